from __future__ import annotations

import re
from typing import Iterable, Mapping

from frontier.dialogue.schemas import NPC, DialogueSnippet, GenerationContext, TimeBucket

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def time_of_day(hour: int) -> TimeBucket:
    if 5 <= hour < 12:
        return "morning"
    if 12 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 21:
        return "evening"
    return "night"


def substitute_variables(text: str, variables: Mapping[str, str]) -> str:
    return PLACEHOLDER.sub(lambda match: variables.get(match.group(1), match.group(0)), text)


def _personality_fits(snippet: DialogueSnippet, personality: Mapping[str, float]) -> bool:
    # a trait the npc does not carry never filters the snippet out
    for trait, minimum in snippet.personality_min.items():
        value = personality.get(trait)
        if value is not None and value < minimum:
            return False
    for trait, maximum in snippet.personality_max.items():
        value = personality.get(trait)
        if value is not None and value > maximum:
            return False
    return True


def snippet_fits(snippet: DialogueSnippet, npc: NPC, bucket: TimeBucket) -> bool:
    if snippet.valid_roles and npc.role not in snippet.valid_roles:
        return False
    if snippet.valid_factions and npc.faction not in snippet.valid_factions:
        return False
    if snippet.valid_time_of_day and bucket not in snippet.valid_time_of_day:
        return False
    return _personality_fits(snippet, npc.personality)


def filter_snippets(pool: Iterable[DialogueSnippet], npc: NPC, context: GenerationContext) -> list[DialogueSnippet]:
    bucket = time_of_day(context.game_hour)
    return [snippet for snippet in pool if snippet_fits(snippet, npc, bucket)]


def snippets_by_category(pool: Iterable[DialogueSnippet], category: str) -> list[DialogueSnippet]:
    return [snippet for snippet in pool if snippet.category == category]


def snippets_by_tags(pool: Iterable[DialogueSnippet], tags: Iterable[str], match_all: bool = False) -> list[DialogueSnippet]:
    wanted = set(tags)
    if match_all:
        return [snippet for snippet in pool if wanted.issubset(snippet.tags)]
    return [snippet for snippet in pool if wanted.intersection(snippet.tags)]
