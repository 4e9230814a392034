from __future__ import annotations

import logging
from typing import Iterable, Mapping

from frontier.dialogue.schemas import (
    NPC,
    DialogueChoice,
    DialogueNode,
    DialogueSnippet,
    DialogueTree,
    DialogueTreeTemplate,
    EntryPoint,
    GenerationContext,
    NodePattern,
)
from frontier.dialogue.snippets import filter_snippets, substitute_variables, time_of_day
from frontier.models.conditions import Condition
from frontier.rng import RandomSource

log = logging.getLogger(__name__)

TREE_SUFFIX_MAX = 99999

FALLBACK_TEXTS = {
    "greeting": "{name} acknowledges your presence.",
    "main": "{name} considers what to say.",
    "branch": "{name} pauses thoughtfully.",
    "farewell": "{name} nods in farewell.",
    "quest": "{name} has a proposition for you.",
    "shop": "{name} gestures to their wares.",
    "rumor": "{name} leans in conspiratorially.",
}
DEFAULT_FALLBACK = "{name} remains silent."


def fallback_text(role: str, npc: NPC) -> str:
    return FALLBACK_TEXTS.get(role, DEFAULT_FALLBACK).format(name=npc.name)


def build_variables(npc: NPC, context: GenerationContext) -> dict[str, str]:
    variables = dict(context.variables)
    variables.update(
        {
            "npc_name": npc.name,
            "npc_title": npc.title or "",
            "npc_role": npc.role,
            "npc_faction": npc.faction,
            "location": npc.location_id,
            "time_of_day": time_of_day(context.game_hour),
            "region": context.region_id or "unknown",
        }
    )
    return variables


def _assign_node_ids(template: DialogueTreeTemplate) -> tuple[list[str], dict[str, str]]:
    node_ids: list[str] = []
    by_role: dict[str, str] = {}
    for index, pattern in enumerate(template.node_patterns):
        node_id = f"{template.id}_{pattern.role}_{index}"
        node_ids.append(node_id)
        # a repeated role resolves to its last node
        by_role[pattern.role] = node_id
    return node_ids, by_role


def _node_text(
    pattern: NodePattern,
    compatible: list[DialogueSnippet],
    npc: NPC,
    variables: Mapping[str, str],
    rng: RandomSource,
) -> str:
    candidates = [snippet for snippet in compatible if snippet.category in pattern.snippet_categories]
    if not candidates:
        log.debug("dialogue_fallback role=%s npc_id=%s", pattern.role, npc.id)
        return fallback_text(pattern.role, npc)
    snippet = rng.pick(candidates)
    text = substitute_variables(rng.pick(snippet.text_templates), variables)
    return text or fallback_text(pattern.role, npc)


def _build_node(
    node_id: str,
    pattern: NodePattern,
    by_role: Mapping[str, str],
    compatible: list[DialogueSnippet],
    npc: NPC,
    variables: Mapping[str, str],
    rng: RandomSource,
) -> DialogueNode:
    text = _node_text(pattern, compatible, npc, variables, rng)
    choices = [
        DialogueChoice(
            text=substitute_variables(choice.text_template, variables),
            next_node_id=by_role.get(choice.next_role) if choice.next_role else None,
            tags=list(choice.tags),
        )
        for choice in pattern.choice_patterns
    ]
    return DialogueNode(id=node_id, text=text, choices=choices, tags=[pattern.role])


def _entry_conditions(template: DialogueTreeTemplate, variables: Mapping[str, str]) -> list[Condition]:
    return [
        condition.model_copy(
            update={"target": substitute_variables(condition.target, variables) if condition.target is not None else None}
        )
        for condition in template.entry_conditions
    ]


def build_dialogue_tree(
    template_id: str,
    npc: NPC,
    context: GenerationContext,
    snippets: Iterable[DialogueSnippet],
    rng: RandomSource,
    *,
    templates: Mapping[str, DialogueTreeTemplate],
) -> DialogueTree | None:
    template = templates.get(template_id)
    if template is None:
        log.info("dialogue_template_missing template_id=%s npc_id=%s", template_id, npc.id)
        return None

    variables = build_variables(npc, context)
    compatible = filter_snippets(snippets, npc, context)
    node_ids, by_role = _assign_node_ids(template)

    nodes = [
        _build_node(node_id, pattern, by_role, compatible, npc, variables, rng)
        for node_id, pattern in zip(node_ids, template.node_patterns)
    ]

    tree = DialogueTree(
        id=f"{template.id}_{npc.id}_{rng.int(0, TREE_SUFFIX_MAX)}",
        name=f"{template.name} - {npc.name}",
        description=template.description,
        nodes=nodes,
        entry_points=[EntryPoint(node_id=nodes[0].id, conditions=_entry_conditions(template, variables), priority=0)],
        tags=[*template.tags, npc.role, npc.faction],
    )
    log.debug(
        "dialogue_built tree_id=%s nodes=%s snippets=%s",
        tree.id,
        len(nodes),
        len(compatible),
    )
    return tree
