from __future__ import annotations

import pytest
from pydantic import ValidationError

from frontier.dialogue.schemas import NPC, DialogueSnippet, GenerationContext
from frontier.dialogue.snippets import (
    filter_snippets,
    snippets_by_category,
    snippets_by_tags,
    substitute_variables,
    time_of_day,
)


def _npc(**overrides) -> NPC:
    data = {
        "id": "npc_martha",
        "name": "Martha",
        "role": "bartender",
        "faction": "townsfolk",
        "location_id": "dusty_springs_saloon",
        "personality": {"friendliness": 0.8, "aggression": 0.2},
    }
    data.update(overrides)
    return NPC(**data)


def _snippet(snippet_id: str, **constraints) -> DialogueSnippet:
    return DialogueSnippet(id=snippet_id, category="greeting", text_templates=["Howdy."], **constraints)


def test_time_of_day_buckets():
    assert [time_of_day(h) for h in (4, 5, 11, 12, 16, 17, 20, 21, 0)] == [
        "night",
        "morning",
        "morning",
        "afternoon",
        "afternoon",
        "evening",
        "evening",
        "night",
        "night",
    ]


def test_unconstrained_snippet_always_passes():
    pool = [_snippet("plain")]
    assert filter_snippets(pool, _npc(), GenerationContext(game_hour=3)) == pool


def test_role_faction_and_time_constraints():
    pool = [
        _snippet("bar_only", valid_roles=["bartender"]),
        _snippet("sheriff_only", valid_roles=["sheriff"]),
        _snippet("outlaws", valid_factions=["copperhead"]),
        _snippet("morning", valid_time_of_day=["morning"]),
        _snippet("evening", valid_time_of_day=["evening"]),
    ]
    kept = filter_snippets(pool, _npc(), GenerationContext(game_hour=19))
    assert [s.id for s in kept] == ["bar_only", "evening"]


def test_personality_bounds_are_inclusive():
    pool = [
        _snippet("warm", personality_min={"friendliness": 0.8}),
        _snippet("very_warm", personality_min={"friendliness": 0.9}),
        _snippet("calm", personality_max={"aggression": 0.2}),
        _snippet("very_calm", personality_max={"aggression": 0.1}),
    ]
    kept = filter_snippets(pool, _npc(), GenerationContext())
    assert [s.id for s in kept] == ["warm", "calm"]


def test_missing_trait_never_filters():
    pool = [
        _snippet("greedy", personality_min={"greed": 0.9}),
        _snippet("honest", personality_max={"honesty": 0.1}),
    ]
    assert filter_snippets(pool, _npc(personality={}), GenerationContext()) == pool


def test_substitution_leaves_unknown_keys():
    assert substitute_variables("Hello {{unknown_key}}", {}) == "Hello {{unknown_key}}"
    assert substitute_variables("{{npc_name}} of {{location}}", {"npc_name": "Martha"}) == "Martha of {{location}}"
    assert substitute_variables("{{a}}{{a}}", {"a": "x"}) == "xx"
    assert substitute_variables("{{ spaced }}", {"spaced": "x"}) == "{{ spaced }}"


def test_category_and_tag_helpers():
    pool = [
        DialogueSnippet(id="a", category="greeting", text_templates=["a"], tags=["friendly", "welcoming"]),
        DialogueSnippet(id="b", category="rumor", text_templates=["b"], tags=["friendly"]),
        DialogueSnippet(id="c", category="rumor", text_templates=["c"], tags=["gossip"]),
    ]
    assert [s.id for s in snippets_by_category(pool, "rumor")] == ["b", "c"]
    assert [s.id for s in snippets_by_tags(pool, ["friendly", "gossip"])] == ["a", "b", "c"]
    assert [s.id for s in snippets_by_tags(pool, ["friendly", "welcoming"], match_all=True)] == ["a"]


def test_malformed_models_are_rejected():
    with pytest.raises(ValidationError):
        DialogueSnippet(id="empty", category="greeting", text_templates=[])
    with pytest.raises(ValidationError):
        DialogueSnippet(id="odd", category="weather_report", text_templates=["Rain."])
    with pytest.raises(ValidationError):
        GenerationContext(game_hour=24)
