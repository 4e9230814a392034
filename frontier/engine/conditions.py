from __future__ import annotations

import logging
import operator as op
from types import MappingProxyType
from typing import Any, Callable, Iterable

from frontier.models.conditions import Condition
from frontier.models.state import GameState

log = logging.getLogger(__name__)

_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "eq": op.eq,
    "lt": op.lt,
    "gt": op.gt,
    "lte": op.le,
    "gte": op.ge,
}


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _strict_equals(actual: object, expected: object) -> bool:
    if actual is None:
        return False
    if isinstance(actual, bool) or isinstance(expected, bool):
        return isinstance(actual, bool) and isinstance(expected, bool) and actual == expected
    if _is_number(actual) and _is_number(expected):
        return actual == expected
    return type(actual) is type(expected) and actual == expected


def compare_numeric(value: float, target: float, operator: str | None = None) -> bool:
    return _OPERATORS.get(operator or "eq", op.eq)(value, target)


def _threshold(actual: object, condition: Condition, operator: str | None) -> bool:
    if not _is_number(actual) or not _is_number(condition.value):
        return False
    return compare_numeric(actual, condition.value, operator)  # type: ignore[arg-type]


def _subject(condition: Condition) -> str | None:
    if isinstance(condition.value, str):
        return condition.value
    return condition.target


def _equality(field: str) -> Callable[[Condition, GameState], bool]:
    def check(condition: Condition, state: GameState) -> bool:
        return _strict_equals(getattr(state, field), condition.value)

    return check


def _numeric(field: str) -> Callable[[Condition, GameState], bool]:
    def check(condition: Condition, state: GameState) -> bool:
        return _threshold(getattr(state, field), condition, condition.operator)

    return check


def _membership(field: str, *, negate: bool = False) -> Callable[[Condition, GameState], bool]:
    def check(condition: Condition, state: GameState) -> bool:
        collection = getattr(state, field)
        subject = _subject(condition)
        if collection is None or subject is None:
            return False
        return (subject in collection) != negate

    return check


def _reputation(fixed_operator: str | None) -> Callable[[Condition, GameState], bool]:
    def check(condition: Condition, state: GameState) -> bool:
        if state.reputation is None or condition.target is None:
            return False
        return _threshold(state.reputation.get(condition.target), condition, fixed_operator or condition.operator)

    return check


EVALUATORS: MappingProxyType[str, Callable[[Condition, GameState], bool]] = MappingProxyType(
    {
        "location": _equality("location"),
        "biome": _equality("biome"),
        "time": _equality("time_of_day"),
        "combat_state": _equality("in_combat"),
        "faction_territory": _equality("faction_territory"),
        "danger_level": _numeric("danger_level"),
        "player_health": _numeric("player_health"),
        "reputation": _reputation(None),
        "reputation_gte": _reputation("gte"),
        "reputation_lte": _reputation("lte"),
        "flag_set": _membership("flags"),
        "flag_not_set": _membership("flags", negate=True),
        "quest_active": _membership("active_quests"),
        "quest_complete": _membership("completed_quests"),
    }
)


def evaluate(condition: Condition, state: GameState) -> bool:
    evaluator = EVALUATORS.get(condition.kind)
    if evaluator is None:
        log.debug("condition_kind_unknown kind=%s", condition.kind)
        return False
    return evaluator(condition, state)


def conditions_hold(conditions: Iterable[Condition], state: GameState) -> bool:
    return all(evaluate(condition, state) for condition in conditions)
