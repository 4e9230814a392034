from __future__ import annotations

from functools import reduce
from typing import Callable, Iterable, Protocol, Sequence, TypeVar

from frontier.engine.conditions import conditions_hold
from frontier.models.conditions import Condition
from frontier.models.state import GameState


class Conditioned(Protocol):
    @property
    def conditions(self) -> Sequence[Condition]: ...


class Prioritized(Conditioned, Protocol):
    @property
    def priority(self) -> int: ...


C = TypeVar("C", bound=Conditioned)
P = TypeVar("P", bound=Prioritized)

TieBreak = Callable[[C, C], C]


def highest_priority(best: P, current: P) -> P:
    return current if current.priority > best.priority else best


def most_conditions(best: C, current: C) -> C:
    return current if len(current.conditions) > len(best.conditions) else best


def entry_point_rank(best: P, current: P) -> P:
    best_key = (len(best.conditions), best.priority)
    current_key = (len(current.conditions), current.priority)
    return current if current_key > best_key else best


def matching(candidates: Iterable[C], state: GameState) -> list[C]:
    return [candidate for candidate in candidates if conditions_hold(candidate.conditions, state)]


def select_best(candidates: Iterable[C], state: GameState, tie_break: TieBreak) -> C | None:
    matched = matching(candidates, state)
    if not matched:
        return None
    # reduce keeps the earlier candidate on a tie
    return reduce(tie_break, matched)
