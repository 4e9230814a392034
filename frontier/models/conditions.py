from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

ConditionKind = Literal[
    "location",
    "biome",
    "time",
    "combat_state",
    "faction_territory",
    "danger_level",
    "player_health",
    "reputation",
    "reputation_gte",
    "reputation_lte",
    "flag_set",
    "flag_not_set",
    "quest_active",
    "quest_complete",
]

Operator = Literal["eq", "lt", "gt", "lte", "gte"]


class Condition(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    target: str | None = None
    value: str | int | float | bool | None = None
    operator: Operator | None = None
