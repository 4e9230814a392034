from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

TimeOfDay = Literal["dawn", "day", "dusk", "night"]


class GameState(BaseModel):
    location: str | None = None
    biome: str | None = None
    time_of_day: TimeOfDay | None = None
    in_combat: bool | None = None
    danger_level: int | float | None = None
    flags: set[str] | None = None
    faction_territory: str | None = None
    active_quests: list[str] | None = None
    completed_quests: list[str] | None = None
    player_health: int | float | None = None
    reputation: dict[str, int] | None = None


class ExplorationState(BaseModel):
    visited_locations: set[str] | None = None
    inventory: set[str] | None = None
    completed_quests: set[str] | None = None
    current_time: TimeOfDay | None = None
    # coordinates, action sequences and scripted triggers are resolved by the caller
    triggers_resolved: bool = True
