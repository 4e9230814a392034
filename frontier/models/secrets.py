from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from frontier.models.state import TimeOfDay

SecretType = Literal["location", "easter_egg", "hidden_item", "achievement"]

DiscoveryMethod = Literal[
    "exploration",
    "interaction",
    "sequence",
    "item_use",
    "dialogue",
    "time_based",
    "combat",
    "combination",
]


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class HintCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    quest_complete: str | None = None
    item_required: str | None = None
    time_of_day: TimeOfDay | None = None


class SecretHint(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: str
    npc_id: str | None = None
    text: str
    type: Literal["dialogue", "book", "sign", "graffiti", "rumor", "inscription"]
    condition: HintCondition | None = None


class DiscoveryConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    location_id: str | None = None
    required_item: str | None = None
    prerequisite_quest: str | None = None
    time_of_day: TimeOfDay | None = None
    # resolved outside this package; see ExplorationState.triggers_resolved
    coordinates: Coordinates | None = None
    npc_id: str | None = None
    dialogue_choice: str | None = None
    action_sequence: list[str] | None = None
    special_trigger: str | None = None

    @property
    def has_external_trigger(self) -> bool:
        return any(
            value is not None
            for value in (self.coordinates, self.npc_id, self.dialogue_choice, self.action_sequence, self.special_trigger)
        )


class RewardItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    item_id: str
    quantity: int


class SecretRewards(BaseModel):
    model_config = ConfigDict(frozen=True)

    xp: int
    gold: int
    items: list[RewardItem] = Field(default_factory=list)
    lore_entries: list[str] = Field(default_factory=list)
    achievement_id: str | None = None
    reputation: dict[str, int] = Field(default_factory=dict)
    unlocks_quest: str | None = None


class Secret(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: SecretType
    description: str
    discovery_method: DiscoveryMethod
    discovery_conditions: DiscoveryConditions
    rewards: SecretRewards
    hints: list[SecretHint] = Field(default_factory=list)
    lore: str
    tags: list[str] = Field(default_factory=list)
    difficulty: int = Field(default=3, ge=1, le=5)
