from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReputationTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_rep: int
    max_rep: int
    tier_name: str
    greeting_snippets: list[str] = Field(default_factory=list)
    price_modifier: float = 1.0
    quest_availability: float = Field(default=1.0, ge=0, le=1)
    hostile: bool = False


class FactionTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    faction_id: str
    reputation_tiers: list[ReputationTier] = Field(min_length=1)
    # weights in [-1, 1]; self-relation is implied and never stored
    faction_relations: dict[str, float] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
