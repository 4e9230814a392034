from __future__ import annotations

import math
from typing import Mapping

from frontier.models.factions import FactionTemplate, ReputationTier

REPUTATION_MIN = -100
REPUTATION_MAX = 100
RIPPLE_FACTOR = 0.5
HOSTILE_RELATION = -0.5
ALLIED_RELATION = 0.5


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_reputation(reputation: int) -> int:
    return max(REPUTATION_MIN, min(REPUTATION_MAX, int(reputation)))


def tier_for(factions: Mapping[str, FactionTemplate], faction_id: str, reputation: int) -> ReputationTier | None:
    template = factions.get(faction_id)
    if template is None:
        return None
    clamped = clamp_reputation(reputation)
    for tier in template.reputation_tiers:
        if tier.min_rep <= clamped <= tier.max_rep:
            return tier
    return None


def is_hostile(factions: Mapping[str, FactionTemplate], faction_id: str, reputation: int) -> bool:
    tier = tier_for(factions, faction_id, reputation)
    return tier.hostile if tier is not None else False


def relation(factions: Mapping[str, FactionTemplate], faction_a: str, faction_b: str) -> float:
    if faction_a == faction_b:
        return 1.0
    template = factions.get(faction_a)
    if template is None:
        return 0.0
    return template.faction_relations.get(faction_b, 0.0)


def ripple(factions: Mapping[str, FactionTemplate], faction_id: str, delta: int) -> dict[str, int]:
    changes: dict[str, int] = {faction_id: delta}
    template = factions.get(faction_id)
    if template is None:
        return changes
    for other, weight in template.faction_relations.items():
        if other == faction_id or weight == 0:
            continue
        amount = _round_half_up(delta * weight * RIPPLE_FACTOR)
        if amount != 0:
            changes[other] = amount
    return changes


def hostile_factions(factions: Mapping[str, FactionTemplate], faction_id: str) -> list[str]:
    template = factions.get(faction_id)
    if template is None:
        return []
    return [other for other, weight in template.faction_relations.items() if weight <= HOSTILE_RELATION]


def allied_factions(factions: Mapping[str, FactionTemplate], faction_id: str) -> list[str]:
    template = factions.get(faction_id)
    if template is None:
        return []
    return [other for other, weight in template.faction_relations.items() if weight >= ALLIED_RELATION]


def all_faction_ids(factions: Mapping[str, FactionTemplate]) -> list[str]:
    return list(factions)


def tier_partition_errors(template: FactionTemplate) -> list[str]:
    errors: list[str] = []
    for value in range(REPUTATION_MIN, REPUTATION_MAX + 1):
        hits = [tier.tier_name for tier in template.reputation_tiers if tier.min_rep <= value <= tier.max_rep]
        if not hits:
            errors.append(f"{template.faction_id}: no tier covers {value}")
        elif len(hits) > 1:
            errors.append(f"{template.faction_id}: {value} matches {', '.join(hits)}")
    return errors
