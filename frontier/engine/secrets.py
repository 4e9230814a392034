from __future__ import annotations

from typing import Iterable

from frontier.models.secrets import Secret, SecretHint
from frontier.models.state import ExplorationState


def _holds(required: str | None, collection: set[str] | None) -> bool:
    if required is None:
        return True
    return collection is not None and required in collection


def can_discover(secret: Secret, state: ExplorationState) -> bool:
    conditions = secret.discovery_conditions
    if not _holds(conditions.location_id, state.visited_locations):
        return False
    if not _holds(conditions.required_item, state.inventory):
        return False
    if not _holds(conditions.prerequisite_quest, state.completed_quests):
        return False
    if conditions.time_of_day is not None and state.current_time != conditions.time_of_day:
        return False
    if conditions.has_external_trigger and not state.triggers_resolved:
        return False
    return True


def hint_visible(hint: SecretHint, state: ExplorationState) -> bool:
    condition = hint.condition
    if condition is None:
        return True
    if not _holds(condition.quest_complete, state.completed_quests):
        return False
    if not _holds(condition.item_required, state.inventory):
        return False
    if condition.time_of_day is not None and state.current_time != condition.time_of_day:
        return False
    return True


def secret_by_id(secrets: Iterable[Secret], secret_id: str) -> Secret | None:
    return next((secret for secret in secrets if secret.id == secret_id), None)


def secrets_by_type(secrets: Iterable[Secret], secret_type: str) -> list[Secret]:
    return [secret for secret in secrets if secret.type == secret_type]


def secrets_at_location(secrets: Iterable[Secret], location_id: str) -> list[Secret]:
    return [secret for secret in secrets if secret.discovery_conditions.location_id == location_id]


def secrets_requiring_item(secrets: Iterable[Secret], item_id: str) -> list[Secret]:
    return [secret for secret in secrets if secret.discovery_conditions.required_item == item_id]


def secrets_by_tag(secrets: Iterable[Secret], tag: str) -> list[Secret]:
    return [secret for secret in secrets if tag in secret.tags]


def secrets_by_difficulty(secrets: Iterable[Secret], difficulty: int) -> list[Secret]:
    return [secret for secret in secrets if secret.difficulty == difficulty]


def hints_for_location(secrets: Iterable[Secret], location_id: str) -> list[SecretHint]:
    return [hint for secret in secrets for hint in secret.hints if hint.location == location_id]
