from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from frontier.dialogue.schemas import DialogueSnippet, DialogueTreeTemplate
from frontier.engine.reputation import tier_partition_errors
from frontier.models.audio import AmbienceLayer, DynamicMusicConfig, MusicTrack, SoundCue
from frontier.models.factions import FactionTemplate
from frontier.models.schedules import ScheduleTemplate
from frontier.models.secrets import Secret

log = logging.getLogger(__name__)

TABLES_DIR = Path(__file__).resolve().parent / "tables"

M = TypeVar("M", bound=BaseModel)


class ContentError(ValueError):
    pass


@dataclass(frozen=True)
class ContentTables:
    music_tracks: tuple[MusicTrack, ...]
    ambience_layers: tuple[AmbienceLayer, ...]
    sound_cues: MappingProxyType[str, SoundCue]
    dynamic_music: DynamicMusicConfig
    factions: MappingProxyType[str, FactionTemplate]
    dialogue_templates: MappingProxyType[str, DialogueTreeTemplate]
    dialogue_snippets: tuple[DialogueSnippet, ...]
    secrets: tuple[Secret, ...]
    schedules: MappingProxyType[str, ScheduleTemplate]

    def counts(self) -> dict[str, int]:
        return {
            "music_tracks": len(self.music_tracks),
            "ambience_layers": len(self.ambience_layers),
            "sound_cues": len(self.sound_cues),
            "factions": len(self.factions),
            "dialogue_templates": len(self.dialogue_templates),
            "dialogue_snippets": len(self.dialogue_snippets),
            "secrets": len(self.secrets),
            "schedules": len(self.schedules),
        }


def _read_json(root: Path, name: str) -> Any:
    path = root / f"{name}.json"
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContentError(f"content_table_unreadable table={name} path={path}") from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ContentError(f"content_table_invalid_json table={name} line={exc.lineno}") from exc


def _parse_list(root: Path, name: str, model: type[M]) -> tuple[M, ...]:
    data = _read_json(root, name)
    if not isinstance(data, list):
        raise ContentError(f"content_table_not_a_list table={name}")
    try:
        return tuple(model.model_validate(item) for item in data)
    except ValidationError as exc:
        raise ContentError(f"content_table_invalid table={name}: {exc}") from exc


def _index(rows: tuple[M, ...], name: str, key: str) -> MappingProxyType[str, M]:
    indexed: dict[str, M] = {}
    for row in rows:
        row_key = getattr(row, key)
        if row_key in indexed:
            raise ContentError(f"content_table_duplicate_key table={name} key={row_key}")
        indexed[row_key] = row
    return MappingProxyType(indexed)


def _check_factions(factions: MappingProxyType[str, FactionTemplate]) -> None:
    errors = [error for template in factions.values() for error in tier_partition_errors(template)]
    if errors:
        raise ContentError(f"faction_tiers_invalid count={len(errors)} first={errors[0]}")


def _load(root: Path) -> ContentTables:
    try:
        dynamic_music = DynamicMusicConfig.model_validate(_read_json(root, "dynamic_music"))
    except ValidationError as exc:
        raise ContentError(f"content_table_invalid table=dynamic_music: {exc}") from exc

    factions = _index(_parse_list(root, "factions", FactionTemplate), "factions", "faction_id")
    _check_factions(factions)

    return ContentTables(
        music_tracks=_parse_list(root, "music_tracks", MusicTrack),
        ambience_layers=_parse_list(root, "ambience_layers", AmbienceLayer),
        sound_cues=_index(_parse_list(root, "sound_cues", SoundCue), "sound_cues", "event"),
        dynamic_music=dynamic_music,
        factions=factions,
        dialogue_templates=_index(
            _parse_list(root, "dialogue_templates", DialogueTreeTemplate), "dialogue_templates", "id"
        ),
        dialogue_snippets=_parse_list(root, "dialogue_snippets", DialogueSnippet),
        secrets=_parse_list(root, "secrets", Secret),
        schedules=_index(_parse_list(root, "schedules", ScheduleTemplate), "schedules", "id"),
    )


@lru_cache(maxsize=8)
def _load_cached(root: Path) -> ContentTables:
    tables = _load(root)
    log.info("content_loaded root=%s %s", root, " ".join(f"{k}={v}" for k, v in tables.counts().items()))
    return tables


def load_content(content_dir: str | Path | None = None) -> ContentTables:
    root = Path(content_dir).resolve() if content_dir is not None else TABLES_DIR
    return _load_cached(root)
