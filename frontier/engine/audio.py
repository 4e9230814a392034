from __future__ import annotations

from typing import Iterable, Mapping

from frontier.engine.selector import highest_priority, most_conditions, select_best
from frontier.models.audio import AmbienceLayer, DynamicMusicConfig, MusicTrack, SoundCue
from frontier.models.state import GameState
from frontier.rng import RandomSource


def select_music_track(tracks: Iterable[MusicTrack], state: GameState) -> MusicTrack | None:
    return select_best(tracks, state, highest_priority)


def select_ambience_layer(layers: Iterable[AmbienceLayer], state: GameState) -> AmbienceLayer | None:
    return select_best(layers, state, most_conditions)


def music_track_by_id(tracks: Iterable[MusicTrack], track_id: str) -> MusicTrack | None:
    return next((track for track in tracks if track.id == track_id), None)


def music_tracks_by_category(tracks: Iterable[MusicTrack], category: str) -> list[MusicTrack]:
    return [track for track in tracks if track.category == category]


def stingers(tracks: Iterable[MusicTrack]) -> list[MusicTrack]:
    return music_tracks_by_category(tracks, "stinger")


def get_sound_cue(cues: Mapping[str, SoundCue], event: str) -> SoundCue | None:
    return cues.get(event)


def sound_cues_by_category(cues: Mapping[str, SoundCue], category: str) -> list[SoundCue]:
    return [cue for cue in cues.values() if cue.category == category]


def should_play_sound_cue(cue: SoundCue, rng: RandomSource) -> bool:
    return rng.random() < cue.probability


def select_sound_variant(cue: SoundCue, rng: RandomSource) -> str:
    if not cue.variants:
        return cue.sfx_id
    return rng.pick(cue.variants)


def tension_layer_active(config: DynamicMusicConfig, state: GameState) -> bool:
    if state.danger_level is None:
        return False
    return state.danger_level >= config.tension_layer_threshold
