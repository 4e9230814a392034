from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from frontier.models.conditions import Condition

MusicCategory = Literal["exploration", "combat", "emotional", "location", "stinger"]

MusicMood = Literal[
    "peaceful",
    "neutral",
    "tense",
    "dangerous",
    "intense",
    "dramatic",
    "melancholic",
    "triumphant",
]

TransitionType = Literal["crossfade", "cut", "fade_out_in", "stinger_bridge"]

MusicLayer = Literal["base", "rhythm", "tension", "ambient"]

SFXCategory = Literal[
    "ui",
    "combat",
    "movement",
    "ambient",
    "character",
    "shop",
    "environmental",
    "stinger",
]


class MusicTrack(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: MusicCategory
    mood: MusicMood
    priority: int
    conditions: list[Condition] = Field(default_factory=list)
    transition_in: TransitionType = "crossfade"
    transition_duration: int = 2000
    layerable: bool = False
    layers: list[MusicLayer] = Field(default_factory=list)
    loop: bool = True
    bpm: int | None = None
    scale: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    notes: str | None = None


class AmbienceLayer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    conditions: list[Condition] = Field(default_factory=list)
    sounds: list[str] = Field(default_factory=list)
    min_interval: int
    max_interval: int
    volume: int
    has_base_loop: bool = False
    base_loop_id: str | None = None
    tags: list[str] = Field(default_factory=list)


class SoundCue(BaseModel):
    model_config = ConfigDict(frozen=True)

    event: str
    sfx_id: str
    category: SFXCategory
    volume_offset: float = Field(default=0, ge=-20, le=10)
    pitch_variation: float = Field(default=0, ge=0, le=0.5)
    delay: int = 0
    allow_overlap: bool = True
    cooldown: int = 0
    probability: float = Field(default=1, ge=0, le=1)
    variants: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class DynamicMusicConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_crossfade_duration: int = 2000
    music_memory_duration: int = 60000
    stinger_duck_amount: int = -12
    stinger_duck_duration: int = 500
    minimum_play_time: int = 5000
    layer_fade_duration: int = 1000
    tension_layer_threshold: int = 3
    combat_start_stinger: str = "stinger_danger"
    boss_encounter_stinger: str = "stinger_boss"
    ambush_stinger: str = "stinger_danger"
