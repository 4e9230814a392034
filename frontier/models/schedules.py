from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Activity = Literal["sleep", "work", "eat", "patrol", "socialize", "pray", "shop", "travel", "idle"]


class ScheduleEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_hour: int = Field(ge=0, le=24)
    end_hour: int = Field(ge=0, le=24)
    activity: Activity
    location_marker: str
    dialogue_override: str | None = None

    @property
    def wraps_midnight(self) -> bool:
        return self.start_hour > self.end_hour

    @property
    def duration(self) -> int:
        if self.wraps_midnight:
            return 24 - self.start_hour + self.end_hour
        return self.end_hour - self.start_hour

    def covers(self, hour: int) -> bool:
        if self.wraps_midnight:
            return hour >= self.start_hour or hour < self.end_hour
        return self.start_hour <= hour < self.end_hour


class ScheduleTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    valid_roles: list[str] = Field(default_factory=list)
    entries: list[ScheduleEntry] = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
