from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping

from frontier.models.schedules import ScheduleEntry, ScheduleTemplate

HOURS_PER_DAY = 24

CATEGORY_TAGS: dict[str, tuple[str, ...]] = {
    "business_owner": ("business_owner",),
    "worker": ("worker",),
    "official": ("official",),
    "transient": ("transient", "wanderer"),
    "criminal": ("criminal", "dangerous"),
}


def get_schedule(schedules: Mapping[str, ScheduleTemplate], schedule_id: str) -> ScheduleTemplate | None:
    return schedules.get(schedule_id)


def entry_at(schedule: ScheduleTemplate, hour: int) -> ScheduleEntry | None:
    normalized = hour % HOURS_PER_DAY
    return next((entry for entry in schedule.entries if entry.covers(normalized)), None)


def activity_at(schedule: ScheduleTemplate, hour: int) -> str | None:
    entry = entry_at(schedule, hour)
    return entry.activity if entry is not None else None


def schedule_for_role(schedules: Iterable[ScheduleTemplate], role: str) -> ScheduleTemplate | None:
    return next((schedule for schedule in schedules if role in schedule.valid_roles), None)


def schedules_for_role(schedules: Iterable[ScheduleTemplate], role: str) -> list[ScheduleTemplate]:
    return [schedule for schedule in schedules if role in schedule.valid_roles]


def schedules_by_tag(schedules: Iterable[ScheduleTemplate], tag: str) -> list[ScheduleTemplate]:
    return [schedule for schedule in schedules if tag in schedule.tags]


def schedule_ids_by_category(schedules: Mapping[str, ScheduleTemplate], category: str) -> list[str]:
    tags = CATEGORY_TAGS.get(category, ())
    return [schedule_id for schedule_id, schedule in schedules.items() if any(tag in tags for tag in schedule.tags)]


def covers_full_day(schedule: ScheduleTemplate) -> bool:
    return all(entry_at(schedule, hour) is not None for hour in range(HOURS_PER_DAY))


def schedule_summary(schedule: ScheduleTemplate) -> dict[str, int]:
    # overlapping entries each contribute their full duration
    totals: Counter[str] = Counter()
    for entry in schedule.entries:
        totals[entry.activity] += entry.duration
    return dict(totals)
