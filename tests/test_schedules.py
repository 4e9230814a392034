from __future__ import annotations

from frontier.content.loader import load_content
from frontier.engine.schedules import (
    activity_at,
    covers_full_day,
    entry_at,
    get_schedule,
    schedule_for_role,
    schedule_ids_by_category,
    schedule_summary,
    schedules_by_tag,
    schedules_for_role,
)
from frontier.models.schedules import ScheduleEntry, ScheduleTemplate


def _night_watch() -> ScheduleTemplate:
    return ScheduleTemplate(
        id="night_watch",
        valid_roles=["watchman"],
        entries=[
            ScheduleEntry(start_hour=22, end_hour=6, activity="patrol", location_marker="{{town}}"),
            ScheduleEntry(start_hour=6, end_hour=14, activity="sleep", location_marker="{{home}}"),
        ],
    )


def test_activity_lookup_in_packaged_schedule():
    banker = schedule_for_role(load_content().schedules.values(), "bank_teller")
    assert banker.id == "banker_schedule"
    assert activity_at(banker, 3) == "sleep"
    assert activity_at(banker, 9) == "work"
    assert activity_at(banker, 12) == "eat"
    assert activity_at(banker, 23) == "sleep"
    assert entry_at(banker, 10).dialogue_override == "morning_banking"


def test_hours_normalise_modulo_day():
    banker = get_schedule(load_content().schedules, "banker_schedule")
    assert activity_at(banker, 33) == activity_at(banker, 9)
    assert activity_at(banker, -1) == activity_at(banker, 23)


def test_midnight_wrapping_entries():
    watch = _night_watch()
    entry = watch.entries[0]
    assert entry.wraps_midnight is True
    assert entry.duration == 8
    assert activity_at(watch, 23) == "patrol"
    assert activity_at(watch, 0) == "patrol"
    assert activity_at(watch, 5) == "patrol"
    assert activity_at(watch, 6) == "sleep"
    assert activity_at(watch, 15) is None
    assert covers_full_day(watch) is False


def test_summary_sums_entry_durations_per_activity():
    banker = get_schedule(load_content().schedules, "banker_schedule")
    assert schedule_summary(banker) == {"sleep": 9, "eat": 3, "idle": 5, "travel": 2, "work": 5}
    assert schedule_summary(_night_watch()) == {"patrol": 8, "sleep": 8}


def test_summary_counts_overlapping_entries_in_full():
    shift = ScheduleTemplate(
        id="double_shift",
        entries=[
            ScheduleEntry(start_hour=0, end_hour=12, activity="sleep", location_marker="{{home}}"),
            ScheduleEntry(start_hour=8, end_hour=24, activity="work", location_marker="{{mine}}"),
        ],
    )
    assert schedule_summary(shift) == {"sleep": 12, "work": 16}
    assert activity_at(shift, 9) == "sleep"


def test_packaged_schedules_cover_full_day():
    for schedule in load_content().schedules.values():
        assert covers_full_day(schedule), schedule.id


def test_lookup_by_id():
    schedules = load_content().schedules
    assert get_schedule(schedules, "sheriff_schedule").id == "sheriff_schedule"
    assert get_schedule(schedules, "missing") is None


def test_role_and_tag_lookups():
    schedules = load_content().schedules.values()
    assert schedule_for_role(schedules, "astronaut") is None
    assert [s.id for s in schedules_for_role(schedules, "farmer")] == ["homesteader_schedule"]
    assert "sheriff_schedule" in [s.id for s in schedules_by_tag(schedules, "law_enforcement")]


def test_ids_by_category_use_tag_groups():
    schedules = load_content().schedules
    assert schedule_ids_by_category(schedules, "transient") == ["gambler_schedule", "drifter_schedule", "hotel_guest_schedule"]
    assert schedule_ids_by_category(schedules, "criminal") == ["outlaw_schedule", "bounty_hunter_schedule"]
    assert "banker_schedule" in schedule_ids_by_category(schedules, "business_owner")
    assert schedule_ids_by_category(schedules, "astronaut") == []
