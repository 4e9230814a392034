from __future__ import annotations

from typing import get_args

from frontier.engine.conditions import EVALUATORS, compare_numeric, conditions_hold, evaluate
from frontier.models.conditions import Condition, ConditionKind
from frontier.models.state import GameState


def test_every_condition_kind_has_an_evaluator():
    assert set(get_args(ConditionKind)) == set(EVALUATORS)


def test_unknown_kind_never_matches():
    state = GameState(location="saloon")
    assert evaluate(Condition(kind="weather", value="rain"), state) is False


def test_missing_state_field_fails_closed():
    assert evaluate(Condition(kind="location", value="saloon"), GameState()) is False
    assert evaluate(Condition(kind="danger_level", value=2, operator="lte"), GameState()) is False
    assert evaluate(Condition(kind="flag_set", value="ambush_triggered"), GameState()) is False
    assert evaluate(Condition(kind="flag_not_set", value="ambush_triggered"), GameState()) is False


def test_equality_is_strict_about_types():
    assert evaluate(Condition(kind="combat_state", value=False), GameState(in_combat=False)) is True
    assert evaluate(Condition(kind="combat_state", value=0), GameState(in_combat=False)) is False
    assert evaluate(Condition(kind="time", value="night"), GameState(time_of_day="night")) is True
    assert evaluate(Condition(kind="time", value="night"), GameState(time_of_day="dusk")) is False


def test_numeric_thresholds_follow_operator():
    state = GameState(danger_level=3, player_health=40)
    assert evaluate(Condition(kind="danger_level", value=3, operator="lte"), state) is True
    assert evaluate(Condition(kind="danger_level", value=3, operator="lt"), state) is False
    assert evaluate(Condition(kind="danger_level", value=4, operator="gte"), state) is False
    assert evaluate(Condition(kind="player_health", value=25, operator="gt"), state) is True
    assert evaluate(Condition(kind="danger_level", value=3), state) is True


def test_numeric_threshold_rejects_non_numbers():
    state = GameState(danger_level=3)
    assert evaluate(Condition(kind="danger_level", value="3", operator="lte"), state) is False
    assert evaluate(Condition(kind="danger_level", value=True, operator="lte"), state) is False


def test_compare_numeric_defaults_to_equality():
    assert compare_numeric(2, 2) is True
    assert compare_numeric(2, 3) is False
    assert compare_numeric(2, 3, "lt") is True


def test_membership_kinds_accept_value_or_target():
    state = GameState(flags={"met_sheriff"}, active_quests=["iron_tyrant"], completed_quests=["lost_mine"])
    assert evaluate(Condition(kind="flag_set", value="met_sheriff"), state) is True
    assert evaluate(Condition(kind="flag_not_set", value="met_sheriff"), state) is False
    assert evaluate(Condition(kind="flag_not_set", target="quest_offered_q1"), state) is True
    assert evaluate(Condition(kind="quest_active", target="iron_tyrant"), state) is True
    assert evaluate(Condition(kind="quest_complete", target="lost_mine"), state) is True
    assert evaluate(Condition(kind="quest_complete", target="iron_tyrant"), state) is False


def test_reputation_kinds_read_target_faction():
    state = GameState(reputation={"law_enforcement": -40, "town_council": 60})
    assert evaluate(Condition(kind="reputation_lte", target="law_enforcement", value=-25), state) is True
    assert evaluate(Condition(kind="reputation_gte", target="town_council", value=50), state) is True
    assert evaluate(Condition(kind="reputation_gte", target="desperados", value=0), state) is False
    assert evaluate(Condition(kind="reputation", target="town_council", value=60, operator="eq"), state) is True
    assert evaluate(Condition(kind="reputation_gte", target="town_council", value=50), GameState()) is False


def test_conditions_hold_is_a_conjunction():
    state = GameState(biome="desert", in_combat=False)
    desert = Condition(kind="biome", value="desert")
    calm = Condition(kind="combat_state", value=False)
    night = Condition(kind="time", value="night")
    assert conditions_hold([], state) is True
    assert conditions_hold([desert, calm], state) is True
    assert conditions_hold([desert, calm, night], state) is False
