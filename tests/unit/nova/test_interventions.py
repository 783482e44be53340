"""
Unit tests for the recovery multiplier resolver.

Covers intervention extraction from recovery workouts and chapters,
time-window activity and the max tie-break.
"""

import datetime

import pytest

from app.nova.interventions import (
    RECOVERY_INTERVENTIONS,
    InterventionEvent,
    boosted_hours,
    extract_interventions,
    is_active,
    resolve_boosts,
    resolve_recovery_boosts,
)
from app.schemas.workout import WorkoutRecord

NOW = datetime.datetime(2026, 2, 8, 12, 0, tzinfo=datetime.timezone.utc)


def _ago(hours: float) -> datetime.datetime:
    return NOW - datetime.timedelta(hours=hours)


def _record(workout_type: str = "recovery", hours_ago: float = 1.0, status: str = "finished",
            session_data: dict | None = None) -> WorkoutRecord:
    return WorkoutRecord.model_validate({
        "id": "r1",
        "workout_type": workout_type,
        "status": status,
        "finished_at": _ago(hours_ago).isoformat(),
        "session_data": session_data or {},
    })


def _event(name: str, hours_ago: float) -> InterventionEvent:
    return InterventionEvent(name=name, occurred_at=_ago(hours_ago))


# ======================================================================
# Rule table
# ======================================================================


class TestRuleTable:

    @pytest.mark.parametrize("name,zones,multiplier,hours", [
        ("ice_bath", ["upper_body", "lower_body"], 2.0, 24.0),
        ("sauna", ["upper_body", "lower_body", "cns"], 1.8, 48.0),
        ("stretching", ["upper_body", "lower_body"], 1.3, 12.0),
    ])
    def test_rules(self, name, zones, multiplier, hours):
        rule = RECOVERY_INTERVENTIONS[name]
        assert rule.zones == zones
        assert rule.multiplier == multiplier
        assert rule.duration_hours == hours


# ======================================================================
# Extraction
# ======================================================================


class TestExtraction:

    def test_cold_and_heat_rounds(self):
        record = _record(session_data={"rounds": [{"type": "cold"}, {"type": "heat"}, {"type": "cold"}]})
        names = [e.name for e in extract_interventions([record])]
        assert names == ["ice_bath", "sauna"]

    def test_plain_recovery_is_stretching(self):
        names = [e.name for e in extract_interventions([_record()])]
        assert names == ["stretching"]

    def test_stretches_with_cold_rounds(self):
        record = _record(session_data={
            "mode": "hybrid",
            "stretches": [{"title": "Pigeon"}],
            "rounds": [{"type": "cold"}],
        })
        names = [e.name for e in extract_interventions([record])]
        assert names == ["ice_bath", "stretching"]

    def test_recovery_chapter_of_hybrid(self):
        record = _record("hybrid", session_data={"chapters": [
            {"type": "strength", "data": {}},
            {"type": "recovery", "config": {"rounds": [{"type": "heat"}]}},
        ]})
        names = [e.name for e in extract_interventions([record])]
        assert names == ["sauna"]

    def test_rounds_in_recovery_chapter_only(self):
        record = _record(session_data={"chapters": [
            {"type": "recovery", "config": {"rounds": [{"type": "cold"}]}},
        ]})
        names = [e.name for e in extract_interventions([record])]
        assert names == ["ice_bath"]

    def test_top_level_stretches_with_recovery_chapter(self):
        record = _record(session_data={
            "stretches": [{"title": "Couch stretch"}],
            "chapters": [{"type": "recovery", "config": {"rounds": [{"type": "cold"}]}}],
        })
        names = [e.name for e in extract_interventions([record])]
        assert names == ["stretching", "ice_bath"]

    def test_non_recovery_workout_has_none(self):
        assert extract_interventions([_record("strength")]) == []

    def test_unfinished_ignored(self):
        record = _record(status="in_progress", session_data={"rounds": [{"type": "cold"}]})
        assert extract_interventions([record]) == []

    def test_malformed_rounds_ignored(self):
        record = _record(session_data={"rounds": ["cold", None, {"type": "lava"}]})
        names = [e.name for e in extract_interventions([record])]
        assert names == ["stretching"]

    def test_event_time_is_workout_time(self):
        record = _record(hours_ago=5, session_data={"rounds": [{"type": "heat"}]})
        (event,) = extract_interventions([record])
        assert event.occurred_at == _ago(5)
        assert event.workout_id == "r1"


# ======================================================================
# Activity window
# ======================================================================


class TestActivity:

    def test_active_inside_window(self):
        assert is_active(_event("sauna", 47.9), NOW)

    def test_inactive_at_window_end(self):
        assert not is_active(_event("sauna", 48.0), NOW)

    def test_stretching_expires_after_12h(self):
        assert is_active(_event("stretching", 11.99), NOW)
        assert not is_active(_event("stretching", 12.0), NOW)

    def test_future_event_inactive(self):
        assert not is_active(_event("ice_bath", -1.0), NOW)


# ======================================================================
# Resolution
# ======================================================================


class TestResolveBoosts:

    def test_no_events(self):
        boosts, active = resolve_boosts([], NOW)
        assert boosts.as_list() == [1.0, 1.0, 1.0]
        assert active == []

    def test_ice_bath_only_muscles(self):
        boosts, active = resolve_boosts([_event("ice_bath", 2)], NOW)
        assert boosts.as_dict() == {"upper_body": 2.0, "lower_body": 2.0, "cns": 1.0}
        assert active == ["ice_bath"]

    def test_max_not_product(self):
        boosts, active = resolve_boosts(
            [_event("stretching", 1), _event("sauna", 1), _event("ice_bath", 1)], NOW,
        )
        assert boosts.as_dict() == {"upper_body": 2.0, "lower_body": 2.0, "cns": 1.8}
        assert active == ["ice_bath", "sauna", "stretching"]

    def test_expired_event_ignored(self):
        boosts, active = resolve_boosts([_event("ice_bath", 30), _event("stretching", 2)], NOW)
        assert boosts.upper_body == 1.3
        assert active == ["stretching"]

    def test_from_workouts(self):
        record = _record(hours_ago=3, session_data={"rounds": [{"type": "heat"}]})
        boosts = resolve_recovery_boosts([record], NOW)
        assert boosts.as_list() == [1.8, 1.8, 1.8]


class TestBoostedHours:

    def test_no_events_is_plain_hours(self):
        assert boosted_hours([], "cns", _ago(10), NOW) == pytest.approx(10.0)

    def test_window_covering_whole_span(self):
        hours = boosted_hours([_event("sauna", 12)], "cns", _ago(10), NOW)
        assert hours == pytest.approx(18.0)

    def test_window_expiring_mid_span(self):
        # Sauna window closes 8h into the 10h span.
        hours = boosted_hours([_event("sauna", 50)], "upper_body", _ago(10), NOW)
        assert hours == pytest.approx(8 * 1.8 + 2)

    def test_window_opening_mid_span(self):
        hours = boosted_hours([_event("ice_bath", 4)], "lower_body", _ago(10), NOW)
        assert hours == pytest.approx(6 + 4 * 2.0)

    def test_zone_outside_rule(self):
        assert boosted_hours([_event("ice_bath", 5)], "cns", _ago(10), NOW) == pytest.approx(10.0)

    def test_overlapping_windows_take_max(self):
        events = [_event("stretching", 10), _event("ice_bath", 10)]
        assert boosted_hours(events, "upper_body", _ago(10), NOW) == pytest.approx(20.0)

    def test_empty_span(self):
        assert boosted_hours([_event("sauna", 1)], "cns", NOW, NOW) == 0.0
