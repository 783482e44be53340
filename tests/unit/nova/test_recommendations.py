"""
Unit tests for the rule-based recommendation generator.

Each rule is exercised on its own with a hand-built context, then the
full rule set is checked for ordering and stable priority sorting.
"""

import datetime

import pytest

from app.nova.recommendations import (
    RecommendationContext,
    all_clear,
    cns_caution,
    fresh_zone,
    generate_recommendations,
    push_prs,
    recovery_active,
    recovery_deficit,
    recovery_suggestion,
    sort_by_priority,
    technical_flow,
)
from app.schemas.readiness import Recommendation
from app.schemas.workout import WorkoutRecord
from app.schemas.zones import ZoneVector

NOW = datetime.datetime(2026, 2, 8, 12, 0, tzinfo=datetime.timezone.utc)


def _session(workout_type: str, hours_ago: float = 1.0) -> WorkoutRecord:
    return WorkoutRecord.model_validate({
        "workout_type": workout_type,
        "status": "finished",
        "finished_at": NOW - datetime.timedelta(hours=hours_ago),
    })


def _ctx(upper=100.0, lower=100.0, cns=100.0, sessions=None, active=None, **kwargs):
    zones = ZoneVector(upper_body=upper, lower_body=lower, cns=cns)
    return RecommendationContext(
        zones=zones,
        overall=round((upper + lower + cns) / 3, 1),
        recent_sessions=sessions if sessions is not None else [_session("strength")],
        active_interventions=active or [],
        **kwargs,
    )


# ======================================================================
# Individual rules
# ======================================================================


class TestCnsCaution:

    def test_fires_below_60(self):
        rec = cns_caution(_ctx(cns=13.2))
        assert rec.priority == "high"
        assert "13%" in rec.message
        assert "sparring" in rec.message

    def test_silent_at_60(self):
        assert cns_caution(_ctx(cns=60.0)) is None


class TestFreshZone:

    def test_single_fresh_zone(self):
        rec = fresh_zone(_ctx(upper=20.0, lower=90.0, cns=50.0))
        assert rec.priority == "medium"
        assert rec.message.startswith("Lower Body is Fresh (90%)")

    def test_two_fresh_zones_silent(self):
        assert fresh_zone(_ctx(upper=90.0, lower=90.0, cns=50.0)) is None

    def test_no_fresh_zone_silent(self):
        assert fresh_zone(_ctx(upper=70.0, lower=70.0, cns=70.0)) is None


class TestPushPrs:

    def test_green_day(self):
        rec = push_prs(_ctx(upper=95.0, lower=90.0, cns=88.0))
        assert rec.message == "Today is a High-Intensity Green Day. Push for PRs."

    def test_requires_history(self):
        assert push_prs(_ctx(sessions=[])) is None

    def test_below_85_silent(self):
        assert push_prs(_ctx(upper=80.0, lower=80.0, cns=80.0)) is None


class TestTechnicalFlow:

    def test_systemic_fatigue(self):
        rec = technical_flow(_ctx(upper=19.5, lower=83.8, cns=13.2))
        assert rec.priority == "high"
        assert rec.message == "Systemic Fatigue Detected. Focus on Technical Flow over Power."

    def test_silent_at_60(self):
        assert technical_flow(_ctx(upper=60.0, lower=60.0, cns=60.0)) is None


class TestRecoveryDeficit:

    def test_three_sessions_without_recovery(self):
        sessions = [_session("strength", 1), _session("endurance", 10), _session("martial_arts", 30)]
        rec = recovery_deficit(_ctx(sessions=sessions))
        assert rec.priority == "high"

    def test_recovery_in_window(self):
        sessions = [_session("strength", 1), _session("recovery", 10), _session("martial_arts", 30)]
        assert recovery_deficit(_ctx(sessions=sessions)) is None

    def test_recovery_chapter_counts(self):
        hybrid = WorkoutRecord.model_validate({
            "workout_type": "hybrid",
            "status": "finished",
            "session_data": {"chapters": [{"type": "strength"}, {"type": "recovery"}]},
        })
        sessions = [_session("strength", 1), hybrid, _session("endurance", 30)]
        assert recovery_deficit(_ctx(sessions=sessions)) is None

    def test_only_last_three_checked(self):
        sessions = [
            _session("strength", 1),
            _session("endurance", 10),
            _session("martial_arts", 30),
            _session("recovery", 40),
        ]
        assert recovery_deficit(_ctx(sessions=sessions)) is not None

    def test_sessions_older_than_30_days_ignored(self):
        sessions = [_session("strength", 1), _session("endurance", 10), _session("martial_arts", 24 * 31)]
        assert recovery_deficit(_ctx(sessions=sessions, now=NOW)) is None

    def test_future_sessions_ignored(self):
        sessions = [_session("martial_arts", -5), _session("strength", 1), _session("endurance", 10)]
        assert recovery_deficit(_ctx(sessions=sessions, now=NOW)) is None

    def test_window_applies_with_reference_time(self):
        sessions = [_session("strength", 1), _session("endurance", 10), _session("martial_arts", 24 * 29)]
        assert recovery_deficit(_ctx(sessions=sessions, now=NOW)) is not None

    def test_fewer_than_three_sessions(self):
        sessions = [_session("strength", 1), _session("endurance", 10)]
        assert recovery_deficit(_ctx(sessions=sessions)) is None


class TestRecoverySuggestion:

    def test_two_fried_zones(self):
        rec = recovery_suggestion(_ctx(upper=19.5, lower=83.8, cns=13.2))
        assert rec.priority == "medium"
        assert "Upper Body, CNS" in rec.message

    def test_silent_when_intervention_active(self):
        assert recovery_suggestion(_ctx(upper=19.5, lower=30.0, cns=13.2, active=["sauna"])) is None

    def test_single_fried_zone_silent(self):
        assert recovery_suggestion(_ctx(upper=19.5, lower=83.8, cns=70.0)) is None


class TestRecoveryActive:

    def test_lists_multipliers(self):
        rec = recovery_active(_ctx(active=["ice_bath", "sauna"]))
        assert rec.priority == "low"
        assert rec.message.startswith("Recovery multipliers active: Ice Bath (2.0x), Sauna (1.8x)")

    def test_silent_without_interventions(self):
        assert recovery_active(_ctx()) is None


class TestAllClear:

    def test_empty_history(self):
        rec = all_clear(_ctx(sessions=[]))
        assert rec.message == "No recent training load. All systems operating normally."

    def test_silent_with_history(self):
        assert all_clear(_ctx()) is None


# ======================================================================
# Full rule set
# ======================================================================


class TestGenerateRecommendations:

    def test_empty_history_only_all_clear(self):
        recs = generate_recommendations(_ctx(sessions=[]))
        assert [r.type for r in recs] == ["all_clear"]

    def test_fixed_rule_order(self):
        recs = generate_recommendations(_ctx(upper=19.5, lower=83.8, cns=13.2))
        assert [r.type for r in recs] == ["cns_caution", "technical_flow", "recovery_suggestion"]

    def test_custom_rules(self):
        recs = generate_recommendations(_ctx(sessions=[]), rules=(push_prs,))
        assert recs == []


class TestSortByPriority:

    @pytest.fixture
    def recs(self):
        return [
            Recommendation(type="a", priority="low", message="a"),
            Recommendation(type="b", priority="high", message="b"),
            Recommendation(type="c", priority="medium", message="c"),
            Recommendation(type="d", priority="high", message="d"),
        ]

    def test_high_first_and_stable(self, recs):
        assert [r.type for r in sort_by_priority(recs)] == ["b", "d", "c", "a"]

    def test_limit(self, recs):
        assert [r.type for r in sort_by_priority(recs, limit=2)] == ["b", "d"]

    def test_does_not_mutate_input(self, recs):
        sort_by_priority(recs)
        assert [r.type for r in recs] == ["a", "b", "c", "d"]
