"""
Unit tests for the daily readiness timeline.
"""

import datetime

import pytest

from app.nova.timeline import readiness_timeline

NOW = datetime.datetime(2026, 2, 8, 12, 0, tzinfo=datetime.timezone.utc)


def _at(hours_ago: float) -> str:
    return (NOW - datetime.timedelta(hours=hours_ago)).isoformat()


class TestReadinessTimeline:

    def test_point_count_and_order(self):
        timeline = readiness_timeline([], now=NOW, days=14)
        assert len(timeline.points) == 15
        dates = [p.date for p in timeline.points]
        assert dates == sorted(dates)
        assert timeline.points[0].date == datetime.date(2026, 1, 25)
        assert timeline.points[-1].timestamp == NOW

    def test_empty_history_is_flat(self):
        timeline = readiness_timeline([], now=NOW, days=3)
        assert [p.readiness for p in timeline.points] == [100.0] * 4
        assert timeline.recovery_events == []

    def test_points_only_see_past_workouts(self):
        workouts = [{"workout_type": "martial_arts", "status": "finished", "finished_at": _at(1)}]
        timeline = readiness_timeline(workouts, now=NOW, days=2)
        assert timeline.points[-2].readiness == 100.0
        assert timeline.points[-1].readiness == pytest.approx(38.8)

    def test_thermal_rounds_become_events(self):
        workouts = [
            {
                "workout_type": "recovery", "status": "finished", "finished_at": _at(73),
                "session_data": {"rounds": [{"type": "cold"}, {"type": "heat"}]},
            },
            {"workout_type": "recovery", "status": "finished", "finished_at": _at(2)},
        ]
        timeline = readiness_timeline(workouts, now=NOW, days=5)
        events = [(e.date, e.intervention) for e in timeline.recovery_events]
        assert events == [
            (datetime.date(2026, 2, 5), "ice_bath"),
            (datetime.date(2026, 2, 5), "sauna"),
        ]
        assert timeline.recovery_events[0].readiness == 100.0

    def test_events_outside_window_dropped(self):
        workouts = [{
            "workout_type": "recovery", "status": "finished", "finished_at": _at(24 * 30),
            "session_data": {"rounds": [{"type": "cold"}]},
        }]
        timeline = readiness_timeline(workouts, now=NOW, days=7)
        assert timeline.recovery_events == []
