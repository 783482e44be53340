"""What would the Performance Engine tell you TODAY?

Replays a short training week (boxing, a hybrid strength/run session,
a sauna) and prints the readiness, recommendations and coach context
as of a fixed reference time.

Usage:
    python scripts/simulate_today.py
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.nova.coach_context import build_readiness_context
from app.nova.readiness import calculate_readiness
from app.nova.recommendations import sort_by_priority
from app.nova.status import get_readiness_status
from app.schemas.zones import ZONE_LABELS, ZONE_NAMES

NOW = datetime.datetime(2026, 2, 8, 18, 0, tzinfo=datetime.timezone.utc)


def _at(hours_ago: float) -> str:
    return (NOW - datetime.timedelta(hours=hours_ago)).isoformat()


WORKOUTS = [
    {"id": "w1", "workout_type": "martial_arts", "status": "finished", "finished_at": _at(3)},
    {
        "id": "w2", "workout_type": "hybrid", "status": "finished", "finished_at": _at(26),
        "session_data": {"chapters": [
            {"type": "strength", "data": {}},
            {"type": "endurance", "data": {"distance": 5.2}},
        ]},
    },
    {
        "id": "w3", "workout_type": "recovery", "status": "finished", "finished_at": _at(20),
        "session_data": {"rounds": [{"type": "heat", "mode": "timed", "targetSeconds": 900}]},
    },
    {"id": "w4", "workout_type": "run", "status": "in_progress", "started_at": _at(0.5)},
]


if __name__ == "__main__":
    result = calculate_readiness(WORKOUTS, now=NOW)

    print("=" * 60)
    print(f"NOVA readiness as of {NOW:%Y-%m-%d %H:%M} UTC")
    print("=" * 60)
    overall = get_readiness_status(result.overall)
    print(f"Overall: {result.overall:5.1f}%  {overall.label}")
    for zone in ZONE_NAMES:
        score = result.zones.get(zone)
        boost = result.recovery_boosts.get(zone)
        print(f"  {ZONE_LABELS[zone]:<11} {score:5.1f}%  {get_readiness_status(score).label:<7} x{boost:.1f}")
    print()
    for rec in sort_by_priority(result.recommendations):
        print(f"[{rec.priority:>6}] {rec.message}")
    print()
    print(build_readiness_context(result))
