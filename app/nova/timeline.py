"""
Daily readiness timeline with recovery events.

Replays the readiness engine once per day over a trailing window: each
point only sees the workouts that had happened by that moment, so the
curve shows how overall readiness jumped after ice baths and saunas.
"""

from __future__ import annotations

import datetime
from typing import Any, Optional, Sequence

from app.nova.interventions import extract_interventions
from app.nova.readiness import (
    ReadinessConfig,
    calculate_readiness,
    normalise_now,
    parse_workouts,
)
from app.schemas.readiness import ReadinessTimeline, RecoveryEvent, TimelinePoint

# Interventions plotted on the timeline (thermal rounds only).
_TIMELINE_INTERVENTIONS = ("ice_bath", "sauna")


def readiness_timeline(
    workouts: Sequence[Any],
    now: Optional[datetime.datetime] = None,
    days: int = 14,
    config: Optional[ReadinessConfig] = None,
) -> ReadinessTimeline:
    """Compute ``days + 1`` daily readiness points ending at *now*."""
    ref_now = normalise_now(now)
    records = parse_workouts(workouts)

    events_by_day: dict[datetime.date, list[str]] = {}
    for event in extract_interventions(records):
        if event.name not in _TIMELINE_INTERVENTIONS:
            continue
        events_by_day.setdefault(event.occurred_at.date(), []).append(event.name)

    points: list[TimelinePoint] = []
    recovery_events: list[RecoveryEvent] = []

    for offset in range(days, -1, -1):
        point_time = ref_now - datetime.timedelta(days=offset)
        seen = [
            w for w in records
            if w.occurred_at is not None and w.occurred_at <= point_time
        ]
        overall = calculate_readiness(seen, now=point_time, config=config).overall
        day = point_time.date()
        points.append(TimelinePoint(date=day, timestamp=point_time, readiness=overall))

        for name in events_by_day.get(day, []):
            recovery_events.append(RecoveryEvent(date=day, intervention=name, readiness=overall))

    return ReadinessTimeline(points=points, recovery_events=recovery_events)
