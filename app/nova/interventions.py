"""
Recovery multiplier resolver.

Recovery interventions temporarily accelerate the natural hourly recovery
rate of specific zones:

    Ice bath:    2.0x  upper + lower        for 24h
    Sauna:       1.8x  upper + lower + CNS  for 48h
    Stretching:  1.3x  upper + lower        for 12h

Interventions are read from finished recovery work - either a
``recovery`` workout or a ``recovery`` chapter of a hybrid session:

- rounds of type ``cold`` are ice baths,
- rounds of type ``heat`` are saunas,
- listed stretches, a ``stretching``/``hybrid`` mode, or a recovery
  segment with no cold/heat rounds at all count as stretching.

An intervention is active while ``0 <= now - occurred_at < duration``.
When several are active for one zone the **maximum** multiplier wins;
multipliers never stack.  A multiplier only speeds up recovery during
its own window: :func:`boosted_hours` weights each stretch of elapsed
time by the multiplier in effect over that stretch.
"""

from __future__ import annotations

import datetime
from typing import Any, Iterable

from pydantic import BaseModel, Field

from app.schemas.workout import RECOVERY_TYPE, WorkoutRecord
from app.schemas.zones import ZONE_NAMES, ZoneVector


class InterventionRule(BaseModel):
    """Fixed boost applied by one kind of recovery intervention."""

    name: str
    display_name: str
    zones: list[str]
    multiplier: float = Field(..., ge=1.0)
    duration_hours: float = Field(..., gt=0.0)


RECOVERY_INTERVENTIONS: dict[str, InterventionRule] = {
    "ice_bath": InterventionRule(
        name="ice_bath", display_name="Ice Bath",
        zones=["upper_body", "lower_body"], multiplier=2.0, duration_hours=24.0,
    ),
    "sauna": InterventionRule(
        name="sauna", display_name="Sauna",
        zones=["upper_body", "lower_body", "cns"], multiplier=1.8, duration_hours=48.0,
    ),
    "stretching": InterventionRule(
        name="stretching", display_name="Stretching",
        zones=["upper_body", "lower_body"], multiplier=1.3, duration_hours=12.0,
    ),
}

_ROUND_TYPES: dict[str, str] = {
    "cold": "ice_bath",
    "heat": "sauna",
}

_STRETCH_MODES = ("stretching", "hybrid")


class InterventionEvent(BaseModel):
    """A recovery intervention extracted from workout history."""

    name: str
    occurred_at: datetime.datetime
    workout_id: Any = None


# ======================================================================
# Extraction
# ======================================================================


def _describes_recovery(segment: dict[str, Any]) -> bool:
    return bool(segment.get("rounds") or segment.get("stretches") or segment.get("mode"))


def _recovery_segments(workout: WorkoutRecord) -> list[dict[str, Any]]:
    """Collect the payloads describing recovery work in *workout*.

    A recovery workout whose rounds live in recovery chapters only
    contributes its top-level payload when that payload itself carries
    rounds, stretches or a mode.
    """
    chapter_segments: list[dict[str, Any]] = []
    for chapter in workout.chapters:
        if chapter.type == RECOVERY_TYPE:
            segment = dict(chapter.data)
            segment.update(chapter.config)
            chapter_segments.append(segment)

    segments: list[dict[str, Any]] = []
    if workout.workout_type == RECOVERY_TYPE:
        top_level = workout.session_data.model_dump(exclude={"chapters"})
        if not chapter_segments or _describes_recovery(top_level):
            segments.append(top_level)
    return segments + chapter_segments


def _segment_interventions(segment: dict[str, Any]) -> list[str]:
    """Return intervention names found in one recovery segment."""
    rounds = segment.get("rounds") or []
    if not isinstance(rounds, list):
        rounds = []

    names: list[str] = []
    for rnd in rounds:
        if not isinstance(rnd, dict):
            continue
        name = _ROUND_TYPES.get(rnd.get("type"))
        if name and name not in names:
            names.append(name)

    has_thermal = bool(names)
    if segment.get("stretches") or segment.get("mode") in _STRETCH_MODES or not has_thermal:
        names.append("stretching")
    return names


def extract_interventions(workouts: Iterable[WorkoutRecord]) -> list[InterventionEvent]:
    """Extract recovery interventions from finished, timestamped workouts."""
    events: list[InterventionEvent] = []
    for workout in workouts:
        if not workout.is_finished or workout.occurred_at is None:
            continue
        for segment in _recovery_segments(workout):
            for name in _segment_interventions(segment):
                events.append(InterventionEvent(
                    name=name, occurred_at=workout.occurred_at, workout_id=workout.id,
                ))
    return events


# ======================================================================
# Resolution
# ======================================================================


def is_active(event: InterventionEvent, now: datetime.datetime) -> bool:
    """True while *event* is inside its rule's duration window."""
    rule = RECOVERY_INTERVENTIONS[event.name]
    elapsed_hours = (now - event.occurred_at).total_seconds() / 3600.0
    return 0.0 <= elapsed_hours < rule.duration_hours


def resolve_boosts(
    events: Iterable[InterventionEvent],
    now: datetime.datetime,
) -> tuple[ZoneVector, list[str]]:
    """Compute per-zone multipliers in effect at *now*.

    Returns:
        ``(boosts, active_names)`` - multipliers default to 1.0; the
        maximum active multiplier is taken per zone.
    """
    boosts = {zone: 1.0 for zone in ZONE_NAMES}
    active: list[str] = []

    for event in events:
        if not is_active(event, now):
            continue
        rule = RECOVERY_INTERVENTIONS[event.name]
        if rule.name not in active:
            active.append(rule.name)
        for zone in rule.zones:
            boosts[zone] = max(boosts[zone], rule.multiplier)

    # Keep a stable order matching the rule table.
    active.sort(key=list(RECOVERY_INTERVENTIONS).index)
    return ZoneVector.from_dict(boosts), active


def boosted_hours(
    events: Iterable[InterventionEvent],
    zone: str,
    start: datetime.datetime,
    end: datetime.datetime,
) -> float:
    """Hours between *start* and *end* weighted by the multiplier for *zone*.

    Each intervention only accelerates the part of ``[start, end)`` that
    its own window covers.  Where windows overlap the largest multiplier
    applies; elsewhere the weight is 1.0.
    """
    if end <= start:
        return 0.0

    windows: list[tuple[datetime.datetime, datetime.datetime, float]] = []
    for event in events:
        rule = RECOVERY_INTERVENTIONS[event.name]
        if zone not in rule.zones:
            continue
        opens = event.occurred_at
        closes = opens + datetime.timedelta(hours=rule.duration_hours)
        if closes <= start or opens >= end:
            continue
        windows.append((max(opens, start), min(closes, end), rule.multiplier))

    cuts = sorted({start, end, *(w[0] for w in windows), *(w[1] for w in windows)})
    total = 0.0
    for seg_start, seg_end in zip(cuts, cuts[1:]):
        multiplier = max(
            (m for opens, closes, m in windows if opens <= seg_start and seg_end <= closes),
            default=1.0,
        )
        total += (seg_end - seg_start).total_seconds() / 3600.0 * multiplier
    return total


def resolve_recovery_boosts(
    workouts: Iterable[WorkoutRecord],
    now: datetime.datetime,
) -> ZoneVector:
    """Return ``{upper_body, lower_body, cns}`` multipliers (>= 1.0) at *now*."""
    boosts, _ = resolve_boosts(extract_interventions(workouts), now)
    return boosts
