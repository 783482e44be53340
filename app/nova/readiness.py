"""
Zone readiness - the NOVA Performance Engine.

This module computes how recovered each fatigue zone is, based on the
athlete's recent workout history.

Model
-----
Each finished workout inflicts a fresh fatigue percentage on each zone
(see :mod:`app.nova.fatigue`).  That fatigue recovers **linearly** at a
zone-specific hourly rate, accelerated by any active recovery
multiplier (see :mod:`app.nova.interventions`):

    residual(t) = max(0, fresh - rate × Σ(segment_hours × multiplier))

where the sum runs over the hours elapsed since the workout, each
stretch weighted by the multiplier active during it (1.0 outside every
intervention window).  Readiness per zone is:

    readiness = clamp(100 - max(residual over workouts), 0, 100)

Recovery rates (percent per hour):

    upper_body:  4.5
    lower_body:  3.8
    cns:         3.2   - slowest, the most conservative constraint

Design choices
--------------
1. **Max, not sum** - the most severe recent stressor dominates a zone.
   Training often must not drive readiness negative.
2. **Time-bounded multipliers** - an intervention only accelerates the
   hours its window overlaps, so with a fixed history readiness never
   falls as time passes, even when a boost expires.
3. **Injected clock** - ``now`` is a parameter, so the computation is a
   pure function of ``(workouts, now)``.
4. **Fail soft per record** - unknown types, malformed records and
   unparseable timestamps are skipped; only a history that is not a
   sequence at all raises :class:`InvalidWorkoutHistoryError`.
5. **Lookback window** - workouts older than ``lookback_hours`` are
   ignored.  The slowest full recovery (CNS from 95%) is under 30h, so
   the default 96h window loses nothing.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from app.nova.errors import InvalidReferenceTimeError, InvalidWorkoutHistoryError
from app.nova.fatigue import fatigue_profiles
from app.nova.interventions import (
    InterventionEvent,
    boosted_hours,
    extract_interventions,
    resolve_boosts,
)
from app.nova.recommendations import RecommendationContext, generate_recommendations
from app.schemas.readiness import ReadinessResult
from app.schemas.workout import WorkoutRecord, coerce_timestamp
from app.schemas.zones import ZONE_NAMES, ZoneVector

# ======================================================================
# Configuration
# ======================================================================

# Zone recovery rates (percent of full fatigue recovered per hour).
RECOVERY_RATES: dict[str, float] = {
    "upper_body": 4.5,
    "lower_body": 3.8,
    "cns": 3.2,
}

_LOOKBACK_HOURS = 96.0


class ReadinessConfig(BaseModel):
    """Configuration for the readiness computation."""

    recovery_rates: dict[str, float] = Field(
        default_factory=lambda: dict(RECOVERY_RATES),
    )
    lookback_hours: float = Field(default=_LOOKBACK_HOURS, gt=0.0)


DEFAULT_READINESS_CONFIG = ReadinessConfig()


# ======================================================================
# Input normalisation
# ======================================================================


def _utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def normalise_now(now: Optional[datetime.datetime]) -> datetime.datetime:
    if now is None:
        return _utc_now()
    parsed = coerce_timestamp(now)
    if parsed is None:
        raise InvalidReferenceTimeError(now)
    return parsed


def parse_workouts(workouts: Any) -> list[WorkoutRecord]:
    """Validate *workouts* into :class:`WorkoutRecord` objects.

    Raises:
        InvalidWorkoutHistoryError: if *workouts* is not a list/tuple-like
            sequence (``None``, strings, bytes and mappings included).
    """
    if workouts is None or isinstance(workouts, (str, bytes, bytearray, Mapping)):
        raise InvalidWorkoutHistoryError(workouts)
    if not isinstance(workouts, Sequence):
        raise InvalidWorkoutHistoryError(workouts)

    records: list[WorkoutRecord] = []
    for index, raw in enumerate(workouts):
        if isinstance(raw, WorkoutRecord):
            records.append(raw)
            continue
        try:
            records.append(WorkoutRecord.model_validate(raw))
        except ValidationError as exc:
            logger.debug(
                "Skipping malformed workout record at index {}: {} error(s)",
                index, exc.error_count(),
            )
    return records


def finished_sessions(records: list[WorkoutRecord]) -> list[WorkoutRecord]:
    """Finished workouts with a usable timestamp, most recent first."""
    usable = []
    for record in records:
        if not record.is_finished:
            continue
        if record.occurred_at is None:
            logger.debug("Skipping workout {} without a usable timestamp", record.id)
            continue
        usable.append(record)
    usable.sort(key=lambda w: w.occurred_at, reverse=True)
    return usable


# ======================================================================
# Core computation
# ======================================================================


def residual_fatigue(
    fresh: float,
    rate: float,
    hours: float,
    multiplier: float = 1.0,
) -> float:
    """Fatigue left from *fresh* after *hours* at *rate* × *multiplier* per hour."""
    recovered = rate * max(hours, 0.0) * multiplier
    if recovered >= fresh:
        return 0.0
    return fresh - recovered


def _compute_zone_fatigue(
    sessions: list[WorkoutRecord],
    now: datetime.datetime,
    events: list[InterventionEvent],
    cfg: ReadinessConfig,
) -> dict[str, float]:
    """Maximum residual fatigue per zone across *sessions*."""
    zone_fatigue = {zone: 0.0 for zone in ZONE_NAMES}

    for workout in sessions:
        hours_ago = (now - workout.occurred_at).total_seconds() / 3600.0
        if hours_ago < 0:
            continue  # Future workout, skip.
        if hours_ago > cfg.lookback_hours:
            continue

        profiles = fatigue_profiles(workout)
        if not profiles:
            continue
        weighted = {
            zone: boosted_hours(events, zone, workout.occurred_at, now)
            for zone in ZONE_NAMES
        }
        for profile in profiles:
            for zone in ZONE_NAMES:
                fresh = profile.get(zone)
                if fresh <= 0:
                    continue
                residual = residual_fatigue(fresh, cfg.recovery_rates[zone], weighted[zone])
                zone_fatigue[zone] = max(zone_fatigue[zone], residual)

    return zone_fatigue


def _zone_readiness(zone_fatigue: dict[str, float]) -> dict[str, float]:
    return {
        zone: max(0.0, min(100.0, 100.0 - fatigue))
        for zone, fatigue in zone_fatigue.items()
    }


def _compute_overall(readiness: dict[str, float]) -> float:
    """Simple mean of the zone readinesses."""
    return sum(readiness[zone] for zone in ZONE_NAMES) / len(ZONE_NAMES)


# ======================================================================
# Main entry point
# ======================================================================


def calculate_readiness(
    workouts: Sequence[Any],
    now: Optional[datetime.datetime] = None,
    config: Optional[ReadinessConfig] = None,
) -> ReadinessResult:
    """Compute per-zone readiness from a workout history.

    Args:
        workouts: Workout records (raw mappings or :class:`WorkoutRecord`).
        now: Reference time; defaults to the current UTC time.  Naive
            datetimes are treated as UTC.
        config: Optional config override.

    Returns:
        :class:`ReadinessResult` with zone readiness, overall score,
        active recovery boosts and recommendations.

    Raises:
        InvalidWorkoutHistoryError: if *workouts* is not a sequence.
        InvalidReferenceTimeError: if *now* is given but unreadable.
    """
    cfg = config or DEFAULT_READINESS_CONFIG
    ref_now = normalise_now(now)

    sessions = finished_sessions(parse_workouts(workouts))

    events = extract_interventions(sessions)
    boosts, active = resolve_boosts(events, ref_now)
    zone_fatigue = _compute_zone_fatigue(sessions, ref_now, events, cfg)
    readiness = _zone_readiness(zone_fatigue)
    overall = _compute_overall(readiness)

    # Rules see the exact values; only the returned scores are rounded.
    recommendations = generate_recommendations(RecommendationContext(
        zones=ZoneVector.from_dict(readiness),
        overall=overall,
        recovery_boosts=boosts,
        active_interventions=active,
        recent_sessions=[s for s in sessions if s.occurred_at <= ref_now],
        now=ref_now,
    ))

    return ReadinessResult(
        overall=round(overall, 1),
        zones=ZoneVector(**{zone: round(value, 1) for zone, value in readiness.items()}),
        recovery_boosts=boosts,
        active_interventions=active,
        recommendations=recommendations,
    )
