"""
Pre-flight advisor - checks a planned session against current readiness.

Three checks run before a workout starts:

    1. **Scale back** - a compromised athlete planning 8+ combat rounds is
       offered half the rounds, shorter rounds and longer rest.
    2. **Hybrid swap** - a leg-focused strength session planned on a day
       that already contains endurance work is flagged for a swap to
       upper body or recovery.
    3. **Pre-flight note** - combat work with overall readiness below 70
       gets a 15% volume/intensity reduction note.

The advisor does NOT modify the session itself; it returns a suggestion
that the athlete may accept or decline.
"""

from __future__ import annotations

import datetime
import math
from typing import Any, Optional, Sequence

from app.nova.errors import InvalidConditionError
from app.nova.readiness import (
    ReadinessConfig,
    calculate_readiness,
    finished_sessions,
    normalise_now,
    parse_workouts,
)
from app.nova.status import get_readiness_status
from app.schemas.preflight import (
    CoachSuggestion,
    PreFlightAdvice,
    SessionPlan,
)
from app.schemas.readiness import ReadinessResult, ZoneStatusView
from app.schemas.workout import WorkoutRecord
from app.schemas.zones import ZONE_NAMES

CONDITIONS = ("fresh", "tired", "compromised")

# Combat rounds at or above which a compromised athlete is scaled back.
_SCALE_BACK_MIN_ROUNDS = 8

# Overall readiness below which combat sessions get a pre-flight note.
_PREFLIGHT_NOTE_THRESHOLD = 70.0

_LEG_KEYWORDS = ("squat", "deadlift")


# ======================================================================
# Checks
# ======================================================================


def _scale_back(
    planned_type: str,
    condition: str,
    plan: SessionPlan,
) -> Optional[CoachSuggestion]:
    rounds = plan.rounds or 0
    if condition != "compromised" or planned_type != "martial_arts":
        return None
    if rounds < _SCALE_BACK_MIN_ROUNDS:
        return None

    target = math.ceil(rounds / 2)
    modified = plan.model_copy(update={
        "rounds": target,
        "round_duration": plan.round_duration * 0.75 if plan.round_duration is not None else None,
        "rest_duration": plan.rest_duration * 1.5 if plan.rest_duration is not None else None,
    })
    return CoachSuggestion(
        type="scale_back",
        message=(
            f"I see you're feeling compromised. Your plan calls for {rounds} rounds "
            "of combat work, which creates high CNS load. I recommend scaling back "
            f"to {target} rounds of light technical work today."
        ),
        changes=[
            f"Reduce rounds from {rounds} to {target}",
            "Focus on technique over intensity",
            "Lower work-to-rest ratio",
        ],
        modified_plan=modified,
    )


def _has_leg_exercise(plan: SessionPlan) -> bool:
    for exercise in plan.exercises:
        if exercise.category == "legs":
            return True
        title = exercise.title.lower()
        if any(keyword in title for keyword in _LEG_KEYWORDS):
            return True
    return False


def _swap_workout(
    planned_type: str,
    plan: SessionPlan,
    todays_workouts: list[WorkoutRecord],
) -> Optional[CoachSuggestion]:
    if planned_type != "strength" or not _has_leg_exercise(plan):
        return None
    if not any(w.has_type("endurance") for w in todays_workouts):
        return None
    return CoachSuggestion(
        type="swap_workout",
        message=(
            "Heavy leg fatigue detected from your run earlier today. Starting a "
            "leg-focused strength session now risks overtraining your lower body. "
            "I recommend swapping to an upper body template or a stretching-only "
            "recovery session."
        ),
        changes=[
            "Detected: Recent endurance work",
            "Risk: Compounded leg fatigue",
            "Suggestion: Focus on upper body or recovery today",
        ],
        modified_plan=None,
    )


def _preflight_notes(planned_type: str, readiness: ReadinessResult) -> list[str]:
    notes: list[str] = []
    if planned_type == "martial_arts" and readiness.overall < _PREFLIGHT_NOTE_THRESHOLD:
        notes.append(
            f"Systemic fatigue is elevated ({readiness.overall:.0f}% readiness). "
            "Nova Lab recommends -15% volume or intensity reduction today."
        )
    return notes


def _todays_workouts(
    records: list[WorkoutRecord],
    now: datetime.datetime,
) -> list[WorkoutRecord]:
    return [w for w in finished_sessions(records) if w.occurred_at.date() == now.date()]


# ======================================================================
# Main entry point
# ======================================================================


def compute_preflight_advice(
    workouts: Sequence[Any],
    planned_type: str,
    condition: str = "fresh",
    plan: Optional[SessionPlan] = None,
    now: Optional[datetime.datetime] = None,
    config: Optional[ReadinessConfig] = None,
) -> PreFlightAdvice:
    """Compute pre-flight advice for a session about to start.

    Args:
        workouts: Workout history (raw mappings or records).
        planned_type: Type of the session about to start.
        condition: Self-reported condition, one of :data:`CONDITIONS`.
        plan: Planned session configuration.
        now: Reference time (defaults to now).
        config: Optional readiness config override.

    Returns:
        :class:`PreFlightAdvice` with readiness, per-zone status, an
        optional coach suggestion and notes.

    Raises:
        InvalidConditionError: if *condition* is not a known condition.
    """
    if condition not in CONDITIONS:
        raise InvalidConditionError(condition, CONDITIONS)

    ref_now = normalise_now(now)
    session_plan = plan or SessionPlan()
    records = parse_workouts(workouts)

    readiness = calculate_readiness(records, now=ref_now, config=config)
    zone_status = [
        ZoneStatusView(
            zone=zone,
            score=readiness.zones.get(zone),
            status=get_readiness_status(readiness.zones.get(zone)),
        )
        for zone in ZONE_NAMES
    ]

    suggestion = _scale_back(planned_type, condition, session_plan)
    if suggestion is None:
        suggestion = _swap_workout(
            planned_type, session_plan, _todays_workouts(records, ref_now),
        )

    return PreFlightAdvice(
        planned_type=planned_type,
        condition=condition,
        readiness=readiness,
        zone_status=zone_status,
        suggestion=suggestion,
        notes=_preflight_notes(planned_type, readiness),
    )
