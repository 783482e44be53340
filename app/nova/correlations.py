"""
Fatigue correlations - how readiness relates to session performance.

For every boxing, strength and running session the engine is replayed
over the workouts logged before it, giving the readiness the athlete
started that session with.  Sessions are split into a high band
(readiness >= 80) and a low band (readiness < 60); sessions in between
are ignored.  The average metric of each band is compared:

    Boxing     rounds completed     vs overall readiness
    Strength   total volume         vs overall readiness
    Running    pace (min per km)    vs lower body readiness, lower is better

A correlation is reported only with at least 5 sessions of the type,
at least one session in each band, and a positive improvement.
"""

from __future__ import annotations

from typing import Any, Callable, NamedTuple, Optional, Sequence

from app.nova.readiness import (
    ReadinessConfig,
    calculate_readiness,
    finished_sessions,
    parse_workouts,
)
from app.schemas.correlations import CorrelationReport, PerformanceCorrelation
from app.schemas.readiness import ReadinessResult
from app.schemas.workout import WorkoutRecord

MIN_SESSIONS = 5
HIGH_READINESS = 80.0
LOW_READINESS = 60.0


# ======================================================================
# Metric extraction
# ======================================================================


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _extra(model: Any, key: str) -> Any:
    return (model.model_extra or {}).get(key)


def _first_chapter_value(workout: WorkoutRecord, key: str) -> Any:
    if workout.chapters:
        return workout.chapters[0].data.get(key)
    return None


def _is_boxing(workout: WorkoutRecord) -> bool:
    if workout.workout_type == "boxing":
        return True
    session_type = _extra(workout, "session_type")
    return (
        workout.workout_type == "martial_arts"
        and isinstance(session_type, str)
        and "box" in session_type.lower()
    )


def _boxing_rounds(workout: WorkoutRecord) -> Optional[float]:
    rounds = _first_chapter_value(workout, "total_rounds")
    if rounds is None:
        rounds = _extra(workout.session_data, "total_rounds")
    return _number(rounds)


def _strength_volume(workout: WorkoutRecord) -> Optional[float]:
    return _number(_extra(workout, "total_volume"))


def _run_pace(workout: WorkoutRecord) -> Optional[float]:
    distance = _number(_first_chapter_value(workout, "distance"))
    duration = _number(_extra(workout, "duration_minutes"))
    if not distance or not duration or distance <= 0 or duration <= 0:
        return None
    return duration / distance


class _Metric(NamedTuple):
    type: str
    metric: str
    selects: Callable[[WorkoutRecord], bool]
    value: Callable[[WorkoutRecord], Optional[float]]
    readiness: Callable[[ReadinessResult], float]
    lower_is_better: bool
    message: str


METRICS: tuple[_Metric, ...] = (
    _Metric(
        type="boxing",
        metric="rounds completed",
        selects=_is_boxing,
        value=_boxing_rounds,
        readiness=lambda r: r.overall,
        lower_is_better=False,
        message="Your Boxing volume is {improvement}% higher when Systemic Readiness is above 80%",
    ),
    _Metric(
        type="strength",
        metric="total volume",
        selects=lambda w: w.workout_type in ("strength", "gym"),
        value=_strength_volume,
        readiness=lambda r: r.overall,
        lower_is_better=False,
        message="Your Strength volume is {improvement}% higher when Overall Readiness is above 80%",
    ),
    _Metric(
        type="endurance",
        metric="pace",
        selects=lambda w: w.workout_type in ("endurance", "run"),
        value=_run_pace,
        readiness=lambda r: r.zones.lower_body,
        lower_is_better=True,
        message="Your Running pace is {improvement}% faster when Lower Body Readiness is above 80%",
    ),
)


# ======================================================================
# Correlation
# ======================================================================


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def _correlate(
    metric: _Metric,
    sessions: list[WorkoutRecord],
    history: list[WorkoutRecord],
    cfg: Optional[ReadinessConfig],
) -> Optional[PerformanceCorrelation]:
    selected = [w for w in sessions if metric.selects(w)]
    if len(selected) < MIN_SESSIONS:
        return None

    high: list[float] = []
    low: list[float] = []
    for workout in selected:
        value = metric.value(workout)
        if value is None or value <= 0:
            continue
        before = [w for w in history if w.occurred_at is not None and w.occurred_at < workout.occurred_at]
        score = metric.readiness(calculate_readiness(before, now=workout.occurred_at, config=cfg))
        if score >= HIGH_READINESS:
            high.append(value)
        elif score < LOW_READINESS:
            low.append(value)

    if not high or not low:
        return None

    avg_high, avg_low = _mean(high), _mean(low)
    if metric.lower_is_better:
        improvement = round((avg_low - avg_high) / avg_low * 100)
    else:
        improvement = round((avg_high - avg_low) / avg_low * 100)
    if improvement <= 0:
        return None

    return PerformanceCorrelation(
        type=metric.type,
        metric=metric.metric,
        improvement=improvement,
        message=metric.message.format(improvement=improvement),
        sample_size=len(selected),
        high_readiness_sessions=len(high),
        low_readiness_sessions=len(low),
    )


def fatigue_correlations(
    workouts: Sequence[Any],
    config: Optional[ReadinessConfig] = None,
) -> CorrelationReport:
    """Compare session performance at high vs low starting readiness.

    Raises:
        InvalidWorkoutHistoryError: if *workouts* is not a sequence.
    """
    records = parse_workouts(workouts)
    sessions = finished_sessions(records)

    correlations = []
    for metric in METRICS:
        correlation = _correlate(metric, sessions, records, config)
        if correlation is not None:
            correlations.append(correlation)
    return CorrelationReport(correlations=correlations)
