"""
Rule-based readiness recommendations.

Each rule is an independent, pure predicate over a
:class:`RecommendationContext` that either returns a
:class:`Recommendation` or ``None``.  Rules are not mutually exclusive
and do not look at each other's output, so each can be tested alone.

Rules are evaluated in the fixed order of :data:`RULES`; callers that
want the most urgent items first use :func:`sort_by_priority`.

The "fresh zone" rule is where the design goal of keeping at least one
zone above 85% surfaces: it never alters computed scores, it only steers
the athlete towards the zone that is still fresh.
"""

from __future__ import annotations

import datetime
from typing import Callable, Optional

from pydantic import BaseModel, Field

from app.nova.interventions import RECOVERY_INTERVENTIONS
from app.nova.status import FRESH_THRESHOLD, STEADY_THRESHOLD, is_fresh, is_fried
from app.schemas.readiness import Recommendation
from app.schemas.workout import RECOVERY_TYPE, WorkoutRecord
from app.schemas.zones import ZONE_LABELS, ZONE_NAMES, ZoneVector

PRIORITY_ORDER: dict[str, int] = {"high": 0, "medium": 1, "low": 2}

# Number of most recent finished sessions checked for recovery work.
RECOVERY_DEFICIT_WINDOW = 3

# Only sessions this recent count towards the recovery deficit.
RECOVERY_DEFICIT_DAYS = 30

_FRESH_ZONE_FOCUS: dict[str, str] = {
    "upper_body": "upper body strength or technical striking",
    "lower_body": "leg-focused strength or an endurance run",
    "cns": "low-intensity skill and mobility work",
}


class RecommendationContext(BaseModel):
    """Inputs shared by every recommendation rule."""

    zones: ZoneVector
    overall: float
    recovery_boosts: ZoneVector = Field(default_factory=lambda: ZoneVector.filled(1.0))
    active_interventions: list[str] = Field(default_factory=list)
    recent_sessions: list[WorkoutRecord] = Field(
        default_factory=list,
        description="Finished, timestamped workouts, most recent first",
    )
    now: Optional[datetime.datetime] = Field(
        None, description="Reference time; bounds the recovery deficit window",
    )


Rule = Callable[[RecommendationContext], Optional[Recommendation]]


# ======================================================================
# Rules
# ======================================================================


def cns_caution(ctx: RecommendationContext) -> Optional[Recommendation]:
    """CNS below the Steady threshold: no sparring or combat work."""
    if ctx.zones.cns >= STEADY_THRESHOLD:
        return None
    return Recommendation(
        type="cns_caution",
        priority="high",
        message=(
            f"CNS readiness is {ctx.zones.cns:.0f}%. Avoid sparring, boxing "
            "and other high-CNS combat work today."
        ),
    )


def fresh_zone(ctx: RecommendationContext) -> Optional[Recommendation]:
    """Exactly one zone is Fresh: focus training there."""
    fresh = [z for z in ZONE_NAMES if is_fresh(ctx.zones.get(z))]
    if len(fresh) != 1:
        return None
    zone = fresh[0]
    return Recommendation(
        type="fresh_zone",
        priority="medium",
        message=(
            f"{ZONE_LABELS[zone]} is Fresh ({ctx.zones.get(zone):.0f}%). "
            f"Target it today with {_FRESH_ZONE_FOCUS[zone]}."
        ),
    )


def push_prs(ctx: RecommendationContext) -> Optional[Recommendation]:
    if ctx.overall < FRESH_THRESHOLD or not ctx.recent_sessions:
        return None
    return Recommendation(
        type="push_prs",
        priority="medium",
        message="Today is a High-Intensity Green Day. Push for PRs.",
    )


def technical_flow(ctx: RecommendationContext) -> Optional[Recommendation]:
    if ctx.overall >= STEADY_THRESHOLD:
        return None
    return Recommendation(
        type="technical_flow",
        priority="high",
        message="Systemic Fatigue Detected. Focus on Technical Flow over Power.",
    )


def recovery_deficit(ctx: RecommendationContext) -> Optional[Recommendation]:
    """None of the last three finished sessions included recovery work.

    With a reference time, only past sessions from the last 30 days count.
    """
    sessions = ctx.recent_sessions
    if ctx.now is not None:
        cutoff = ctx.now - datetime.timedelta(days=RECOVERY_DEFICIT_DAYS)
        sessions = [
            s for s in sessions
            if s.occurred_at is not None and cutoff < s.occurred_at <= ctx.now
        ]
    last = sessions[:RECOVERY_DEFICIT_WINDOW]
    if len(last) < RECOVERY_DEFICIT_WINDOW:
        return None
    if any(w.has_type(RECOVERY_TYPE) for w in last):
        return None
    return Recommendation(
        type="recovery_deficit",
        priority="high",
        message=(
            "No recovery work in your last 3 sessions. Your next session should "
            "include a 10-minute mobility flow or stretching to prevent burnout."
        ),
    )


def recovery_suggestion(ctx: RecommendationContext) -> Optional[Recommendation]:
    """Several zones fried and nothing is accelerating recovery."""
    fried = [z for z in ZONE_NAMES if is_fried(ctx.zones.get(z))]
    if len(fried) < 2 or ctx.active_interventions:
        return None
    names = ", ".join(ZONE_LABELS[z] for z in fried)
    return Recommendation(
        type="recovery_suggestion",
        priority="medium",
        message=(
            f"Multiple zones are fatigued ({names}). An ice bath or sauna "
            "session will accelerate recovery."
        ),
    )


def recovery_active(ctx: RecommendationContext) -> Optional[Recommendation]:
    if not ctx.active_interventions:
        return None
    parts = []
    for name in ctx.active_interventions:
        rule = RECOVERY_INTERVENTIONS[name]
        parts.append(f"{rule.display_name} ({rule.multiplier:.1f}x)")
    return Recommendation(
        type="recovery_active",
        priority="low",
        message=f"Recovery multipliers active: {', '.join(parts)}. Recovery is accelerating.",
    )


def all_clear(ctx: RecommendationContext) -> Optional[Recommendation]:
    if ctx.recent_sessions:
        return None
    return Recommendation(
        type="all_clear",
        priority="low",
        message="No recent training load. All systems operating normally.",
    )


RULES: tuple[Rule, ...] = (
    cns_caution,
    fresh_zone,
    push_prs,
    technical_flow,
    recovery_deficit,
    recovery_suggestion,
    recovery_active,
    all_clear,
)


# ======================================================================
# Entry points
# ======================================================================


def generate_recommendations(
    ctx: RecommendationContext,
    rules: tuple[Rule, ...] = RULES,
) -> list[Recommendation]:
    """Evaluate every rule in order and collect the triggered ones."""
    recommendations = []
    for rule in rules:
        rec = rule(ctx)
        if rec is not None:
            recommendations.append(rec)
    return recommendations


def sort_by_priority(
    recommendations: list[Recommendation],
    limit: int | None = None,
) -> list[Recommendation]:
    """Return *recommendations* ordered high > medium > low (stable)."""
    ordered = sorted(recommendations, key=lambda r: PRIORITY_ORDER.get(r.priority, len(PRIORITY_ORDER)))
    if limit is not None:
        return ordered[:limit]
    return ordered
