"""
Zone readiness schemas.

Readiness models the recovery state of each fatigue zone as a linear
recovery from the fatigue inflicted by recent workouts:

    residual(t) = max(0, fresh_fatigue - rate × t × multiplier)
    readiness   = 100 - max(residual over recent workouts)

Readiness values are 0-100 where:
    0   = fully fatigued (just trained at maximal load)
    100 = fully recovered (no residual fatigue)
"""

import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.schemas.zones import ZoneVector


class ReadinessStatus(BaseModel):
    """Discrete status tier for a readiness score."""

    label: str = Field(..., description="One of: Fresh, Steady, Fried")
    color: str = Field(..., description="One of: green, amber, red")


class Recommendation(BaseModel):
    """A single rule-based coaching insight."""

    type: str = Field(..., description="Rule identifier, e.g. 'cns_caution'")
    priority: str = Field(..., description="One of: high, medium, low")
    message: str


class ReadinessResult(BaseModel):
    """Full readiness assessment returned by the engine."""

    overall: float = Field(
        ..., ge=0.0, le=100.0,
        description="Mean of the three zone readinesses",
    )
    zones: ZoneVector = Field(
        ...,
        description="Per-zone readiness, 0 (fried) to 100 (fresh)",
    )
    recovery_boosts: ZoneVector = Field(
        default_factory=lambda: ZoneVector.filled(1.0),
        description="Per-zone recovery multiplier currently in effect (>= 1.0)",
    )
    active_interventions: list[str] = Field(
        default_factory=list,
        description="Recovery interventions whose window covers 'now'",
    )
    recommendations: list[Recommendation] = Field(default_factory=list)


class ZoneStatusView(BaseModel):
    """Readiness score paired with its status tier."""

    zone: str
    score: float
    status: ReadinessStatus


# ======================================================================
# Timeline
# ======================================================================


class TimelinePoint(BaseModel):
    date: datetime.date
    timestamp: datetime.datetime
    readiness: float


class RecoveryEvent(BaseModel):
    """Ice bath or sauna round logged on a timeline day."""

    date: datetime.date
    intervention: str = Field(..., description="One of: ice_bath, sauna")
    readiness: float = Field(..., description="Overall readiness on that day")


class ReadinessTimeline(BaseModel):
    points: list[TimelinePoint]
    recovery_events: list[RecoveryEvent]


# ======================================================================
# Requests / auxiliary responses
# ======================================================================


class ReadinessRequest(BaseModel):
    """Workout history supplied by the caller."""

    workouts: list[Any] = Field(
        default_factory=list,
        description="Raw workout records as returned by the backend",
    )
    now: Optional[datetime.datetime] = Field(
        None, description="Reference time (defaults to current time)",
    )


class TimelineRequest(ReadinessRequest):
    days: int = Field(14, ge=1, le=90)


class FatigueTableResponse(BaseModel):
    """Constant tables used by the engine."""

    fatigue_profiles: dict[str, ZoneVector]
    recovery_rates: ZoneVector
    interventions: dict[str, dict[str, Any]]
