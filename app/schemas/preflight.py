"""
Pre-flight advisor schemas.

The pre-flight advisor runs just before a workout starts and combines
the current readiness with the planned session to produce an optional
coach suggestion and cautionary notes.
"""

import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.schemas.readiness import ReadinessResult, ZoneStatusView


class PlannedExercise(BaseModel):
    title: str = ""
    category: Optional[str] = None


class SessionPlan(BaseModel):
    """Configuration of the session about to start."""

    rounds: Optional[int] = Field(None, ge=0)
    round_duration: Optional[float] = Field(None, ge=0, description="Seconds per round")
    rest_duration: Optional[float] = Field(None, ge=0, description="Seconds of rest between rounds")
    exercises: list[PlannedExercise] = Field(default_factory=list)


class CoachSuggestion(BaseModel):
    """A change the coach proposes before the session starts."""

    type: str = Field(..., description="One of: scale_back, swap_workout")
    message: str
    changes: list[str] = Field(default_factory=list)
    modified_plan: Optional[SessionPlan] = Field(
        None,
        description="Replacement plan (None when the whole workout should be swapped)",
    )


class PreFlightAdvice(BaseModel):
    """Complete pre-flight output."""

    planned_type: str
    condition: str
    readiness: ReadinessResult
    zone_status: list[ZoneStatusView]
    suggestion: Optional[CoachSuggestion] = None
    notes: list[str] = Field(default_factory=list)


class PreFlightRequest(BaseModel):
    workouts: list[Any] = Field(default_factory=list)
    planned_type: str = Field(..., description="Workout type about to start, e.g. 'martial_arts'")
    condition: str = Field("fresh", description="One of: fresh, tired, compromised")
    plan: SessionPlan = Field(default_factory=SessionPlan)
    now: Optional[datetime.datetime] = None
