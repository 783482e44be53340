"""Pydantic schemas for request/response validation."""

from app.schemas.zones import ZONE_NAMES, ZoneVector
from app.schemas.workout import Chapter, SessionData, WorkoutRecord
from app.schemas.readiness import (
    ReadinessRequest,
    ReadinessResult,
    ReadinessStatus,
    ReadinessTimeline,
    Recommendation,
    TimelineRequest,
)
from app.schemas.preflight import (
    CoachSuggestion,
    PreFlightAdvice,
    PreFlightRequest,
    SessionPlan,
)
from app.schemas.coach import CoachPromptRequest, CoachPromptResponse
from app.schemas.correlations import CorrelationReport, PerformanceCorrelation

__all__ = [
    "ZONE_NAMES",
    "ZoneVector",
    "Chapter",
    "SessionData",
    "WorkoutRecord",
    "ReadinessRequest",
    "ReadinessResult",
    "ReadinessStatus",
    "ReadinessTimeline",
    "Recommendation",
    "TimelineRequest",
    "CoachSuggestion",
    "PreFlightAdvice",
    "PreFlightRequest",
    "SessionPlan",
    "CoachPromptRequest",
    "CoachPromptResponse",
    "CorrelationReport",
    "PerformanceCorrelation",
]
