"""
Fatigue correlation schemas.

A correlation compares how a session metric (boxing rounds, strength
volume, running pace) differs between sessions started at high and at
low readiness.
"""

from typing import Any

from pydantic import BaseModel, Field


class PerformanceCorrelation(BaseModel):
    """One readiness vs performance insight."""

    type: str = Field(..., description="One of: boxing, strength, endurance")
    metric: str = Field(..., description="Metric compared, e.g. 'total volume'")
    improvement: int = Field(..., gt=0, description="Percent better at high readiness")
    message: str
    sample_size: int = Field(..., description="Sessions of this type in the history")
    high_readiness_sessions: int
    low_readiness_sessions: int


class CorrelationReport(BaseModel):
    correlations: list[PerformanceCorrelation] = Field(default_factory=list)


class CorrelationRequest(BaseModel):
    workouts: list[Any] = Field(
        default_factory=list,
        description="Raw workout records as returned by the backend",
    )
