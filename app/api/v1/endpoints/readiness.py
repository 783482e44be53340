"""
Readiness endpoints - zone readiness, status tiers, timeline, correlations, pre-flight.
"""

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_readiness_service
from app.schemas.correlations import CorrelationReport, CorrelationRequest
from app.schemas.preflight import PreFlightAdvice, PreFlightRequest
from app.schemas.readiness import (
    FatigueTableResponse,
    ReadinessRequest,
    ReadinessResult,
    ReadinessStatus,
    ReadinessTimeline,
    TimelineRequest,
)
from app.services.readiness_service import ReadinessService

router = APIRouter()


@router.post(
    "/readiness",
    summary="Compute per-zone readiness from a workout history.",
    response_model=ReadinessResult,
)
def compute_readiness(
    data: ReadinessRequest,
    service: ReadinessService = Depends(get_readiness_service),
):
    return service.compute(data.workouts, data.now)


@router.get(
    "/readiness/status",
    summary="Classify a readiness score as Fresh, Steady or Fried.",
    response_model=ReadinessStatus,
)
def get_status(
    score: float = Query(..., description="Zone or overall readiness score"),
    service: ReadinessService = Depends(get_readiness_service),
):
    return service.classify(score)


@router.post(
    "/readiness/timeline",
    summary="Daily overall readiness with recovery events.",
    response_model=ReadinessTimeline,
)
def get_timeline(
    data: TimelineRequest,
    service: ReadinessService = Depends(get_readiness_service),
):
    return service.timeline(data.workouts, data.now, data.days)


@router.get(
    "/readiness/fatigue-table",
    summary="Fatigue profiles, recovery rates and recovery interventions.",
    response_model=FatigueTableResponse,
)
def get_fatigue_table(service: ReadinessService = Depends(get_readiness_service)):
    return service.fatigue_table()


@router.post(
    "/readiness/correlations",
    summary="Compare session performance at high vs low starting readiness.",
    response_model=CorrelationReport,
)
def get_correlations(
    data: CorrelationRequest,
    service: ReadinessService = Depends(get_readiness_service),
):
    return service.correlations(data.workouts)


@router.post(
    "/preflight",
    summary="Check a planned session against current readiness.",
    response_model=PreFlightAdvice,
)
def preflight(
    data: PreFlightRequest,
    service: ReadinessService = Depends(get_readiness_service),
):
    return service.preflight(data)
