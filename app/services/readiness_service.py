"""
Readiness service.

Business logic between the HTTP layer and the pure readiness engine:
builds the engine config from settings, logs requests and maps engine
errors to HTTP errors.
"""

import datetime
from typing import Any, Optional

from fastapi import HTTPException, status
from loguru import logger

from app.core.config import settings
from app.nova.coach_context import build_coach_prompt
from app.nova.correlations import fatigue_correlations
from app.nova.errors import NovaEngineError
from app.nova.fatigue import FATIGUE_TABLE
from app.nova.interventions import RECOVERY_INTERVENTIONS
from app.nova.preflight import compute_preflight_advice
from app.nova.readiness import ReadinessConfig, calculate_readiness
from app.nova.recommendations import sort_by_priority
from app.nova.status import get_readiness_status
from app.nova.timeline import readiness_timeline
from app.schemas.correlations import CorrelationReport
from app.schemas.preflight import PreFlightAdvice, PreFlightRequest
from app.schemas.readiness import (
    FatigueTableResponse,
    ReadinessResult,
    ReadinessStatus,
    ReadinessTimeline,
)
from app.schemas.zones import ZoneVector


class ReadinessService:
    """Service wrapping the readiness engine for the API."""

    def __init__(self, config: Optional[ReadinessConfig] = None, recommendation_limit: Optional[int] = None):
        """
        Initialize service with an engine configuration.

        Args:
            config: Engine config; built from settings when omitted.
            recommendation_limit: Max recommendations returned (None = all).
        """
        self.config = config or ReadinessConfig(lookback_hours=settings.READINESS_LOOKBACK_HOURS)
        self.recommendation_limit = recommendation_limit

    @staticmethod
    def _unprocessable(exc: NovaEngineError) -> HTTPException:
        logger.warning(f"Readiness request rejected: {exc}")
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))

    def _prioritise(self, result: ReadinessResult) -> ReadinessResult:
        result.recommendations = sort_by_priority(result.recommendations, self.recommendation_limit)
        return result

    def compute(self, workouts: list[Any], now: Optional[datetime.datetime] = None) -> ReadinessResult:
        """Compute readiness with recommendations sorted by priority."""
        try:
            result = calculate_readiness(workouts, now=now, config=self.config)
        except NovaEngineError as e:
            raise self._unprocessable(e)
        logger.info(
            f"Readiness computed from {len(workouts)} record(s): overall={result.overall} "
            f"recommendations={len(result.recommendations)}"
        )
        return self._prioritise(result)

    def classify(self, score: float) -> ReadinessStatus:
        return get_readiness_status(score)

    def timeline(
        self,
        workouts: list[Any],
        now: Optional[datetime.datetime] = None,
        days: int = 14,
    ) -> ReadinessTimeline:
        logger.info(f"Computing {days}-day readiness timeline")
        try:
            return readiness_timeline(workouts, now=now, days=days, config=self.config)
        except NovaEngineError as e:
            raise self._unprocessable(e)

    def preflight(self, request: PreFlightRequest) -> PreFlightAdvice:
        logger.info(f"Pre-flight check for planned '{request.planned_type}' session")
        try:
            advice = compute_preflight_advice(
                request.workouts,
                planned_type=request.planned_type,
                condition=request.condition,
                plan=request.plan,
                now=request.now,
                config=self.config,
            )
        except NovaEngineError as e:
            raise self._unprocessable(e)
        self._prioritise(advice.readiness)
        return advice

    def coach_prompt(
        self,
        workouts: list[Any],
        now: Optional[datetime.datetime] = None,
        extra_context: str = "",
    ) -> str:
        """Build the AI coach prompt from the current readiness."""
        result = self.compute(workouts, now)
        return build_coach_prompt(result, extra_context)

    def fatigue_table(self) -> FatigueTableResponse:
        return FatigueTableResponse(
            fatigue_profiles=dict(FATIGUE_TABLE),
            recovery_rates=ZoneVector.from_dict(self.config.recovery_rates),
            interventions={
                name: rule.model_dump(exclude={"name"})
                for name, rule in RECOVERY_INTERVENTIONS.items()
            },
        )

    def correlations(self, workouts: list[Any]) -> CorrelationReport:
        """Relate starting readiness to boxing, strength and running performance."""
        try:
            report = fatigue_correlations(workouts, config=self.config)
        except NovaEngineError as e:
            raise self._unprocessable(e)
        logger.info(f"Found {len(report.correlations)} fatigue correlation(s) in {len(workouts)} record(s)")
        return report
