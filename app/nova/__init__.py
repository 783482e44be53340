"""NOVA core algorithms - readiness engine, recommendations, pre-flight advice."""

from app.nova.errors import InvalidWorkoutHistoryError, NovaEngineError
from app.nova.readiness import ReadinessConfig, calculate_readiness
from app.nova.status import get_readiness_status

__all__ = [
    "InvalidWorkoutHistoryError",
    "NovaEngineError",
    "ReadinessConfig",
    "calculate_readiness",
    "get_readiness_status",
]
