"""Business logic services."""

from app.services.readiness_service import ReadinessService

__all__ = [
    "ReadinessService",
]
