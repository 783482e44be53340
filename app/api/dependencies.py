"""
Shared API dependencies.

Reusable FastAPI dependencies for the readiness service.
"""

from app.core.config import settings
from app.services.readiness_service import ReadinessService


def get_readiness_service() -> ReadinessService:
    """Build a :class:`ReadinessService` from the current settings."""
    return ReadinessService(recommendation_limit=settings.RECOMMENDATION_LIMIT)
