"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import coach, readiness

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    readiness.router, tags=["Readiness"]
)
api_router.include_router(
    coach.router, prefix="/coach", tags=["AI coach"]
)
