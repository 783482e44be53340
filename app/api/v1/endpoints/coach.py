"""
AI coach endpoints - prompt context built from current readiness.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_readiness_service
from app.schemas.coach import CoachPromptRequest, CoachPromptResponse
from app.services.readiness_service import ReadinessService

router = APIRouter()


@router.post(
    "/prompt",
    summary="Build the AI coach prompt for the current readiness state.",
    response_model=CoachPromptResponse,
)
def build_prompt(
    data: CoachPromptRequest,
    service: ReadinessService = Depends(get_readiness_service),
):
    prompt = service.coach_prompt(data.workouts, data.now, data.context)
    return CoachPromptResponse(prompt=prompt)
