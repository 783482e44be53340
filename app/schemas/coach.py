"""AI coach prompt schemas."""

from pydantic import BaseModel, Field

from app.schemas.readiness import ReadinessRequest


class CoachPromptRequest(ReadinessRequest):
    context: str = Field("", max_length=10000, description="Extra user context (goals, nutrition, recent chat)")


class CoachPromptResponse(BaseModel):
    prompt: str
