"""
Workout record schemas.

Workout records are owned by the external backend and arrive here as raw
mappings.  Parsing is deliberately lenient: unknown workout types and
unknown extra fields are accepted, and timestamps that cannot be parsed
become ``None`` so the engine can exclude that single record instead of
failing the whole computation.

Timestamps may be ISO-8601 strings, epoch milliseconds or datetimes.
Naive values are interpreted as UTC.
"""

from __future__ import annotations

import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

FINISHED_STATUS = "finished"
HYBRID_TYPE = "hybrid"
RECOVERY_TYPE = "recovery"


def coerce_timestamp(value: Any) -> Optional[datetime.datetime]:
    """Convert *value* to an aware UTC datetime, or ``None`` if unusable."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        try:
            parsed = datetime.datetime.fromtimestamp(value / 1000.0, tz=datetime.timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed.astimezone(datetime.timezone.utc)


class Chapter(BaseModel):
    """A typed segment of a hybrid workout."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = Field(None, description="Chapter type, e.g. 'strength' or 'endurance'")
    data: dict[str, Any] = Field(default_factory=dict, description="Free-form chapter payload")
    config: dict[str, Any] = Field(default_factory=dict, description="Chapter configuration (rounds, stretches)")

    @field_validator("data", "config", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class SessionData(BaseModel):
    """Session payload; carries chapters for hybrid workouts."""

    model_config = ConfigDict(extra="allow")

    chapters: list[Chapter] = Field(default_factory=list)

    @field_validator("chapters", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value


class WorkoutRecord(BaseModel):
    """A single logged workout as consumed by the readiness engine."""

    model_config = ConfigDict(extra="allow")

    id: Any = None
    workout_type: Optional[str] = None
    status: Optional[str] = None
    created_date: Optional[datetime.datetime] = None
    started_at: Optional[datetime.datetime] = None
    finished_at: Optional[datetime.datetime] = None
    session_data: SessionData = Field(default_factory=SessionData)

    @field_validator("created_date", "started_at", "finished_at", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> Optional[datetime.datetime]:
        return coerce_timestamp(value)

    @field_validator("session_data", mode="before")
    @classmethod
    def _none_to_session(cls, value: Any) -> Any:
        return {} if value is None else value

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def occurred_at(self) -> Optional[datetime.datetime]:
        """Best available moment the workout happened."""
        return self.finished_at or self.started_at or self.created_date

    @property
    def is_finished(self) -> bool:
        return self.status == FINISHED_STATUS

    @property
    def is_hybrid(self) -> bool:
        return self.workout_type == HYBRID_TYPE

    @property
    def chapters(self) -> list[Chapter]:
        return self.session_data.chapters

    def has_type(self, workout_type: str) -> bool:
        """True if the workout or any of its chapters is *workout_type*."""
        if self.workout_type == workout_type:
            return True
        return any(ch.type == workout_type for ch in self.chapters)
