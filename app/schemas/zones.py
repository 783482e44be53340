"""
3-zone fatigue vector schema.

The ZoneVector is the fundamental unit of the NOVA Performance Engine.
Every workout, recovery multiplier and readiness score is expressed across
three fatigue zones:

- Upper body: chest, back, shoulders, arms
- Lower body: legs, glutes, calves
- CNS: central nervous system / systemic fatigue, coordination
"""

from __future__ import annotations

from pydantic import BaseModel, Field

ZONE_NAMES = ["upper_body", "lower_body", "cns", ]

ZONE_LABELS: dict[str, str] = {
    "upper_body": "Upper Body",
    "lower_body": "Lower Body",
    "cns": "CNS",
}


class ZoneVector(BaseModel):
    """Per-zone numeric values (fatigue %, readiness % or multipliers)."""

    upper_body: float = Field(0.0, description="Upper body value", )
    lower_body: float = Field(0.0, description="Lower body value", )
    cns: float = Field(0.0, description="Central nervous system / systemic value", )

    def get(self, zone: str) -> float:
        """Return the value for *zone*."""
        return getattr(self, zone)

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in ZONE_NAMES}

    def as_list(self) -> list[float]:
        """Return as ordered list ``[upper, lower, cns]``."""
        return [getattr(self, name) for name in ZONE_NAMES]

    def is_zero(self) -> bool:
        return all(v == 0.0 for v in self.as_list())

    @classmethod
    def filled(cls, value: float) -> ZoneVector:
        """Return a vector with every zone set to *value*."""
        return cls(**{name: value for name in ZONE_NAMES})

    @classmethod
    def zero(cls) -> ZoneVector:
        """Return a zero vector."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, float], default: float = 0.0) -> ZoneVector:
        return cls(**{name: data.get(name, default) for name in ZONE_NAMES})
