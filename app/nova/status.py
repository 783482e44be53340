"""
Readiness status classifier.

Maps a 0-100 readiness score to one of three tiers:

    >= 85      Fresh   (green)
    60 - <85   Steady  (amber)
    < 60       Fried   (red)

The classifier is total over all floats: values outside [0, 100] fall
into the nearest tier and NaN is treated as Fried.
"""

from __future__ import annotations

import math

from app.schemas.readiness import ReadinessStatus

FRESH_THRESHOLD = 85.0
STEADY_THRESHOLD = 60.0

FRESH = ReadinessStatus(label="Fresh", color="green")
STEADY = ReadinessStatus(label="Steady", color="amber")
FRIED = ReadinessStatus(label="Fried", color="red")


def get_readiness_status(score: float) -> ReadinessStatus:
    """Classify a zone or overall readiness *score*."""
    if math.isnan(score):
        return FRIED.model_copy()
    if score >= FRESH_THRESHOLD:
        return FRESH.model_copy()
    if score >= STEADY_THRESHOLD:
        return STEADY.model_copy()
    return FRIED.model_copy()


def is_fresh(score: float) -> bool:
    return score >= FRESH_THRESHOLD


def is_fried(score: float) -> bool:
    return not score >= STEADY_THRESHOLD
