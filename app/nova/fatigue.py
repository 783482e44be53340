"""
Fatigue contribution table - fresh fatigue inflicted per workout type.

Every workout type maps to a fixed 3-zone fatigue profile (percent of
full fatigue inflicted at time zero, before any recovery):

    Type                          Upper  Lower  CNS
    martial_arts / boxing          85     20    90
    muay_thai                      80     85    95
    strength / gym                 90      0    40
    calisthenics                   75     35    35
    endurance / run                10     85    40
    recovery                        0      0     0

This table is the single source for both the readiness maths and the
natural-language fatigue matrix handed to the AI coach, so the two can
never drift apart.

Lookup rules
------------
1. **Fail soft** - unknown types contribute zero fatigue.
2. **Hybrid via chapters** - a ``hybrid`` workout has no profile of its
   own; each chapter contributes its own profile independently.
3. **No double counting** - non-hybrid workouts use only their top-level
   type, even if they carry chapters.
"""

from __future__ import annotations

from app.schemas.workout import WorkoutRecord
from app.schemas.zones import ZoneVector

_COMBAT = ZoneVector(upper_body=85.0, lower_body=20.0, cns=90.0)
_STRENGTH = ZoneVector(upper_body=90.0, lower_body=0.0, cns=40.0)
_ENDURANCE = ZoneVector(upper_body=10.0, lower_body=85.0, cns=40.0)

FATIGUE_TABLE: dict[str, ZoneVector] = {
    "martial_arts": _COMBAT,
    "boxing": _COMBAT,
    "combat": _COMBAT,
    "muay_thai": ZoneVector(upper_body=80.0, lower_body=85.0, cns=95.0),
    "strength": _STRENGTH,
    "gym": _STRENGTH,
    "calisthenics": ZoneVector(upper_body=75.0, lower_body=35.0, cns=35.0),
    "endurance": _ENDURANCE,
    "run": _ENDURANCE,
    "recovery": ZoneVector.zero(),
}

# Display names used when describing the table in prose.
PROFILE_DISPLAY_NAMES: dict[str, str] = {
    "martial_arts": "Boxing",
    "muay_thai": "Muay Thai",
    "strength": "Chest/Strength",
    "calisthenics": "Calisthenics",
    "endurance": "Running",
    "recovery": "Recovery",
}


def fresh_fatigue(workout_type: str | None) -> ZoneVector:
    """Return the fresh fatigue profile for *workout_type*.

    Unknown or missing types return a zero vector.
    """
    if not workout_type:
        return ZoneVector.zero()
    return FATIGUE_TABLE.get(workout_type, ZoneVector.zero())


def fatigue_profiles(workout: WorkoutRecord) -> list[ZoneVector]:
    """Return every non-zero fatigue profile *workout* contributes.

    Hybrid workouts contribute one profile per chapter; all other
    workouts contribute their top-level profile only.
    """
    if workout.is_hybrid:
        profiles = [fresh_fatigue(ch.type) for ch in workout.chapters]
    else:
        profiles = [fresh_fatigue(workout.workout_type)]
    return [p for p in profiles if not p.is_zero()]
