"""
AI coach prompt context.

Serialises the engine's constant tables and a :class:`ReadinessResult`
into the natural-language context handed to the AI coach.  Every number
in the prose is read from :data:`FATIGUE_TABLE`, :data:`RECOVERY_RATES`
and :data:`RECOVERY_INTERVENTIONS`, never typed by hand.

Sending the prompt to the language model is the caller's concern.
"""

from __future__ import annotations

from app.nova.fatigue import FATIGUE_TABLE, PROFILE_DISPLAY_NAMES
from app.nova.interventions import RECOVERY_INTERVENTIONS
from app.nova.readiness import RECOVERY_RATES
from app.nova.status import FRESH_THRESHOLD, STEADY_THRESHOLD, get_readiness_status
from app.schemas.readiness import ReadinessResult
from app.schemas.zones import ZONE_LABELS, ZONE_NAMES

_ZONE_DESCRIPTIONS: dict[str, str] = {
    "upper_body": "chest, back, shoulders, arms",
    "lower_body": "legs, glutes, calves",
    "cns": "central nervous system, coordination",
}

_ZONE_CONTEXT_LABELS: dict[str, str] = {
    "upper_body": "Upper Body",
    "lower_body": "Lower Body",
    "cns": "CNS/Systemic",
}

_NO_INSIGHTS = "All systems operating normally"


def _fmt(value: float) -> str:
    return f"{value:g}"


def describe_fatigue_matrix() -> str:
    """Describe recovery rates, fatigue profiles and accelerators."""
    slowest = min(RECOVERY_RATES, key=RECOVERY_RATES.get)  # type: ignore[arg-type]

    lines = ["PERFORMANCE ENGINE - FATIGUE MATRIX:", "The app tracks THREE recovery zones:"]
    for idx, zone in enumerate(ZONE_NAMES, start=1):
        suffix = " (slowest)" if zone == slowest else ""
        lines.append(
            f"{idx}. {ZONE_LABELS[zone].upper()} ({_ZONE_DESCRIPTIONS[zone]}) - "
            f"Recovers at ~{_fmt(RECOVERY_RATES[zone])}% per hour{suffix}"
        )

    lines += ["", "WORKOUT FATIGUE PROFILES:"]
    for workout_type, display in PROFILE_DISPLAY_NAMES.items():
        profile = FATIGUE_TABLE[workout_type]
        lines.append(
            f"- {display}: Upper Body {_fmt(profile.upper_body)}%, "
            f"Lower Body {_fmt(profile.lower_body)}%, CNS {_fmt(profile.cns)}%"
        )

    lines += ["", "RECOVERY ACCELERATORS (Active Boosts):"]
    for rule in RECOVERY_INTERVENTIONS.values():
        zones = " & ".join(ZONE_LABELS[z] for z in rule.zones)
        lines.append(
            f"- {rule.display_name}: {rule.multiplier:.1f}x recovery for {zones} "
            f"({_fmt(rule.duration_hours)}h duration)"
        )

    lines += [
        "",
        "FRESH ZONE LOGIC:",
        f"The Performance Engine aims to keep at least ONE zone above {_fmt(FRESH_THRESHOLD)}% "
        "readiness to prevent overtraining. Suggest work that targets Fresh zones. "
        f"If CNS is below {_fmt(STEADY_THRESHOLD)}%, avoid sparring/combat entirely.",
    ]
    return "\n".join(lines)


def build_readiness_context(result: ReadinessResult) -> str:
    """Describe current scores, active multipliers and insights."""
    overall_status = get_readiness_status(result.overall)
    lines = [
        "CURRENT READINESS SCORES (Performance Engine):",
        f"- Overall Readiness: {_fmt(result.overall)}% ({overall_status.label})",
    ]
    for zone in ZONE_NAMES:
        score = result.zones.get(zone)
        lines.append(
            f"- {_ZONE_CONTEXT_LABELS[zone]}: {round(score)}% "
            f"({get_readiness_status(score).label})"
        )

    lines += ["", "RECOVERY MULTIPLIERS ACTIVE:"]
    boosted = [z for z in ZONE_NAMES if result.recovery_boosts.get(z) > 1.0]
    if boosted:
        sources = ", ".join(RECOVERY_INTERVENTIONS[n].display_name for n in result.active_interventions)
        for zone in boosted:
            lines.append(
                f"- {ZONE_LABELS[zone]}: {result.recovery_boosts.get(zone):.1f}x ({sources} active)"
            )
    else:
        lines.append("- No active recovery multipliers")

    lines += ["", "READINESS INSIGHTS:"]
    if result.recommendations:
        lines += [f"- {rec.message}" for rec in result.recommendations]
    else:
        lines.append(f"- {_NO_INSIGHTS}")
    return "\n".join(lines)


def build_coach_prompt(result: ReadinessResult, extra_context: str = "") -> str:
    """Assemble the full coach prompt: matrix, current state, extra context."""
    sections = [
        "You are an elite fitness and nutrition AI coach with full access to the "
        "NOVA Performance Engine - a fatigue tracking system.",
        describe_fatigue_matrix(),
        build_readiness_context(result),
    ]
    if extra_context.strip():
        sections.append(f"CONTEXT YOU HAVE:\n{extra_context.strip()}")
    sections.append(
        "Keep responses concise, data-driven, and motivating. "
        "Reference specific readiness percentages in your advice."
    )
    return "\n\n".join(sections)
