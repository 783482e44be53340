"""
Unit tests for the AI coach prompt context.
"""

from app.nova.coach_context import (
    build_coach_prompt,
    build_readiness_context,
    describe_fatigue_matrix,
)
from app.schemas.readiness import ReadinessResult, Recommendation
from app.schemas.zones import ZoneVector


def _result(**kwargs) -> ReadinessResult:
    defaults = {
        "overall": 38.8,
        "zones": ZoneVector(upper_body=19.5, lower_body=83.8, cns=13.2),
    }
    defaults.update(kwargs)
    return ReadinessResult(**defaults)


class TestFatigueMatrix:

    def test_recovery_rates(self):
        text = describe_fatigue_matrix()
        assert "Recovers at ~4.5% per hour" in text
        assert "Recovers at ~3.8% per hour" in text
        assert "Recovers at ~3.2% per hour (slowest)" in text

    def test_profiles(self):
        text = describe_fatigue_matrix()
        assert "- Boxing: Upper Body 85%, Lower Body 20%, CNS 90%" in text
        assert "- Running: Upper Body 10%, Lower Body 85%, CNS 40%" in text

    def test_accelerators(self):
        text = describe_fatigue_matrix()
        assert "- Ice Bath: 2.0x recovery for Upper Body & Lower Body (24h duration)" in text
        assert "- Sauna: 1.8x recovery for Upper Body & Lower Body & CNS (48h duration)" in text


class TestReadinessContext:

    def test_scores(self):
        text = build_readiness_context(_result())
        assert "- Overall Readiness: 38.8% (Fried)" in text
        assert "- Upper Body: 20% (Fried)" in text
        assert "- Lower Body: 84% (Steady)" in text
        assert "- CNS/Systemic: 13% (Fried)" in text

    def test_no_multipliers(self):
        text = build_readiness_context(_result())
        assert "- No active recovery multipliers" in text

    def test_active_multiplier(self):
        result = _result(recovery_boosts=ZoneVector.filled(1.8), active_interventions=["sauna"])
        text = build_readiness_context(result)
        assert "- CNS: 1.8x (Sauna active)" in text
        assert "No active recovery multipliers" not in text

    def test_insights(self):
        rec = Recommendation(type="technical_flow", priority="high", message="Focus on flow.")
        text = build_readiness_context(_result(recommendations=[rec]))
        assert "- Focus on flow." in text

    def test_no_insights(self):
        text = build_readiness_context(_result())
        assert text.endswith("- All systems operating normally")


class TestCoachPrompt:

    def test_sections(self):
        prompt = build_coach_prompt(_result())
        assert "PERFORMANCE ENGINE - FATIGUE MATRIX:" in prompt
        assert "CURRENT READINESS SCORES" in prompt
        assert "CONTEXT YOU HAVE:" not in prompt

    def test_extra_context(self):
        prompt = build_coach_prompt(_result(), "  Goal: fight camp in 6 weeks \n")
        assert "CONTEXT YOU HAVE:\nGoal: fight camp in 6 weeks" in prompt

    def test_blank_extra_context_ignored(self):
        assert "CONTEXT YOU HAVE:" not in build_coach_prompt(_result(), "   ")
