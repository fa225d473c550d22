"""
test_schemas.py - CoffeeSuggestion / 신뢰도 구간 테스트
"""

import pytest

from src.domain.schemas import CoffeeSuggestion, ConfidenceTier, confidence_tier


def make_suggestion(score: float = 0.85) -> CoffeeSuggestion:
    return CoffeeSuggestion(
        name="Sam",
        greeting="Hi Sam",
        suggested_coffee="Latte",
        reasoning="calming",
        health_fact="Antioxidants",
        confidence_score=score,
    )


class TestCoffeeSuggestion:
    """CoffeeSuggestion 데이터클래스 테스트."""

    def test_to_dict_uses_wire_keys(self):
        """JSON 키는 외부 계약 그대로."""
        data = make_suggestion().to_dict()

        assert list(data) == [
            "name",
            "greeting",
            "suggestedCoffee",
            "reasoning",
            "healthFact",
            "confidence_score",
        ]
        assert data["suggestedCoffee"] == "Latte"
        assert data["healthFact"] == "Antioxidants"

    def test_confidence_percent(self):
        """퍼센트 표시 (소수점 1자리)."""
        assert make_suggestion(0.85).confidence_percent == "85.0%"
        assert make_suggestion(0.123).confidence_percent == "12.3%"


class TestConfidenceTier:
    """confidence_tier 함수 테스트."""

    @pytest.mark.parametrize(
        ("score", "tier"),
        [
            (1.0, ConfidenceTier.HIGH),
            (0.8, ConfidenceTier.HIGH),
            (0.79, ConfidenceTier.MEDIUM),
            (0.6, ConfidenceTier.MEDIUM),
            (0.59, ConfidenceTier.LOW),
            (-1, ConfidenceTier.LOW),
        ],
    )
    def test_thresholds(self, score, tier):
        """0.8 이상 high, 0.6 이상 medium, 그 외 low."""
        assert confidence_tier(score) is tier

    def test_suggestion_tier_property(self):
        assert make_suggestion(0.7).tier is ConfidenceTier.MEDIUM
