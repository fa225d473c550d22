"""
Data schemas for coffee suggestions.

규칙:
- 필드명은 외부 JSON 계약과 동일 (suggestedCoffee, healthFact는 camelCase 유지)
- confidence_score는 [0, 1] 의도지만 clamp하지 않음
- 저장 없음: 요청마다 새로 생성
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .constants import CONFIDENCE_HIGH_THRESHOLD, CONFIDENCE_MEDIUM_THRESHOLD

# =============================================================================
# Confidence Tier (표시용)
# =============================================================================

class ConfidenceTier(str, Enum):
    """
    추천 신뢰도 구간.

    결과 화면의 색상/아이콘 선택에 사용.
    """
    HIGH = "high"      # >= 0.8
    MEDIUM = "medium"  # >= 0.6
    LOW = "low"


def confidence_tier(score: float) -> ConfidenceTier:
    """confidence_score → 표시 구간."""
    if score >= CONFIDENCE_HIGH_THRESHOLD:
        return ConfidenceTier.HIGH
    if score >= CONFIDENCE_MEDIUM_THRESHOLD:
        return ConfidenceTier.MEDIUM
    return ConfidenceTier.LOW


# =============================================================================
# Core Schemas
# =============================================================================

@dataclass
class CoffeeRequest:
    """POST /api/coffee 요청 본문."""
    name: str


@dataclass
class CoffeeSuggestion:
    """
    커피 추천 레코드.

    6개 필드 모두 항상 존재해야 함 (normalize()가 보장).
    JSON 키는 외부 계약 그대로: suggestedCoffee, healthFact, confidence_score
    """
    name: str
    greeting: str
    suggested_coffee: str
    reasoning: str
    health_fact: str
    confidence_score: float

    @property
    def tier(self) -> ConfidenceTier:
        return confidence_tier(self.confidence_score)

    @property
    def confidence_percent(self) -> str:
        """표시용 퍼센트 (소수점 1자리)."""
        return f"{self.confidence_score * 100:.1f}%"

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "name": self.name,
            "greeting": self.greeting,
            "suggestedCoffee": self.suggested_coffee,
            "reasoning": self.reasoning,
            "healthFact": self.health_fact,
            "confidence_score": self.confidence_score,
        }
