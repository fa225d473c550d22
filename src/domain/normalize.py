"""
응답 정규화: candidate → CoffeeSuggestion.

서버(services/suggest.py)와 클라이언트(client/submitter.py)가 같은 함수를 사용.
업스트림의 구조화 출력 보장은 권고일 뿐이므로, 호출이 "성공"해도 항상 거친다.

규칙:
- 키가 있고 타입이 맞으면 그대로 복사
- 아니면 해당 필드만 기본값으로 대체
- candidate가 객체(mapping)가 아니면 전체를 기본값으로 대체
"""

import math
from collections.abc import Mapping
from typing import Any

from .constants import (
    DEFAULT_CONFIDENCE_SCORE,
    DEFAULT_GREETING,
    DEFAULT_HEALTH_FACT,
    DEFAULT_REASONING,
    DEFAULT_SUGGESTED_COFFEE,
)
from .schemas import CoffeeSuggestion


def _is_number(value: Any) -> bool:
    # bool은 int의 subclass지만 숫자로 취급하지 않음. inf/nan은 JSON으로 내보낼 수 없음
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def _text(candidate: Mapping[str, Any], key: str, default: str) -> str:
    value = candidate.get(key)
    return value if isinstance(value, str) else default


def default_suggestion(fallback_name: str) -> CoffeeSuggestion:
    """전체 기본값 레코드."""
    return CoffeeSuggestion(
        name=fallback_name,
        greeting=DEFAULT_GREETING,
        suggested_coffee=DEFAULT_SUGGESTED_COFFEE,
        reasoning=DEFAULT_REASONING,
        health_fact=DEFAULT_HEALTH_FACT,
        confidence_score=DEFAULT_CONFIDENCE_SCORE,
    )


def normalize(candidate: Any, fallback_name: str) -> CoffeeSuggestion:
    """
    candidate를 완전하고 타입이 맞는 레코드로 변환.

    Args:
        candidate: 업스트림/API 응답에서 꺼낸 값 (타입 보장 없음)
        fallback_name: name 필드 기본값

    Returns:
        CoffeeSuggestion (6개 필드 모두 채워짐)
    """
    if not isinstance(candidate, Mapping):
        return default_suggestion(fallback_name)

    score = candidate.get("confidence_score")

    return CoffeeSuggestion(
        name=_text(candidate, "name", fallback_name),
        greeting=_text(candidate, "greeting", DEFAULT_GREETING),
        suggested_coffee=_text(candidate, "suggestedCoffee", DEFAULT_SUGGESTED_COFFEE),
        reasoning=_text(candidate, "reasoning", DEFAULT_REASONING),
        health_fact=_text(candidate, "healthFact", DEFAULT_HEALTH_FACT),
        confidence_score=score if _is_number(score) else DEFAULT_CONFIDENCE_SCORE,
    )
