"""
커피 추천 서비스.

흐름:
1. name 검증 (비어 있으면 MissingInputError, 외부 호출 없음)
2. 프롬프트 + tool 정의 구성
3. provider 1회 호출
4. raw 응답 → candidate (shapes.extract_candidate)
5. candidate → CoffeeSuggestion (domain.normalize)
"""

import logging
from typing import Any

from src.app.providers.base import ModelProvider, ToolDefinition, ToolField
from src.app.providers.shapes import extract_candidate
from src.domain.constants import MSG_NO_CANDIDATE, TOOL_NAME
from src.domain.errors import (
    CoffeeError,
    MissingInputError,
    UpstreamShapeMismatchError,
    UpstreamUnknownError,
)
from src.domain.normalize import normalize
from src.domain.schemas import CoffeeSuggestion

logger = logging.getLogger(__name__)


COFFEE_TOOL = ToolDefinition(
    name=TOOL_NAME,
    description=(
        "Send a personalized morning greeting with a coffee suggestion "
        "and related health fact."
    ),
    fields=[
        ToolField("name", "string", "Name of the person to greet."),
        ToolField("greeting", "string", "Personalized morning greeting message."),
        ToolField("suggestedCoffee", "string", "The type of coffee suggested."),
        ToolField("reasoning", "string", "Reasoning behind the coffee suggestion."),
        ToolField(
            "healthFact",
            "string",
            "A health fact related to the suggested coffee.",
        ),
        ToolField(
            "confidence_score",
            "number",
            "Confidence score of the suggested pairing, between 0 and 1.",
        ),
    ],
)

PROMPT_TEMPLATE = """You are a coffee expert and morning person. Generate a personalized morning greeting and coffee suggestion for {name}.

Please use the tool call to provide:
1. A warm, personalized morning greeting
2. A specific coffee type recommendation (e.g., "Ethiopian Yirgacheffe pour-over", "Dark roast espresso", "Light roast cold brew")
3. Clear reasoning for why this coffee is perfect for them
4. An interesting health fact related to coffee or the suggested type
5. A confidence score between 0 and 1 for your recommendation

Make it personal, warm, and informative."""


def build_prompt(name: str) -> str:
    """이름을 넣은 프롬프트."""
    return PROMPT_TEMPLATE.format(name=name)


def require_name(name: Any) -> str:
    """name 검증. 문자열이 아니거나 비어 있으면 MissingInputError."""
    if not isinstance(name, str) or not name:
        raise MissingInputError()
    return name


class CoffeeSuggestionService:
    """
    커피 추천 서비스.

    호출 간 상태 없음. provider만 주입받는다.

    Usage:
        service = CoffeeSuggestionService(BedrockProvider())
        suggestion = await service.suggest("Sam")
    """

    def __init__(self, provider: ModelProvider, tool: ToolDefinition = COFFEE_TOOL):
        self.provider = provider
        self.tool = tool

    async def suggest(self, name: Any) -> CoffeeSuggestion:
        """
        이름 → 커피 추천.

        Raises:
            MissingInputError: name 누락
            UpstreamShapeMismatchError: 응답에서 candidate를 못 찾음
            CoffeeError: 그 외 업스트림 실패 (provider가 분류)
        """
        name = require_name(name)

        try:
            raw = await self.provider.invoke(build_prompt(name), self.tool)
        except CoffeeError:
            raise
        except Exception as e:
            # provider가 분류하지 못한 실패
            logger.error(f"Coffee suggestion failed: {e}", exc_info=True)
            raise UpstreamUnknownError(details=str(e) or None) from e

        candidate = extract_candidate(raw)
        if candidate is None:
            logger.error(f"Response structure: {raw!r}")
            raise UpstreamShapeMismatchError(details=MSG_NO_CANDIDATE, raw_response=raw)

        logger.info(f"Candidate found via shape '{candidate.shape}'")
        return normalize(candidate.value, fallback_name=name)
