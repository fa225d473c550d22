"""
Application Services.

역할:
- suggest: 이름 → 프롬프트/tool → Bedrock → candidate → 정규화된 추천
"""

from .suggest import COFFEE_TOOL, CoffeeSuggestionService, build_prompt

__all__ = [
    "COFFEE_TOOL",
    "CoffeeSuggestionService",
    "build_prompt",
]
