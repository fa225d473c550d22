"""
Model Provider Abstraction.

모델 교체 가능하게 설계. 모델 ID/리전은 config만 SSOT.
응답 형태 해석은 shapes.py에 격리.
"""

from .base import ModelProvider, ToolDefinition, ToolField
from .bedrock import BedrockProvider
from .shapes import RESPONSE_SHAPES, Candidate, ResponseShape, extract_candidate

__all__ = [
    "ModelProvider",
    "ToolDefinition",
    "ToolField",
    "BedrockProvider",
    "Candidate",
    "ResponseShape",
    "RESPONSE_SHAPES",
    "extract_candidate",
]
