"""
Model Provider 추상 인터페이스.

역할:
- 프롬프트 + tool 정의를 받아 모델을 한 번 호출
- 디코딩된 raw 응답(dict)을 그대로 반환 (형태 해석은 shapes.py)
- SDK 예외 → domain 에러 분류

재시도/스트리밍 없음. 호출 간 상태 없음.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

# =============================================================================
# Tool Definition
# =============================================================================

@dataclass
class ToolField:
    """tool input_schema의 필드 하나."""
    name: str
    type: str  # JSON Schema 타입 (string, number)
    description: str


@dataclass
class ToolDefinition:
    """
    구조화 출력용 tool 정의.

    모델이 자유 텍스트 대신 이 스키마를 채우도록 강제 (tool_choice 고정).
    모든 필드는 required.
    """
    name: str
    description: str
    fields: list[ToolField] = field(default_factory=list)

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "required": [f.name for f in self.fields],
            "properties": {
                f.name: {"type": f.type, "description": f.description}
                for f in self.fields
            },
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema(),
        }

    def tool_choice(self) -> dict[str, str]:
        """이 tool 호출을 강제하는 tool_choice."""
        return {"type": "tool", "name": self.name}


# =============================================================================
# Abstract Provider
# =============================================================================

class ModelProvider(ABC):
    """
    Model Provider 추상 인터페이스.

    구현체는 model_id와 region을 노출해야 함 (에러 메시지에 사용).
    """

    model_id: str
    region: str

    @abstractmethod
    async def invoke(self, prompt: str, tool: ToolDefinition) -> dict[str, Any]:
        """
        모델 1회 호출.

        Args:
            prompt: 사용자 메시지
            tool: 강제할 tool 정의

        Returns:
            디코딩된 raw 응답

        Raises:
            CoffeeError 하위 클래스 (업스트림 실패 분류)
        """
        ...
