"""
응답 형태(shape) 탐색: raw 응답 → candidate.

구조화 출력 envelope가 API 버전마다 달라질 수 있어서,
알려진 형태를 우선순위 순서의 데이터로 정의하고 하나의 함수로 탐색한다.
새 형태는 RESPONSE_SHAPES에 추가하면 되고 호출부는 바뀌지 않는다.

우선순위 (먼저 존재하는 것이 이김):
1. content[0].input
2. content[0].tool_use.input
3. content[0].tool_use.content
4. choices[0].message.tool_calls[0].function_call.arguments
5. content[0].text
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

PathKey = str | int

_MISSING = object()


@dataclass(frozen=True)
class ResponseShape:
    """
    응답 형태 하나.

    name: 태그 (로그/디버깅용)
    path: raw 응답에서 candidate까지의 키/인덱스 경로
    """
    name: str
    path: tuple[PathKey, ...]

    def dig(self, raw: Any) -> Any:
        """경로를 따라 값을 꺼냄. 중간에 끊기면 _MISSING."""
        node = raw
        for key in self.path:
            if isinstance(key, int):
                if (
                    isinstance(node, Sequence)
                    and not isinstance(node, (str, bytes))
                    and -len(node) <= key < len(node)
                ):
                    node = node[key]
                else:
                    return _MISSING
            elif isinstance(node, Mapping) and key in node:
                node = node[key]
            else:
                return _MISSING
        return node


@dataclass(frozen=True)
class Candidate:
    """선택된 구조화 답 (정규화 전)."""
    shape: str
    value: Any


RESPONSE_SHAPES: tuple[ResponseShape, ...] = (
    ResponseShape("content_input", ("content", 0, "input")),
    ResponseShape("tool_use_input", ("content", 0, "tool_use", "input")),
    ResponseShape("tool_use_content", ("content", 0, "tool_use", "content")),
    ResponseShape(
        "openai_function_arguments",
        ("choices", 0, "message", "tool_calls", 0, "function_call", "arguments"),
    ),
    ResponseShape("content_text", ("content", 0, "text")),
)


def is_present(value: Any) -> bool:
    """
    "구조적으로 존재"하는 값인지.

    None/False/0/빈 문자열은 없는 것으로 본다.
    빈 dict/list는 존재하는 것으로 본다 (객체가 왔다는 사실 자체가 의미 있음).
    """
    if value is _MISSING or value is None or isinstance(value, bool):
        return value is True
    if isinstance(value, (int, float)):
        return value == value and value != 0  # NaN도 없는 것으로
    if isinstance(value, str):
        return value != ""
    return True


def extract_candidate(
    raw: Any,
    shapes: Sequence[ResponseShape] = RESPONSE_SHAPES,
) -> Candidate | None:
    """
    raw 응답에서 첫 번째로 존재하는 candidate 반환.

    Args:
        raw: 디코딩된 응답 객체
        shapes: 탐색할 형태 (우선순위 순)

    Returns:
        Candidate 또는 None (어떤 형태도 없을 때)
    """
    for shape in shapes:
        value = shape.dig(raw)
        if is_present(value):
            return Candidate(shape=shape.name, value=value)
    return None
