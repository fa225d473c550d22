"""
test_shapes.py - 응답 형태 탐색 테스트

우선순위:
1. content[0].input
2. content[0].tool_use.input
3. content[0].tool_use.content
4. choices[0].message.tool_calls[0].function_call.arguments
5. content[0].text
"""

import pytest

from src.app.providers.shapes import (
    RESPONSE_SHAPES,
    ResponseShape,
    extract_candidate,
    is_present,
)

ANSWER = {"greeting": "Hi Sam"}
OTHER = {"greeting": "Other"}


# =============================================================================
# 단일 형태
# =============================================================================


class TestEachShape:
    """각 형태 하나만 있을 때."""

    @pytest.mark.parametrize(
        ("raw", "shape"),
        [
            ({"content": [{"type": "tool_use", "input": ANSWER}]}, "content_input"),
            ({"content": [{"tool_use": {"input": ANSWER}}]}, "tool_use_input"),
            ({"content": [{"tool_use": {"content": ANSWER}}]}, "tool_use_content"),
            (
                {
                    "choices": [
                        {
                            "message": {
                                "tool_calls": [
                                    {"function_call": {"arguments": ANSWER}}
                                ]
                            }
                        }
                    ]
                },
                "openai_function_arguments",
            ),
            ({"content": [{"type": "text", "text": ANSWER}]}, "content_text"),
        ],
    )
    def test_finds_shape(self, raw, shape):
        candidate = extract_candidate(raw)

        assert candidate is not None
        assert candidate.shape == shape
        assert candidate.value == ANSWER

    def test_text_candidate_stays_string(self):
        """text 형태는 문자열 그대로 반환 (파싱하지 않음)."""
        raw = {"content": [{"type": "text", "text": '{"greeting": "Hi"}'}]}

        candidate = extract_candidate(raw)

        assert candidate.shape == "content_text"
        assert candidate.value == '{"greeting": "Hi"}'


# =============================================================================
# 우선순위
# =============================================================================


class TestPriority:
    """두 형태가 동시에 있으면 앞선 형태가 이김."""

    def test_input_beats_text(self):
        raw = {"content": [{"input": ANSWER, "text": "free text"}]}

        candidate = extract_candidate(raw)

        assert candidate.shape == "content_input"
        assert candidate.value == ANSWER

    def test_input_beats_tool_use(self):
        raw = {"content": [{"input": ANSWER, "tool_use": {"input": OTHER}}]}

        assert extract_candidate(raw).value == ANSWER

    def test_tool_use_input_beats_tool_use_content(self):
        raw = {"content": [{"tool_use": {"input": ANSWER, "content": OTHER}}]}

        assert extract_candidate(raw).shape == "tool_use_input"

    def test_tool_use_content_beats_openai(self):
        raw = {
            "content": [{"tool_use": {"content": ANSWER}}],
            "choices": [
                {"message": {"tool_calls": [{"function_call": {"arguments": OTHER}}]}}
            ],
        }

        assert extract_candidate(raw).shape == "tool_use_content"

    def test_openai_beats_text(self):
        raw = {
            "content": [{"text": "free text"}],
            "choices": [
                {"message": {"tool_calls": [{"function_call": {"arguments": ANSWER}}]}}
            ],
        }

        candidate = extract_candidate(raw)

        assert candidate.shape == "openai_function_arguments"
        assert candidate.value == ANSWER

    def test_empty_input_falls_through(self):
        """빈 문자열 input은 없는 것으로 보고 다음 형태로."""
        raw = {"content": [{"input": "", "text": "free text"}]}

        assert extract_candidate(raw).shape == "content_text"

    def test_empty_dict_input_counts(self):
        """빈 dict는 존재하는 것으로 본다."""
        raw = {"content": [{"input": {}, "text": "free text"}]}

        candidate = extract_candidate(raw)

        assert candidate.shape == "content_input"
        assert candidate.value == {}


# =============================================================================
# 없음
# =============================================================================


class TestNoCandidate:
    """어떤 형태도 없으면 None."""

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"content": []},
            {"content": [{}]},
            {"content": [{"type": "text", "text": ""}]},
            {"content": "not a list"},
            {"choices": [{"message": {"tool_calls": []}}]},
            None,
            "raw string",
            [],
        ],
    )
    def test_returns_none(self, raw):
        assert extract_candidate(raw) is None


# =============================================================================
# 확장
# =============================================================================


class TestCustomShapes:
    """호출부 변경 없이 형태 추가 가능."""

    def test_custom_shape_list(self):
        shapes = (ResponseShape("output_json", ("output", "json")), *RESPONSE_SHAPES)
        raw = {"output": {"json": ANSWER}, "content": [{"input": OTHER}]}

        candidate = extract_candidate(raw, shapes=shapes)

        assert candidate.shape == "output_json"
        assert candidate.value == ANSWER

    def test_shape_order_is_fixed(self):
        assert [s.name for s in RESPONSE_SHAPES] == [
            "content_input",
            "tool_use_input",
            "tool_use_content",
            "openai_function_arguments",
            "content_text",
        ]


class TestIsPresent:
    """is_present: None/False/0/빈 문자열은 없음."""

    @pytest.mark.parametrize("value", [None, False, 0, 0.0, "", float("nan")])
    def test_absent(self, value):
        assert is_present(value) is False

    @pytest.mark.parametrize("value", [True, 1, 0.5, "x", {}, [], {"a": 1}])
    def test_present(self, value):
        assert is_present(value) is True
