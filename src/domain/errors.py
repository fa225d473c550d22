"""
Error definitions for coffee suggestions.

규칙:
- 재시도 없음 → 실패는 즉시 호출자에게 전달
- 업스트림 에러는 SDK 예외를 보고 분류 (providers/bedrock.py)
- 응답 본문: {"error": str, "details"?: str}
"""

from typing import Any

from .constants import (
    MSG_ACCESS_DENIED,
    MSG_GENERATION_FAILED,
    MSG_INVALID_REQUEST,
    MSG_NAME_REQUIRED,
    MSG_THROTTLED,
    MSG_UNKNOWN_ERROR,
)


class CoffeeError(Exception):
    """
    커피 추천 처리 중 발생하는 에러의 기본 클래스.

    code: 에러 코드 (ErrorCodes)
    message: 사용자에게 보여줄 메시지 (응답의 "error")
    details: 부가 설명 (응답의 "details", 없으면 생략)
    context: 로그용 컨텍스트 (응답에는 포함하지 않음)

    Usage:
        raise UpstreamThrottledError(details=str(e), model="...")
    """

    code: str = "COFFEE_ERROR"
    status_code: int = 500
    default_message: str = MSG_GENERATION_FAILED

    def __init__(
        self,
        message: str | None = None,
        details: str | None = None,
        **context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.details = details
        self.context = context
        super().__init__(f"[{self.code}] {self.message}")

    def to_dict(self) -> dict[str, Any]:
        """JSON 응답 본문."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingInputError(CoffeeError):
    """name 누락/빈 값."""
    code = "MISSING_INPUT"
    status_code = 400
    default_message = MSG_NAME_REQUIRED


class UpstreamAuthDeniedError(CoffeeError):
    """Bedrock 접근 거부 (자격 증명/모델 접근 권한)."""
    code = "UPSTREAM_AUTH_DENIED"
    status_code = 403
    default_message = MSG_ACCESS_DENIED


class UpstreamValidationError(CoffeeError):
    """Bedrock이 요청 파라미터를 거부."""
    code = "UPSTREAM_VALIDATION"
    status_code = 400
    default_message = MSG_INVALID_REQUEST


class UpstreamThrottledError(CoffeeError):
    """Bedrock 요청 제한."""
    code = "UPSTREAM_THROTTLED"
    status_code = 429
    default_message = MSG_THROTTLED


class UpstreamShapeMismatchError(CoffeeError):
    """응답에서 구조화된 답(candidate)을 찾지 못함."""
    code = "UPSTREAM_SHAPE_MISMATCH"
    status_code = 500


class UpstreamUnknownError(CoffeeError):
    """그 외 모든 실패 (네트워크, 파싱, 알 수 없음)."""
    code = "UPSTREAM_UNKNOWN"
    status_code = 500

    def __init__(
        self,
        message: str | None = None,
        details: str | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message, details or MSG_UNKNOWN_ERROR, **context)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    MISSING_INPUT = MissingInputError.code
    UPSTREAM_AUTH_DENIED = UpstreamAuthDeniedError.code
    UPSTREAM_VALIDATION = UpstreamValidationError.code
    UPSTREAM_THROTTLED = UpstreamThrottledError.code
    UPSTREAM_SHAPE_MISMATCH = UpstreamShapeMismatchError.code
    UPSTREAM_UNKNOWN = UpstreamUnknownError.code
