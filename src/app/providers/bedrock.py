"""
AWS Bedrock (Claude) Provider.

- anthropic SDK의 AsyncAnthropicBedrock 클라이언트 사용
- 자격 증명은 AWS 기본 credential chain (env, profile, role)
- 요청 1회, 재시도 없음 (max_retries=0), 스트리밍 없음, SDK 기본 timeout
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from src.domain.constants import DEFAULT_AWS_REGION, DEFAULT_MAX_TOKENS, DEFAULT_MODEL_ID
from src.domain.errors import (
    CoffeeError,
    UpstreamAuthDeniedError,
    UpstreamThrottledError,
    UpstreamUnknownError,
    UpstreamValidationError,
)

from .base import ModelProvider, ToolDefinition

logger = logging.getLogger(__name__)

# 실패 discriminator (예외 클래스명 또는 AWS 에러 코드) → 분류
_AUTH_DENIED = frozenset({
    "AccessDeniedException",
    "UnrecognizedClientException",
    "NoCredentialsError",
    "PermissionDeniedError",  # anthropic 403
    "AuthenticationError",    # anthropic 401
})
_VALIDATION = frozenset({
    "ValidationException",
    "BadRequestError",           # anthropic 400
    "UnprocessableEntityError",  # anthropic 422
})
_THROTTLED = frozenset({
    "ThrottlingException",
    "RateLimitError",  # anthropic 429
})


def error_discriminator(error: BaseException) -> str:
    """
    실패 종류 식별자.

    botocore ClientError처럼 response["Error"]["Code"]가 있으면 그 코드,
    아니면 예외 클래스명.
    """
    response = getattr(error, "response", None)
    if isinstance(response, Mapping):
        info = response.get("Error")
        code = info.get("Code") if isinstance(info, Mapping) else None
        if isinstance(code, str) and code:
            return code
    return type(error).__name__


class BedrockProvider(ModelProvider):
    """
    Bedrock Runtime Provider.

    Usage:
        provider = BedrockProvider(region="ap-southeast-2")
        raw = await provider.invoke(prompt, tool)
    """

    def __init__(
        self,
        model_id: str = DEFAULT_MODEL_ID,
        region: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ):
        """
        Args:
            model_id: Bedrock 모델 ID (config에서 주입)
            region: AWS 리전 (없으면 AWS_REGION 환경변수, 그것도 없으면 기본 리전)
            max_tokens: 최대 출력 토큰 수
        """
        self.model_id = model_id
        self.region = region or os.environ.get("AWS_REGION") or DEFAULT_AWS_REGION
        self.max_tokens = max_tokens
        self._client: Any = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "BedrockProvider":
        """
        default.yaml의 bedrock 섹션으로 생성.

        AWS_REGION 환경변수가 config의 region보다 우선.
        """
        bedrock = config.get("bedrock") or {}
        return cls(
            model_id=bedrock.get("model_id", DEFAULT_MODEL_ID),
            region=os.environ.get("AWS_REGION") or bedrock.get("region"),
            max_tokens=int(bedrock.get("max_tokens", DEFAULT_MAX_TOKENS)),
        )

    def _get_client(self) -> Any:
        """Bedrock 클라이언트 (lazy init)."""
        if self._client is None:
            try:
                import anthropic

                self._client = anthropic.AsyncAnthropicBedrock(
                    aws_region=self.region,
                    max_retries=0,
                )
            except ImportError as e:
                raise UpstreamUnknownError(
                    details="anthropic package not installed. "
                    "Run: pip install 'anthropic[bedrock]'",
                ) from e
        return self._client

    async def invoke(self, prompt: str, tool: ToolDefinition) -> dict[str, Any]:
        """모델 1회 호출 → 디코딩된 raw 응답."""
        client = self._get_client()

        try:
            response = await client.messages.create(
                model=self.model_id,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
                tools=[tool.to_dict()],
                tool_choice=tool.tool_choice(),
            )
        except Exception as e:
            logger.error(f"Error calling Bedrock: {e}", exc_info=True)
            raise self.classify_error(e) from e

        raw = self._decode(response)
        logger.debug(f"Full response body: {raw!r}")
        return raw

    def _decode(self, response: Any) -> dict[str, Any]:
        """SDK 응답 객체 → dict."""
        if response is None:
            raise UpstreamUnknownError(details="No response body from Bedrock")
        if isinstance(response, Mapping):
            return dict(response)
        try:
            data = response.model_dump()
        except Exception as e:
            raise UpstreamUnknownError(
                details=f"Could not decode Bedrock response: {e}",
            ) from e
        if not isinstance(data, Mapping):
            raise UpstreamUnknownError(details="No response body from Bedrock")
        return dict(data)

    def classify_error(self, error: Exception) -> CoffeeError:
        """SDK/전송 예외 → domain 에러."""
        if isinstance(error, CoffeeError):
            return error

        kind = error_discriminator(error)
        detail = getattr(error, "message", None) or str(error) or None
        context = {"model": self.model_id, "region": self.region, "cause": kind}

        if kind in _AUTH_DENIED:
            return UpstreamAuthDeniedError(
                details=(
                    f"Make sure you have access to {self.model_id} in your "
                    f"AWS Bedrock console in the {self.region} region."
                ),
                **context,
            )
        if kind in _VALIDATION:
            return UpstreamValidationError(details=detail, **context)
        if kind in _THROTTLED:
            return UpstreamThrottledError(details=detail, **context)
        return UpstreamUnknownError(details=detail, **context)
