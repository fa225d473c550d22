"""
Client Submitter: 이름 제출 → 표시용 상태.

상태 머신:
    Idle → Pending → Succeeded(result) | Failed(message, details)

- 서버 응답도 domain.normalize로 한 번 더 정규화 (표시 계층은 항상 완전한 레코드)
- 취소 없음
- 겹친 제출은 기본적으로 막지 않음 → 마지막에 도착한 응답이 상태를 차지
  (discard_stale=True면 최신 제출의 응답만 반영)
"""

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any

import httpx

from src.domain.constants import (
    CLIENT_FALLBACK_NAME,
    MSG_GENERATION_FAILED,
    MSG_INVALID_STRUCTURE,
    MSG_UNEXPECTED_ERROR,
)
from src.domain.normalize import normalize
from src.domain.schemas import CoffeeRequest, CoffeeSuggestion

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_TIMEOUT = 30.0
API_PATH = "/api/coffee"

# =============================================================================
# States
# =============================================================================


@dataclass(frozen=True)
class Idle:
    """제출 전."""


@dataclass(frozen=True)
class Pending:
    """요청 진행 중."""


@dataclass(frozen=True)
class Succeeded:
    """정규화된 추천 수신."""
    result: CoffeeSuggestion


@dataclass(frozen=True)
class Failed:
    """에러 메시지 (+ 선택적 details)."""
    message: str
    details: str | None = None


SubmissionState = Idle | Pending | Succeeded | Failed


def _error_details(body: dict[str, Any], message: str) -> str | None:
    """
    에러 details 추출.

    1. 본문의 details 필드
    2. 없으면 message 자체가 JSON이면 그 안의 details (실패 시 무시)
    """
    details = body.get("details")
    if isinstance(details, str) and details:
        return details
    try:
        parsed = json.loads(message)
    except ValueError:
        return None
    if isinstance(parsed, dict):
        nested = parsed.get("details")
        if isinstance(nested, str) and nested:
            return nested
    return None


def interpret_response(status_code: int, data: Any) -> Succeeded | Failed:
    """
    HTTP 응답 (상태 코드 + 디코딩된 본문) → 최종 상태.

    Args:
        status_code: HTTP 상태 코드
        data: JSON 디코딩된 본문

    Returns:
        Succeeded 또는 Failed
    """
    if not 200 <= status_code < 300:
        body = data if isinstance(data, dict) else {}
        error = body.get("error")
        message = error if isinstance(error, str) and error else MSG_GENERATION_FAILED
        logger.error(f"API returned error status: {status_code}")
        return Failed(message=message, details=_error_details(body, message))

    if not isinstance(data, dict):
        return Failed(message=MSG_INVALID_STRUCTURE)

    return Succeeded(result=normalize(data, fallback_name=CLIENT_FALLBACK_NAME))


class CoffeeSubmitter:
    """
    커피 추천 API 클라이언트 + 표시 상태.

    Usage:
        submitter = CoffeeSubmitter("http://127.0.0.1:8000")
        await submitter.submit("Sam")
        if submitter.result:
            print(submitter.result.greeting)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        discard_stale: bool = False,
    ):
        """
        Args:
            base_url: 서버 주소
            client: 주입할 httpx 클라이언트 (없으면 요청마다 생성)
            timeout: 요청 timeout (초)
            discard_stale: True면 최신 제출이 아닌 응답은 버림
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.discard_stale = discard_stale
        self.state: SubmissionState = Idle()
        self._client = client
        self._sequence = 0

    # -------------------------------------------------------------------------
    # 표시용 파생 값
    # -------------------------------------------------------------------------

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Pending)

    @property
    def result(self) -> CoffeeSuggestion | None:
        return self.state.result if isinstance(self.state, Succeeded) else None

    @property
    def error(self) -> str | None:
        return self.state.message if isinstance(self.state, Failed) else None

    @property
    def error_details(self) -> str | None:
        return self.state.details if isinstance(self.state, Failed) else None

    # -------------------------------------------------------------------------
    # 제출
    # -------------------------------------------------------------------------

    async def submit(self, name: str) -> SubmissionState:
        """
        이름 제출.

        진행 중에는 state가 Pending, 끝나면 Succeeded 또는 Failed.

        Returns:
            제출 후 현재 state
        """
        self._sequence += 1
        sequence = self._sequence
        self.state = Pending()

        try:
            outcome = await self._request(name)
        except Exception as e:
            # 어떤 실패든 Pending에 머물지 않음
            logger.error(f"Unexpected error during submission: {e}", exc_info=True)
            outcome = Failed(message=MSG_UNEXPECTED_ERROR)

        if self.discard_stale and sequence != self._sequence:
            logger.debug(f"Discarding stale response #{sequence}")
            return self.state

        self.state = outcome
        return outcome

    async def _request(self, name: str) -> Succeeded | Failed:
        payload = asdict(CoffeeRequest(name=name))
        try:
            if self._client is not None:
                response = await self._client.post(API_PATH, json=payload)
            else:
                async with httpx.AsyncClient(
                    base_url=self.base_url, timeout=self.timeout
                ) as client:
                    response = await client.post(API_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Coffee request failed: {e}")
            return Failed(message=MSG_UNEXPECTED_ERROR)

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Non-JSON response: status={response.status_code}")
            return Failed(message=MSG_UNEXPECTED_ERROR)

        logger.debug(f"API Response data: {data!r}")
        return interpret_response(response.status_code, data)
