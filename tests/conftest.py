"""
Pytest fixtures for the coffee suggestion tests.

테스트 구성:
- 정상 응답 (tool_use), 필드 누락/타입 오류 응답, 형태 불일치 응답 분리
- 외부 호출은 FakeProvider로 대체 (Bedrock 호출 없음)
"""

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import yaml
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.providers.base import ModelProvider, ToolDefinition
from src.app.routes.coffee import api_router, router
from src.app.services.suggest import CoffeeSuggestionService

# =============================================================================
# Fake Provider
# =============================================================================


class FakeProvider(ModelProvider):
    """
    Bedrock 대신 미리 정한 응답/예외를 돌려주는 provider.

    calls: invoke 호출 기록 (prompt, tool)
    """

    def __init__(
        self,
        response: Any = None,
        error: Exception | None = None,
        model_id: str = "anthropic.claude-3-haiku-20240307-v1:0",
        region: str = "ap-southeast-2",
    ):
        self.response = response
        self.error = error
        self.model_id = model_id
        self.region = region
        self.calls: list[tuple[str, ToolDefinition]] = []

    async def invoke(self, prompt: str, tool: ToolDefinition) -> dict[str, Any]:
        self.calls.append((prompt, tool))
        if self.error is not None:
            raise self.error
        return self.response


# =============================================================================
# Path / Config Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config(project_root: Path) -> dict:
    """기본 설정 로드."""
    with open(project_root / "default.yaml", encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Response Fixtures
# =============================================================================

@pytest.fixture
def valid_candidate() -> dict:
    """모든 필드가 있고 타입이 맞는 candidate."""
    return {
        "name": "Sam",
        "greeting": "Good morning, Sam!",
        "suggestedCoffee": "Ethiopian Yirgacheffe pour-over",
        "reasoning": "Bright and floral to wake you up gently.",
        "healthFact": "Coffee contains antioxidants.",
        "confidence_score": 0.92,
    }


@pytest.fixture
def tool_use_response(valid_candidate: dict) -> dict:
    """Bedrock Messages API tool_use 응답 (model_dump 형태)."""
    return {
        "id": "msg_bdrk_test",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-haiku-20240307",
        "content": [
            {
                "type": "tool_use",
                "id": "toolu_test",
                "name": "morning_coffee_greeting",
                "input": valid_candidate,
            }
        ],
        "stop_reason": "tool_use",
        "usage": {"input_tokens": 420, "output_tokens": 120},
    }


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def make_provider() -> type[FakeProvider]:
    """FakeProvider 생성용 (응답/예외를 테스트마다 지정)."""
    return FakeProvider


@pytest.fixture
def fake_provider(tool_use_response: dict) -> FakeProvider:
    """정상 응답을 돌려주는 provider."""
    return FakeProvider(response=tool_use_response)


@pytest.fixture
def app(fake_provider: FakeProvider) -> FastAPI:
    """테스트용 FastAPI 앱 (lifespan 없이 state 직접 설정)."""
    app = FastAPI()
    app.include_router(router)
    app.include_router(api_router, prefix="/api/coffee")
    app.state.config = {}
    app.state.coffee_service = CoffeeSuggestionService(fake_provider)
    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """테스트 클라이언트."""
    with TestClient(app) as client:
        yield client
