"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI

from src.app.providers.bedrock import BedrockProvider
from src.app.routes import coffee
from src.app.services.suggest import CoffeeSuggestionService

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = Path(__file__).parent.parent.parent / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, Bedrock provider/서비스 생성 (클라이언트는 lazy init)
    """
    # Startup
    app.state.config = load_config()
    provider = BedrockProvider.from_config(app.state.config)
    app.state.coffee_service = CoffeeSuggestionService(provider)
    logger.info(
        f"Coffee service ready: model={provider.model_id}, region={provider.region}"
    )

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Morning Coffee AI",
    description="이름 → AWS Bedrock → 맞춤 커피 추천",
    version="0.1.0",
    lifespan=lifespan,
)


# =============================================================================
# Routes
# =============================================================================

# 페이지 라우트 (HTML)
app.include_router(coffee.router, prefix="", tags=["Coffee"])

# API 라우트
app.include_router(coffee.api_router, prefix="/api/coffee", tags=["Coffee API"])


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
