"""
Coffee Routes: 이름 → 커피 추천.

- GET  /            → 입력 화면 (HTMX)
- POST /coffee      → 추천 결과 HTML 조각 (HTMX swap용)
- POST /api/coffee  → JSON API

에러 응답 본문: {"error": str, "details"?: str}
"""

import json
import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from src.app.services.suggest import CoffeeSuggestionService
from src.domain.errors import CoffeeError, ErrorCodes

logger = logging.getLogger(__name__)

# Jinja2 템플릿 설정
_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints


def get_service(request: Request) -> CoffeeSuggestionService:
    """lifespan에서 만든 서비스."""
    service: CoffeeSuggestionService = request.app.state.coffee_service
    return service


def error_response(error: CoffeeError) -> JSONResponse:
    """CoffeeError → JSON 에러 응답."""
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# =============================================================================
# Page Routes (HTML)
# =============================================================================


@router.get("/", response_class=HTMLResponse)
async def index_page(request: Request) -> HTMLResponse:
    """입력 화면."""
    return jinja_templates.TemplateResponse(request, "index.html", {})


@router.post("/coffee", response_class=HTMLResponse)
async def coffee_fragment(
    request: Request,
    name: str = Form(""),  # 빈 값은 내부에서 "Name is required"로 처리
) -> HTMLResponse:
    """
    폼 제출 → 결과 또는 에러 조각.

    에러도 200으로 돌려줌 (HTMX는 2xx만 swap). 상태 코드는 헤더로 전달.
    """
    service = get_service(request)

    try:
        suggestion = await service.suggest(name.strip())
    except CoffeeError as e:
        response = jinja_templates.TemplateResponse(
            request,
            "_error.html",
            {"error": e.message, "details": e.details},
        )
        response.headers["X-Coffee-Status"] = str(e.status_code)
        return response

    return jinja_templates.TemplateResponse(
        request,
        "_result.html",
        {"result": suggestion},
    )


# =============================================================================
# API Routes
# =============================================================================


@api_router.post("")
async def create_suggestion(request: Request) -> JSONResponse:
    """
    커피 추천 생성.

    Request: {"name": str}
    Returns:
        200: {name, greeting, suggestedCoffee, reasoning, healthFact, confidence_score}
        400/403/429/500: {"error": str, "details"?: str}
    """
    payload: Any
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        # 본문이 JSON이 아니면 name 누락으로 취급
        payload = None

    name = payload.get("name") if isinstance(payload, dict) else None
    service = get_service(request)

    try:
        suggestion = await service.suggest(name)
    except CoffeeError as e:
        if e.code == ErrorCodes.MISSING_INPUT:
            logger.info(f"Coffee request rejected: [{e.code}] {e.message}")
        else:
            logger.warning(f"Coffee request failed: [{e.code}] {e.message}")
        return error_response(e)

    return JSONResponse(content=suggestion.to_dict())
