"""
FastAPI Routes.

페이지 라우트 (HTML) + API 라우트 (JSON)
"""

from . import coffee

__all__ = ["coffee"]
