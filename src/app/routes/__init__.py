"""
FastAPI Routes.

API 라우트 (JSON + text/markdown), 읽기 전용
"""

from . import templates

__all__ = ["templates"]
