"""
FastAPI 애플리케이션 진입점 (읽기 전용 템플릿 API).

실행:
- dev: uv run uvicorn src.app.main:app --reload
- prod: uv run uvicorn src.app.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.app.routes import templates
from src.core.config import Settings, load_config
from src.templates.store import TemplateStore


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    애플리케이션 생성.

    Args:
        settings: 런타임 설정 (None = default.yaml 로드)

    Returns:
        FastAPI app (템플릿 스토어는 startup 시 로드)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Startup: 설정 + 템플릿 스토어 로드 (로드 실패 시 startup 중단).
        """
        app.state.settings = settings or load_config()
        app.state.store = TemplateStore.load(app.state.settings.templates_dir)

        yield

    app = FastAPI(
        title="Issue Template Kit",
        description="Read-only access to issue template documents",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(
        templates.api_router, prefix="/api/templates", tags=["Templates API"]
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        return {
            "message": "Issue Template Kit",
            "endpoints": {
                "templates": "/api/templates",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


app = create_app()


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
