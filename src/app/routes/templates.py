"""
Templates Routes: 읽기 전용 템플릿 API.

- GET /api/templates                  → 이름 목록
- GET /api/templates/{name}           → 템플릿 (JSON, ETag)
- GET /api/templates/{name}/document  → 렌더된 문서 (text/markdown)
- GET /api/templates/{name}/issue     → 미리 채운 이슈 payload
"""

from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse

from src.core.hashing import compute_template_hash
from src.domain.errors import TemplateNotFoundError
from src.domain.schemas import IssueTemplate
from src.templates.renderer import render_template, to_issue_payload
from src.templates.store import TemplateStore

api_router = APIRouter()


def _get_template(request: Request, name: str) -> IssueTemplate:
    store: TemplateStore = request.app.state.store
    try:
        return store.get(name)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail={"code": e.code, "message": e.message}) from e


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_templates(request: Request) -> dict[str, Any]:
    """템플릿 이름 목록."""
    store: TemplateStore = request.app.state.store
    return {"templates": store.list()}


@api_router.get("/{name}")
async def get_template(request: Request, response: Response, name: str) -> dict[str, Any]:
    """템플릿 상세 (내용 해시 ETag 포함)."""
    template = _get_template(request, name)
    response.headers["ETag"] = f'"{compute_template_hash(template)}"'

    data = template.to_dict()
    # 서버 경로는 응답에서 제외
    data.pop("source", None)
    return data


@api_router.get("/{name}/document", response_class=PlainTextResponse)
async def get_template_document(request: Request, name: str) -> PlainTextResponse:
    """렌더된 템플릿 문서."""
    template = _get_template(request, name)
    return PlainTextResponse(
        content=render_template(template),
        media_type="text/markdown",
    )


@api_router.get("/{name}/issue")
async def get_issue_payload(request: Request, name: str) -> dict[str, Any]:
    """미리 채운 이슈 (title, body, labels, assignees)."""
    template = _get_template(request, name)
    return to_issue_payload(template)
