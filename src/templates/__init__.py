"""
Templates 레이어: 이슈 템플릿 문서.

역할:
- 문서 파싱 / 렌더 (parser.py, renderer.py)
- 이름 기반 템플릿 스토어 + 디렉토리 검증 (store.py)
- 섹션 family 관례 (conventions.py)
- 새 템플릿 스캐폴딩 (scaffolder.py)

주의: 디렉토리
- src/templates/ → 코드 (이 패키지)
- .github/ISSUE_TEMPLATE/ → 템플릿 문서 (데이터)
"""

from .conventions import check_sections, get_family
from .parser import parse_template
from .renderer import render_body, render_template, to_issue_payload
from .scaffolder import scaffold_template
from .store import TemplateStore, validate_directory

__all__ = [
    # parser / renderer
    "parse_template",
    "render_template",
    "render_body",
    "to_issue_payload",
    # store
    "TemplateStore",
    "validate_directory",
    # conventions
    "check_sections",
    "get_family",
    # scaffolder
    "scaffold_template",
]
