"""
템플릿 렌더러: IssueTemplate → 문서 텍스트 / 이슈 payload.

규칙:
- 알려진 키 먼저 (name, about, title, labels, assignees), 그 다음 extra 키
- 값은 YAML 스칼라로 dump ('' 와 '[Feat]: Title'는 따옴표 유지)
- parse_template(render_template(t)) == t
"""

from typing import Any

import yaml

from src.domain.constants import METADATA_DELIMITER, SECTION_HEADING_PREFIX
from src.domain.schemas import IssueTemplate

# 긴 title/about 줄바꿈 방지
YAML_LINE_WIDTH = 4096


def _dump_field(key: str, value: Any) -> str:
    return yaml.safe_dump(
        {key: value},
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=YAML_LINE_WIDTH,
    ).rstrip("\n")


def render_metadata(template: IssueTemplate) -> str:
    """구분자 포함 메타데이터 블록."""
    lines = [METADATA_DELIMITER]
    for key, value in template.metadata().items():
        lines.append(_dump_field(key, value))
    lines.append(METADATA_DELIMITER)
    return "\n".join(lines)


def render_body(template: IssueTemplate) -> str:
    """
    이슈 본문: preamble + sections (메타데이터 제외).

    Args:
        template: IssueTemplate

    Returns:
        Markdown 텍스트 (본문 없으면 "")
    """
    parts: list[str] = []
    if template.preamble:
        parts.append(template.preamble)

    for section in template.sections:
        heading = f"{SECTION_HEADING_PREFIX}{section.heading}"
        parts.append(f"{heading}\n{section.body}" if section.body else heading)

    return "\n\n".join(parts) + "\n" if parts else ""


def render_template(template: IssueTemplate) -> str:
    """
    템플릿 파일 포맷의 전체 문서.

    Args:
        template: IssueTemplate

    Returns:
        줄바꿈으로 끝나는 문서 텍스트
    """
    metadata = render_metadata(template)
    body = render_body(template)
    if not body:
        return metadata + "\n"
    return f"{metadata}\n\n{body}"


def to_issue_payload(template: IssueTemplate) -> dict[str, Any]:
    """
    미리 채운 이슈 (이슈 생성 요청 형태).

    Returns:
        {"title", "body", "labels", "assignees"}
    """
    return {
        "title": template.title,
        "body": render_body(template),
        "labels": list(template.labels),
        "assignees": list(template.assignees),
    }
