"""
템플릿 파서: 문서 텍스트 → IssueTemplate.

포맷:
    ---
    name: <string>
    about: <string>
    title: <string>
    labels: <comma-separated or empty>
    assignees: <comma-separated or empty>
    ---

    ## <Section Heading>
    <free text>

규칙:
- 메타데이터 블록은 문서 맨 앞, "---"로 닫혀야 함
  (아니면 MalformedMetadata, 필드 단위 복구 없음)
- 메타데이터는 YAML, 스칼라는 str 변환, null → ""
- name 필수 (MissingRequiredField)
- "## " heading으로 본문 분할, heading 중복 → DUPLICATE_SECTION
- fenced code block 안의 heading은 본문 텍스트
"""

import re
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    LIST_FIELDS,
    METADATA_DELIMITER,
    METADATA_FIELDS,
    REQUIRED_FIELDS,
)
from src.domain.errors import (
    ErrorCodes,
    MalformedMetadataError,
    MalformedTemplateError,
    MissingRequiredFieldError,
)
from src.domain.schemas import IssueTemplate, Section, split_list_value

HEADING_PATTERN = re.compile(r"^## +(\S.*?)\s*$")
FENCE_PATTERN = re.compile(r"^\s{0,3}(`{3,}|~{3,})")


# =============================================================================
# Metadata
# =============================================================================


def split_document(text: str, source: Path | None = None) -> tuple[str, list[str], int]:
    """
    문서를 메타데이터 블록 + 본문 라인으로 분리.

    Args:
        text: 문서 텍스트
        source: 파일 경로 (에러 context 용)

    Returns:
        (메타데이터 YAML 텍스트, 본문 라인, 여는 구분자 줄 번호)

    Raises:
        MalformedMetadataError: 여는/닫는 구분자 없음
    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    lines = text.split("\n")

    start = next((i for i, line in enumerate(lines) if line.strip()), None)
    if start is None or lines[start].rstrip() != METADATA_DELIMITER:
        raise MalformedMetadataError(
            f"Document must start with a '{METADATA_DELIMITER}' metadata delimiter",
            source=source,
            line=(start or 0) + 1,
        )

    end = next(
        (
            i
            for i in range(start + 1, len(lines))
            if lines[i].rstrip() == METADATA_DELIMITER
        ),
        None,
    )
    if end is None:
        raise MalformedMetadataError(
            f"Missing closing '{METADATA_DELIMITER}' metadata delimiter",
            source=source,
            line=start + 1,
        )

    return "\n".join(lines[start + 1:end]), lines[end + 1:], start + 1


def _coerce_scalar(key: str, value: Any, source: Path | None) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise MalformedMetadataError(
            f"Field '{key}' must be a plain value, got {type(value).__name__}",
            source=source,
            field=key,
        )
    return str(value)


def _coerce_list(key: str, value: Any, source: Path | None) -> tuple[str, ...]:
    if isinstance(value, dict):
        raise MalformedMetadataError(
            f"Field '{key}' must be a comma-separated string or a list",
            source=source,
            field=key,
        )
    if isinstance(value, list):
        for item in value:
            if isinstance(item, (dict, list)):
                raise MalformedMetadataError(
                    f"Field '{key}' contains a nested value: {item!r}",
                    source=source,
                    field=key,
                )
        return split_list_value(value)
    if value is not None and not isinstance(value, str):
        value = str(value)
    return split_list_value(value)


def parse_metadata(
    block: str,
    source: Path | None = None,
    first_line: int = 1,
) -> dict[str, Any]:
    """
    YAML 메타데이터 블록 파싱.

    Args:
        block: 구분자 사이 텍스트
        source: 파일 경로 (에러 context 용)
        first_line: 여는 구분자 줄 번호

    Returns:
        {"name", "about", "title", "labels", "assignees", "extra"}

    Raises:
        MalformedMetadataError: YAML 에러, mapping 아님, 잘못된 필드 타입
        MissingRequiredFieldError: name 없음
    """
    try:
        data = yaml.safe_load(block) if block.strip() else {}
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        raise MalformedMetadataError(
            f"Metadata is not valid YAML: {getattr(e, 'problem', None) or e}",
            source=source,
            line=first_line + 1 + mark.line if mark is not None else first_line,
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedMetadataError(
            "Metadata block must be a key-value mapping",
            source=source,
            line=first_line,
        )

    data = {str(k): v for k, v in data.items()}

    result: dict[str, Any] = {}
    for key in METADATA_FIELDS:
        value = data.get(key)
        if key in LIST_FIELDS:
            result[key] = _coerce_list(key, value, source)
        else:
            result[key] = _coerce_scalar(key, value, source)

    for key in REQUIRED_FIELDS:
        if not result[key].strip():
            raise MissingRequiredFieldError(key, source=source)

    result["extra"] = tuple(
        (key, value) for key, value in data.items() if key not in METADATA_FIELDS
    )
    return result


# =============================================================================
# Body
# =============================================================================


def _trim_blank_lines(lines: list[str]) -> str:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])


def parse_sections(
    lines: list[str],
    source: Path | None = None,
) -> tuple[str, tuple[Section, ...]]:
    """
    본문 라인 → preamble + sections.

    Args:
        lines: 본문 라인 (닫는 구분자 이후)
        source: 파일 경로 (에러 context 용)

    Returns:
        (preamble, sections)

    Raises:
        MalformedTemplateError: DUPLICATE_SECTION
    """
    preamble: list[str] = []
    sections: list[tuple[str, list[str]]] = []
    seen: set[str] = set()
    fence: str | None = None

    for line in lines:
        fence_match = FENCE_PATTERN.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif (
                marker[0] == fence[0]
                and len(marker) >= len(fence)
                and not line[fence_match.end():].strip()
            ):
                # 닫는 fence는 info string 없이 마커만
                fence = None

        heading_match = HEADING_PATTERN.match(line) if fence is None else None
        if heading_match:
            heading = heading_match.group(1)
            if heading in seen:
                raise MalformedTemplateError(
                    ErrorCodes.DUPLICATE_SECTION,
                    f"Section '{heading}' appears more than once",
                    source=source,
                    heading=heading,
                )
            seen.add(heading)
            sections.append((heading, []))
        elif sections:
            sections[-1][1].append(line)
        else:
            preamble.append(line)

    return _trim_blank_lines(preamble), tuple(
        Section(heading=heading, body=_trim_blank_lines(body))
        for heading, body in sections
    )


# =============================================================================
# Document
# =============================================================================


def parse_template(text: str, source: Path | None = None) -> IssueTemplate:
    """
    템플릿 문서 파싱.

    Args:
        text: 문서 텍스트
        source: 텍스트를 읽은 파일 경로 (결과에 보존)

    Returns:
        IssueTemplate

    Raises:
        MalformedMetadataError, MissingRequiredFieldError, MalformedTemplateError
    """
    block, body_lines, first_line = split_document(text, source)
    metadata = parse_metadata(block, source, first_line)
    preamble, sections = parse_sections(body_lines, source)

    return IssueTemplate(
        name=metadata["name"],
        about=metadata["about"],
        title=metadata["title"],
        labels=metadata["labels"],
        assignees=metadata["assignees"],
        sections=sections,
        preamble=preamble,
        extra=metadata["extra"],
        source=source,
    )
