"""
이슈 템플릿 데이터 스키마.

규칙:
- 필드명 = 메타데이터 키 (name, about, title, labels, assignees)
- labels/assignees: 순서 유지, 중복 제거 tuple ("" / null / 없음 → ())
- source 경로는 동등 비교에서 제외
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from src.domain.constants import LIST_SEPARATOR

# =============================================================================
# Helpers
# =============================================================================


def split_list_value(value: Any) -> tuple[str, ...]:
    """
    labels/assignees 값 정규화.

    쉼표 구분 문자열, YAML 리스트, None 허용.
    항목 strip, 빈 항목/중복 제거, 순서 유지.

    Args:
        value: 원본 메타데이터 값

    Returns:
        중복 없는 비어있지 않은 문자열 tuple
    """
    if value is None:
        return ()

    if isinstance(value, str):
        items: Iterable[Any] = value.split(LIST_SEPARATOR)
    else:
        items = value

    result: list[str] = []
    for item in items:
        text = "" if item is None else str(item).strip()
        if text and text not in result:
            result.append(text)
    return tuple(result)


def join_list_value(items: Iterable[str]) -> str:
    """labels/assignees tuple → 쉼표 구분 문자열."""
    return f"{LIST_SEPARATOR} ".join(items)


def list_metadata_value(items: tuple[str, ...]) -> str | list[str]:
    """
    labels/assignees 메타데이터 값.

    쉼표가 포함된 항목이 있으면 YAML 리스트로 유지 (split 시 쪼개짐 방지).
    """
    if any(LIST_SEPARATOR in item for item in items):
        return list(items)
    return join_list_value(items)


# =============================================================================
# Core Schemas
# =============================================================================


@dataclass(frozen=True)
class Section:
    """제목이 있는 자유 텍스트 블록 (## heading + body)."""
    heading: str
    body: str = ""


@dataclass(frozen=True)
class IssueTemplate:
    """
    파싱된 이슈 템플릿 문서.

    메타데이터 블록:
    - name (필수, 스토어 내 고유)
    - about, title ("" 가능, "[Feat]: Title" 같은 placeholder 포함 가능)
    - labels, assignees (비어있을 수 있음)

    본문:
    - preamble: 첫 섹션 heading 이전 텍스트
    - sections: 순서 있는 (heading, body) 쌍, heading 고유
    """
    name: str
    about: str = ""
    title: str = ""
    labels: tuple[str, ...] = ()
    assignees: tuple[str, ...] = ()
    sections: tuple[Section, ...] = ()
    preamble: str = ""

    # 알 수 없는 메타데이터 키, round-trip 위해 보존 (projects, type, ...)
    extra: tuple[tuple[str, Any], ...] = ()

    source: Path | None = field(default=None, compare=False)

    @property
    def headings(self) -> list[str]:
        return [s.heading for s in self.sections]

    def get_section(self, heading: str) -> Section | None:
        """heading으로 섹션 조회 (정확히 일치), 없으면 None."""
        for section in self.sections:
            if section.heading == heading:
                return section
        return None

    def metadata(self) -> dict[str, Any]:
        """메타데이터 블록 dict (labels/assignees: 쉼표 구분 문자열, 쉼표 포함 항목이 있으면 리스트)."""
        data: dict[str, Any] = {
            "name": self.name,
            "about": self.about,
            "title": self.title,
            "labels": list_metadata_value(self.labels),
            "assignees": list_metadata_value(self.assignees),
        }
        data.update(dict(self.extra))
        return data

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "name": self.name,
            "about": self.about,
            "title": self.title,
            "labels": list(self.labels),
            "assignees": list(self.assignees),
            "preamble": self.preamble,
            "sections": [
                {"heading": s.heading, "body": s.body}
                for s in self.sections
            ],
            "extra": dict(self.extra),
            "source": str(self.source) if self.source else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IssueTemplate":
        source = data.get("source")
        return cls(
            name=data["name"],
            about=data.get("about", ""),
            title=data.get("title", ""),
            labels=split_list_value(data.get("labels")),
            assignees=split_list_value(data.get("assignees")),
            sections=tuple(
                Section(heading=s["heading"], body=s.get("body", ""))
                for s in data.get("sections", [])
            ),
            preamble=data.get("preamble", ""),
            extra=tuple((data.get("extra") or {}).items()),
            source=Path(source) if source else None,
        )


# =============================================================================
# Validation Schemas
# =============================================================================


class WarningCode(str, Enum):
    """관례 경고 코드 (치명적 아님)."""
    SECTION_MISSING = "SECTION_MISSING"
    SECTION_UNEXPECTED = "SECTION_UNEXPECTED"
    SECTION_OUT_OF_ORDER = "SECTION_OUT_OF_ORDER"


@dataclass
class ConventionWarning:
    """섹션 family와의 차이."""
    code: WarningCode
    template: str
    heading: str | None
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "template": self.template,
            "heading": self.heading,
            "message": self.message,
        }


@dataclass
class ValidationReport:
    """템플릿 디렉토리 전체 검증 결과."""
    root: Path
    templates: list[IssueTemplate] = field(default_factory=list)
    errors: list[Exception] = field(default_factory=list)
    warnings: list[ConventionWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": str(self.root),
            "templates": [t.name for t in self.templates],
            "errors": [
                e.to_dict() if hasattr(e, "to_dict") else {"message": str(e)}
                for e in self.errors
            ],
            "warnings": [w.to_dict() for w in self.warnings],
        }
