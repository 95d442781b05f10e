"""
템플릿 스캐폴더: 섹션 family → 새 IssueTemplate.

섹션 본문은 HTML 주석 프롬프트 (이슈 화면에는 안 보임).
결과는 TemplateStore.save()로 따로 저장해야 함.
"""

from collections.abc import Iterable, Mapping

from src.domain.constants import DEFAULT_SECTION_FAMILY, DEFAULT_SECTION_PROMPTS
from src.domain.errors import MissingRequiredFieldError
from src.domain.schemas import IssueTemplate, Section, split_list_value
from src.templates.conventions import get_family


def section_prompt(heading: str, prompts: Mapping[str, str] | None = None) -> str:
    """섹션용 HTML 주석 프롬프트 (프롬프트 없으면 "")."""
    text = (prompts or {}).get(heading) or DEFAULT_SECTION_PROMPTS.get(heading)
    return f"<!-- {text} -->" if text else ""


def scaffold_template(
    name: str,
    about: str = "",
    title: str = "",
    labels: Iterable[str] | str = (),
    assignees: Iterable[str] | str = (),
    family: str = DEFAULT_SECTION_FAMILY,
    prompts: Mapping[str, str] | None = None,
) -> IssueTemplate:
    """
    family heading마다 섹션 하나씩 가진 템플릿 생성.

    Args:
        name: 템플릿 이름 (필수)
        about: 짧은 설명
        title: 기본 이슈 제목 (예: "[Feat]: Title")
        labels: 라벨 (리스트 또는 쉼표 구분 문자열)
        assignees: 담당자 (리스트 또는 쉼표 구분 문자열)
        family: 섹션 family 이름
        prompts: heading → 프롬프트 텍스트 override

    Returns:
        IssueTemplate (아직 저장 안 됨)

    Raises:
        MissingRequiredFieldError: name 없음
        TemplateError: UNKNOWN_FAMILY
    """
    if not name or not name.strip():
        raise MissingRequiredFieldError("name")

    headings = get_family(family)

    return IssueTemplate(
        name=name,
        about=about,
        title=title,
        labels=split_list_value(labels),
        assignees=split_list_value(assignees),
        sections=tuple(
            Section(heading=heading, body=section_prompt(heading, prompts))
            for heading in headings
        ),
    )
