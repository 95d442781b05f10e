"""
섹션 관례: 템플릿 heading을 섹션 family와 비교.

family의 heading은 관례일 뿐 강제하지 않음:
차이는 ConventionWarning으로 반환, raise 없음.
"""

from src.domain.constants import SECTION_FAMILIES
from src.domain.errors import ErrorCodes, TemplateError
from src.domain.schemas import ConventionWarning, IssueTemplate, WarningCode


def get_family(family: str) -> tuple[str, ...]:
    """
    섹션 family의 기대 heading.

    Raises:
        TemplateError: UNKNOWN_FAMILY
    """
    try:
        return SECTION_FAMILIES[family]
    except KeyError:
        raise TemplateError(
            ErrorCodes.UNKNOWN_FAMILY,
            f"Unknown section family '{family}'",
            family=family,
            known=", ".join(sorted(SECTION_FAMILIES)),
        ) from None


def check_sections(template: IssueTemplate, family: str) -> list[ConventionWarning]:
    """
    섹션 family 기준 heading 검사.

    보고:
    - SECTION_MISSING: 기대 heading 없음
    - SECTION_UNEXPECTED: family에 없는 heading
    - SECTION_OUT_OF_ORDER: 순서가 어긋난 첫 family heading

    Args:
        template: IssueTemplate
        family: 섹션 family 이름

    Returns:
        경고 목록 (빈 리스트 = 준수)
    """
    expected = get_family(family)
    headings = template.headings
    warnings: list[ConventionWarning] = []

    for heading in expected:
        if heading not in headings:
            warnings.append(ConventionWarning(
                code=WarningCode.SECTION_MISSING,
                template=template.name,
                heading=heading,
                message=f"Expected section '{heading}' is missing",
            ))

    for heading in headings:
        if heading not in expected:
            warnings.append(ConventionWarning(
                code=WarningCode.SECTION_UNEXPECTED,
                template=template.name,
                heading=heading,
                message=f"Section '{heading}' is not part of the '{family}' family",
            ))

    present = [h for h in headings if h in expected]
    ordered = [h for h in expected if h in present]
    for actual, wanted in zip(present, ordered):
        if actual != wanted:
            warnings.append(ConventionWarning(
                code=WarningCode.SECTION_OUT_OF_ORDER,
                template=template.name,
                heading=actual,
                message=f"Section '{actual}' found where '{wanted}' was expected",
            ))
            break

    return warnings
