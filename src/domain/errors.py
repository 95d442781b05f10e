"""
이슈 템플릿 에러 정의.

규칙:
- silent failure 금지: 로드/검증 문제는 모두 TemplateError
- 로드 시점에 보고, 필드 단위 복구 없음
- 모든 에러는 code + message + context (source, line, ...)
"""

from typing import Any


class TemplateError(Exception):
    """
    템플릿 로드/검증/저장 기본 에러.

    사용:
        raise TemplateError("UNKNOWN_FAMILY", "Unknown section family 'x'", family="x")
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        source = self.context.get("source")
        if source:
            return f"[{self.code}] {source}: {self.message}"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """로그 / JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **{k: str(v) if v is not None else None for k, v in self.context.items()},
        }


class MalformedMetadataError(TemplateError):
    """메타데이터 블록 구분자 또는 필드 파싱 실패."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(ErrorCodes.MALFORMED_METADATA, message, **context)


class MissingRequiredFieldError(TemplateError):
    """필수 메타데이터 필드(name)가 비었거나 없음."""

    def __init__(self, field: str, **context: Any) -> None:
        self.field = field
        super().__init__(
            ErrorCodes.MISSING_REQUIRED_FIELD,
            f"Required field '{field}' is empty",
            field=field,
            **context,
        )


class DuplicateTemplateNameError(TemplateError):
    """한 스토어 안에서 두 문서가 같은 name 선언."""

    def __init__(self, name: str, **context: Any) -> None:
        self.name = name
        super().__init__(
            ErrorCodes.DUPLICATE_TEMPLATE_NAME,
            f"Template name '{name}' is already defined",
            name=name,
            **context,
        )


class MalformedTemplateError(TemplateError):
    """본문 구조 문제 (예: 섹션 heading 중복)."""


class TemplateNotFoundError(TemplateError):
    """존재하지 않는 템플릿 name 조회."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            ErrorCodes.TEMPLATE_NOT_FOUND,
            f"Template '{name}' not found",
            name=name,
        )


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Parse ===
    MALFORMED_METADATA = "MALFORMED_METADATA"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    DUPLICATE_SECTION = "DUPLICATE_SECTION"

    # === Store ===
    DUPLICATE_TEMPLATE_NAME = "DUPLICATE_TEMPLATE_NAME"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    TEMPLATE_LOCK_TIMEOUT = "TEMPLATE_LOCK_TIMEOUT"
    INVALID_FILENAME = "INVALID_FILENAME"
    READ_FAILED = "READ_FAILED"

    # === Scaffold / Config ===
    UNKNOWN_FAMILY = "UNKNOWN_FAMILY"
    INVALID_CONFIG = "INVALID_CONFIG"
