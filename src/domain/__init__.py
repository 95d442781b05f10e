"""Domain 레이어: 에러, 상수, 스키마."""

from .errors import (
    DuplicateTemplateNameError,
    ErrorCodes,
    MalformedMetadataError,
    MalformedTemplateError,
    MissingRequiredFieldError,
    TemplateError,
    TemplateNotFoundError,
)
from .schemas import (
    ConventionWarning,
    IssueTemplate,
    Section,
    ValidationReport,
    WarningCode,
)

__all__ = [
    "TemplateError",
    "MalformedMetadataError",
    "MalformedTemplateError",
    "MissingRequiredFieldError",
    "DuplicateTemplateNameError",
    "TemplateNotFoundError",
    "ErrorCodes",
    "IssueTemplate",
    "Section",
    "ConventionWarning",
    "ValidationReport",
    "WarningCode",
]
