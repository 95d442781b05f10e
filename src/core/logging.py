"""
로깅 설정 + 메인테이너용 에러 리포트.

규칙:
- 에러는 한 줄에 하나, 번호 붙여 출력: "1. MALFORMED_METADATA: ..."
- 관례 경고는 WARNING (ERROR 아님)
"""

import logging
from collections.abc import Iterable
from enum import Enum

from src.domain.schemas import ConventionWarning

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """CLI 로그 레벨."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"

    def to_logging(self) -> int:
        return {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARNING: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
        }[self]


def setup_logging(level: LogLevel | str = LogLevel.INFO) -> None:
    """
    root logger 설정.

    Args:
        level: LogLevel 또는 문자열 값 ("error", "info", ...)

    Raises:
        ValueError: 알 수 없는 레벨
    """
    log_level = LogLevel(level.lower() if isinstance(level, str) else level)
    logging.basicConfig(
        level=log_level.to_logging(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    # 핸들러가 이미 있으면 basicConfig는 no-op
    logging.getLogger().setLevel(log_level.to_logging())
    logger.debug(f"Log level set to {log_level.value}")


def format_error(error: Exception) -> str:
    """에러 하나 → "CODE: message" (source 있으면 포함)."""
    code = getattr(error, "code", type(error).__name__)
    message = getattr(error, "message", str(error))
    context = getattr(error, "context", {}) or {}
    source = context.get("source")
    if source:
        return f"{code}: {source}: {message}"
    return f"{code}: {message}"


def log_errors(errors: Iterable[Exception]) -> int:
    """
    에러를 1부터 번호 붙여 로깅.

    Args:
        errors: 보고할 에러

    Returns:
        로깅한 에러 수
    """
    count = 0
    for index, error in enumerate(errors, start=1):
        logger.error(f"{index}. {format_error(error)}")
        count = index
    return count


def log_warnings(warnings: Iterable[ConventionWarning]) -> int:
    """관례 경고 로깅, 개수 반환."""
    count = 0
    for index, warning in enumerate(warnings, start=1):
        logger.warning(
            f"{index}. {warning.code.value}: {warning.template}: {warning.message}"
        )
        count = index
    return count
