"""
설정: default.yaml → Settings.

- 파일 없음 → 기본값
- 알 수 없는 키 무시
- 상대 경로 templates_dir는 설정 파일 디렉토리 기준
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.core.logging import LogLevel
from src.domain.constants import DEFAULT_SECTION_FAMILY, DEFAULT_TEMPLATES_DIR
from src.domain.errors import ErrorCodes, TemplateError

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "default.yaml"


@dataclass
class Settings:
    """런타임 설정."""
    templates_dir: Path
    section_family: str = DEFAULT_SECTION_FAMILY
    strict: bool = False
    log_level: str = "info"


def load_config(config_path: Path | None = None) -> Settings:
    """
    YAML 파일에서 설정 로드.

    Args:
        config_path: 설정 파일 (기본: <project root>/default.yaml)

    Returns:
        Settings

    Raises:
        TemplateError: INVALID_CONFIG
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    base_dir = config_path.parent
    data: dict[str, Any] = {}

    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise TemplateError(
                ErrorCodes.INVALID_CONFIG,
                f"Config is not valid YAML: {e}",
                source=config_path,
            ) from e

        if loaded is not None and not isinstance(loaded, dict):
            raise TemplateError(
                ErrorCodes.INVALID_CONFIG,
                "Config must be a mapping",
                source=config_path,
            )
        data = loaded or {}

    templates_dir = Path(data.get("templates_dir") or DEFAULT_TEMPLATES_DIR)
    if not templates_dir.is_absolute():
        templates_dir = base_dir / templates_dir

    strict = data.get("strict")
    if strict is None:
        strict = False
    if not isinstance(strict, bool):
        raise TemplateError(
            ErrorCodes.INVALID_CONFIG,
            f"strict must be true or false, got {strict!r}",
            source=config_path,
        )

    log_level = str(data.get("log_level") or LogLevel.INFO.value).lower()
    if log_level not in {level.value for level in LogLevel}:
        raise TemplateError(
            ErrorCodes.INVALID_CONFIG,
            f"Unknown log_level '{log_level}'",
            source=config_path,
            known=", ".join(level.value for level in LogLevel),
        )

    return Settings(
        templates_dir=templates_dir,
        section_family=str(data.get("section_family") or DEFAULT_SECTION_FAMILY),
        strict=strict,
        log_level=log_level,
    )
