#!/usr/bin/env python3
"""
validate_templates.py - 메인테이너용 이슈 템플릿 검증

템플릿 디렉토리의 모든 *.md 문서 검사:
1. 메타데이터 블록 구분자 + YAML (MALFORMED_METADATA)
2. name 필수 (MISSING_REQUIRED_FIELD)
3. name 고유 (DUPLICATE_TEMPLATE_NAME), 섹션 heading 고유
4. 섹션 family 관례 (경고, --strict면 실패)

종료 코드:
- 0: 정상
- 1: 잘못된 인자 / 설정 (템플릿 디렉토리 없음, INVALID_CONFIG)
- 2: 템플릿 에러 (--strict면 경고 포함)

사용법:
    # default.yaml 설정 사용
    uv run python scripts/validate_templates.py

    # 다른 디렉토리, 경고도 실패 처리
    uv run python scripts/validate_templates.py --templates-dir docs/templates --strict
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.core.config import load_config  # noqa: E402
from src.core.logging import LogLevel, log_errors, log_warnings, setup_logging  # noqa: E402
from src.domain.errors import TemplateError  # noqa: E402
from src.domain.schemas import ValidationReport  # noqa: E402
from src.templates.store import validate_directory  # noqa: E402

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_ARGS = 1
EXIT_TEMPLATE_ERRORS = 2


class ValidateArgumentParser(argparse.ArgumentParser):
    """잘못된 인자는 EXIT_INVALID_ARGS로 종료 (argparse 기본값 2는 템플릿 에러용)."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_INVALID_ARGS, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = ValidateArgumentParser(
        description="Validate issue template documents",
    )
    parser.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        help="templates directory (default: templates_dir in config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=PROJECT_ROOT / "default.yaml",
        help="config file (default: default.yaml)",
    )
    parser.add_argument(
        "--family",
        type=str,
        default=None,
        help="section family for convention warnings (default: section_family in config)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="convention warnings fail validation",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=[level.value for level in LogLevel],
        default=None,
        help="log level (default: log_level in config, else info)",
    )
    return parser


def report_exit_code(report: ValidationReport, strict: bool) -> int:
    """검증 결과 → 종료 코드."""
    if report.errors:
        return EXIT_TEMPLATE_ERRORS
    if strict and report.warnings:
        return EXIT_TEMPLATE_ERRORS
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_config(args.config)
    except TemplateError as e:
        setup_logging(args.log_level or LogLevel.INFO)
        log_errors([e])
        return EXIT_INVALID_ARGS

    setup_logging(args.log_level or settings.log_level)

    templates_dir = args.templates_dir or settings.templates_dir
    family = args.family or settings.section_family
    strict = settings.strict if args.strict is None else args.strict

    if not templates_dir.exists():
        logger.error(f"Templates directory not found: {templates_dir}")
        return EXIT_INVALID_ARGS
    if not templates_dir.is_dir():
        logger.error(f"Path is not a directory: {templates_dir}")
        return EXIT_INVALID_ARGS

    try:
        report = validate_directory(templates_dir, family=family)
    except TemplateError as e:
        log_errors([e])
        return EXIT_INVALID_ARGS

    logger.info(f"Checked {templates_dir}: {len(report.templates)} valid template(s)")
    log_warnings(report.warnings)
    if report.errors:
        logger.error(f"{len(report.errors)} error(s):")
        log_errors(report.errors)

    return report_exit_code(report, strict)


if __name__ == "__main__":
    sys.exit(main())
