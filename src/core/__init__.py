"""
Core 레이어: 파일 I/O, 해싱, 로깅, 설정.

역할:
- 메인테이너 저장용 원자적 쓰기
- template fingerprint (ETag)
- 로깅 설정 + 번호 붙은 에러 리포트
- default.yaml 로드
"""

from .config import Settings, load_config
from .fileio import atomic_write_text, read_document
from .hashing import compute_template_hash
from .logging import LogLevel, log_errors, log_warnings, setup_logging

__all__ = [
    # config
    "Settings",
    "load_config",
    # fileio
    "atomic_write_text",
    "read_document",
    # hashing
    "compute_template_hash",
    # logging
    "LogLevel",
    "setup_logging",
    "log_errors",
    "log_warnings",
]
