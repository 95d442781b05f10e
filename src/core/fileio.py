"""
템플릿 문서 파일 I/O: 읽기 + 원자적 쓰기.

규칙:
- 중간 상태 없음: temp → rename
- 가능하면 내구성 보장: 파일 fsync + 디렉토리 fsync
- fsync 실패: 경고 후 계속
- 실패 시: temp 파일 삭제, 원본 유지
"""

import logging
import os
import tempfile
from pathlib import Path

from src.domain.errors import ErrorCodes, TemplateError

logger = logging.getLogger(__name__)


def read_document(path: Path) -> str:
    """
    템플릿 문서를 UTF-8 텍스트로 읽기.

    Args:
        path: 문서 경로

    Returns:
        문서 텍스트

    Raises:
        TemplateError: READ_FAILED
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(
            ErrorCodes.READ_FAILED,
            f"Failed to read document: {e}",
            source=path,
        ) from e


def _fsync_dir(dir_path: Path) -> None:
    """디렉토리 fsync (지원되는 경우)."""
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        # O_DIRECTORY 미지원, 권한 등
        logger.warning(
            f"Directory fsync failed for {dir_path}: {e}. "
            f"Rename durability may not be guaranteed."
        )


def atomic_write_text(path: Path, text: str) -> None:
    """
    원자적 텍스트 쓰기.

    Args:
        path: 대상 파일 경로
        text: 내용 (UTF-8, "\\n" 줄바꿈)
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
            newline="\n",
        ) as f:
            temp_path = Path(f.name)
            f.write(text)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.replace(temp_path, path)

        _fsync_dir(dir_path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise
