"""
test_fileio.py - 문서 읽기 / 원자적 쓰기 테스트
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from src.core.fileio import atomic_write_text, read_document
from src.domain.errors import ErrorCodes, TemplateError


class TestAtomicWriteText:

    def test_writes_content(self, tmp_path: Path):
        path = tmp_path / "a.md"

        atomic_write_text(path, "---\nname: A\n---\n")

        assert path.read_text(encoding="utf-8") == "---\nname: A\n---\n"

    def test_creates_parent_dirs(self, tmp_path: Path):
        path = tmp_path / "nested" / "dir" / "a.md"

        atomic_write_text(path, "x")

        assert path.exists()

    def test_overwrites(self, tmp_path: Path):
        path = tmp_path / "a.md"
        path.write_text("old", encoding="utf-8")

        atomic_write_text(path, "new")

        assert path.read_text(encoding="utf-8") == "new"

    def test_failure_keeps_original_and_cleans_temp(self, tmp_path: Path):
        path = tmp_path / "a.md"
        path.write_text("old", encoding="utf-8")

        with patch("src.core.fileio.os.replace", side_effect=OSError("rename failed")):
            with pytest.raises(OSError):
                atomic_write_text(path, "new")

        assert path.read_text(encoding="utf-8") == "old"
        assert not list(tmp_path.glob("*.tmp"))

    def test_unicode(self, tmp_path: Path):
        path = tmp_path / "a.md"

        atomic_write_text(path, "about: 기능 제안 ✨\n")

        assert read_document(path) == "about: 기능 제안 ✨\n"


class TestReadDocument:

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(TemplateError) as exc_info:
            read_document(tmp_path / "missing.md")

        assert exc_info.value.code == ErrorCodes.READ_FAILED
        assert exc_info.value.context["source"] == tmp_path / "missing.md"

    def test_invalid_utf8(self, tmp_path: Path):
        path = tmp_path / "bad.md"
        path.write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(TemplateError) as exc_info:
            read_document(path)

        assert exc_info.value.code == ErrorCodes.READ_FAILED
