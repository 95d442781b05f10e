"""
템플릿 스토어: 디렉토리에서 로드한 이름 기반 이슈 템플릿.

규칙:
- list() / get(name): 읽기 전용, 부작용 없음
- name은 스토어 내 고유 (DuplicateTemplateName, 로드 시 fail-fast)
- 잘못된 문서 → 로드 시 에러, 조용히 건너뛰지 않음
- save() / delete(): 메인테이너 작업, 템플릿별 FileLock + 원자적 쓰기

Layout:
.github/ISSUE_TEMPLATE/
├── feature-issue-template.md
├── config.yml        # 무시
└── .locks/           # save()/delete()가 생성
"""

import logging
import re
from collections.abc import Generator, Iterable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path

from filelock import FileLock, Timeout

from src.core.fileio import atomic_write_text, read_document
from src.domain.constants import IGNORED_FILENAMES, LOCKS_DIRNAME, TEMPLATE_SUFFIX
from src.domain.errors import (
    DuplicateTemplateNameError,
    ErrorCodes,
    MissingRequiredFieldError,
    TemplateError,
    TemplateNotFoundError,
)
from src.domain.schemas import IssueTemplate, ValidationReport
from src.templates.conventions import check_sections, get_family
from src.templates.parser import parse_template
from src.templates.renderer import render_template

logger = logging.getLogger(__name__)

FILENAME_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


# =============================================================================
# Discovery
# =============================================================================


def iter_template_files(root: Path) -> list[Path]:
    """
    디렉토리의 템플릿 문서 (비재귀, 정렬).

    dot 파일과 플랫폼 설정 파일 (config.yml, README.md) 제외.

    Raises:
        TemplateError: READ_FAILED (없거나 디렉토리 아님)
    """
    if not root.is_dir():
        raise TemplateError(
            ErrorCodes.READ_FAILED,
            "Templates directory does not exist or is not a directory",
            source=root,
        )

    files = []
    for path in sorted(root.iterdir()):
        if not path.is_file() or path.name.startswith("."):
            continue
        if path.name in IGNORED_FILENAMES or path.suffix.lower() != TEMPLATE_SUFFIX:
            logger.debug(f"Skipping non-template file: {path}")
            continue
        files.append(path)
    return files


def load_template_file(path: Path) -> IssueTemplate:
    """문서 하나 읽기 + 파싱."""
    return parse_template(read_document(path), source=path)


def filename_for(name: str) -> str:
    """템플릿 이름 → 기본 파일명 ("Feature issue template" → "feature-issue-template.md")."""
    slug = FILENAME_SLUG_PATTERN.sub("-", name.lower()).strip("-")
    return f"{slug or 'template'}{TEMPLATE_SUFFIX}"


def validate_filename(filename: str) -> None:
    """
    Raises:
        TemplateError: INVALID_FILENAME
    """
    if (
        not filename
        or filename.startswith(".")
        or "/" in filename
        or "\\" in filename
        or not filename.lower().endswith(TEMPLATE_SUFFIX)
        or filename in IGNORED_FILENAMES
    ):
        raise TemplateError(
            ErrorCodes.INVALID_FILENAME,
            f"Invalid template file name '{filename}' "
            f"(plain '*{TEMPLATE_SUFFIX}' name expected)",
            filename=filename,
        )


# =============================================================================
# Template Store
# =============================================================================


class TemplateStore:
    """
    이름 기반 이슈 템플릿 읽기 전용 접근.

    사용:
        store = TemplateStore.load(Path(".github/ISSUE_TEMPLATE"))
        for name in store.list():
            template = store.get(name)
    """

    # 락 타임아웃 (초)
    LOCK_TIMEOUT = 10.0

    def __init__(
        self,
        root: Path | None = None,
        templates: Iterable[IssueTemplate] = (),
    ):
        """
        Args:
            root: 템플릿 디렉토리 (None = 인메모리 스토어, save/delete 불가)
            templates: 초기 템플릿

        Raises:
            DuplicateTemplateNameError
        """
        self.root = root
        self._templates: dict[str, IssueTemplate] = {}
        for template in templates:
            self._add(template)

    # =========================================================================
    # Load
    # =========================================================================

    @classmethod
    def load(cls, root: Path) -> "TemplateStore":
        """
        디렉토리의 모든 템플릿 문서 로드.

        Fail-fast: 첫 번째 잘못된 문서 또는 중복 name에서 raise.
        문제를 모두 모으려면 validate_directory() 사용.

        Raises:
            TemplateError: READ_FAILED, MALFORMED_METADATA,
                MISSING_REQUIRED_FIELD, DUPLICATE_SECTION,
                DUPLICATE_TEMPLATE_NAME
        """
        store = cls(root)
        for path in iter_template_files(root):
            store._add(load_template_file(path))
        logger.info(f"Loaded {len(store)} template(s) from {root}")
        return store

    @classmethod
    def from_documents(cls, documents: Mapping[str, str]) -> "TemplateStore":
        """
        {filename: 문서 텍스트}로 인메모리 스토어 생성.

        Raises:
            load()와 동일
        """
        store = cls()
        for filename, text in documents.items():
            store._add(parse_template(text, source=Path(filename)))
        return store

    # =========================================================================
    # Read
    # =========================================================================

    def get(self, name: str) -> IssueTemplate:
        """
        name으로 템플릿 조회.

        Raises:
            TemplateNotFoundError
        """
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFoundError(name) from None

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[IssueTemplate]:
        return (self._templates[name] for name in self.list_templates())

    def list_templates(self) -> list[str]:
        """템플릿 이름 (정렬)."""
        return sorted(self._templates)

    # =========================================================================
    # Maintainer operations
    # =========================================================================

    @contextmanager
    def _template_lock(self, filename: str) -> Generator[None, None, None]:
        """
        템플릿별 락.

        Raises:
            TemplateError: TEMPLATE_LOCK_TIMEOUT
        """
        root = self._require_root()
        locks_dir = root / LOCKS_DIRNAME
        locks_dir.mkdir(parents=True, exist_ok=True)
        lock = FileLock(locks_dir / f"{filename}.lock", timeout=self.LOCK_TIMEOUT)

        try:
            lock.acquire()
            yield
        except Timeout:
            raise TemplateError(
                ErrorCodes.TEMPLATE_LOCK_TIMEOUT,
                f"Failed to acquire lock for template file '{filename}'",
                filename=filename,
                timeout=self.LOCK_TIMEOUT,
            ) from None
        finally:
            lock.release()

    def save(self, template: IssueTemplate, filename: str | None = None) -> Path:
        """
        스토어 디렉토리에 템플릿 문서 쓰기.

        파일명: 지정값 → 같은 name의 기존 파일 → name에서 유도
        ("feature-issue-template.md").

        Args:
            template: IssueTemplate
            filename: 스토어 디렉토리 내 대상 파일명

        Returns:
            쓴 파일 경로

        Raises:
            MissingRequiredFieldError: name 없음
            DuplicateTemplateNameError: 다른 파일이 가진 name
            TemplateError: INVALID_FILENAME, TEMPLATE_LOCK_TIMEOUT
        """
        if not template.name.strip():
            raise MissingRequiredFieldError("name")

        root = self._require_root()
        existing = self._templates.get(template.name)

        if filename is None:
            if existing is not None and existing.source is not None:
                filename = existing.source.name
            else:
                filename = filename_for(template.name)
        validate_filename(filename)

        target = root / filename
        if existing is not None and existing.source is not None and existing.source != target:
            raise DuplicateTemplateNameError(template.name, source=existing.source)

        owner = self._owner_of(target)
        if owner is not None and owner.name != template.name:
            raise TemplateError(
                ErrorCodes.INVALID_FILENAME,
                f"File '{filename}' already holds template '{owner.name}'",
                filename=filename,
            )

        with self._template_lock(filename):
            atomic_write_text(target, render_template(template))
            self._templates[template.name] = replace(template, source=target)

        logger.info(f"Saved template '{template.name}' to {target}")
        return target

    def delete(self, name: str) -> None:
        """
        템플릿 삭제 (파일 기반이면 문서도 삭제).

        Raises:
            TemplateNotFoundError
            TemplateError: TEMPLATE_LOCK_TIMEOUT
        """
        template = self.get(name)

        if template.source is not None and self.root is not None:
            with self._template_lock(template.source.name):
                template.source.unlink(missing_ok=True)
            logger.info(f"Deleted template '{name}' ({template.source})")

        del self._templates[name]

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _add(self, template: IssueTemplate) -> None:
        existing = self._templates.get(template.name)
        if existing is not None:
            raise DuplicateTemplateNameError(
                template.name,
                source=template.source,
                first_defined_in=existing.source,
            )
        self._templates[template.name] = template

    def _owner_of(self, path: Path) -> IssueTemplate | None:
        for template in self._templates.values():
            if template.source == path:
                return template
        return None

    def _require_root(self) -> Path:
        if self.root is None:
            raise TemplateError(
                ErrorCodes.INVALID_FILENAME,
                "In-memory store has no directory to write to",
            )
        return self.root

    list = list_templates


# =============================================================================
# Validation
# =============================================================================


def validate_directory(root: Path, family: str | None = None) -> ValidationReport:
    """
    디렉토리의 모든 문서를 raise 없이 검증.

    파싱 에러, 중복 name, (family 지정 시) 관례 경고를 수집.

    Args:
        root: 템플릿 디렉토리
        family: 관례 검사용 섹션 family (None = 생략)

    Returns:
        ValidationReport

    Raises:
        TemplateError: UNKNOWN_FAMILY
    """
    if family is not None:
        get_family(family)

    report = ValidationReport(root=root)

    try:
        paths = iter_template_files(root)
    except TemplateError as e:
        report.errors.append(e)
        return report

    seen: dict[str, Path] = {}
    for path in paths:
        try:
            template = load_template_file(path)
        except TemplateError as e:
            report.errors.append(e)
            continue

        if template.name in seen:
            report.errors.append(DuplicateTemplateNameError(
                template.name,
                source=path,
                first_defined_in=seen[template.name],
            ))
            continue

        seen[template.name] = path
        report.templates.append(template)
        if family is not None:
            report.warnings.extend(check_sections(template, family))

    logger.debug(
        f"Validated {len(paths)} file(s) in {root}: "
        f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
    )
    return report
