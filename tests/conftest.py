"""
이슈 템플릿 테스트용 pytest fixture.

구성:
- 문서 fixture: 원본 템플릿 텍스트 (정상 / 엣지 케이스)
- 디렉토리 fixture: 문서가 쓰여진 tmp 템플릿 디렉토리
"""

from pathlib import Path

import pytest

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트."""
    return Path(__file__).parent.parent


@pytest.fixture
def shipped_templates_dir(project_root: Path) -> Path:
    """저장소에 포함된 .github/ISSUE_TEMPLATE."""
    return project_root / ".github" / "ISSUE_TEMPLATE"


# =============================================================================
# Document Fixtures
# =============================================================================

FEATURE_DOCUMENT = """\
---
name: Feature issue template
about: Propose a new feature or an enhancement
title: "[Feat]: Title"
labels: ''
assignees: SL9-1994
---

## Overview
Describe the feature.

## Goals
- goal one
- goal two

## Implementation Details

## Challenges

## Related Issues

## Additional Context
"""

BUG_DOCUMENT = """\
---
name: Bug report
about: Report something that does not work
title: ''
labels: bug, triage
assignees: ''
---

## Overview
What happened?
"""


@pytest.fixture
def feature_document() -> str:
    """Feature 템플릿 (title placeholder, 빈 labels)."""
    return FEATURE_DOCUMENT


@pytest.fixture
def bug_document() -> str:
    """Bug 템플릿 (빈 title, labels 2개)."""
    return BUG_DOCUMENT


@pytest.fixture
def unclosed_document() -> str:
    """닫는 구분자 없는 메타데이터 블록."""
    return "---\nname: Broken\nabout: no closing delimiter\n\n## Overview\ntext\n"


# =============================================================================
# Directory Fixtures
# =============================================================================

@pytest.fixture
def templates_dir(tmp_path: Path, feature_document: str, bug_document: str) -> Path:
    """정상 문서 2개 + 플랫폼 설정 파일이 있는 템플릿 디렉토리."""
    root = tmp_path / "ISSUE_TEMPLATE"
    root.mkdir()
    (root / "feature.md").write_text(feature_document, encoding="utf-8")
    (root / "bug.md").write_text(bug_document, encoding="utf-8")
    (root / "config.yml").write_text("blank_issues_enabled: false\n", encoding="utf-8")
    return root
