"""
Domain Constants: 문서 포맷 + 스토어 레이아웃.

parser / renderer / store / CLI 공용 값.
"""

# =============================================================================
# Document Format
# =============================================================================
# ---
# name: <string>
# about: <string>
# title: <string>
# labels: <comma-separated or empty>
# assignees: <comma-separated or empty>
# ---
#
# ## <Section Heading>
# <free text>

METADATA_DELIMITER = "---"
SECTION_HEADING_PREFIX = "## "
LIST_SEPARATOR = ","

# 알려진 메타데이터 키 (직렬화 순서)
METADATA_FIELDS = ("name", "about", "title", "labels", "assignees")
LIST_FIELDS = ("labels", "assignees")
REQUIRED_FIELDS = ("name",)

# =============================================================================
# Section Families
# =============================================================================
# heading은 관례일 뿐, 강제하지 않음.

SECTION_FAMILIES: dict[str, tuple[str, ...]] = {
    "feature": (
        "Overview",
        "Goals",
        "Implementation Details",
        "Challenges",
        "Related Issues",
        "Additional Context",
    ),
}

DEFAULT_SECTION_FAMILY = "feature"

# 스캐폴드 프롬프트 (HTML 주석은 이슈 화면에 표시 안 됨)
DEFAULT_SECTION_PROMPTS = {
    "Overview": "Briefly describe the feature and the problem it solves.",
    "Goals": "List the outcomes this issue should achieve.",
    "Implementation Details": "Describe the proposed approach.",
    "Challenges": "Note known risks, open questions or blockers.",
    "Related Issues": "Link related issues or pull requests.",
    "Additional Context": "Add screenshots, references or anything else.",
}

# =============================================================================
# Store Layout
# =============================================================================
# .github/ISSUE_TEMPLATE/
# ├── feature-issue-template.md
# ├── config.yml        # 플랫폼 chooser 설정, 템플릿 아님
# └── .locks/           # 메인테이너 쓰기 락

DEFAULT_TEMPLATES_DIR = ".github/ISSUE_TEMPLATE"
TEMPLATE_SUFFIX = ".md"
IGNORED_FILENAMES = ("config.yml", "config.yaml", "README.md")
LOCKS_DIRNAME = ".locks"
