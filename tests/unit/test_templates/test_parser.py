"""
test_parser.py - 템플릿 문서 파서 테스트

검증:
- 메타데이터 블록: 구분자, YAML, 없는 필드 기본값
- name 필수, labels/assignees는 tuple로 정규화
- sections: 순서, 본문, fenced code, heading 중복
"""

from pathlib import Path

import pytest

from src.domain.errors import (
    ErrorCodes,
    MalformedMetadataError,
    MalformedTemplateError,
    MissingRequiredFieldError,
)
from src.domain.schemas import Section
from src.templates.parser import parse_sections, parse_template, split_document

# =============================================================================
# Metadata
# =============================================================================

class TestMetadata:
    """메타데이터 블록 파싱."""

    def test_feature_template(self, feature_document):
        template = parse_template(feature_document)

        assert template.name == "Feature issue template"
        assert template.about == "Propose a new feature or an enhancement"
        assert template.title == "[Feat]: Title"
        assert template.labels == ()
        assert template.assignees == ("SL9-1994",)

    def test_empty_title_is_empty_string(self, bug_document):
        """title: '' → "" (실패 아님)."""
        template = parse_template(bug_document)

        assert template.title == ""

    def test_comma_separated_labels(self, bug_document):
        template = parse_template(bug_document)

        assert template.labels == ("bug", "triage")
        assert template.assignees == ()

    def test_empty_labels_and_assignees(self):
        """값 없음 (null) → 빈 tuple."""
        template = parse_template("---\nname: X\nlabels:\nassignees:\n---\n")

        assert template.labels == ()
        assert template.assignees == ()

    def test_yaml_list_labels(self):
        template = parse_template("---\nname: X\nlabels: [bug, ' ui ', bug]\n---\n")

        assert template.labels == ("bug", "ui")

    def test_absent_fields_default_to_empty(self):
        template = parse_template("---\nname: Minimal\n---\n")

        assert template.about == ""
        assert template.title == ""
        assert template.labels == ()
        assert template.assignees == ()
        assert template.sections == ()

    def test_non_string_scalars_coerced(self):
        template = parse_template("---\nname: 2024\ntitle: 42\n---\n")

        assert template.name == "2024"
        assert template.title == "42"

    def test_unknown_keys_kept_as_extra(self):
        template = parse_template("---\nname: X\nprojects: [org/1]\ntype: Feature\n---\n")

        assert dict(template.extra) == {"projects": ["org/1"], "type": "Feature"}

    def test_source_kept(self, feature_document):
        source = Path("feature.md")
        template = parse_template(feature_document, source=source)

        assert template.source == source

    def test_crlf_and_bom(self, feature_document):
        text = "\ufeff" + feature_document.replace("\n", "\r\n")
        template = parse_template(text)

        assert template == parse_template(feature_document)


# =============================================================================
# Metadata errors
# =============================================================================

class TestMetadataErrors:
    """MalformedMetadata / MissingRequiredField."""

    def test_missing_closing_delimiter(self, unclosed_document):
        with pytest.raises(MalformedMetadataError) as exc_info:
            parse_template(unclosed_document)

        assert exc_info.value.code == ErrorCodes.MALFORMED_METADATA
        assert "closing" in exc_info.value.message

    def test_missing_opening_delimiter(self):
        with pytest.raises(MalformedMetadataError) as exc_info:
            parse_template("name: X\n---\n")

        assert "start" in exc_info.value.message

    def test_empty_document(self):
        with pytest.raises(MalformedMetadataError):
            parse_template("")

    def test_invalid_yaml(self):
        """따옴표 없는 '[Feat]: Title'은 유효한 YAML 아님."""
        with pytest.raises(MalformedMetadataError) as exc_info:
            parse_template("---\nname: X\ntitle: [Feat]: Title\n---\n")

        assert exc_info.value.context["line"] == 3

    def test_non_mapping_block(self):
        with pytest.raises(MalformedMetadataError) as exc_info:
            parse_template("---\n- a\n- b\n---\n")

        assert "mapping" in exc_info.value.message

    def test_mapping_value_rejected(self):
        with pytest.raises(MalformedMetadataError) as exc_info:
            parse_template("---\nname: X\ntitle:\n  nested: value\n---\n")

        assert exc_info.value.context["field"] == "title"

    def test_nested_label_rejected(self):
        with pytest.raises(MalformedMetadataError):
            parse_template("---\nname: X\nlabels:\n  - [a, b]\n---\n")

    def test_empty_name(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            parse_template("---\nname: ''\n---\n")

        assert exc_info.value.code == ErrorCodes.MISSING_REQUIRED_FIELD
        assert exc_info.value.field == "name"

    def test_absent_name(self):
        with pytest.raises(MissingRequiredFieldError):
            parse_template("---\nabout: no name\n---\n")

    def test_empty_block_has_no_name(self):
        with pytest.raises(MissingRequiredFieldError):
            parse_template("---\n---\n")

    def test_error_mentions_source(self, unclosed_document):
        with pytest.raises(MalformedMetadataError) as exc_info:
            parse_template(unclosed_document, source=Path("broken.md"))

        assert "broken.md" in str(exc_info.value)


# =============================================================================
# Sections
# =============================================================================

class TestSections:
    """Body → preamble + sections."""

    def test_section_order_and_bodies(self, feature_document):
        template = parse_template(feature_document)

        assert template.headings == [
            "Overview",
            "Goals",
            "Implementation Details",
            "Challenges",
            "Related Issues",
            "Additional Context",
        ]
        assert template.get_section("Overview") == Section("Overview", "Describe the feature.")
        assert template.get_section("Goals").body == "- goal one\n- goal two"
        assert template.get_section("Challenges").body == ""

    def test_preamble(self):
        template = parse_template("---\nname: X\n---\n\nIntro text.\n\n## A\nbody\n")

        assert template.preamble == "Intro text."
        assert template.headings == ["A"]

    def test_deeper_headings_stay_in_body(self):
        preamble, sections = parse_sections(["## A", "### Sub", "text"])

        assert preamble == ""
        assert sections == (Section("A", "### Sub\ntext"),)

    def test_fenced_heading_is_body_text(self):
        lines = ["## A", "```md", "## Not a heading", "```", "## B"]
        _, sections = parse_sections(lines)

        assert [s.heading for s in sections] == ["A", "B"]
        assert "## Not a heading" in sections[0].body

    def test_fence_with_info_string_does_not_close(self):
        lines = ["## A", "```", "```python", "## Not a heading", "```", "## B"]
        _, sections = parse_sections(lines)

        assert [s.heading for s in sections] == ["A", "B"]
        assert "## Not a heading" in sections[0].body

    def test_duplicate_heading(self):
        with pytest.raises(MalformedTemplateError) as exc_info:
            parse_template("---\nname: X\n---\n## A\none\n## A\ntwo\n")

        assert exc_info.value.code == ErrorCodes.DUPLICATE_SECTION
        assert exc_info.value.context["heading"] == "A"

    def test_inner_blank_lines_kept(self):
        _, sections = parse_sections(["## A", "", "one", "", "two", "", ""])

        assert sections[0].body == "one\n\ntwo"


class TestSplitDocument:
    """구분자 처리."""

    def test_leading_blank_lines_allowed(self):
        block, body, first_line = split_document("\n\n---\nname: X\n---\nbody")

        assert block == "name: X"
        assert body == ["body"]
        assert first_line == 3

    def test_body_delimiter_not_metadata(self):
        """첫 번째 닫는 구분자에서만 블록 종료."""
        block, body, _ = split_document("---\nname: X\n---\ntext\n---\nmore")

        assert block == "name: X"
        assert body == ["text", "---", "more"]
