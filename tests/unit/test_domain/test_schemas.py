"""
test_schemas.py - IssueTemplate / 리스트 값 정규화 테스트
"""

from pathlib import Path

import pytest

from src.domain.schemas import (
    IssueTemplate,
    Section,
    ValidationReport,
    join_list_value,
    list_metadata_value,
    split_list_value,
)


class TestSplitListValue:
    """labels/assignees 정규화."""

    @pytest.mark.parametrize("value", [None, "", "  ", ",", " , ,", []])
    def test_empty_values(self, value):
        assert split_list_value(value) == ()

    def test_comma_separated(self):
        assert split_list_value("bug, triage ,ui") == ("bug", "triage", "ui")

    def test_duplicates_dropped_order_kept(self):
        assert split_list_value("b, a, b") == ("b", "a")

    def test_list(self):
        assert split_list_value(["bug", None, 3, " x "]) == ("bug", "3", "x")

    def test_join(self):
        assert join_list_value(("bug", "triage")) == "bug, triage"
        assert join_list_value(()) == ""

    def test_metadata_value_keeps_items_with_commas(self):
        assert list_metadata_value(("bug", "ui")) == "bug, ui"
        assert list_metadata_value(("needs info, please", "bug")) == [
            "needs info, please",
            "bug",
        ]


class TestIssueTemplate:
    """IssueTemplate 레코드."""

    def test_equality_ignores_source(self):
        a = IssueTemplate(name="X", source=Path("a.md"))
        b = IssueTemplate(name="X", source=Path("b.md"))

        assert a == b

    def test_metadata(self):
        template = IssueTemplate(
            name="X",
            title="[Feat]: Title",
            assignees=("SL9-1994",),
            extra=(("type", "Feature"),),
        )

        assert template.metadata() == {
            "name": "X",
            "about": "",
            "title": "[Feat]: Title",
            "labels": "",
            "assignees": "SL9-1994",
            "type": "Feature",
        }

    def test_get_section(self):
        template = IssueTemplate(name="X", sections=(Section("A", "a"), Section("B")))

        assert template.get_section("B") == Section("B", "")
        assert template.get_section("C") is None
        assert template.headings == ["A", "B"]

    def test_dict_round_trip(self):
        template = IssueTemplate(
            name="X",
            labels=("bug",),
            sections=(Section("A", "a"),),
            preamble="intro",
            extra=(("type", "Bug"),),
            source=Path("x.md"),
        )

        data = template.to_dict()
        restored = IssueTemplate.from_dict(data)

        assert data["labels"] == ["bug"]
        assert data["source"] == "x.md"
        assert restored == template
        assert restored.source == Path("x.md")


class TestValidationReport:

    def test_ok(self):
        assert ValidationReport(root=Path(".")).ok

    def test_plain_exception_in_dict(self):
        report = ValidationReport(root=Path("."), errors=[ValueError("boom")])

        assert not report.ok
        assert report.to_dict()["errors"] == [{"message": "boom"}]
