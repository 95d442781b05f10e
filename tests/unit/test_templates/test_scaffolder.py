"""
test_scaffolder.py - 새 템플릿 스캐폴딩 테스트
"""

import pytest

from src.domain.errors import ErrorCodes, MissingRequiredFieldError, TemplateError
from src.templates.conventions import check_sections
from src.templates.parser import parse_template
from src.templates.renderer import render_template
from src.templates.scaffolder import scaffold_template, section_prompt


class TestScaffoldTemplate:
    """scaffold_template()."""

    def test_feature_scaffold(self):
        template = scaffold_template(
            "Feature issue template",
            about="Propose a new feature",
            title="[Feat]: Title",
            assignees="SL9-1994",
        )

        assert template.title == "[Feat]: Title"
        assert template.labels == ()
        assert template.assignees == ("SL9-1994",)
        assert check_sections(template, "feature") == []

    def test_sections_have_prompts(self):
        template = scaffold_template("X")

        overview = template.get_section("Overview")
        assert overview.body.startswith("<!-- ")
        assert overview.body.endswith(" -->")

    def test_prompt_override(self):
        template = scaffold_template("X", prompts={"Goals": "What does done look like?"})

        assert template.get_section("Goals").body == "<!-- What does done look like? -->"

    def test_label_list(self):
        template = scaffold_template("X", labels=["enhancement", "needs triage"])

        assert template.labels == ("enhancement", "needs triage")

    def test_scaffold_round_trips(self):
        template = scaffold_template("X", labels="a, b")

        assert parse_template(render_template(template)) == template

    def test_empty_name(self):
        with pytest.raises(MissingRequiredFieldError):
            scaffold_template("  ")

    def test_unknown_family(self):
        with pytest.raises(TemplateError) as exc_info:
            scaffold_template("X", family="epic")

        assert exc_info.value.code == ErrorCodes.UNKNOWN_FAMILY


class TestSectionPrompt:
    """section_prompt()."""

    def test_unknown_heading(self):
        assert section_prompt("Screenshots") == ""

    def test_custom_heading(self):
        assert section_prompt("Screenshots", {"Screenshots": "Add images"}) == "<!-- Add images -->"
