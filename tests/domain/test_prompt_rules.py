"""Tests for the markdown generation-prompt linter."""

from __future__ import annotations

import pytest

from resume_linter.domain.linting.line_refs import line_anchor
from resume_linter.domain.linting.prompt_rules import build_prompt_runner, validate_markdown_resume_prompt
from resume_linter.domain.models import Severity

SCENARIO = "# Jane Doe\njane@x.com\n---\n## Skills\n**Frontend:** \n- React\n"


def _severities(findings):
    return [f.severity for f in findings]


class TestScenario:
    def test_minimal_template(self):
        findings = validate_markdown_resume_prompt(SCENARIO)
        assert _severities(findings) == [
            Severity.PASS,  # header style
            Severity.PASS,  # divider count
            Severity.PASS,  # divider placement
            Severity.WARNING,  # header separators
            Severity.PASS,  # skills formatting
            Severity.PASS,  # ascii
            Severity.PASS,  # extra dividers
        ]
        assert findings[1].line_ref == 3
        assert line_anchor(3) in findings[1].message
        assert findings[2].line_ref == 3
        assert findings[3].message == "Consider using bullet separators (•) in contact info"

    def test_full_template_all_pass(self, markdown_resume):
        findings = validate_markdown_resume_prompt(markdown_resume)
        assert len(findings) == 7
        assert all(f.severity is Severity.PASS for f in findings)

    @pytest.mark.parametrize("raw", ["", "   \n\n  "])
    def test_empty_input(self, raw):
        assert validate_markdown_resume_prompt(raw) == []


class TestHeaderAndDividers:
    def test_missing_h1_is_error(self):
        findings = validate_markdown_resume_prompt("Jane Doe\njane@x.com\n---\n")
        assert findings[0].severity is Severity.ERROR
        assert findings[0].message.startswith("Missing Markdown headers")
        assert findings[2].severity is Severity.ERROR

    def test_h2_only_is_not_a_title(self):
        findings = validate_markdown_resume_prompt("## Jane Doe\njane@x.com\n---\n")
        assert findings[0].severity is Severity.ERROR

    def test_missing_divider(self):
        findings = validate_markdown_resume_prompt("# Jane Doe\njane@x.com\n## Skills\n")
        assert findings[1].severity is Severity.ERROR
        assert findings[1].message == "Missing divider line after header (use --- or similar)"
        assert findings[2].severity is Severity.ERROR
        assert findings[6].severity is Severity.PASS

    def test_multiple_dividers(self):
        findings = validate_markdown_resume_prompt("# Jane Doe\njane@x.com\n---\n## Skills\n===\n***\n")
        assert findings[1].severity is Severity.ERROR
        assert findings[1].message == "Has 3 divider lines, should have exactly 1"
        assert findings[6].message == "Found 2 additional divider line(s) in body - remove them"

    @pytest.mark.parametrize("divider", ["---", "===", "___", "***", "-----"])
    def test_divider_styles(self, divider):
        findings = validate_markdown_resume_prompt(f"# Jane Doe\njane@x.com\n{divider}\n")
        assert findings[1].severity is Severity.PASS
        assert findings[1].line_ref == 3

    def test_divider_with_trailing_text_is_not_a_divider(self):
        findings = validate_markdown_resume_prompt("# Jane Doe\njane@x.com\n--- end\n")
        assert findings[1].severity is Severity.ERROR

    def test_divider_placement_requires_contact_token(self):
        findings = validate_markdown_resume_prompt("# Jane Doe\nSoftware person\n---\n")
        placement = findings[2]
        assert placement.severity is Severity.ERROR
        assert placement.line_ref == 3
        assert placement.message.startswith(line_anchor(3))

    @pytest.mark.parametrize("token", ["555-123-4567", "github.com/jane", "LinkedIn: jane"])
    def test_divider_placement_contact_tokens(self, token):
        findings = validate_markdown_resume_prompt(f"# Jane Doe\n{token}\n---\n")
        assert findings[2].severity is Severity.PASS

    def test_divider_before_header_is_not_placement(self):
        findings = validate_markdown_resume_prompt("---\n# Jane Doe\njane@x.com\n")
        assert findings[1].severity is Severity.PASS
        assert findings[2].severity is Severity.ERROR

    @pytest.mark.parametrize("separator", ["•", "|"])
    def test_header_separators(self, separator):
        findings = validate_markdown_resume_prompt(f"# Jane Doe\njane@x.com {separator} 555-123-4567\n---\n")
        assert findings[3].severity is Severity.PASS

    def test_separator_after_divider_does_not_count(self):
        findings = validate_markdown_resume_prompt("# Jane Doe\njane@x.com\n---\nA | B\n")
        assert findings[3].severity is Severity.WARNING


class TestSkillsFormatting:
    def test_missing_skills_section_is_warning(self):
        findings = validate_markdown_resume_prompt("# Jane Doe\njane@x.com\n---\n## Experience\n- Did work\n")
        assert findings[4].severity is Severity.WARNING
        assert findings[4].message == "No Skills section found"

    def test_missing_bold_labels(self):
        findings = validate_markdown_resume_prompt("# Jane Doe\njane@x.com\n---\n## Skills\n- React\n")
        assert findings[4].severity is Severity.ERROR
        assert "bold category labels" in findings[4].message
        assert "bullet points" not in findings[4].message

    def test_missing_bullets(self):
        findings = validate_markdown_resume_prompt("# Jane Doe\njane@x.com\n---\n## Skills\n**Frontend:** React\n")
        assert findings[4].severity is Severity.ERROR
        assert "bullet points" in findings[4].message

    def test_missing_both(self):
        findings = validate_markdown_resume_prompt("# Jane Doe\njane@x.com\n---\n## Skills\nReact, Vue\n")
        assert findings[4].message == "Skills section missing bold category labels (**Category:**) and bullet points"

    def test_skills_section_stops_at_next_heading(self):
        raw = "# Jane Doe\njane@x.com\n---\n## Skills\n**Frontend:** React\n## Experience\n- Built things\n"
        findings = validate_markdown_resume_prompt(raw)
        assert findings[4].severity is Severity.ERROR
        assert "bullet points" in findings[4].message

    def test_skills_heading_is_case_insensitive(self):
        raw = "# Jane Doe\njane@x.com\n---\n## SKILLS & Tools\n**Frontend:**\n- React\n"
        assert validate_markdown_resume_prompt(raw)[4].severity is Severity.PASS


class TestASCIISafety:
    def test_single_aggregate_error_with_unique_characters(self):
        raw = "# Jane Doe\njane@x.com\n---\nBuilt APIs — fast\nShipped — often\nSaid “hi”\n"
        findings = validate_markdown_resume_prompt(raw)
        ascii_findings = [f for f in findings if "Non-ASCII" in f.message]
        assert len(ascii_findings) == 1
        message = ascii_findings[0].message
        assert ascii_findings[0].severity is Severity.ERROR
        assert message.count("—") == 1
        assert '"—" (em dash - use - instead)' in message
        assert '"“" (smart quote - use " instead)' in message
        assert message.index("—") < message.index("“")

    def test_unknown_character_uses_codepoint(self):
        findings = validate_markdown_resume_prompt("# José\njose@x.com\n---\n")
        assert '"é" (Unicode U+00E9)' in findings[5].message


class TestConfiguredRunner:
    def test_disabled_rule_is_skipped(self):
        runner = build_prompt_runner({"header_separators": {"enabled": False}})
        findings = validate_markdown_resume_prompt(SCENARIO, runner=runner)
        assert len(findings) == 6
        assert all(f.severity is Severity.PASS for f in findings)

    def test_custom_separators(self):
        runner = build_prompt_runner({"header_separators": {"params": {"separators": ["/"]}}})
        findings = validate_markdown_resume_prompt("# Jane Doe\njane@x.com / 555-123-4567\n---\n", runner=runner)
        assert findings[3].severity is Severity.PASS
