"""Tests for the grammar/ASCII linter and the combined resume validator."""

from __future__ import annotations

import pytest

from resume_linter.domain.linting.grammar_rules import (
    PROMPT_SECTION_MARKER,
    _rule_word_count,
    build_grammar_runner,
    validate_resume,
)
from resume_linter.domain.linting.line_refs import LINE_ANCHOR_RE, line_anchor
from resume_linter.domain.linting.markdown_source import parse_markdown_source
from resume_linter.domain.linting.prompt_rules import validate_markdown_resume_prompt
from resume_linter.domain.models import Severity

BASE = "# Jane Doe\nEmail: jane@x.com | 555-123-4567\n---\n"


def _grammar_part(findings):
    marker = next(i for i, f in enumerate(findings) if f.message == PROMPT_SECTION_MARKER)
    return findings[:marker]


def _warnings(findings):
    return [f.message for f in _grammar_part(findings) if f.severity is Severity.WARNING]


class TestValidateResume:
    @pytest.mark.parametrize("raw", ["", "\n \n"])
    def test_empty_input(self, raw):
        assert validate_resume(raw) == []

    def test_rule_order_and_embedded_prompt_block(self):
        raw = BASE + "## Experience\n- Built billing in 2021.\n"
        findings = validate_resume(raw)

        assert [f.message for f in findings[:3]] == [
            "Has name/title header",
            "Has contact information",
            "Has experience section",
        ]
        assert findings[3].severity is Severity.WARNING
        assert findings[3].message.startswith("Resume too short (15 words")
        assert findings[4].message == "No grammar issues detected"
        assert findings[5].message == "Uses bullet points for structure"
        assert findings[6].message == "Has proper date formatting"
        assert findings[7].message == "All characters are ATS-safe (ASCII)"
        assert findings[8].severity is Severity.PASS
        assert findings[8].message == PROMPT_SECTION_MARKER
        assert findings[9:] == validate_markdown_resume_prompt(raw)

    def test_missing_header_and_contact(self):
        findings = validate_resume("Plain text only\n")
        assert findings[0].severity is Severity.ERROR
        assert findings[0].message == "Missing name/title header (use # Your Name)"
        assert findings[1].message == "Missing contact information"
        assert findings[2].message == "No experience section found"

    def test_missing_bullets_and_dates(self):
        findings = validate_resume("# Jane Doe\nEmail: jane@x.com\n")
        warnings = _warnings(findings)
        assert "Consider using bullet points for better readability" in warnings
        assert "Consider adding dates for experience" in warnings

    def test_present_counts_as_date(self):
        findings = validate_resume(BASE + "Acme Corp: Jan to Present.\n")
        assert "Has proper date formatting" in [f.message for f in findings]


class TestGrammarHeuristics:
    def test_lowercase_i_counted_once(self):
        findings = validate_resume(BASE + "Yesterday i built it and i shipped it.\n")
        assert 'Found 2 lowercase "i" - should be "I"' in _warnings(findings)

    def test_multiple_spaces_per_line(self):
        findings = validate_resume(BASE + "Built  APIs  quickly.\n")
        line_findings = [f for f in _grammar_part(findings) if f.line_ref == 4]
        assert [f.message for f in line_findings] == [f"{line_anchor(4)}: Multiple spaces found (2 occurrence(s))"]

    def test_each_punctuation_run_is_reported(self):
        findings = validate_resume(BASE + "Done!! Really?!\n")
        warnings = _warnings(findings)
        assert f'{line_anchor(4)}: Multiple punctuation "!!"' in warnings
        assert f'{line_anchor(4)}: Multiple punctuation "?!"' in warnings

    def test_lowercase_line_start(self):
        findings = validate_resume(BASE + "shipped things weekly.\n")
        assert f'{line_anchor(4)}: Starts with lowercase "shipped things weekl"' in _warnings(findings)

    def test_markdown_prefixed_lines_are_exempt(self):
        findings = validate_resume(BASE + "- shipped things weekly and often\n> quoted words without a period here\n")
        assert not any("Starts with lowercase" in w for w in _warnings(findings))
        assert not any("terminal punctuation" in w for w in _warnings(findings))

    def test_missing_terminal_punctuation(self):
        findings = validate_resume(BASE + "Built a payments platform for banks\n")
        assert f"{line_anchor(4)}: Possibly missing terminal punctuation" in _warnings(findings)

    @pytest.mark.parametrize(
        "line",
        [
            "Platform Engineer at Acme Corp 2021",
            "Only four words here",
            "Languages and tools I use daily:",
        ],
    )
    def test_terminal_punctuation_exemptions(self, line):
        findings = validate_resume(BASE + line + "\n")
        assert not any("terminal punctuation" in w for w in _warnings(findings))

    def test_line_refs_match_anchors(self):
        findings = validate_resume(BASE + "shipped  it.\nBuilt a payments platform for banks\n")
        for finding in findings:
            match = LINE_ANCHOR_RE.search(finding.message)
            if finding.line_ref is None:
                continue
            assert match is not None
            assert int(match.group(1)) == finding.line_ref


class TestWordCount:
    @pytest.mark.parametrize(
        "words,severity,prefix",
        [
            (99, Severity.WARNING, "Resume too short"),
            (100, Severity.PASS, "Good length"),
            (800, Severity.PASS, "Good length"),
            (801, Severity.WARNING, "Resume too long"),
        ],
    )
    def test_boundaries(self, words, severity, prefix):
        source = parse_markdown_source("word " * words)
        [finding] = _rule_word_count(source, {"min_words": 100, "max_words": 800})
        assert finding.severity is severity
        assert finding.message.startswith(prefix)

    def test_configured_bounds(self):
        runner = build_grammar_runner({"word_count": {"params": {"min_words": 5, "max_words": 10}}})
        findings = validate_resume(BASE + "## Experience\n- Built billing in 2021.\n", runner=runner)
        assert findings[3].message == "Resume too long (15 words, aim for 5-10)"


class TestASCIILines:
    def test_one_warning_per_offending_line(self):
        raw = BASE + "Built APIs — fast.\nShipped — often.\nLed — teams.\n"
        findings = validate_resume(raw)

        ascii_warnings = [f for f in _grammar_part(findings) if "Non-ASCII characters" in f.message]
        assert [f.line_ref for f in ascii_warnings] == [4, 5, 6]
        assert all('"—" (em dash - use - instead)' in f.message for f in ascii_warnings)

        prompt_errors = [f for f in validate_markdown_resume_prompt(raw) if "Non-ASCII" in f.message]
        assert len(prompt_errors) == 1
        assert prompt_errors[0].message.count("—") == 1

    def test_unique_characters_per_line(self):
        findings = validate_resume(BASE + "Said “hi” — twice “hi”.\n")
        [warning] = [f for f in _grammar_part(findings) if "Non-ASCII characters" in f.message]
        assert warning.message.count("“") == 1
        assert warning.message.count("”") == 1

    def test_ascii_input_passes_in_both_linters(self, markdown_resume):
        full = [f.message for f in validate_resume(markdown_resume) if f.severity is Severity.PASS]
        prompt = [f.message for f in validate_markdown_resume_prompt(markdown_resume) if f.severity is Severity.PASS]
        assert "All characters are ATS-safe (ASCII)" in full
        assert "All characters are ASCII-safe" in full
        assert "All characters are ASCII-safe" in prompt


class TestConfiguredRunner:
    def test_disabled_rule(self):
        runner = build_grammar_runner({"grammar": {"enabled": False}})
        findings = validate_resume(BASE + "shipped  it!!\n", runner=runner)
        assert not any(f.line_ref for f in _grammar_part(findings))
        assert "No grammar issues detected" not in [f.message for f in findings]

    def test_rule_ids(self):
        assert build_grammar_runner().rule_ids == [
            "name_header",
            "contact_info",
            "experience_wording",
            "word_count",
            "grammar",
            "bullets",
            "dates",
            "ascii_lines",
        ]
