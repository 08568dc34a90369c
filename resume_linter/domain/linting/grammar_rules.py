"""Resume-wide grammar, length and ASCII checks with line-addressed findings.

:func:`validate_resume` is the superset validator: these checks first, then a
marker entry, then the full prompt-compliance output.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from ..models import Diagnostic, Severity
from ..tables import ASCII_REPLACEMENTS, describe_non_ascii
from .line_refs import line_anchor
from .markdown_source import MarkdownSource, has_contact_token, parse_markdown_source
from .prompt_rules import run_prompt_rules
from .rule_runner import RuleRunner, apply_overrides

logger = logging.getLogger(__name__)

PROMPT_SECTION_MARKER = "--- Markdown Generation Prompt Requirements ---"

EXPERIENCE_WORDING_RE = re.compile(r"experience|work|job|position|role", re.I)
LOWERCASE_I_RE = re.compile(r"\bi\s")
MULTI_SPACE_RE = re.compile(r" {2,}")
MULTI_PUNCT_RE = re.compile(r"[.!?]{2,}")
MARKDOWN_PREFIX_RE = re.compile(r"^\s*(?:[-*+#>|]|\d)")
TRAILING_YEAR_RE = re.compile(r"\b\d{4}$")
BULLET_LINE_RE = re.compile(r"^\s*[-*+]\s", re.M)
DATE_HINT_RE = re.compile(r"(?:19|20)\d{2}|present|current", re.I)

TERMINAL_PUNCTUATION = (".", "!", "?", ":", ";")

GRAMMAR_RULES: List[Dict[str, Any]] = [
    {"id": "name_header", "enabled": True, "params": {}},
    {"id": "contact_info", "enabled": True, "params": {}},
    {"id": "experience_wording", "enabled": True, "params": {}},
    {"id": "word_count", "enabled": True, "params": {"min_words": 100, "max_words": 800}},
    {"id": "grammar", "enabled": True, "params": {"min_sentence_chars": 10, "min_sentence_words": 5}},
    {"id": "bullets", "enabled": True, "params": {}},
    {"id": "dates", "enabled": True, "params": {}},
    {"id": "ascii_lines", "enabled": True, "params": {}},
]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_resume(
    raw: str,
    runner: Optional[RuleRunner] = None,
    prompt_runner: Optional[RuleRunner] = None,
) -> List[Diagnostic]:
    """Run the grammar checks followed by the prompt-compliance rules.

    Returns ``[]`` for empty input. Findings keep rule order; per-line
    findings carry ``line_ref`` and the line anchor in their message.
    """
    if not raw.strip():
        return []

    source = parse_markdown_source(raw)
    findings = (runner or build_grammar_runner()).run(source)
    findings.append(Diagnostic(Severity.PASS, PROMPT_SECTION_MARKER))
    findings.extend(run_prompt_rules(source, prompt_runner))
    logger.debug("Resume validation: %d findings over %d lines", len(findings), len(source.lines))
    return findings


def build_grammar_runner(overrides: Optional[Mapping[str, Mapping[str, Any]]] = None) -> RuleRunner:
    return RuleRunner(
        rules=apply_overrides(GRAMMAR_RULES, overrides),
        registry={
            "name_header": _rule_name_header,
            "contact_info": _rule_contact_info,
            "experience_wording": _rule_experience_wording,
            "word_count": _rule_word_count,
            "grammar": _rule_grammar,
            "bullets": _rule_bullets,
            "dates": _rule_dates,
            "ascii_lines": _rule_ascii_lines,
        },
    )


# ---------------------------------------------------------------------------
# Document-level rules
# ---------------------------------------------------------------------------


def _rule_name_header(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    if source.h1_index is not None:
        return [Diagnostic(Severity.PASS, "Has name/title header")]
    return [Diagnostic(Severity.ERROR, "Missing name/title header (use # Your Name)")]


def _rule_contact_info(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    if has_contact_token(source.text):
        return [Diagnostic(Severity.PASS, "Has contact information")]
    return [Diagnostic(Severity.ERROR, "Missing contact information")]


def _rule_experience_wording(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    if EXPERIENCE_WORDING_RE.search(source.text):
        return [Diagnostic(Severity.PASS, "Has experience section")]
    return [Diagnostic(Severity.WARNING, "No experience section found")]


def _rule_word_count(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    min_words = int(params.get("min_words", 100))
    max_words = int(params.get("max_words", 800))
    count = len(source.text.split())
    target = f"aim for {min_words}-{max_words}"

    if count < min_words:
        return [Diagnostic(Severity.WARNING, f"Resume too short ({count} words, {target})")]
    if count > max_words:
        return [Diagnostic(Severity.WARNING, f"Resume too long ({count} words, {target})")]
    return [Diagnostic(Severity.PASS, f"Good length ({count} words)")]


def _rule_bullets(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    if BULLET_LINE_RE.search(source.text):
        return [Diagnostic(Severity.PASS, "Uses bullet points for structure")]
    return [Diagnostic(Severity.WARNING, "Consider using bullet points for better readability")]


def _rule_dates(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    if DATE_HINT_RE.search(source.text):
        return [Diagnostic(Severity.PASS, "Has proper date formatting")]
    return [Diagnostic(Severity.WARNING, "Consider adding dates for experience")]


# ---------------------------------------------------------------------------
# Line-level rules
# ---------------------------------------------------------------------------


def _rule_grammar(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    min_chars = int(params.get("min_sentence_chars", 10))
    min_words = int(params.get("min_sentence_words", 5))
    findings: List[Diagnostic] = []

    lowercase_i = len(LOWERCASE_I_RE.findall(source.text))
    if lowercase_i:
        findings.append(Diagnostic(Severity.WARNING, f'Found {lowercase_i} lowercase "i" - should be "I"'))

    numbered = list(enumerate(source.lines, start=1))

    for number, line in numbered:
        runs = len(MULTI_SPACE_RE.findall(line))
        if runs:
            findings.append(_line_warning(number, f"Multiple spaces found ({runs} occurrence(s))"))

    for number, line in numbered:
        for match in MULTI_PUNCT_RE.finditer(line):
            findings.append(_line_warning(number, f'Multiple punctuation "{match.group(0)}"'))

    for number, line in numbered:
        stripped = line.strip()
        if stripped and not MARKDOWN_PREFIX_RE.match(line) and stripped[0].islower() and stripped[0].isascii():
            findings.append(_line_warning(number, f'Starts with lowercase "{stripped[:20]}"'))

    for number, line in numbered:
        stripped = line.strip()
        if (
            len(stripped) >= min_chars
            and not MARKDOWN_PREFIX_RE.match(line)
            and not stripped.endswith(TERMINAL_PUNCTUATION)
            and not TRAILING_YEAR_RE.search(stripped)
            and len(stripped.split()) >= min_words
        ):
            findings.append(_line_warning(number, "Possibly missing terminal punctuation"))

    if not findings:
        return [Diagnostic(Severity.PASS, "No grammar issues detected")]
    return findings


def _rule_ascii_lines(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    replacements = params.get("replacements") or ASCII_REPLACEMENTS
    findings: List[Diagnostic] = []
    for number, line in enumerate(source.lines, start=1):
        unique = list(dict.fromkeys(char for char in line if ord(char) > 127))
        if unique:
            described = ", ".join(describe_non_ascii(char, replacements) for char in unique)
            findings.append(_line_warning(number, f"Non-ASCII characters {described}"))

    if not findings:
        return [Diagnostic(Severity.PASS, "All characters are ATS-safe (ASCII)")]
    return findings


def _line_warning(line_number: int, message: str) -> Diagnostic:
    return Diagnostic(Severity.WARNING, f"{line_anchor(line_number)}: {message}", line_ref=line_number)
