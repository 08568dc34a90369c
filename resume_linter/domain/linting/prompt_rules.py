"""Markdown generation-prompt compliance rules.

Checks raw markdown against the authoring template: a ``#`` name header,
exactly one divider closing the contact block, a bold-labelled skills list
and ASCII-only characters.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from ..models import Diagnostic, Severity
from ..tables import ASCII_REPLACEMENTS, describe_non_ascii
from .line_refs import line_anchor
from .markdown_source import MarkdownSource, has_contact_token, parse_markdown_source
from .rule_runner import RuleRunner, apply_overrides

logger = logging.getLogger(__name__)

SKILLS_SECTION_RE = re.compile(r"^##\s+skills.*?(?=##|\n\n|\Z)", re.I | re.M | re.S)
BOLD_LABEL_RE = re.compile(r"\*\*[^*\n]+:\*\*")
BULLET_LINE_RE = re.compile(r"^\s*[-*+]\s", re.M)

PROMPT_RULES: List[Dict[str, Any]] = [
    {"id": "header_style", "enabled": True, "params": {}},
    {"id": "divider_count", "enabled": True, "params": {}},
    {"id": "divider_placement", "enabled": True, "params": {}},
    {"id": "header_separators", "enabled": True, "params": {"separators": ["•", "|"]}},
    {"id": "skills_formatting", "enabled": True, "params": {}},
    {"id": "ascii_safety", "enabled": True, "params": {}},
    {"id": "extra_dividers", "enabled": True, "params": {}},
]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_markdown_resume_prompt(raw: str, runner: Optional[RuleRunner] = None) -> List[Diagnostic]:
    """Check *raw* markdown against the generation-prompt rules.

    Returns ``[]`` for empty input; otherwise one finding per enabled rule.
    """
    if not raw.strip():
        return []
    return run_prompt_rules(parse_markdown_source(raw), runner)


def run_prompt_rules(source: MarkdownSource, runner: Optional[RuleRunner] = None) -> List[Diagnostic]:
    findings = (runner or build_prompt_runner()).run(source)
    logger.debug("Prompt lint: %d findings", len(findings))
    return findings


def build_prompt_runner(overrides: Optional[Mapping[str, Mapping[str, Any]]] = None) -> RuleRunner:
    """Return the prompt-rule runner, optionally with per-rule config overrides."""
    return RuleRunner(
        rules=apply_overrides(PROMPT_RULES, overrides),
        registry={
            "header_style": _rule_header_style,
            "divider_count": _rule_divider_count,
            "divider_placement": _rule_divider_placement,
            "header_separators": _rule_header_separators,
            "skills_formatting": _rule_skills_formatting,
            "ascii_safety": _rule_ascii_safety,
            "extra_dividers": _rule_extra_dividers,
        },
    )


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _rule_header_style(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    if source.h1_index is not None:
        return [Diagnostic(Severity.PASS, "Has proper Markdown headers")]
    return [Diagnostic(Severity.ERROR, "Missing Markdown headers (use # for main title, ## for sections)")]


def _rule_divider_count(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    count = len(source.divider_indexes)
    if count == 1:
        line_number = source.divider_indexes[0] + 1
        return [
            Diagnostic(
                Severity.PASS,
                f"Has exactly one divider line ({line_anchor(line_number)})",
                line_ref=line_number,
            )
        ]
    if count == 0:
        return [Diagnostic(Severity.ERROR, "Missing divider line after header (use --- or similar)")]
    return [Diagnostic(Severity.ERROR, f"Has {count} divider lines, should have exactly 1")]


def _rule_divider_placement(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    if source.h1_index is None:
        return [Diagnostic(Severity.ERROR, "Divider placement cannot be checked without a # header")]

    divider = next((i for i in source.divider_indexes if i > source.h1_index), None)
    if divider is None:
        return [Diagnostic(Severity.ERROR, "Divider should come immediately after header section")]

    line_number = divider + 1
    span = "\n".join(source.lines[source.h1_index : divider + 1])
    if has_contact_token(span):
        return [
            Diagnostic(
                Severity.PASS,
                f"Divider correctly placed after header ({line_anchor(line_number)})",
                line_ref=line_number,
            )
        ]
    return [
        Diagnostic(
            Severity.ERROR,
            f"{line_anchor(line_number)}: Divider should come immediately after the header contact details",
            line_ref=line_number,
        )
    ]


def _rule_header_separators(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    separators = params.get("separators") or ["•", "|"]
    head = source.head_text()
    if any(sep in head for sep in separators):
        return [Diagnostic(Severity.PASS, "Header uses bullet separators (• or |)")]
    return [Diagnostic(Severity.WARNING, "Consider using bullet separators (•) in contact info")]


def _rule_skills_formatting(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    match = SKILLS_SECTION_RE.search(source.text)
    if match is None:
        return [Diagnostic(Severity.WARNING, "No Skills section found")]

    skills_text = match.group(0)
    missing: List[str] = []
    if not BOLD_LABEL_RE.search(skills_text):
        missing.append("bold category labels (**Category:**)")
    if not BULLET_LINE_RE.search(skills_text):
        missing.append("bullet points")

    if not missing:
        return [Diagnostic(Severity.PASS, "Skills section properly formatted with bold categories and bullets")]
    return [Diagnostic(Severity.ERROR, f"Skills section missing {' and '.join(missing)}")]


def _rule_ascii_safety(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    replacements = params.get("replacements") or ASCII_REPLACEMENTS
    unique = list(dict.fromkeys(char for char in source.text if ord(char) > 127))
    if not unique:
        return [Diagnostic(Severity.PASS, "All characters are ASCII-safe")]
    described = ", ".join(describe_non_ascii(char, replacements) for char in unique)
    return [Diagnostic(Severity.ERROR, f"Non-ASCII characters found: {described}")]


def _rule_extra_dividers(source: MarkdownSource, params: Dict[str, Any]) -> List[Diagnostic]:
    extra = max(len(source.divider_indexes) - 1, 0)
    if extra == 0:
        return [Diagnostic(Severity.PASS, "No additional divider lines in body")]
    return [Diagnostic(Severity.ERROR, f"Found {extra} additional divider line(s) in body - remove them")]
