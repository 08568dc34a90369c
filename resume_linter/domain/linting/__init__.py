"""Raw-markdown linters: prompt compliance and grammar/ASCII checks."""

from .grammar_rules import GRAMMAR_RULES, PROMPT_SECTION_MARKER, build_grammar_runner, validate_resume
from .line_refs import LINE_ANCHOR_RE, line_anchor, strip_line_anchors
from .markdown_source import MarkdownSource, parse_markdown_source
from .prompt_rules import PROMPT_RULES, build_prompt_runner, validate_markdown_resume_prompt
from .report import format_diagnostics_report
from .rule_runner import RuleRunner, apply_overrides

__all__ = [
    "GRAMMAR_RULES",
    "PROMPT_RULES",
    "PROMPT_SECTION_MARKER",
    "LINE_ANCHOR_RE",
    "MarkdownSource",
    "RuleRunner",
    "apply_overrides",
    "build_grammar_runner",
    "build_prompt_runner",
    "format_diagnostics_report",
    "line_anchor",
    "parse_markdown_source",
    "strip_line_anchors",
    "validate_markdown_resume_prompt",
    "validate_resume",
]
