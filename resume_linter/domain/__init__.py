"""Resume Linter Domain - Pure parsing, rendering and linting of resume text.

This package contains pure functions with no file system or network dependencies.
I/O is handled by the CLI and web layers; this package operates on strings and
immutable dataclasses.
"""

from .ats_checker import format_ats_report, perform_ats_checks
from .linting import (
    RuleRunner,
    build_grammar_runner,
    build_prompt_runner,
    format_diagnostics_report,
    line_anchor,
    strip_line_anchors,
    validate_markdown_resume_prompt,
    validate_resume,
)
from .models import (
    ATSCheck,
    CheckCategory,
    Diagnostic,
    HeaderInfo,
    Item,
    ParsedResume,
    Section,
    SectionKind,
    Severity,
    TextMetadata,
)
from .resume_parser import extract_header, parse_resume_text
from .resume_writer import format_as_html, format_as_html_document, format_as_rtf, parsed_resume_to_json
from .text_cleaner import clean_resume_text, text_metadata

__all__ = [
    # Models
    "ATSCheck",
    "CheckCategory",
    "Diagnostic",
    "HeaderInfo",
    "Item",
    "ParsedResume",
    "Section",
    "SectionKind",
    "Severity",
    "TextMetadata",
    # Parser
    "parse_resume_text",
    "extract_header",
    # Writer
    "format_as_html",
    "format_as_html_document",
    "format_as_rtf",
    "parsed_resume_to_json",
    # ATS
    "perform_ats_checks",
    "format_ats_report",
    # Linting
    "validate_markdown_resume_prompt",
    "validate_resume",
    "build_prompt_runner",
    "build_grammar_runner",
    "RuleRunner",
    "format_diagnostics_report",
    "line_anchor",
    "strip_line_anchors",
    # Text
    "clean_resume_text",
    "text_metadata",
]
