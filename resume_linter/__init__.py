"""Resume Linter - parse, render and lint plain-text/markdown resumes."""

from .domain import (
    ParsedResume,
    clean_resume_text,
    format_as_html,
    format_as_rtf,
    parse_resume_text,
    perform_ats_checks,
    text_metadata,
    validate_markdown_resume_prompt,
    validate_resume,
)

__version__ = "0.1.0"

__all__ = [
    "ParsedResume",
    "parse_resume_text",
    "format_as_html",
    "format_as_rtf",
    "perform_ats_checks",
    "validate_markdown_resume_prompt",
    "validate_resume",
    "clean_resume_text",
    "text_metadata",
]
