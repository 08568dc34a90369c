"""Text normalisation helpers applied to uploaded/pasted resume text."""

from __future__ import annotations

import re

from .models import TextMetadata

_LINE_ENDING_RE = re.compile(r"\r\n?")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def clean_resume_text(raw: str) -> str:
    """Normalise line endings, strip trailing whitespace and collapse blank runs.

    Three or more consecutive newlines become one blank line. Leading and
    trailing blank lines are removed.
    """
    text = _LINE_ENDING_RE.sub("\n", raw)
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip("\n")


def text_metadata(raw: str) -> TextMetadata:
    stripped = raw.strip()
    if not stripped:
        return TextMetadata()
    return TextMetadata(
        word_count=len(stripped.split()),
        line_count=len(_LINE_ENDING_RE.sub("\n", raw).split("\n")),
    )
