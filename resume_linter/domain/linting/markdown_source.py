"""Line-indexed view of markdown resume text shared by the lint rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..resume_parser import EMAIL_RE, PHONE_RE

DIVIDER_RE = re.compile(r"[-=_*]{3,}")
H1_RE = re.compile(r"#\s+")
PROFILE_TOKEN_RE = re.compile(r"linkedin|github", re.I)


@dataclass(frozen=True)
class MarkdownSource:
    """Raw text plus the line facts most rules need, computed once per lint call."""

    text: str
    lines: Tuple[str, ...]
    divider_indexes: Tuple[int, ...]
    h1_index: Optional[int]

    @property
    def first_divider(self) -> Optional[int]:
        return self.divider_indexes[0] if self.divider_indexes else None

    def head_text(self) -> str:
        """Text above the first divider (all text when there is none)."""
        if self.first_divider is None:
            return self.text
        return "\n".join(self.lines[: self.first_divider])


def is_divider(line: str) -> bool:
    return DIVIDER_RE.fullmatch(line.rstrip("\r")) is not None


def is_h1(line: str) -> bool:
    return H1_RE.match(line) is not None


def has_contact_token(text: str) -> bool:
    """Email, phone number, or a LinkedIn/GitHub mention."""
    return bool(EMAIL_RE.search(text) or PHONE_RE.search(text) or PROFILE_TOKEN_RE.search(text))


def parse_markdown_source(text: str) -> MarkdownSource:
    """Split *text* on ``\\n`` (so indexes map to editor lines) and index dividers/H1."""
    lines = text.split("\n")
    dividers: List[int] = [i for i, line in enumerate(lines) if is_divider(line)]
    h1_index = next((i for i, line in enumerate(lines) if is_h1(line)), None)
    return MarkdownSource(
        text=text,
        lines=tuple(lines),
        divider_indexes=tuple(dividers),
        h1_index=h1_index,
    )
