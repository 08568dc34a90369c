"""Pure domain logic for turning raw resume text into a :class:`ParsedResume`.

All functions operate on strings -- no file I/O.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from functools import reduce
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .item_extractor import extract_items
from .models import HeaderInfo, ParsedResume, Section, SectionKind
from .tables import SECTION_PATTERNS

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Contact patterns
# ---------------------------------------------------------------------------

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(\+?1[-.\s]?)?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})")
LINKEDIN_RE = re.compile(r"(linkedin\.com/in/[a-zA-Z0-9-]+|linkedin\.com/pub/[a-zA-Z0-9-/]+)", re.I)
WEBSITE_RE = re.compile(r"(https?://[^\s]+|www\.[^\s]+\.[a-zA-Z]{2,})", re.I)
LOCATION_RE = re.compile(r"^[A-Za-z\s]+,\s*[A-Za-z\s]+$")

YEAR_RANGE_RE = re.compile(r"\d{4}[-–]\d{4}|\d{4}[-–]present", re.I)

HEADER_LINE_LIMIT = 10
HEADER_ARTIFACT_WINDOW = 5
SECTION_HEADER_MAX_LEN = 50


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_resume_text(raw: str) -> ParsedResume:
    """Parse *raw* resume text into header info and classified sections.

    Never raises: empty input yields :meth:`ParsedResume.empty`.
    """
    header_lines, body_lines = segment_lines(raw)
    if not body_lines:
        return ParsedResume.empty()

    header = extract_header(header_lines)
    sections = classify_sections(body_lines)
    logger.debug("Parsed resume: name=%r sections=%d", header.name, len(sections))
    return ParsedResume(header=header, sections=sections)


def segment_lines(raw: str) -> Tuple[List[str], List[str]]:
    """Return ``(header_lines, body_lines)``: stripped, non-blank lines.

    Body lines are all non-blank lines; the classifier applies its own
    header-artifact exemption.
    """
    lines = [line.strip() for line in raw.split("\n")]
    lines = [line for line in lines if line]
    return lines[:HEADER_LINE_LIMIT], lines


def extract_header(header_lines: Sequence[str]) -> HeaderInfo:
    """Collect contact fields; the first match of each field wins."""
    found: Dict[str, Optional[str]] = dict.fromkeys(("phone", "email", "location", "linkedin", "website"))

    for line in header_lines:
        email = EMAIL_RE.search(line)
        phone = PHONE_RE.search(line)
        linkedin = LINKEDIN_RE.search(line)
        website = None if linkedin else WEBSITE_RE.search(line)

        for key, match in (("email", email), ("phone", phone), ("linkedin", linkedin), ("website", website)):
            if match and found[key] is None:
                found[key] = match.group(0)

        if found["location"] is None and not (email or phone or linkedin or website) and LOCATION_RE.match(line):
            found["location"] = line

    return HeaderInfo(name=header_lines[0] if header_lines else "", **found)


# ---------------------------------------------------------------------------
# Heuristic predicates
# ---------------------------------------------------------------------------


def match_section_kind(line: str, patterns=SECTION_PATTERNS) -> Optional[SectionKind]:
    """Return the section kind whose leading phrase starts *line*, if any."""
    for pattern, kind in patterns:
        if pattern.search(line):
            return kind
    return None


def is_likely_section_header(line: str) -> bool:
    """Short, upper- or title-cased line that is not a URL, decimal or date range."""
    if len(line) > SECTION_HEADER_MAX_LEN:
        return False
    if "." in line and not line.endswith("."):
        return False
    if YEAR_RANGE_RE.search(line):
        return False

    is_all_caps = line == line.upper() and re.search(r"[A-Z]", line) is not None
    is_title_case = all(not word or word[0] == word[0].upper() for word in line.split(" "))
    return is_all_caps or is_title_case


def is_header_artifact(index: int, line: str, first_line: str) -> bool:
    """Contact lines near the top must not be mistaken for section headings."""
    if index >= HEADER_ARTIFACT_WINDOW:
        return False
    return bool(EMAIL_RE.search(line) or PHONE_RE.search(line) or line == first_line)


# ---------------------------------------------------------------------------
# Section scan (fold)
# ---------------------------------------------------------------------------


class ScanState(Enum):
    SEEKING = "seeking"
    IN_SECTION = "in_section"


class OpenSection(NamedTuple):
    kind: SectionKind
    title: str
    lines: Tuple[str, ...] = ()


class SectionScan(NamedTuple):
    closed: Tuple[Section, ...] = ()
    current: Optional[OpenSection] = None

    @property
    def state(self) -> ScanState:
        return ScanState.SEEKING if self.current is None else ScanState.IN_SECTION


def close_section(open_section: OpenSection) -> Section:
    content = "\n".join(open_section.lines)
    return Section(
        kind=open_section.kind,
        title=open_section.title,
        content=content,
        items=extract_items(content, open_section.kind),
    )


def step_section(acc: SectionScan, line: str, is_boundary: bool, kind: SectionKind) -> SectionScan:
    """Advance the section scan by one body line."""
    if is_boundary:
        closed = acc.closed if acc.current is None else acc.closed + (close_section(acc.current),)
        return SectionScan(closed=closed, current=OpenSection(kind=kind, title=line))
    if acc.state is ScanState.SEEKING:
        return acc
    return acc._replace(current=acc.current._replace(lines=acc.current.lines + (line,)))


def classify_sections(lines: Sequence[str], patterns=SECTION_PATTERNS) -> Tuple[Section, ...]:
    """Split body lines into sections; text before the first heading is discarded."""
    if not lines:
        return ()
    first_line = lines[0]

    def _step(acc: SectionScan, indexed: Tuple[int, str]) -> SectionScan:
        index, line = indexed
        if is_header_artifact(index, line, first_line):
            return acc
        kind = match_section_kind(line, patterns)
        is_boundary = kind is not None or is_likely_section_header(line)
        return step_section(acc, line, is_boundary, kind or SectionKind.OTHER)

    final = reduce(_step, enumerate(lines), SectionScan())
    if final.current is None:
        return final.closed
    return final.closed + (close_section(final.current),)
