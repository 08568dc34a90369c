"""Split classified section content into skill tokens or structured entries."""

from __future__ import annotations

import re
from dataclasses import replace
from enum import Enum
from functools import reduce
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .models import STRUCTURED_KINDS, Item, SectionKind
from .tables import BULLET_CHARS, DEGREE_KEYWORDS, ROLE_KEYWORDS

DATE_RANGE_RE = re.compile(
    r"(\d{4}[-–]\d{4}|\d{4}[-–]present|\w+\s+\d{4}\s*[-–]\s*\w+\s+\d{4})",
    re.I,
)
TITLE_SPLIT_RE = re.compile(r"\s+at\s+|\s+[-–]\s+|\s+\|\s+", re.I)

ITEM_HEADER_MIN_LEN = 10
ITEM_HEADER_MAX_LEN = 100
DESCRIPTION_MIN_LEN = 10


def _keyword_re(keywords: Sequence[str]) -> re.Pattern[str]:
    if not keywords:
        return re.compile(r"(?!)")
    return re.compile(r"\b(" + "|".join(re.escape(k) for k in keywords) + r")\b", re.I)


def _bullet_prefix_re(bullets: Sequence[str]) -> re.Pattern[str]:
    return re.compile("^(?:" + "|".join(re.escape(b) for b in bullets) + r")\s*")


_ROLE_RE = _keyword_re(ROLE_KEYWORDS)
_DEGREE_RE = _keyword_re(DEGREE_KEYWORDS)
BULLET_PREFIX_RE = _bullet_prefix_re(BULLET_CHARS)


def strip_bullet(line: str, bullets: Sequence[str] = BULLET_CHARS) -> Optional[str]:
    """Return *line* without its leading bullet, or ``None`` if it has none."""
    if not bullets or not line.startswith(tuple(bullets)):
        return None
    prefix_re = BULLET_PREFIX_RE if bullets is BULLET_CHARS else _bullet_prefix_re(bullets)
    return prefix_re.sub("", line, count=1).strip()


def extract_items(content: str, kind: SectionKind) -> Tuple[Item, ...]:
    """Derive items from section *content* according to its *kind*."""
    lines = [line for line in content.split("\n") if line.strip()]
    if kind is SectionKind.SKILLS:
        return extract_skill_items(lines)
    if kind in STRUCTURED_KINDS:
        return extract_structured_items(lines)
    return ()


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------


def extract_skill_items(lines: Sequence[str], bullets: Sequence[str] = BULLET_CHARS) -> Tuple[Item, ...]:
    """Comma lists, bullet lines, or whole lines each become skill tokens."""
    tokens: List[str] = []
    for line in lines:
        if "," in line:
            tokens.extend(part.strip() for part in line.split(","))
        else:
            stripped = strip_bullet(line, bullets)
            tokens.append(line.strip() if stripped is None else stripped)
    return tuple(Item(title=token) for token in tokens if token)


# ---------------------------------------------------------------------------
# Experience / education / projects
# ---------------------------------------------------------------------------


def is_likely_item_header(
    line: str,
    role_keywords: Sequence[str] = ROLE_KEYWORDS,
    degree_keywords: Sequence[str] = DEGREE_KEYWORDS,
) -> bool:
    """Medium-length line naming a job title or degree."""
    if len(line) < ITEM_HEADER_MIN_LEN or len(line) > ITEM_HEADER_MAX_LEN:
        return False
    role_re = _ROLE_RE if role_keywords is ROLE_KEYWORDS else _keyword_re(role_keywords)
    degree_re = _DEGREE_RE if degree_keywords is DEGREE_KEYWORDS else _keyword_re(degree_keywords)
    return bool(role_re.search(line) or degree_re.search(line))


def find_date_range(line: str) -> Optional[str]:
    match = DATE_RANGE_RE.search(line)
    return match.group(0) if match else None


def start_item(line: str, date_range: Optional[str]) -> Item:
    """Build an item from its header line: strip the date, then split title/subtitle."""
    remainder = line.replace(date_range, "", 1) if date_range else line
    remainder = remainder.strip().rstrip("-–|").strip()

    parts = [part.strip() for part in TITLE_SPLIT_RE.split(remainder)]
    if len(parts) > 1 and parts[0] and parts[1]:
        return Item(title=parts[0], subtitle=parts[1], date_range=date_range)
    return Item(title=remainder, date_range=date_range)


def description_line(line: str, bullets: Sequence[str] = BULLET_CHARS) -> Optional[str]:
    """Return the description text for *line*, or ``None`` for short fragments."""
    stripped = strip_bullet(line, bullets)
    if stripped is not None:
        return stripped or None
    if len(line) > DESCRIPTION_MIN_LEN:
        return line
    return None


class ItemState(Enum):
    IN_SECTION = "in_section"
    IN_ITEM = "in_item"


class ItemScan(NamedTuple):
    items: Tuple[Item, ...] = ()
    current: Optional[Item] = None

    @property
    def state(self) -> ItemState:
        return ItemState.IN_SECTION if self.current is None else ItemState.IN_ITEM

    def flushed(self) -> Tuple[Item, ...]:
        if self.current is not None and self.current.title:
            return self.items + (self.current,)
        return self.items


def step_item(acc: ItemScan, line: str) -> ItemScan:
    """Advance the item scan by one content line."""
    date_range = find_date_range(line)
    if date_range or is_likely_item_header(line):
        return ItemScan(items=acc.flushed(), current=start_item(line, date_range))
    if acc.state is ItemState.IN_SECTION:
        return acc

    text = description_line(line)
    if text is None:
        return acc
    current = acc.current
    return acc._replace(current=replace(current, description=current.description + (text,)))


def extract_structured_items(lines: Sequence[str]) -> Tuple[Item, ...]:
    """Group content lines into items; items without a title are dropped."""
    return reduce(step_item, (line.strip() for line in lines), ItemScan()).flushed()
