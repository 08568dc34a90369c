"""Fixed rule tables used by the parser, ATS checker and linters.

Every table is immutable; rule functions receive them as parameters so a test
or a configuration override can swap one in without touching control flow.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Pattern, Tuple

from .models import SectionKind

# ---------------------------------------------------------------------------
# Section headings
# ---------------------------------------------------------------------------

#: Leading phrases mapping a heading line to its section kind (checked in order).
SECTION_PATTERNS: Tuple[Tuple[Pattern[str], SectionKind], ...] = (
    (
        re.compile(r"^(experience|work\s+experience|professional\s+experience|employment)", re.I),
        SectionKind.EXPERIENCE,
    ),
    (re.compile(r"^(education|academic\s+background)", re.I), SectionKind.EDUCATION),
    (re.compile(r"^(skills|technical\s+skills|core\s+competencies|expertise)", re.I), SectionKind.SKILLS),
    (re.compile(r"^(projects|relevant\s+projects|key\s+projects)", re.I), SectionKind.PROJECTS),
    (re.compile(r"^(summary|professional\s+summary|profile|objective)", re.I), SectionKind.SUMMARY),
    (re.compile(r"^(certifications|licenses|credentials)", re.I), SectionKind.CERTIFICATIONS),
)

# ---------------------------------------------------------------------------
# Item headers
# ---------------------------------------------------------------------------

ROLE_KEYWORDS: Tuple[str, ...] = (
    "manager",
    "engineer",
    "developer",
    "analyst",
    "specialist",
    "coordinator",
    "director",
    "senior",
    "junior",
    "lead",
)

DEGREE_KEYWORDS: Tuple[str, ...] = (
    "bachelor",
    "master",
    "phd",
    "associate",
    "certificate",
    "diploma",
)

BULLET_CHARS: Tuple[str, ...] = ("•", "-", "*")

# ---------------------------------------------------------------------------
# Spelling
# ---------------------------------------------------------------------------

MISSPELLINGS: Mapping[str, str] = MappingProxyType(
    {
        "managment": "management",
        "recieve": "receive",
        "seperate": "separate",
        "definately": "definitely",
        "experiance": "experience",
        "responsability": "responsibility",
    }
)

# ---------------------------------------------------------------------------
# ASCII replacements
# ---------------------------------------------------------------------------

#: Non-ASCII character -> (label, ASCII replacement).
ASCII_REPLACEMENTS: Mapping[str, Tuple[str, str]] = MappingProxyType(
    {
        "—": ("em dash", "-"),
        "–": ("en dash", "-"),
        "“": ("smart quote", '"'),
        "”": ("smart quote", '"'),
        "‘": ("smart apostrophe", "'"),
        "’": ("smart apostrophe", "'"),
        "•": ("bullet", "-"),
    }
)


def describe_non_ascii(char: str, replacements: Mapping[str, Tuple[str, str]] = ASCII_REPLACEMENTS) -> str:
    """Human-readable note for a non-ASCII character with its suggested fix."""
    known = replacements.get(char)
    if known is not None:
        label, replacement = known
        return f'"{char}" ({label} - use {replacement} instead)'
    return f'"{char}" (Unicode U+{ord(char):04X})'
