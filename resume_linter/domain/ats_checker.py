"""Pure domain logic for ATS (Applicant Tracking System) content checks.

All functions operate on a parsed model plus the raw text -- no file I/O.
"""

from __future__ import annotations

import logging
from typing import List, Mapping

from .models import ATSCheck, CheckCategory, ParsedResume, SectionKind, Severity
from .tables import MISSPELLINGS

logger = logging.getLogger(__name__)

MIN_RAW_LENGTH = 500

_ESSENTIAL_SECTIONS = (
    (SectionKind.EXPERIENCE, "experience", "Add a work experience or professional experience section"),
    (SectionKind.EDUCATION, "education", "Add an education section with your degrees/certifications"),
    (SectionKind.SKILLS, "skills", "Add a skills section to highlight your technical abilities"),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def perform_ats_checks(
    doc: ParsedResume,
    raw: str,
    misspellings: Mapping[str, str] = MISSPELLINGS,
) -> List[ATSCheck]:
    """Evaluate *doc* and *raw* against the ATS content rules.

    Every rule runs independently; the result lists errors, warnings and
    passes in rule order.
    """
    checks: List[ATSCheck] = []
    checks.extend(_check_contact(doc))
    checks.extend(_check_sections(doc))
    checks.extend(_check_raw_formatting(raw))
    checks.extend(_check_spelling(raw, misspellings))
    checks.extend(_check_passes(doc))
    logger.debug("ATS checks: %d findings", len(checks))
    return checks


def format_ats_report(checks: List[ATSCheck]) -> str:
    """Render ATS findings as a plain-text report."""
    counts = {severity: 0 for severity in Severity}
    for check in checks:
        counts[check.severity] += 1

    lines = [
        f"## ATS Checks: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.PASS]} passed",
        "",
    ]
    for check in checks:
        line = f"- [{check.severity.value}] ({check.category.value}) {check.message}"
        if check.suggestion:
            line += f" -- {check.suggestion}"
        lines.append(line)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Private checks
# ---------------------------------------------------------------------------


def _check_contact(doc: ParsedResume) -> List[ATSCheck]:
    checks: List[ATSCheck] = []
    if not doc.header.email:
        checks.append(
            ATSCheck(
                Severity.ERROR,
                CheckCategory.CONTENT,
                "Missing email address",
                "Add a professional email address to your resume header",
            )
        )
    if not doc.header.phone:
        checks.append(
            ATSCheck(
                Severity.WARNING,
                CheckCategory.CONTENT,
                "Missing phone number",
                "Consider adding a phone number for easy contact",
            )
        )
    return checks


def _check_sections(doc: ParsedResume) -> List[ATSCheck]:
    return [
        ATSCheck(Severity.WARNING, CheckCategory.CONTENT, f"No {label} section detected", suggestion)
        for kind, label, suggestion in _ESSENTIAL_SECTIONS
        if not doc.has_section(kind)
    ]


def _check_raw_formatting(raw: str) -> List[ATSCheck]:
    checks: List[ATSCheck] = []
    if "\t" in raw:
        checks.append(
            ATSCheck(
                Severity.WARNING,
                CheckCategory.ATS,
                "Contains tab characters",
                "Use spaces instead of tabs for better ATS compatibility",
            )
        )
    if any(ord(char) > 127 for char in raw):
        checks.append(
            ATSCheck(
                Severity.WARNING,
                CheckCategory.ATS,
                "Contains non-ASCII characters",
                "Consider using standard ASCII characters for better ATS parsing",
            )
        )
    if len(raw) < MIN_RAW_LENGTH:
        checks.append(
            ATSCheck(
                Severity.WARNING,
                CheckCategory.CONTENT,
                "Resume appears very short",
                "Consider expanding your resume with more details about your experience",
            )
        )
    return checks


def _check_spelling(raw: str, misspellings: Mapping[str, str]) -> List[ATSCheck]:
    lowered = raw.lower()
    checks: List[ATSCheck] = []
    for wrong, correct in misspellings.items():
        occurrences = lowered.count(wrong)
        if not occurrences:
            continue
        message = f'Possible misspelling: "{wrong}"'
        if occurrences > 1:
            message += f" ({occurrences} occurrences)"
        checks.append(ATSCheck(Severity.ERROR, CheckCategory.SPELLING, message, f'Did you mean "{correct}"?'))
    return checks


def _check_passes(doc: ParsedResume) -> List[ATSCheck]:
    checks: List[ATSCheck] = []
    if doc.header.email and doc.header.phone:
        checks.append(ATSCheck(Severity.PASS, CheckCategory.CONTENT, "Complete contact information provided"))
    if all(doc.has_section(kind) for kind, _, _ in _ESSENTIAL_SECTIONS):
        checks.append(ATSCheck(Severity.PASS, CheckCategory.CONTENT, "All essential resume sections present"))
    return checks
