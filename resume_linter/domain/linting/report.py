"""Plain-text rendering of lint diagnostics."""

from __future__ import annotations

from typing import List

from ..models import Diagnostic, Severity
from .line_refs import strip_line_anchors


def format_diagnostics_report(diagnostics: List[Diagnostic], title: str = "Resume Validation") -> str:
    """Render *diagnostics* as a markdown-ish report with anchors flattened to ``Line N``."""
    counts = {severity: 0 for severity in Severity}
    for diagnostic in diagnostics:
        counts[diagnostic.severity] += 1

    lines = [
        f"## {title}: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.PASS]} passed",
        "",
    ]
    if not diagnostics:
        lines.append("No findings (empty input).")
    for diagnostic in diagnostics:
        lines.append(f"- [{diagnostic.severity.value}] {strip_line_anchors(diagnostic.message)}")
    return "\n".join(lines)
