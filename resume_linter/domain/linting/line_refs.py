"""Line-anchor markup embedded in line-addressed diagnostic messages.

The editor UI turns ``Line <a href="#line-N">N</a>`` into a jump-to-line
link, so the exact markup is a compatibility contract. Build it only with
:func:`line_anchor`.
"""

from __future__ import annotations

import re

LINE_ANCHOR_RE = re.compile(r'Line <a href="#line-(\d+)">(\d+)</a>')


def line_anchor(line_number: int) -> str:
    return f'Line <a href="#line-{line_number}">{line_number}</a>'


def strip_line_anchors(message: str) -> str:
    """Replace every anchor with plain ``Line N`` text (terminal output)."""
    return LINE_ANCHOR_RE.sub(lambda m: f"Line {m.group(2)}", message)
