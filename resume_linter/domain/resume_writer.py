"""Pure domain logic for rendering a :class:`ParsedResume`.

All functions accept a model and return strings -- no file I/O.
The CLI and web layers are responsible for writing output.
"""

from __future__ import annotations

import html
import json
from typing import List

from .models import STRUCTURED_KINDS, Item, ParsedResume, Section, SectionKind

CONTACT_SEPARATOR = " • "

# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def parsed_resume_to_json(doc: ParsedResume) -> str:
    """Serialize *doc* to stable, human-readable JSON."""
    return json.dumps(doc.to_dict(), indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

#: Minimal CSS for standalone documents.
_FALLBACK_CSS = """
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { font-family: sans-serif; line-height: 1.6; color: #333; }
        .formatted-resume { max-width: 800px; margin: 0 auto; padding: 40px; }
        .resume-name { font-size: 2em; font-weight: bold; }
        .resume-contact { color: #555; margin-bottom: 0.8em; }
        .section-title { font-size: 1.2em; font-weight: bold; margin-top: 1.5em; border-bottom: 1px solid #ccc; }
        .item-header { display: flex; justify-content: space-between; margin-top: 0.6em; }
        .job-title { font-weight: bold; }
        .company-name { font-style: italic; }
        .date-range { color: #555; white-space: nowrap; }
        .skill-item { display: inline-block; margin: 0.2em 0.4em 0.2em 0; padding: 0 0.4em; border: 1px solid #ddd; }
"""


def format_as_html(doc: ParsedResume) -> str:
    """Render *doc* as an HTML fragment rooted at ``div.formatted-resume``."""
    out: List[str] = ['<div class="formatted-resume">']

    out.append('  <div class="resume-header">')
    out.append(f'    <div class="resume-name">{_escape_html(doc.header.name)}</div>')
    contact = doc.header.contact_fields()
    if contact:
        out.append('    <div class="resume-contact">')
        out.append(f"      {_escape_html(CONTACT_SEPARATOR.join(contact))}")
        out.append("    </div>")
    out.append("  </div>")
    out.append("")

    for section in doc.sections:
        out.append('  <div class="resume-section">')
        out.append(f'    <div class="section-title">{_escape_html(section.title)}</div>')
        out.extend(_html_section_body(section))
        out.append("  </div>")
        out.append("")

    out.append("</div>")
    return "\n".join(out)


def format_as_html_document(doc: ParsedResume, css: str | None = None) -> str:
    """Wrap :func:`format_as_html` in a standalone HTML document.

    *css* is injected into a ``<style>`` tag.  Falls back to
    ``_FALLBACK_CSS`` when *css* is ``None``.
    """
    styles = css if css is not None else _FALLBACK_CSS
    title = _escape_html(doc.header.name) or "Resume"

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '    <meta charset="UTF-8">\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"    <title>{title}</title>\n"
        "    <style>\n"
        f"{styles}\n"
        "    </style>\n"
        "</head>\n"
        "<body>\n"
        f"{format_as_html(doc)}\n"
        "</body>\n"
        "</html>"
    )


def _html_section_body(section: Section) -> List[str]:
    if section.kind is SectionKind.SKILLS:
        out = ['    <div class="skills-list">']
        out.extend(f'      <span class="skill-item">{_escape_html(item.title)}</span>' for item in section.items)
        out.append("    </div>")
        return out

    if section.kind in STRUCTURED_KINDS and section.items:
        css_class = "education-item" if section.kind is SectionKind.EDUCATION else "experience-item"
        out = []
        for item in section.items:
            out.extend(_html_item(item, css_class))
        return out

    content = _escape_html(section.content).replace("\n", "<br>")
    return [f'    <div class="section-content">{content}</div>']


def _html_item(item: Item, css_class: str) -> List[str]:
    out = [
        f'    <div class="{css_class}">',
        '      <div class="item-header">',
        "        <div>",
        f'          <div class="job-title">{_escape_html(item.title)}</div>',
    ]
    if item.subtitle:
        out.append(f'          <div class="company-name">{_escape_html(item.subtitle)}</div>')
    out.append("        </div>")
    if item.date_range:
        out.append(f'        <div class="date-range">{_escape_html(item.date_range)}</div>')
    out.append("      </div>")

    if item.description:
        out.append('      <ul class="description">')
        out.extend(f"        <li>{_escape_html(line)}</li>" for line in item.description)
        out.append("      </ul>")
    out.append("    </div>")
    return out


def _escape_html(text: str) -> str:
    return html.escape(text, quote=True)


# ---------------------------------------------------------------------------
# RTF
# ---------------------------------------------------------------------------

# Font sizes are RTF half-points.
RTF_NAME_SIZE = 28
RTF_TITLE_SIZE = 20
RTF_BODY_SIZE = 18

_RTF_PROLOG = "{\\rtf1\\ansi\\deff0 {\\fonttbl {\\f0 Times New Roman;}}"


def format_as_rtf(doc: ParsedResume) -> str:
    """Render *doc* as a minimal single-font RTF document."""
    body = f"\\fs{RTF_BODY_SIZE}"
    out: List[str] = [_RTF_PROLOG]

    out.append(f"\\f0\\fs{RTF_NAME_SIZE}\\b {escape_rtf(doc.header.name)}\\b0\\par")
    out.append(f"\\fs{RTF_TITLE_SIZE}\\par")
    contact = doc.header.contact_fields()
    if contact:
        out.append(f"{body} {escape_rtf(CONTACT_SEPARATOR.join(contact))}\\par")
    out.append("\\par")

    for section in doc.sections:
        out.append(f"\\fs{RTF_TITLE_SIZE}\\b {escape_rtf(section.title)}\\b0\\par")
        out.append("\\par")

        if section.kind is SectionKind.SKILLS:
            skills = ", ".join(item.title for item in section.items)
            out.append(f"{body} {escape_rtf(skills)}\\par")
        elif section.items:
            for item in section.items:
                line = f"{body}\\b {escape_rtf(item.title)}\\b0"
                details = [d for d in (item.subtitle, item.date_range) if d]
                if details:
                    line += f" - {escape_rtf(' | '.join(details))}"
                out.append(line + "\\par")
                out.extend(f"{body} \\bullet  {escape_rtf(desc)}\\par" for desc in item.description)
                out.append("\\par")
        elif section.content:
            out.extend(
                f"{body} {escape_rtf(paragraph)}\\par" for paragraph in section.content.split("\n") if paragraph.strip()
            )
        out.append("\\par")

    out.append("}")
    return "".join(out)


def escape_rtf(text: str) -> str:
    """Escape RTF control characters; non-ASCII becomes ``\\uN?`` escapes."""
    out: List[str] = []
    for char in text.replace("\r", ""):
        if char in "\\{}":
            out.append("\\" + char)
        elif char == "\n":
            out.append("\\par ")
        elif ord(char) > 127:
            code = ord(char)
            # \uN takes a signed 16-bit value; astral characters are written as surrogate pairs.
            if code > 0xFFFF:
                code -= 0x10000
                out.append(f"\\u{_signed16(0xD800 + (code >> 10))}?\\u{_signed16(0xDC00 + (code & 0x3FF))}?")
            else:
                out.append(f"\\u{_signed16(code)}?")
        else:
            out.append(char)
    return "".join(out)


def _signed16(code: int) -> int:
    return code - 0x10000 if code > 0x7FFF else code
