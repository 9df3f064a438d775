"""Pure projection of classified lines into preview HTML and plain text.

All functions accept and return strings -- no file I/O.
The tools layer is responsible for reading/writing files.
"""

from __future__ import annotations

import html
from typing import Dict, Iterable

from .line_classifier import LineKind, LineRecord, classify

DEFAULT_THEME = "modern"

# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------

_BASE_CSS = """
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { background: #f4f4f5; }
        .resume-preview { max-width: 800px; margin: 0 auto; padding: 40px; background: #fff; color: #222; }
        .resume-preview .contact-info { text-align: center; }
"""

PREVIEW_THEMES: Dict[str, str] = {
    "classic": _BASE_CSS
    + """
        .theme-classic { font-family: "Times New Roman", Times, serif; line-height: 1.5; }
        .theme-classic h1 { font-size: 2em; text-align: center; text-transform: uppercase; }
        .theme-classic h2 { font-size: 1.1em; margin-top: 1.2em; border-bottom: 1px solid #000; text-transform: uppercase; }
        .theme-classic p { margin-bottom: 0.4em; }
""",
    "modern": _BASE_CSS
    + """
        .theme-modern { font-family: Calibri, Arial, sans-serif; line-height: 1.6; }
        .theme-modern h1 { font-size: 2.2em; text-align: center; color: #1e3a8a; }
        .theme-modern h2 { font-size: 1.2em; margin-top: 1.5em; color: #1e3a8a; border-bottom: 2px solid #93c5fd; }
        .theme-modern p { margin-bottom: 0.6em; }
        .theme-modern .contact-info { color: #555; }
""",
    "compact": _BASE_CSS
    + """
        .theme-compact { font-family: Arial, Helvetica, sans-serif; font-size: 0.9em; line-height: 1.3; }
        .theme-compact h1 { font-size: 1.6em; }
        .theme-compact h2 { font-size: 1em; margin-top: 0.8em; border-bottom: 1px solid #ccc; }
        .theme-compact p { margin-bottom: 0.2em; }
        .theme-compact .contact-info { text-align: left; }
""",
}

_TEMPLATES: Dict[LineKind, str] = {
    LineKind.SECTION_HEADING: "<h2>{}</h2>",
    LineKind.NAME_HEADING: "<h1>{}</h1>",
    LineKind.CONTACT_INFO: '<p class="contact-info">{}</p>',
    LineKind.BODY: "<p>{}</p>",
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_fragment(record: LineRecord) -> str:
    """Render a single :class:`LineRecord` as an HTML fragment."""
    if record.kind is LineKind.BLANK:
        return "<br>"
    return _TEMPLATES[record.kind].format(html.escape(record.trimmed_text))


def render_preview_html(records: Iterable[LineRecord]) -> str:
    """Render records in order, one fragment per line."""
    return "\n".join(render_fragment(r) for r in records)


def render_preview_document(text: str, theme: str = DEFAULT_THEME) -> str:
    """Classify *text* and wrap its preview in a standalone HTML document.

    *theme* selects one of :data:`PREVIEW_THEMES`; unknown names raise
    ``ValueError``.
    """
    if theme not in PREVIEW_THEMES:
        raise ValueError(f"Unknown theme '{theme}'. Expected one of: {', '.join(PREVIEW_THEMES)}")

    body = render_preview_html(classify(text))

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '    <meta charset="UTF-8">\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        "    <title>Resume</title>\n"
        "    <style>\n"
        f"{PREVIEW_THEMES[theme]}\n"
        "    </style>\n"
        "</head>\n"
        "<body>\n"
        f'    <div class="resume-preview theme-{theme}">\n'
        f"{body}\n"
        "    </div>\n"
        "</body>\n"
        "</html>"
    )


def render_plain_text(text: str) -> str:
    """Plain-text export is the edited resume, verbatim."""
    return text