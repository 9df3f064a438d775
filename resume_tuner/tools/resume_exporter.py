"""Export a resume to plain text or a styled HTML preview.

Wraps the pure projection functions from :mod:`resume_tuner.domain.preview`
and writes the result to disk. Deterministic -- no LLM involved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Tuple

from ..domain.preview import DEFAULT_THEME, render_plain_text, render_preview_document
from ..errors import UnsupportedFormatError

logger = logging.getLogger(__name__)

EXPORT_FORMATS: Tuple[str, ...] = (".txt", ".md", ".html")


@dataclass
class ExportResult:
    path: Path
    format: str
    size: int


def render_export(text: str, suffix: str, theme: str = DEFAULT_THEME) -> str:
    """Render *text* for the given export *suffix* without touching disk."""
    converters: Dict[str, Callable[[str], str]] = {
        ".txt": render_plain_text,
        ".md": render_plain_text,
        ".html": lambda c: render_preview_document(c, theme=theme),
    }
    converter = converters.get(suffix.lower())
    if converter is None:
        raise UnsupportedFormatError(suffix, EXPORT_FORMATS)
    return converter(text)


def export_resume(text: str, path: str | Path, theme: str = DEFAULT_THEME) -> ExportResult:
    """Write *text* to *path*; the suffix decides the format."""
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    output = render_export(text, suffix, theme=theme)

    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(output, encoding="utf-8")
    logger.info("Exported resume to %s (%d chars)", file_path, len(output))

    return ExportResult(path=file_path, format=suffix, size=len(output))
