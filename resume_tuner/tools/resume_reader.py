"""Resume reader - extract plain text from uploaded resume files."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

from ..errors import ResumeReadError, UnsupportedFormatError

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS: Tuple[str, ...] = (".pdf", ".docx", ".txt", ".md")


@dataclass
class ExtractedResume:
    """Plain text pulled out of a resume file."""

    text: str
    format: str
    metadata: Dict[str, Any] = field(default_factory=dict)


def read_resume_file(path: str | Path) -> ExtractedResume:
    """Read the resume at *path* and return its text."""
    file_path = Path(path)
    if not file_path.exists():
        raise ResumeReadError(f"File not found: {path}")
    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise ResumeReadError(f"Could not read {path}: {e.strerror or e}") from e
    return read_resume_bytes(data, file_path.name)


def read_resume_bytes(data: bytes, filename: str) -> ExtractedResume:
    """Extract text from raw file *data*; the format comes from *filename*'s suffix.

    Line separators are normalized to ``"\\n"``.
    """
    suffix = Path(filename).suffix.lower()
    if suffix not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(suffix, SUPPORTED_FORMATS)

    try:
        if suffix == ".pdf":
            text, metadata = _parse_pdf(data)
        elif suffix == ".docx":
            text, metadata = _parse_docx(data)
        else:
            text, metadata = _parse_text(data)
    except ResumeReadError:
        raise
    except Exception as e:
        logger.warning("Failed to read %s: %s", filename, e)
        raise ResumeReadError(f"Could not read {filename}: {e}") from e

    return ExtractedResume(text=normalize_newlines(text), format=suffix, metadata=metadata)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _parse_pdf(data: bytes) -> Tuple[str, dict]:
    """Parse PDF bytes using PyMuPDF."""
    import fitz  # PyMuPDF

    doc = fitz.open(stream=data, filetype="pdf")
    try:
        metadata = {
            "pages": len(doc),
            "title": (doc.metadata or {}).get("title", ""),
            "author": (doc.metadata or {}).get("author", ""),
        }
        text_parts = [page.get_text() for page in doc]
    finally:
        doc.close()

    return "\n".join(text_parts), metadata


def _parse_docx(data: bytes) -> Tuple[str, dict]:
    """Parse DOCX bytes using python-docx."""
    from docx import Document

    doc = Document(io.BytesIO(data))
    text_parts = [para.text for para in doc.paragraphs if para.text.strip()]

    # Also extract from tables
    for table in doc.tables:
        for row in table.rows:
            row_text = "\t".join(cell.text.strip() for cell in row.cells if cell.text.strip())
            if row_text:
                text_parts.append(row_text)

    metadata = {
        "paragraphs": len(doc.paragraphs),
        "tables": len(doc.tables),
    }
    return "\n".join(text_parts), metadata


def _parse_text(data: bytes) -> Tuple[str, dict]:
    """Decode plain text or Markdown."""
    try:
        content = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ResumeReadError("Text file is not valid UTF-8") from e
    metadata = {
        "lines": content.count("\n") + 1,
        "characters": len(content),
    }
    return content, metadata
