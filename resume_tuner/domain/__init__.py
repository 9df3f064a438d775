"""Resume Tuner Domain - Pure logic for classifying and previewing resumes.

This package contains pure functions with no file system or LLM dependencies.
All I/O is handled by the tools layer; this package operates on strings and records.
"""

from .format_check import STATIC_GUIDANCE, FormatCheckItem, FormatCheckResult, check_format, format_check_report
from .keywords import KeywordCoverage, keyword_coverage
from .line_classifier import (
    KNOWN_SECTION_HEADINGS,
    LineKind,
    LineRecord,
    classify,
    is_section_heading,
    looks_like_contact_info,
    name_heading,
    section_headings,
)
from .preview import (
    DEFAULT_THEME,
    PREVIEW_THEMES,
    render_fragment,
    render_plain_text,
    render_preview_document,
    render_preview_html,
)

__all__ = [
    # Line classifier
    "classify",
    "LineKind",
    "LineRecord",
    "KNOWN_SECTION_HEADINGS",
    "is_section_heading",
    "looks_like_contact_info",
    "name_heading",
    "section_headings",
    # Preview
    "DEFAULT_THEME",
    "PREVIEW_THEMES",
    "render_fragment",
    "render_preview_html",
    "render_preview_document",
    "render_plain_text",
    # Format check
    "check_format",
    "format_check_report",
    "FormatCheckItem",
    "FormatCheckResult",
    "STATIC_GUIDANCE",
    # Keywords
    "keyword_coverage",
    "KeywordCoverage",
]
