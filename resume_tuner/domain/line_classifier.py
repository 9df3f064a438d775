"""Line-level classification of plain-text resumes.

Splits resume text into lines and labels each one as blank, a section
heading, the candidate's name, contact info, or ordinary body text.
The result drives the styled preview and the format check.

All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

KNOWN_SECTION_HEADINGS = frozenset(
    {
        "summary",
        "experience",
        "education",
        "skills",
        "projects",
        "profile",
        "professional experience",
        "technical skills",
        "certifications",
        "work experience",
    }
)

#: Name detection only looks at the first few physical lines.
NAME_HEADING_MAX_INDEX = 3
#: Lines with this many words or more are too long to be a name.
NAME_HEADING_MAX_TOKENS = 4

_PHONE_RE = re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII)


class LineKind(str, Enum):
    BLANK = "blank"
    SECTION_HEADING = "section_heading"
    NAME_HEADING = "name_heading"
    CONTACT_INFO = "contact_info"
    BODY = "body"


@dataclass(frozen=True)
class LineRecord:
    """One classified line of resume text."""

    index: int
    raw_text: str
    trimmed_text: str
    kind: LineKind

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "raw_text": self.raw_text,
            "trimmed_text": self.trimmed_text,
            "kind": self.kind.value,
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def classify(text: str) -> List[LineRecord]:
    """Classify every line of *text*, in order.

    The empty string yields an empty list; any other string yields exactly
    one record per ``"\\n"``-separated segment. Rule priority is
    section heading, then name heading, then contact info, then body.
    At most one line is labelled as the name, and only when it sits in
    the first three lines ahead of any section heading.
    """
    if not text:
        return []

    records: List[LineRecord] = []
    name_assigned = False
    heading_seen = False

    for index, raw_line in enumerate(text.split("\n")):
        trimmed = raw_line.strip()

        if not trimmed:
            kind = LineKind.BLANK
        elif is_section_heading(trimmed):
            kind = LineKind.SECTION_HEADING
            heading_seen = True
        elif not name_assigned and not heading_seen and _could_be_name(index, trimmed):
            kind = LineKind.NAME_HEADING
            name_assigned = True
        elif looks_like_contact_info(trimmed):
            kind = LineKind.CONTACT_INFO
        else:
            kind = LineKind.BODY

        records.append(LineRecord(index=index, raw_text=raw_line, trimmed_text=trimmed, kind=kind))

    return records


def is_section_heading(line: str) -> bool:
    """True when *line* names a conventional resume section (``"Skills:"`` counts)."""
    normalized = line.strip().lower().replace(":", "")
    return normalized in KNOWN_SECTION_HEADINGS


def looks_like_contact_info(line: str) -> bool:
    """True for lines carrying an ``@`` or a North-American style phone number."""
    return "@" in line or _PHONE_RE.search(line) is not None


def name_heading(records: Sequence[LineRecord]) -> Optional[LineRecord]:
    """Return the record labelled as the candidate's name, if any."""
    for record in records:
        if record.kind is LineKind.NAME_HEADING:
            return record
    return None


def section_headings(records: Sequence[LineRecord]) -> List[str]:
    """Return the trimmed text of every section heading, in order."""
    return [r.trimmed_text for r in records if r.kind is LineKind.SECTION_HEADING]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _could_be_name(index: int, trimmed: str) -> bool:
    return index < NAME_HEADING_MAX_INDEX and len(trimmed.split()) < NAME_HEADING_MAX_TOKENS
