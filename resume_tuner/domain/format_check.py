"""Format check: static ATS guidance plus findings from the line classifier.

All functions operate on classified records -- no file I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .line_classifier import LineKind, LineRecord, section_headings

SEVERITY_OK = "ok"
SEVERITY_WARNING = "warning"

SOURCE_GUIDANCE = "guidance"
SOURCE_CLASSIFIER = "classifier"

#: Fewer detected headings than this produces a warning.
MIN_SECTION_HEADINGS = 2


@dataclass(frozen=True)
class FormatCheckItem:
    """A single advisory shown in the format check list."""

    title: str
    description: str
    severity: str = SEVERITY_OK
    source: str = SOURCE_GUIDANCE


@dataclass
class FormatCheckResult:
    """Structured result from :func:`check_format`."""

    items: List[FormatCheckItem] = field(default_factory=list)
    section_count: int = 0
    has_name: bool = False
    has_contact_info: bool = False

    @property
    def warnings(self) -> List[FormatCheckItem]:
        return [i for i in self.items if i.severity == SEVERITY_WARNING]


STATIC_GUIDANCE: tuple[FormatCheckItem, ...] = (
    FormatCheckItem(
        title="Use Standard Fonts",
        description=(
            "Stick to common fonts like Arial, Calibri, or Times New Roman. "
            "Our previews use ATS-friendly fonts."
        ),
    ),
    FormatCheckItem(
        title="Avoid Columns and Tables",
        description=(
            "Complex layouts can confuse ATS. A single-column format is safest. "
            "This editor encourages a single-column layout."
        ),
    ),
    FormatCheckItem(
        title="Use Standard Section Headers",
        description=(
            "Use conventional headers like 'Experience', 'Education', and 'Skills'. "
            "Our preview parser looks for these."
        ),
    ),
    FormatCheckItem(
        title="Be Mindful of Special Characters",
        description="Excessive use of special characters or symbols can sometimes cause parsing errors.",
        severity=SEVERITY_WARNING,
    ),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_format(records: Sequence[LineRecord]) -> FormatCheckResult:
    """Build the format check list for already-classified *records*.

    The static guidance always comes first; findings derived from the
    classification follow it.
    """
    headings = section_headings(records)
    has_name = any(r.kind is LineKind.NAME_HEADING for r in records)
    has_contact = any(r.kind is LineKind.CONTACT_INFO for r in records)

    findings: List[FormatCheckItem] = []

    if not has_name:
        findings.append(
            _finding(
                "Name Not Detected",
                "Put your name alone on one of the first three lines, in fewer than four words.",
                SEVERITY_WARNING,
            )
        )
    if not has_contact:
        findings.append(
            _finding(
                "Contact Info Not Detected",
                "Add an email address or phone number near the top of the resume.",
                SEVERITY_WARNING,
            )
        )
    if len(headings) < MIN_SECTION_HEADINGS:
        findings.append(
            _finding(
                "Few Standard Section Headers",
                f"Only {len(headings)} standard section header(s) recognized. "
                "Put headers like 'Experience' or 'Skills' on their own line.",
                SEVERITY_WARNING,
            )
        )
    else:
        findings.append(
            _finding(
                "Section Headers Recognized",
                f"Detected: {', '.join(headings)}.",
                SEVERITY_OK,
            )
        )

    return FormatCheckResult(
        items=list(STATIC_GUIDANCE) + findings,
        section_count=len(headings),
        has_name=has_name,
        has_contact_info=has_contact,
    )


def format_check_report(result: FormatCheckResult) -> str:
    """Render a :class:`FormatCheckResult` as a human-readable report."""
    lines = ["## Format Check", ""]
    for item in result.items:
        marker = "!" if item.severity == SEVERITY_WARNING else "+"
        lines.append(f"[{marker}] {item.title}")
        lines.append(f"    {item.description}")
    lines.append("")
    lines.append(
        f"Sections: {result.section_count} | "
        f"Name: {'yes' if result.has_name else 'no'} | "
        f"Contact: {'yes' if result.has_contact_info else 'no'}"
    )
    return "\n".join(lines)


def _finding(title: str, description: str, severity: str) -> FormatCheckItem:
    return FormatCheckItem(title=title, description=description, severity=severity, source=SOURCE_CLASSIFIER)
