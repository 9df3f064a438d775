"""Pure domain logic for keyword coverage of a resume.

All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Set


@dataclass
class KeywordCoverage:
    """Which of the requested keywords the resume already mentions."""

    present: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)

    @property
    def ratio(self) -> float:
        total = len(self.present) + len(self.missing)
        return len(self.present) / total if total else 1.0


def keyword_coverage(text: str, keywords: Iterable[str]) -> KeywordCoverage:
    """Split *keywords* into those found in *text* and those that are not.

    Matching is case-insensitive on whole words/phrases, so ``"Go"`` does
    not match ``"good"``. Input order is kept, blank entries are skipped
    and case-insensitive duplicates collapse onto their first spelling.
    """
    result = KeywordCoverage()
    seen: Set[str] = set()

    for raw in keywords:
        keyword = raw.strip()
        key = keyword.lower()
        if not keyword or key in seen:
            continue
        seen.add(key)

        if _contains_phrase(text, keyword):
            result.present.append(keyword)
        else:
            result.missing.append(keyword)

    return result


def _contains_phrase(text: str, phrase: str) -> bool:
    # \b fails next to symbols like "C++", so guard with non-word lookarounds instead.
    pattern = r"(?<!\w)" + r"\s+".join(re.escape(p) for p in phrase.split()) + r"(?!\w)"
    return re.search(pattern, text, flags=re.IGNORECASE) is not None
