"""Find standalone keyword occurrences.

A keyword matches only as a whole token: it may not be touched by a letter,
digit or underscore on either side, so ``exp`` matches ``exp: 04/25`` but not
``expiry`` and ``cvv`` does not match ``cvv_code``.  Matching is
case-insensitive.
"""

from __future__ import annotations
import re
from functools import lru_cache

from .types import KeywordSpec, Occurrence


@lru_cache(maxsize=256)
def keyword_pattern(name: str) -> re.Pattern[str]:
    """Compile the standalone-token pattern for a keyword."""
    return re.compile(
        r"(?<![A-Za-z0-9_])" + re.escape(name) + r"(?![A-Za-z0-9_])",
        re.IGNORECASE,
    )


def locate(text: str, keyword: str | KeywordSpec) -> list[int]:
    """Return the offset just past every occurrence of ``keyword``, left to right."""
    name = keyword.name if isinstance(keyword, KeywordSpec) else keyword
    if not name or not text:
        return []
    return [m.end() for m in keyword_pattern(name).finditer(text)]


def find_occurrences(text: str, spec: KeywordSpec) -> list[Occurrence]:
    return [Occurrence(keyword=spec, end=end) for end in locate(text, spec)]
