"""Pull the value that follows a keyword.

Values are runs of word characters joined by a single space or dot:
``123``, ``abc123``, ``4111 1111 1111 1111``, ``3.50``.  Any other character
(punctuation, newline, a second space, an asterisk) ends the value.

The value may start right after the keyword or after a gap of whitespace,
line breaks included, holding at most one label separator, as in
``cvv 123``, ``cvv: 123``, ``cvv=123`` or ``cvv\\n123``.

Bounded extraction spends a budget of ``expected_length`` word characters:
the first token is cut to the budget, later tokens are taken only while
they fit whole.  Tokens past the budget stay in plaintext, so with a
budget of 4 ``pin 12 34 56`` masks ``12 34`` and leaves ``56``.
"""

from __future__ import annotations
import re

from .types import ExtractedValue

_GAP = re.compile(r"\s*(?:[:=#\-]\s*)?", re.ASCII)
_DYNAMIC_VALUE = re.compile(r"\w+(?:[ .]\w+)*", re.ASCII)
_TOKEN = re.compile(r"\w+", re.ASCII)
_JOINED_TOKEN = re.compile(r"[ .](\w+)", re.ASCII)


def _value_start(text: str, start: int) -> int:
    gap = _GAP.match(text, start)
    return gap.end() if gap else start


def _bounded_end(text: str, pos: int, budget: int) -> int | None:
    """End offset of a bounded value starting at ``pos``, or None."""
    first = _TOKEN.match(text, pos)
    if first is None:
        return None
    width = min(len(first.group()), budget)
    end = pos + width
    if width < len(first.group()):
        return end

    used = width
    while used < budget:
        nxt = _JOINED_TOKEN.match(text, end)
        if nxt is None:
            break
        token = nxt.group(1)
        if used + len(token) > budget:
            break
        used += len(token)
        end = nxt.end()
    return end


def extract(
    text: str,
    start: int,
    expected_length: int = 0,
    keyword: str = "",
) -> ExtractedValue | None:
    """Return the first value following ``start``, or None when there is none.

    Args:
        text: Full text being redacted.
        start: Offset just past the keyword.
        expected_length: 0 for dynamic extraction, otherwise the word
            character budget of a bounded value.
        keyword: Keyword name recorded on the result.
    """
    if start < 0 or start >= len(text):
        return None
    pos = _value_start(text, start)

    if expected_length > 0:
        end = _bounded_end(text, pos, expected_length)
    else:
        m = _DYNAMIC_VALUE.match(text, pos)
        end = m.end() if m else None

    if end is None or end == pos:
        return None
    return ExtractedValue(text=text[pos:end], start=pos, keyword=keyword)
