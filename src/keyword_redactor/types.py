"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class KeywordSpec:
    """A marker keyword and its value-length policy."""
    name: str                  # lower-cased, e.g. "cvv"
    expected_length: int = 0   # 0 = dynamic, N > 0 = bounded

    @property
    def dynamic(self) -> bool:
        return self.expected_length == 0


@dataclass(frozen=True, slots=True)
class Occurrence:
    """A standalone match of a keyword; ``end`` is the offset just past it."""
    keyword: KeywordSpec
    end: int


@dataclass(frozen=True, slots=True)
class ExtractedValue:
    """A value judged sensitive, positioned in the full text."""
    text: str
    start: int
    keyword: str = ""

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(slots=True)
class RedactionResult:
    """Result of redacting a text."""
    text: str                                               # masked text
    occurrences: int = 0                                    # keyword matches seen
    masked: list[ExtractedValue] = field(default_factory=list)
