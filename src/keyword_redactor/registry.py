"""Keyword table: which markers to look for and how long their values are.

Configuration is an ordered collection of entries.  Each entry is either a
bare name (dynamic extraction) or a ``(name, length)`` pair (bounded
extraction of at most ``length`` word characters):

    registry = KeywordRegistry.from_config([
        ("cardnumber", 16),
        "cvv",
        "exp",
    ])

A ``{name: length}`` mapping is accepted as well.  Malformed entries are
never rejected: bad lengths fall back to dynamic, unusable names are skipped.
"""

from __future__ import annotations
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from .types import KeywordSpec

logger = logging.getLogger(__name__)

KeywordConfig = Union["KeywordRegistry", Mapping[str, Any], Iterable[Any]]

# Stock card-data markers.  Bare names use dynamic extraction.
DEFAULT_KEYWORDS: tuple[Any, ...] = (
    ("cardnumber", 16),
    "account_card_number",
    "carddatanumber",
    "cardexpiry",
    "account_expiry",
    "cardexp",
    "exp",
    "cardcvv",
    "cvv",
    "cvvcvcsecurity",
)


def normalize_length(value: Any) -> int:
    """Coerce a configured length to a non-negative int; 0 when unusable."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value > 0 else 0
    if isinstance(value, float) and value.is_integer():
        return int(value) if value > 0 else 0
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return 0


def _split_entry(entry: Any) -> tuple[Any, Any, bool]:
    """Return (name, raw_length, explicit) for one configuration entry."""
    if isinstance(entry, str):
        return entry, 0, False
    if isinstance(entry, (tuple, list)) and entry:
        if len(entry) == 1:
            return entry[0], 0, False
        return entry[0], entry[1], True
    return None, 0, False


class KeywordRegistry:
    """Immutable, ordered keyword table.

    Names are case-insensitive and stored lower-cased.  Iteration yields
    :class:`KeywordSpec` in configuration order.
    """

    __slots__ = ("_specs", "_index")

    def __init__(self, specs: Iterable[KeywordSpec] = ()) -> None:
        self._specs: tuple[KeywordSpec, ...] = tuple(specs)
        self._index: dict[str, KeywordSpec] = {s.name: s for s in self._specs}

    @classmethod
    def from_config(cls, config: KeywordConfig | None) -> "KeywordRegistry":
        """Normalize raw configuration into a registry."""
        if config is None:
            return cls.default()
        if isinstance(config, KeywordRegistry):
            return config
        if isinstance(config, Mapping):
            entries: Iterable[Any] = list(config.items())
        elif isinstance(config, str):
            entries = [config]
        elif isinstance(config, Iterable):
            entries = config
        else:
            logger.warning("Unusable keyword configuration %r; using the default table", config)
            return cls.default()

        lengths: dict[str, int] = {}      # insertion order = first appearance
        explicit: set[str] = set()
        for entry in entries:
            raw_name, raw_length, is_pair = _split_entry(entry)
            if not isinstance(raw_name, str) or not raw_name.strip():
                logger.warning("Skipping keyword entry without a usable name: %r", entry)
                continue
            name = raw_name.strip().lower()
            length = normalize_length(raw_length)
            if is_pair and length == 0 and raw_length not in (0, "0", None):
                logger.warning(
                    "Keyword %r has invalid length %r; using dynamic extraction",
                    name, raw_length,
                )

            if name in lengths:
                if not is_pair:
                    continue
                if name in explicit and lengths[name] != length:
                    logger.warning(
                        "Keyword %r configured twice (%d, %d); keeping the later length",
                        name, lengths[name], length,
                    )
            lengths[name] = length
            if is_pair:
                explicit.add(name)

        return cls(KeywordSpec(name, length) for name, length in lengths.items())

    @classmethod
    def default(cls) -> "KeywordRegistry":
        return cls.from_config(DEFAULT_KEYWORDS)

    def get(self, name: str) -> KeywordSpec | None:
        return self._index.get(name.strip().lower())

    @property
    def names(self) -> list[str]:
        return [s.name for s in self._specs]

    def as_dict(self) -> dict[str, int]:
        return {s.name: s.expected_length for s in self._specs}

    def __iter__(self) -> Iterator[KeywordSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeywordRegistry):
            return NotImplemented
        return self._specs == other._specs

    def __hash__(self) -> int:
        return hash(self._specs)

    def __repr__(self) -> str:
        return f"KeywordRegistry({self.as_dict()!r})"
