"""Redactor: the main API.  Locate, extract, mask, keyword by keyword.

Usage:
    from keyword_redactor import Redactor, redact

    print(redact("cvv 123, exp: 04/25"))    # "cvv ***, exp: **/25"

    redactor = Redactor()                   # reusable, thread-safe after init
    result = redactor.redact("cardnumber 4111 1111 1111 1111 extra")
    print(result.text)                      # "cardnumber ******************* extra"
    print(len(result.masked))               # 1
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .extractor import extract
from .locator import find_occurrences
from .masker import mask
from .registry import KeywordConfig, KeywordRegistry
from .types import ExtractedValue, RedactionResult

logger = logging.getLogger(__name__)


@dataclass
class RedactorConfig:
    """Configuration for the Redactor."""
    keywords: KeywordRegistry = field(default_factory=KeywordRegistry.default)
    # Allow-list: values that should NEVER be masked
    allow_list: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        # Accept raw keyword configuration as well as a built registry
        self.keywords = KeywordRegistry.from_config(self.keywords)
        self.allow_list = set(self.allow_list)


class Redactor:
    """Masks the value after every configured keyword.

    Keywords are processed in registry order, each against the text as left
    by the previous ones.  Masks keep the value's length, so the offsets
    found for a keyword stay valid while its occurrences are rewritten.
    """

    def __init__(self, config: RedactorConfig | None = None) -> None:
        self.config = config or RedactorConfig()

    @property
    def keywords(self) -> KeywordRegistry:
        return self.config.keywords

    def redact(self, text: str) -> RedactionResult:
        """Mask keyword values in ``text``.  Never fails for lack of matches."""
        result = text
        seen = 0
        masked: list[ExtractedValue] = []

        for spec in self.config.keywords:
            occurrences = find_occurrences(result, spec)
            if not occurrences:
                continue
            seen += len(occurrences)

            hits = 0
            for occ in occurrences:
                value = extract(result, occ.end, spec.expected_length, keyword=spec.name)
                if value is None:
                    continue
                if value.text in self.config.allow_list:
                    continue
                result = result[:value.start] + mask(value.text) + result[value.end:]
                masked.append(value)
                hits += 1

            logger.debug(
                "Keyword %r: %d occurrence(s), %d masked",
                spec.name, len(occurrences), hits,
            )

        return RedactionResult(text=result, occurrences=seen, masked=masked)

    def redact_text(self, text: str) -> str:
        """Redact a single string (convenience)."""
        return self.redact(text).text


def redact(text: str, keywords: KeywordConfig | None = None) -> str:
    """Mask the values following ``keywords`` in ``text``.

    ``keywords`` may be a :class:`KeywordRegistry`, raw configuration (see
    :mod:`keyword_redactor.registry`), or None for the default card-data table.
    """
    return Redactor(RedactorConfig(keywords=keywords)).redact_text(text)
