"""Dict config loader for keyword-redactor.

Supports a plain dict, either flat or nested under a ``keyword_redactor``
key (for embedding in a larger application config):

    {
        "keyword_redactor": {
            "enabled": True,
            "keywords": [["cardnumber", 16], "cvv", "exp"],
            "allow_list": ["000"],
        }
    }

``keywords`` takes anything :meth:`KeywordRegistry.from_config` accepts and
defaults to the stock card-data table.
"""

from __future__ import annotations
from typing import Any

from .redactor import Redactor, RedactorConfig
from .registry import KeywordRegistry
from .types import RedactionResult


class _NoopRedactor:
    """Pass-through redactor when redaction is disabled."""
    def __init__(self) -> None:
        self.config = RedactorConfig(keywords=KeywordRegistry())
    @property
    def keywords(self) -> KeywordRegistry:
        return self.config.keywords
    def redact(self, text: str) -> RedactionResult:
        return RedactionResult(text=text)
    def redact_text(self, text: str) -> str:
        return text


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict."""
    # Support nested under "keyword_redactor" key or flat
    if "keyword_redactor" in data:
        data = data["keyword_redactor"] or {}

    return {
        "enabled": bool(data.get("enabled", True)),
        "keywords": KeywordRegistry.from_config(data.get("keywords")),
        "allow_list": set(data.get("allow_list") or []),
    }


def create_redactor(config: dict[str, Any] | None = None) -> Redactor:
    """Create a configured redactor from a config dict."""
    cfg = load_config(config or {})

    if not cfg["enabled"]:
        return _NoopRedactor()

    return Redactor(RedactorConfig(
        keywords=cfg["keywords"],
        allow_list=cfg["allow_list"],
    ))
