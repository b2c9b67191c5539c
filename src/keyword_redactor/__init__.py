"""Keyword Redactor: mask the values that follow sensitive-data labels."""

from .redactor import Redactor, RedactorConfig, redact
from .registry import DEFAULT_KEYWORDS, KeywordRegistry
from .locator import locate
from .extractor import extract
from .masker import mask
from .config import create_redactor, load_config
from .logging_utils import RedactingFilter, configure_logging
from .types import KeywordSpec, Occurrence, ExtractedValue, RedactionResult

__all__ = [
    "redact", "Redactor", "RedactorConfig",
    "KeywordRegistry", "DEFAULT_KEYWORDS",
    "locate", "extract", "mask",
    "create_redactor", "load_config",
    "RedactingFilter", "configure_logging",
    "KeywordSpec", "Occurrence", "ExtractedValue", "RedactionResult",
]
__version__ = "0.1.0"
