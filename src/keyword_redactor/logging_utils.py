"""Logging configuration helpers with keyword-value masking."""

from __future__ import annotations

import logging

from .redactor import Redactor

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class RedactingFilter(logging.Filter):
    """Filter that masks keyword values in log records."""

    def __init__(self, redactor: Redactor | None = None):
        super().__init__()
        self._redactor = redactor or Redactor()

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        message = record.getMessage()
        sanitized = self._redactor.redact_text(message)
        if sanitized != message:
            record.msg = sanitized
            record.args = ()
        return True


def configure_logging(level_name: str, redactor: Redactor | None = None) -> logging.Handler:
    """Configure root logging on stderr with keyword masking."""

    numeric_level = getattr(logging, (level_name or "WARNING").upper(), logging.WARNING)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    handler.addFilter(RedactingFilter(redactor))

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(numeric_level)

    logging.captureWarnings(True)
    return handler
