"""Length-preserving masks."""

from __future__ import annotations

MASK_CHAR = "*"


def mask(value: str) -> str:
    """Return a run of ``MASK_CHAR`` as long as ``value``."""
    return MASK_CHAR * len(value)
