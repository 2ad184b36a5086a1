"""Shared text helpers used by the entity presentation methods."""

from __future__ import annotations

import re
from typing import Final

_WHITESPACE: Final = re.compile(r"\s+")

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def capitalize_first(text: str, *, fallback: str = "Unknown") -> str:
    """Upper-case the first character only; *fallback* when *text* is empty."""
    if not text:
        return fallback
    return text[0].upper() + text[1:]


def text_preview(text: str, max_length: int = 100) -> str:
    """Truncate *text* to *max_length* characters, appending ``...`` when cut."""
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}..."


def word_count(text: str) -> int:
    """Count whitespace-separated words; empty text counts as one word."""
    return len(_WHITESPACE.split(text.strip()))


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return ``"1 Hotspot"`` / ``"2 Hotspots"`` style counters."""
    word = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {word}"

__all__ = ["capitalize_first", "text_preview", "word_count", "pluralize"]
