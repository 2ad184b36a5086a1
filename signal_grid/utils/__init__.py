"""Utility functions and helpers."""

from .datetime_utils import (  # noqa: F401
    get_current_timestamp,
    parse_timestamp,
    format_relative_time,
    format_long_relative_time,
    format_full_datetime,
)
from .text_cleaning import capitalize_first, text_preview, word_count, pluralize  # noqa: F401

__all__ = [
    "get_current_timestamp",
    "parse_timestamp",
    "format_relative_time",
    "format_long_relative_time",
    "format_full_datetime",
    "capitalize_first",
    "text_preview",
    "word_count",
    "pluralize",
]
