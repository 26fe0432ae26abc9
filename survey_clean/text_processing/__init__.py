"""Text processing utilities for sentinel handling and answer matching."""

from .sentinels import is_sentinel, normalize_sentinels
from .matching import build_pattern, contains_any, clean_text, split_selections

__all__ = [
    "is_sentinel",
    "normalize_sentinels",
    "build_pattern",
    "contains_any",
    "clean_text",
    "split_selections",
]
