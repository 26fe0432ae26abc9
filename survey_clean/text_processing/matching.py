"""Pattern matching helpers for free and multi-select text answers."""

import re
from typing import Iterable, Optional

import pandas as pd

_cleanup_spaces = re.compile(r"\s+")


def build_pattern(patterns: Iterable[str]) -> str:
    """Build a regex alternation of literal substrings."""
    return "|".join(re.escape(p) for p in patterns)


def contains_any(series: pd.Series, patterns: Iterable[str]) -> pd.Series:
    """Test whether any pattern occurs as a substring of each cell.

    Missing cells never match.

    Args:
        series: Text column
        patterns: Literal substrings, matched case-insensitively

    Returns:
        Boolean series aligned with the input
    """
    text = series.fillna("").astype(str)
    return text.str.contains(build_pattern(patterns), case=False, regex=True)


def clean_text(value) -> Optional[str]:
    """Collapse whitespace in a text cell; blank or non-text cells become None."""
    if not isinstance(value, str):
        return None
    value = _cleanup_spaces.sub(" ", value).strip()
    return value or None


def split_selections(value, sep: str = ",") -> list:
    """Split a multi-select answer into its trimmed, non-empty selections."""
    value = clean_text(value)
    if value is None:
        return []
    return [part.strip() for part in value.split(sep) if part.strip()]
