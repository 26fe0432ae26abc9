"""Data manipulation utility functions."""

from typing import List

import pandas as pd


def to_number(series: pd.Series) -> pd.Series:
    """Parse a text column to floats; anything unparseable becomes NaN."""
    series = series.map(lambda v: v.strip() if isinstance(v, str) else v)
    return pd.to_numeric(series, errors="coerce")


def count_missing(df: pd.DataFrame, columns: List[str]) -> pd.Series:
    """Count missing cells per row over a set of columns.

    Args:
        df: Input table
        columns: Columns to inspect

    Returns:
        Integer series aligned with the table
    """
    return df[columns].isna().sum(axis=1).astype(int)
