"""Central replacement of platform sentinel strings with missing values."""

from typing import AbstractSet, Any

import numpy as np
import pandas as pd

from ..config import SENTINEL_VALUES


def is_sentinel(value: Any, sentinels: AbstractSet[str] = SENTINEL_VALUES) -> bool:
    """Check whether a cell holds a consent sentinel (exact, case-sensitive)."""
    return isinstance(value, str) and value in sentinels


def normalize_sentinels(df: pd.DataFrame, sentinels: AbstractSet[str] = SENTINEL_VALUES) -> pd.DataFrame:
    """Replace every sentinel cell in the table with missing.

    Args:
        df: Input table
        sentinels: Literal strings to treat as missing

    Returns:
        New table with sentinel cells set to NaN
    """
    out = df.copy()
    for col in out.columns:
        mask = out[col].map(lambda v: is_sentinel(v, sentinels)).astype(bool)
        if mask.any():
            out[col] = out[col].mask(mask, np.nan)
    return out
