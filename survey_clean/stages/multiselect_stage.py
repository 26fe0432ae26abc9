"""Multi-select stage - decompose delimited answers into indicator columns."""

from typing import List

import pandas as pd

from ..models.multiselect import MultiSelectField, MULTISELECT_FIELDS
from ..text_processing import contains_any


def decompose_multiselect(df: pd.DataFrame, field: MultiSelectField) -> pd.DataFrame:
    """Add one 0/1 column per indicator plus the indicator count.

    A missing answer sets every indicator to 0 rather than missing.

    Args:
        df: Input table
        field: Multi-select question declaration

    Returns:
        Table with the indicator and count columns added
    """
    out = df.copy()
    for ind in field.indicators:
        out[ind.name] = contains_any(out[field.source], ind.patterns).astype(int)
    out[field.count_column] = out[field.indicator_names].sum(axis=1).astype(int)
    return out


def decompose_all(df: pd.DataFrame, fields: List[MultiSelectField] = MULTISELECT_FIELDS) -> pd.DataFrame:
    for field in fields:
        df = decompose_multiselect(df, field)
    return df
