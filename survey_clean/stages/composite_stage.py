"""Composite stage - average column groups into summary scores."""

from typing import Dict, List

import pandas as pd

from ..models.columns import COMPOSITES, group_columns


def composite_score(df: pd.DataFrame, columns: List[str]) -> pd.Series:
    """Row-wise mean over the non-missing members of ``columns``.

    Rows where every member is missing get NaN. No rounding is applied.
    """
    return df[columns].astype(float).mean(axis=1, skipna=True)


def score_composites(df: pd.DataFrame, composites: Dict[str, str] = COMPOSITES) -> pd.DataFrame:
    """Add every registered composite score.

    Args:
        df: Table with the ordinal ``_num`` columns present
        composites: Composite column -> column group name

    Returns:
        Table with the composite columns added
    """
    out = df.copy()
    for name, group in composites.items():
        out[name] = composite_score(out, group_columns(group))
    return out
