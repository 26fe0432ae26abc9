"""Ordinal stage - encode single-select attitude answers on their ordered scales."""

from typing import Dict, Tuple

import numpy as np
import pandas as pd

from ..models.scales import OrdinalScale, ORDINAL_FIELDS, ordinal_column, numeric_column


def encode_ordinal(series: pd.Series, scale: OrdinalScale) -> Tuple[pd.Categorical, pd.Series]:
    """Encode raw answers as ordered labels and 1..K positions.

    Answers that do not match a label after the scale's substitutions are
    missing in both outputs.

    Args:
        series: Raw answer column
        scale: Scale to encode against

    Returns:
        Tuple of (ordered categorical, float positions with NaN for missing)
    """
    labels = series.map(scale.match)
    cat = pd.Categorical(labels, categories=list(scale.labels), ordered=True)
    codes = np.asarray(cat.codes)
    positions = np.where(codes >= 0, codes + 1, np.nan).astype(float)
    return cat, pd.Series(positions, index=series.index)


def encode_ordinals(df: pd.DataFrame, fields: Dict[str, OrdinalScale] = ORDINAL_FIELDS) -> pd.DataFrame:
    """Add ``<field>_ord`` and ``<field>_num`` for every ordinal question."""
    out = df.copy()
    for field_name, scale in fields.items():
        cat, num = encode_ordinal(out[field_name], scale)
        out[ordinal_column(field_name)] = cat
        out[numeric_column(field_name)] = num
        unmatched = int(out[field_name].notna().sum() - num.notna().sum())
        if unmatched:
            print(f"[ordinal] {field_name}: {unmatched} answer(s) outside the {scale.name} scale set to missing")
    return out
