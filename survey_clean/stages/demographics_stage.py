"""Demographic stage - recode raw demographic answers into clean categories."""

from typing import Dict, Iterable

import numpy as np
import pandas as pd

from ..config import AGE_BREAKS, AGE_LABELS
from ..models.demographics import (
    SEX_VALUES, EDUCATION_MAP, EDUCATION_LEVELS, EMPLOYMENT_MAP, COUNTRY_ALIASES
)
from ..text_processing import clean_text
from ..utils.data_utils import to_number


def bucket_age(age: pd.Series) -> pd.Series:
    """Bucket numeric ages into the fixed ranges, upper bound inclusive.

    25 falls in "18-25" and 26 in "26-35". Missing ages give a missing bucket.
    """
    bins = [-np.inf] + AGE_BREAKS + [np.inf]
    return pd.cut(age, bins=bins, labels=AGE_LABELS, right=True)


def recode_valid_set(series: pd.Series, valid: Iterable[str]) -> pd.Series:
    """Keep values from a declared valid set; anything else becomes missing."""
    valid = set(valid)
    cleaned = series.map(clean_text)
    return cleaned.where(cleaned.isin(valid), np.nan)


def recode_mapped(series: pd.Series, mapping: Dict[str, str]) -> pd.Series:
    """Map raw answers through a lookup table; unmapped answers become missing."""
    return series.map(clean_text).map(mapping)


def recode_country(series: pd.Series) -> pd.Series:
    cleaned = series.map(clean_text)
    return cleaned.map(lambda v: COUNTRY_ALIASES.get(v, v) if v is not None else np.nan)


def recode_demographics(df: pd.DataFrame) -> pd.DataFrame:
    """Add the cleaned demographic columns.

    Args:
        df: Table after temporal derivation

    Returns:
        Table with age_numeric, age_group, sex_clean, education_clean,
        employment_clean and country_clean added
    """
    out = df.copy()
    out["age_numeric"] = to_number(out["age"])
    out["age_group"] = bucket_age(out["age_numeric"])
    out["sex_clean"] = recode_valid_set(out["sex"], SEX_VALUES)
    out["education_clean"] = pd.Categorical(
        recode_mapped(out["education"], EDUCATION_MAP), categories=list(EDUCATION_LEVELS), ordered=True
    )
    out["employment_clean"] = recode_mapped(out["employment"], EMPLOYMENT_MAP)
    out["country_clean"] = recode_country(out["country"])
    return out
