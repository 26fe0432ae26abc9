"""Single-pass enrichment of a normalized survey table."""

import pandas as pd

from .config import DEFAULT_DURATION_FIELD, MIN_DURATION_SECONDS, MAX_MISSING_ANSWERS
from .stages import (
    derive_temporal, recode_demographics, encode_ordinals, decompose_all,
    score_composites, flag_quality
)


def enrich(
    df: pd.DataFrame,
    duration_field: str = DEFAULT_DURATION_FIELD,
    min_duration: float = MIN_DURATION_SECONDS,
    max_missing: int = MAX_MISSING_ANSWERS,
) -> pd.DataFrame:
    """Run the temporal through quality stages, in order.

    Args:
        df: Normalized table from the ingest stage
        duration_field: Internal name of the duration-in-seconds column
        min_duration: Speed threshold in seconds
        max_missing: Missing-answer threshold

    Returns:
        Enriched table with every derived column and quality_flag
    """
    df = derive_temporal(df, duration_field)
    df = recode_demographics(df)
    df = encode_ordinals(df)
    df = decompose_all(df)
    df = score_composites(df)
    df = flag_quality(df, duration_field=duration_field, min_duration=min_duration, max_missing=max_missing)

    counts = df["quality_flag"].value_counts()
    summary = " ".join(f"{flag}={int(n):,}" for flag, n in counts.items())
    print(f"[quality] Triage → {summary}")
    return df
