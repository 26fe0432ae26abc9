"""Quality stage - flag each response as good or by the first failed check."""

import os
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from ..config import (
    ATTENTION_PASS_VALUE, MIN_DURATION_SECONDS, MAX_MISSING_ANSWERS, DEFAULT_DURATION_FIELD,
    FLAG_FAILED_ATTENTION, FLAG_TOO_FAST, FLAG_HIGH_MISSING, FLAG_GOOD, QUALITY_FLAGS,
    QUALITY_LOG_FILENAME,
)
from ..models.columns import group_columns
from ..utils.data_utils import to_number, count_missing
from ..utils.logging import write_jsonl

ATTENTION_COLUMNS = ["attention_check_1", "attention_check_2"]


def flag_quality(
    df: pd.DataFrame,
    duration_field: str = DEFAULT_DURATION_FIELD,
    min_duration: float = MIN_DURATION_SECONDS,
    max_missing: int = MAX_MISSING_ANSWERS,
    missing_columns: Optional[List[str]] = None,
) -> pd.DataFrame:
    """Assign exactly one quality flag per row.

    Checks run in priority order and the first failing one wins:
    failed_attention, too_fast, high_missing, otherwise good. A missing
    attention check counts as failed; a missing duration is never too fast.

    Args:
        df: Enriched table
        duration_field: Column holding the duration in seconds
        min_duration: Responses faster than this many seconds are too fast
        max_missing: Responses with more missing answers than this are high_missing
        missing_columns: Columns counted for missingness, defaults to the
            ``missingness`` group

    Returns:
        Table with missing_count and quality_flag added
    """
    out = df.copy()
    if missing_columns is None:
        missing_columns = group_columns("missingness")

    attention_ok = np.ones(len(out), dtype=bool)
    for col in ATTENTION_COLUMNS:
        attention_ok &= (to_number(out[col]) == ATTENTION_PASS_VALUE).to_numpy()
    too_fast = (to_number(out[duration_field]) < min_duration).to_numpy()

    out["missing_count"] = count_missing(out, missing_columns)
    high_missing = (out["missing_count"] > max_missing).to_numpy()

    flags = np.select(
        [~attention_ok, too_fast, high_missing],
        [FLAG_FAILED_ATTENTION, FLAG_TOO_FAST, FLAG_HIGH_MISSING],
        default=FLAG_GOOD,
    )
    out["quality_flag"] = pd.Categorical(flags, categories=QUALITY_FLAGS)
    return out


def quality_log_records(df: pd.DataFrame, duration_field: str = DEFAULT_DURATION_FIELD) -> List[Dict[str, Any]]:
    """Build one audit record per rejected row."""
    rejected = df[df["quality_flag"] != FLAG_GOOD]
    records = []
    for _, row in rejected.iterrows():
        duration = row[duration_field]
        records.append({
            "stage": "quality",
            "response_id": None if pd.isna(row["response_id"]) else str(row["response_id"]),
            "quality_flag": str(row["quality_flag"]),
            "duration_seconds": None if pd.isna(duration) else float(duration),
            "missing_count": int(row["missing_count"]),
            "accepted": False,
        })
    return records


def write_quality_log(df: pd.DataFrame, log_dir: str, duration_field: str = DEFAULT_DURATION_FIELD) -> int:
    """Write the rejected-row audit log and return the number of records."""
    records = quality_log_records(df, duration_field)
    if records:
        write_jsonl(os.path.join(log_dir, QUALITY_LOG_FILENAME), records)
    return len(records)
