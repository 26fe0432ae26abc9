"""Diagnostic summaries computed from the enriched table.

Nothing here feeds back into row-level decisions; the report is for
inspecting the data after a run.
"""

import os
from collections import Counter
from typing import Any, Dict

import pandas as pd

from ..config import LOG_DIR, DIAGNOSTICS_LOG_FILENAME, QUALITY_FLAGS
from ..models.columns import group_columns
from ..models.fields import QUESTION_FIELDS
from ..models.multiselect import AI_CONCERNS
from ..text_processing import split_selections
from ..utils.logging import write_jsonl


def distinct_concerns(df: pd.DataFrame) -> Dict[str, int]:
    """Count every distinct concern selection across responses, most common first."""
    counts = Counter()
    for value in df[AI_CONCERNS.source]:
        counts.update(split_selections(value))
    return dict(counts.most_common())


def build_diagnostics(df: pd.DataFrame) -> Dict[str, Any]:
    """Summarize an enriched table.

    Args:
        df: Table after quality flagging

    Returns:
        Dictionary with row count, quality flag counts, answers per question,
        missing answers per column, indicator prevalence and the distinct
        concern listing
    """
    flag_counts = df["quality_flag"].value_counts()
    indicators = group_columns("tools") + group_columns("concerns")
    return {
        "rows": int(len(df)),
        "quality_flags": {flag: int(flag_counts.get(flag, 0)) for flag in QUALITY_FLAGS},
        "answered_by_question": {q: int(df[q].notna().sum()) for q in QUESTION_FIELDS},
        "missing_by_column": {c: int(df[c].isna().sum()) for c in group_columns("missingness")},
        "indicator_prevalence": {c: float(df[c].mean()) if len(df) else 0.0 for c in indicators},
        "distinct_concerns": distinct_concerns(df),
    }


def report_diagnostics(df: pd.DataFrame, log_dir: str = LOG_DIR) -> Dict[str, Any]:
    """Print the diagnostic summary and append it to the diagnostics log.

    Args:
        df: Table after quality flagging
        log_dir: Directory for the diagnostics log

    Returns:
        The diagnostics dictionary
    """
    diag = build_diagnostics(df)
    print(f"[diagnostics] Rows: {diag['rows']:,}")
    print(f"[diagnostics] Quality flags: {diag['quality_flags']}")
    worst = sorted(diag["missing_by_column"].items(), key=lambda x: x[1], reverse=True)[:5]
    print(f"[diagnostics] Most missing answers:")
    for col, n in worst:
        print(f"[diagnostics]   {col}: {n}")
    print(f"[diagnostics] Distinct concerns ({len(diag['distinct_concerns'])}):")
    for concern, n in list(diag["distinct_concerns"].items())[:10]:
        print(f"[diagnostics]   {concern}: {n}")

    write_jsonl(os.path.join(log_dir, DIAGNOSTICS_LOG_FILENAME), [{"stage": "diagnostics", **diag}])
    return diag
