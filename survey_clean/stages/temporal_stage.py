"""Temporal stage - parse timestamps and derive calendar and duration attributes."""

import pandas as pd

from ..config import DEFAULT_DURATION_FIELD
from ..utils.data_utils import to_number


def derive_temporal(df: pd.DataFrame, duration_field: str = DEFAULT_DURATION_FIELD) -> pd.DataFrame:
    """Parse start/end timestamps and derive survey date and duration columns.

    ``start_date``, ``end_date`` and the duration field are overwritten with
    their parsed values. Timestamps are normalized to UTC (naive ones are
    taken as UTC) so exports mixing offsets parse; date and hour are UTC.
    Unparseable timestamps become NaT.

    Args:
        df: Normalized table
        duration_field: Internal name of the duration-in-seconds column

    Returns:
        Table with survey_date, survey_weekday, survey_hour, elapsed_seconds
        and duration_minutes added
    """
    out = df.copy()
    out["start_date"] = pd.to_datetime(out["start_date"], errors="coerce", format="ISO8601", utc=True)
    out["end_date"] = pd.to_datetime(out["end_date"], errors="coerce", format="ISO8601", utc=True)

    out["survey_date"] = out["start_date"].dt.date
    out["survey_weekday"] = out["start_date"].dt.day_name()
    out["survey_hour"] = out["start_date"].dt.hour
    out["elapsed_seconds"] = (out["end_date"] - out["start_date"]).dt.total_seconds()

    out[duration_field] = to_number(out[duration_field])
    out["duration_minutes"] = out[duration_field] / 60
    return out
