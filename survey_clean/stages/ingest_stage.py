"""Ingestion stage - load the raw export and move it onto internal column names."""

from typing import Dict, List, Optional

import pandas as pd

from ..config import DEFAULT_DELIMITER, DEFAULT_HEADER_ROWS, DEFAULT_DURATION_FIELD
from ..errors import SchemaError
from ..models.fields import FIELD_MAPPING, REQUIRED_RAW_COLUMNS
from ..text_processing import normalize_sentinels
from ..utils.io_utils import read_table


def check_required_columns(raw: pd.DataFrame, required: List[str] = REQUIRED_RAW_COLUMNS):
    """Fail if any required raw column is absent.

    Args:
        raw: Table with raw header names
        required: Raw column names that must be present

    Raises:
        SchemaError: Listing every missing column
    """
    missing = [c for c in required if c not in raw.columns]
    if missing:
        raise SchemaError(missing)


def normalize_columns(raw: pd.DataFrame, mapping: Dict[str, str] = FIELD_MAPPING) -> pd.DataFrame:
    """Keep only mapped raw columns and rename them to internal names.

    Args:
        raw: Table with raw header names
        mapping: Raw name -> internal name

    Returns:
        Table with internal column names, in mapping order
    """
    check_required_columns(raw, list(mapping))
    return raw[list(mapping)].rename(columns=mapping).reset_index(drop=True)


def run_stage_ingest(args) -> pd.DataFrame:
    """Run the ingestion and normalization stage.

    Args:
        args: Argument namespace with input configuration

    Returns:
        Normalized table with sentinels set to missing
    """
    print(f"[ingest] Loading {args.input}")
    raw = read_table(
        args.input,
        delimiter=getattr(args, "delimiter", DEFAULT_DELIMITER),
        header_rows=getattr(args, "header_rows", DEFAULT_HEADER_ROWS),
    )
    dropped = [c for c in raw.columns if c not in FIELD_MAPPING]
    df = normalize_columns(raw)
    print(f"[ingest] Loaded {len(df):,} rows; kept {len(df.columns)} mapped columns, dropped {len(dropped)} unmapped")

    duration_field = getattr(args, "duration_field", None) or DEFAULT_DURATION_FIELD
    if duration_field not in df.columns:
        raise SchemaError([duration_field])

    test_limit: Optional[int] = getattr(args, "test_limit", None)
    if test_limit:
        original_len = len(df)
        df = df.head(min(test_limit, len(df))).copy()
        print(f"[ingest][TEST] Using {len(df)} of {original_len} rows.")

    df = normalize_sentinels(df)
    return df
