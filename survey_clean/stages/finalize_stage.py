"""Finalize stage - keep good responses, project the output columns and write them."""

import os
from typing import List, Optional

import pandas as pd

from ..config import FLAG_GOOD
from ..errors import ProjectionError
from ..models.columns import FINAL_COLUMNS
from ..utils.io_utils import ensure_output_dir, write_table


def select_good_rows(df: pd.DataFrame) -> pd.DataFrame:
    return df[df["quality_flag"] == FLAG_GOOD].reset_index(drop=True)


def project_columns(df: pd.DataFrame, columns: List[str] = FINAL_COLUMNS) -> pd.DataFrame:
    """Restrict the table to the declared output columns, in order.

    Args:
        df: Enriched table
        columns: Declared output column list

    Returns:
        Projected copy of the table

    Raises:
        ProjectionError: If any declared column is absent
    """
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ProjectionError(missing)
    return df[list(columns)].copy()


def build_analysis_dataset(df: pd.DataFrame, columns: List[str] = FINAL_COLUMNS) -> pd.DataFrame:
    """Filter to good rows and project; nothing is written."""
    return project_columns(select_good_rows(df), columns)


def output_paths(args) -> tuple:
    csv_path = getattr(args, "output_csv", None) or os.path.join(args.output_dir, f"{args.out_prefix}.csv")
    parquet_path: Optional[str] = getattr(args, "output_parquet", None)
    return csv_path, parquet_path


def run_stage_finalize(args, analysis: pd.DataFrame) -> str:
    """Write the analysis dataset.

    Every artifact is first written to a ``.tmp`` sibling and only moved into
    place once all of them were written, so a failed write leaves nothing behind.

    Args:
        args: Argument namespace with output configuration
        analysis: Projected analysis dataset

    Returns:
        Path to the output CSV
    """
    csv_path, parquet_path = output_paths(args)
    targets = [csv_path] + ([parquet_path] if parquet_path else [])
    for path in targets:
        if os.path.isdir(path):
            raise IsADirectoryError(f"Output path {path} is a directory.")

    staged = {path: f"{path}.tmp" for path in targets}
    try:
        write_table(analysis, staged[csv_path], delimiter=getattr(args, "delimiter", ","))
        if parquet_path:
            ensure_output_dir(os.path.dirname(parquet_path) or ".")
            analysis.to_parquet(staged[parquet_path], index=False)
        for path, tmp in staged.items():
            os.replace(tmp, path)
    finally:
        for tmp in staged.values():
            if os.path.exists(tmp):
                os.remove(tmp)

    print(f"[finalize] Output {len(analysis):,} responses x {len(analysis.columns)} columns.")
    print(f"[finalize] Artifacts: {csv_path}" + (f", {parquet_path}" if parquet_path else ""))
    return csv_path
