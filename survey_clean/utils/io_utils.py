"""I/O utility functions."""

import os

import pandas as pd

from ..config import INPUT_ENCODING, DEFAULT_DELIMITER, DEFAULT_HEADER_ROWS


def ensure_output_dir(path: str):
    """Ensure an output directory exists.

    Args:
        path: Directory path to create
    """
    os.makedirs(path, exist_ok=True)


def read_table(path: str, delimiter: str = DEFAULT_DELIMITER, header_rows: int = DEFAULT_HEADER_ROWS) -> pd.DataFrame:
    """Read a delimited UTF-8 file with every cell as text.

    Only blank cells are read as missing; words like "NA" or "None" stay text.

    Args:
        path: Input file path
        delimiter: Field delimiter
        header_rows: Number of extra rows below the header to skip

    Returns:
        Table keyed by the raw header names
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file not found at {path}. Pass --input with the survey export.")
    skip = list(range(1, header_rows + 1)) if header_rows else None
    with open(path, "r", encoding=INPUT_ENCODING, newline="") as f:
        return pd.read_csv(f, sep=delimiter, dtype=str, skiprows=skip,
                           keep_default_na=False, na_values=[""])


def write_table(df: pd.DataFrame, path: str, delimiter: str = DEFAULT_DELIMITER):
    """Write a table as delimited UTF-8 text with a header row.

    Args:
        df: Table to write
        path: Output file path
        delimiter: Field delimiter
    """
    ensure_output_dir(os.path.dirname(path) or ".")
    with open(path, "w", encoding=INPUT_ENCODING, newline="") as f:
        df.to_csv(f, sep=delimiter, index=False)
