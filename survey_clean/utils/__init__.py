"""Utility functions for logging, I/O, and data manipulation."""

from .logging import write_jsonl, reset_log, read_jsonl, ensure_logdir
from .io_utils import ensure_output_dir, read_table, write_table
from .data_utils import to_number, count_missing

__all__ = [
    "write_jsonl",
    "reset_log",
    "read_jsonl",
    "ensure_logdir",
    "ensure_output_dir",
    "read_table",
    "write_table",
    "to_number",
    "count_missing"
]
