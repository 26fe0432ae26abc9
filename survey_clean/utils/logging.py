"""Audit log utilities for the cleaning pipeline."""

import os
import json
from typing import Iterable, List, Optional

import orjson

from ..config import LOG_DIR


def ensure_logdir(path: Optional[str] = None):
    """Ensure the log directory exists.

    Args:
        path: Directory path to create, defaults to LOG_DIR
    """
    target = path or LOG_DIR
    if target:
        os.makedirs(target, exist_ok=True)


def write_jsonl(path: str, recs: Iterable[dict]):
    """Append records to a JSONL file.

    Args:
        path: Output file path
        recs: Iterable of dictionary records
    """
    ensure_logdir(os.path.dirname(path) or ".")
    with open(path, "ab") as f:
        for r in recs:
            f.write(orjson.dumps(r, option=orjson.OPT_SERIALIZE_NUMPY))
            f.write(b"\n")


def reset_log(filename: str, log_dir: Optional[str] = None) -> Optional[str]:
    """Reset (delete) a log file if it exists.

    Args:
        filename: Name of the log file to reset
        log_dir: Directory holding the log, defaults to LOG_DIR

    Returns:
        Full path to the log file, or None if no log directory is configured
    """
    log_dir = log_dir or LOG_DIR
    if not log_dir:
        return None
    path = os.path.join(log_dir, filename)
    if os.path.exists(path):
        os.remove(path)
    return path


def read_jsonl(path: str) -> List[dict]:
    """Read JSONL file and return list of dicts.

    Args:
        path: Path to JSONL file

    Returns:
        List of dictionary records
    """
    if not os.path.exists(path):
        return []
    records = []
    with open(path, 'rb') as f:
        for line in f:
            if line.strip():
                records.append(json.loads(line))
    return records
