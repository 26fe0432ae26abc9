"""
Survey cleaning test configuration

Provides raw survey rows, normalized/enriched tables and CSV inputs.
"""

import csv
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
import pytest

from survey_clean.models.fields import FIELD_MAPPING
from survey_clean.pipeline import enrich
from survey_clean.stages import normalize_columns
from survey_clean.text_processing import normalize_sentinels


def make_raw_row(overrides: Optional[Dict[str, Optional[str]]] = None) -> Dict[str, Optional[str]]:
    """
    Build one raw survey response that passes every quality check.

    Args:
        overrides: Raw column name -> value to replace (None means blank)
    """
    row = {
        "ResponseId": "R_good",
        "StartDate": "2024-03-04 10:15:00",
        "EndDate": "2024-03-04 10:25:00",
        "Duration (in seconds)": "600",
        "UserLanguage": "EN",
        "Q1": "Very familiar",
        "Q2": "Weekly",
        "Q3": "ChatGPT, Copilot",
        "Q4_1": "Comfortable",
        "Q4_2": "Comfortable",
        "Q4_3": "Neutral",
        "Q4_4": "Very comfortable",
        "Q4_5": "Uncomfortable",
        "Q5": "Job loss, Privacy",
        "Q5_6_TEXT": None,
        "Q6_1": "Agree",
        "Q6_2": "Disagree",
        "Q6_3": "Neither agree nor disagree",
        "Q6_4": "Strongly agree",
        "Q7": "Strongly agree",
        "Q8": "Somewhat positive",
        "Q9": "No change",
        "Q10": "Interesting survey",
        "AC1": "1",
        "AC2": "1",
        "D1": "34",
        "D2": "Female",
        "D3": "Bachelor's degree",
        "D4": "Employed full-time",
        "D5": "USA",
    }
    row.update(overrides or {})
    return row


def write_csv(path: Path, rows: List[Dict[str, Optional[str]]], label_rows: int = 0) -> Path:
    """Write raw rows as a UTF-8 CSV, optionally with Qualtrics-style label rows."""
    header = list(rows[0])
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for i in range(label_rows):
            writer.writerow([f"label {i} for {c}" for c in header])
        for row in rows:
            writer.writerow(["" if row[c] is None else row[c] for c in header])
    return path


@pytest.fixture
def raw_row():
    """Factory for raw rows keyed by export column names."""
    return make_raw_row


@pytest.fixture
def normalized_table():
    """Factory: raw rows -> normalized table with sentinels removed."""
    def _build(*rows) -> pd.DataFrame:
        raw = pd.DataFrame(list(rows) or [make_raw_row()], columns=list(FIELD_MAPPING))
        return normalize_sentinels(normalize_columns(raw))
    return _build


@pytest.fixture
def enriched_table(normalized_table):
    """Factory: raw rows -> fully enriched table."""
    def _build(*rows) -> pd.DataFrame:
        return enrich(normalized_table(*rows))
    return _build


@pytest.fixture
def survey_csv(tmp_path):
    """Factory writing raw rows to a CSV in tmp_path and returning its path."""
    def _write(rows, name: str = "survey.csv", label_rows: int = 0) -> Path:
        return write_csv(tmp_path / name, rows, label_rows=label_rows)
    return _write
