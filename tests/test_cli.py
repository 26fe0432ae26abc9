"""
End-to-end CLI tests

Runs survey_clean.cli.main in-process against CSV exports in tmp_path.
"""

import pandas as pd
import pyarrow.parquet as pq
import pytest

from survey_clean.cli import main
from survey_clean.errors import SchemaError
from survey_clean.models.columns import FINAL_COLUMNS
from survey_clean.utils.logging import read_jsonl


@pytest.fixture
def mixed_export(survey_csv, raw_row):
    """Export with one response per quality outcome plus a second good one."""
    return survey_csv([
        raw_row({"ResponseId": "R_good"}),
        raw_row({"ResponseId": "R_attention", "AC1": "1", "AC2": "0", "Duration (in seconds)": "120"}),
        raw_row({"ResponseId": "R_fast", "Duration (in seconds)": "15"}),
        raw_row({"ResponseId": "R_missing", "Q1": None, "Q2": None, "Q6_1": None,
                 "Q6_2": None, "Q6_3": None, "Q6_4": None}),
        raw_row({"ResponseId": "R_revoked", "D1": "CONSENT_REVOKED", "Q3": "ChatGPT, image generators"}),
    ], label_rows=2)


def run(tmp_path, export, *extra):
    main([
        "--input", str(export),
        "--header_rows", "2",
        "--output_dir", str(tmp_path / "out"),
        "--log_dir", str(tmp_path / "logs"),
        *extra,
    ])


def test_full_run_writes_good_rows_only(tmp_path, mixed_export):
    run(tmp_path, mixed_export)
    out = pd.read_csv(tmp_path / "out" / "ai_attitudes_clean.csv")
    assert list(out.columns) == FINAL_COLUMNS
    assert list(out["response_id"]) == ["R_good", "R_revoked"]

    revoked = out.set_index("response_id").loc["R_revoked"]
    assert pd.isna(revoked["age_numeric"])
    assert pd.isna(revoked["age_group"])
    assert revoked["uses_chatgpt"] == 1
    assert revoked["uses_image_gen"] == 1
    assert revoked["ai_tools_count"] == 2
    assert revoked["survey_date"] == "2024-03-04"
    assert revoked["duration_minutes"] == 10


def test_full_run_logs_rejections(tmp_path, mixed_export):
    run(tmp_path, mixed_export)
    log = read_jsonl(str(tmp_path / "logs" / "quality_flags.jsonl"))
    assert {r["response_id"]: r["quality_flag"] for r in log} == {
        "R_attention": "failed_attention",
        "R_fast": "too_fast",
        "R_missing": "high_missing",
    }

    # Logs are reset, not appended, on a rerun
    run(tmp_path, mixed_export)
    assert len(read_jsonl(str(tmp_path / "logs" / "quality_flags.jsonl"))) == 3


def test_custom_output_paths(tmp_path, mixed_export):
    csv_path = tmp_path / "custom" / "clean.csv"
    parquet_path = tmp_path / "custom" / "clean.parquet"
    run(tmp_path, mixed_export, "--output_csv", str(csv_path), "--output_parquet", str(parquet_path))
    assert list(pd.read_csv(csv_path).columns) == FINAL_COLUMNS
    assert list(pq.read_table(parquet_path).column_names) == FINAL_COLUMNS
    assert sorted(p.name for p in (tmp_path / "custom").iterdir()) == ["clean.csv", "clean.parquet"]


@pytest.mark.parametrize("blocked", ["csv", "parquet"])
def test_failed_output_write_leaves_nothing(tmp_path, mixed_export, blocked):
    out_dir = tmp_path / "custom"
    out_dir.mkdir()
    csv_path = out_dir / "clean.csv"
    parquet_path = out_dir / "clean.parquet"
    (csv_path if blocked == "csv" else parquet_path).mkdir()

    with pytest.raises(IsADirectoryError):
        run(tmp_path, mixed_export, "--output_csv", str(csv_path), "--output_parquet", str(parquet_path))

    leftovers = sorted(p.name for p in out_dir.iterdir())
    assert leftovers == [f"clean.{blocked}"]
    assert not (tmp_path / "logs" / "quality_flags.jsonl").exists()


def test_validate_stage_writes_nothing(tmp_path, mixed_export):
    run(tmp_path, mixed_export, "--stage", "validate")
    assert not (tmp_path / "out").exists()
    assert not (tmp_path / "logs").exists()


def test_diagnostics_stage(tmp_path, mixed_export):
    run(tmp_path, mixed_export, "--stage", "diagnostics")
    assert not (tmp_path / "out").exists()
    [diag] = read_jsonl(str(tmp_path / "logs" / "diagnostics.jsonl"))
    assert diag["rows"] == 5
    assert diag["quality_flags"]["good"] == 2


def test_schema_error_aborts_before_writing(tmp_path, survey_csv, raw_row):
    row = raw_row()
    del row["AC1"]
    export = survey_csv([row])
    with pytest.raises(SchemaError):
        run(tmp_path, export, "--header_rows", "0")
    assert not (tmp_path / "out").exists()
