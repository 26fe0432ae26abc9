"""
Quality flag tests

Coverage:
- Exactly one flag per row from the declared set
- Priority order: failed_attention > too_fast > high_missing > good
- Missing attention checks fail, missing durations are not too fast
"""

import pandas as pd
import pytest

from survey_clean.config import QUALITY_FLAGS
from survey_clean.stages import flag_quality

SIX_MISSING = {"Q1": None, "Q4_1": None, "Q4_2": None, "Q4_3": None, "Q4_4": None, "Q4_5": None}
FIVE_MISSING = {"Q4_1": None, "Q4_2": None, "Q4_3": None, "Q4_4": None, "Q4_5": None}


def flag_of(enriched_table, raw_row, overrides) -> str:
    return enriched_table(raw_row(overrides)).loc[0, "quality_flag"]


@pytest.mark.parametrize("overrides,expected", [
    ({}, "good"),
    ({"AC1": "1", "AC2": "0", "Duration (in seconds)": "120"}, "failed_attention"),
    ({"AC1": "0", "AC2": "0", "Duration (in seconds)": "10"}, "failed_attention"),
    ({"AC2": "2", **SIX_MISSING}, "failed_attention"),
    ({"Duration (in seconds)": "15"}, "too_fast"),
    ({"Duration (in seconds)": "29.9", **SIX_MISSING}, "too_fast"),
    ({"Duration (in seconds)": "30"}, "good"),
    (SIX_MISSING, "high_missing"),
    (FIVE_MISSING, "good"),
])
def test_quality_flag_priority(enriched_table, raw_row, overrides, expected):
    assert flag_of(enriched_table, raw_row, overrides) == expected


def test_missing_attention_check_fails(enriched_table, raw_row):
    assert flag_of(enriched_table, raw_row, {"AC1": None}) == "failed_attention"
    assert flag_of(enriched_table, raw_row, {"AC2": "CONSENT_REVOKED"}) == "failed_attention"


def test_missing_duration_is_not_too_fast(enriched_table, raw_row):
    assert flag_of(enriched_table, raw_row, {"Duration (in seconds)": None}) == "good"


def test_unmatched_labels_count_as_missing(enriched_table, raw_row):
    garbled = {k: "???" for k in ("Q1", "Q2", "Q4_1", "Q4_2", "Q4_3", "Q4_4")}
    df = enriched_table(raw_row(garbled))
    assert df.loc[0, "missing_count"] == 6
    assert df.loc[0, "quality_flag"] == "high_missing"


def test_every_row_gets_exactly_one_known_flag(enriched_table, raw_row):
    rows = [
        raw_row(),
        raw_row({"AC1": "0"}),
        raw_row({"Duration (in seconds)": "3"}),
        raw_row(SIX_MISSING),
        raw_row({"AC1": None, "Duration (in seconds)": None, **SIX_MISSING}),
    ]
    df = enriched_table(*rows)
    assert df["quality_flag"].notna().all()
    assert set(df["quality_flag"]) <= set(QUALITY_FLAGS)
    assert list(df["quality_flag"]) == ["good", "failed_attention", "too_fast", "high_missing", "failed_attention"]


def test_explicit_missing_columns_are_respected(enriched_table, raw_row):
    df = enriched_table(raw_row(SIX_MISSING))
    assert df.loc[0, "quality_flag"] == "high_missing"

    none_counted = flag_quality(df, missing_columns=[])
    assert none_counted.loc[0, "missing_count"] == 0
    assert none_counted.loc[0, "quality_flag"] == "good"

    comfort_only = flag_quality(df, missing_columns=["ai_comfort_work_num"], max_missing=0)
    assert comfort_only.loc[0, "missing_count"] == 1
    assert comfort_only.loc[0, "quality_flag"] == "high_missing"


def test_thresholds_are_configurable(enriched_table, raw_row):
    df = enriched_table(raw_row({"Duration (in seconds)": "45", **FIVE_MISSING}))
    assert flag_quality(df, min_duration=60).loc[0, "quality_flag"] == "too_fast"
    assert flag_quality(df, max_missing=4).loc[0, "quality_flag"] == "high_missing"
    assert flag_quality(df).loc[0, "quality_flag"] == "good"


def test_flagging_is_row_independent(enriched_table, raw_row):
    alone = enriched_table(raw_row({"Duration (in seconds)": "15"}))
    mixed = enriched_table(raw_row(), raw_row({"Duration (in seconds)": "15"}), raw_row({"AC1": "0"}))
    assert alone.loc[0, "quality_flag"] == mixed.loc[1, "quality_flag"]
    assert isinstance(mixed["quality_flag"].dtype, pd.CategoricalDtype)
