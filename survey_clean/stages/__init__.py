"""Processing stages for the survey-cleaning pipeline."""

from .ingest_stage import run_stage_ingest, check_required_columns, normalize_columns
from .temporal_stage import derive_temporal
from .demographics_stage import recode_demographics, bucket_age
from .ordinal_stage import encode_ordinal, encode_ordinals
from .multiselect_stage import decompose_multiselect, decompose_all
from .composite_stage import composite_score, score_composites
from .quality_stage import flag_quality, write_quality_log
from .finalize_stage import select_good_rows, project_columns, build_analysis_dataset, run_stage_finalize
from .analysis import build_diagnostics, report_diagnostics

__all__ = [
    "run_stage_ingest",
    "check_required_columns",
    "normalize_columns",
    "derive_temporal",
    "recode_demographics",
    "bucket_age",
    "encode_ordinal",
    "encode_ordinals",
    "decompose_multiselect",
    "decompose_all",
    "composite_score",
    "score_composites",
    "flag_quality",
    "write_quality_log",
    "select_good_rows",
    "project_columns",
    "build_analysis_dataset",
    "run_stage_finalize",
    "build_diagnostics",
    "report_diagnostics"
]
