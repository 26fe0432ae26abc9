#!/usr/bin/env python3
"""
Clean the AI-attitudes survey export with a single, auditable pass.

Stages:
  ingest → temporal → demographics → ordinal → multi-select → composite → quality → finalize

Logs (default ./logs):
  quality_flags.jsonl   # one record per rejected response (flag, duration, missing count)
  diagnostics.jsonl     # summary written by --stage diagnostics

Final artifacts (default ./):
  ai_attitudes_clean.csv
  ai_attitudes_clean.parquet   # only with --output_parquet

Usage:
  python clean_survey.py --input data/raw/survey.csv --header_rows 2
  python clean_survey.py --stage diagnostics --input data/raw/survey.csv
"""

from survey_clean.cli import main

if __name__ == "__main__":
    main()
