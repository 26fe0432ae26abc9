"""Command-line interface for the survey-cleaning pipeline."""

import os
import argparse

from .config import (
    DEFAULT_INPUT, OUT_PREFIX, LOG_DIR, DEFAULT_DELIMITER, DEFAULT_HEADER_ROWS,
    DEFAULT_DURATION_FIELD, MIN_DURATION_SECONDS, MAX_MISSING_ANSWERS,
    QUALITY_LOG_FILENAME, DIAGNOSTICS_LOG_FILENAME
)
from .pipeline import enrich
from .stages import (
    run_stage_ingest, build_analysis_dataset, run_stage_finalize,
    write_quality_log, report_diagnostics
)
from .utils.io_utils import ensure_output_dir
from .utils.logging import ensure_logdir, reset_log


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    ap = argparse.ArgumentParser("Clean and score the AI-attitudes survey export.")

    # Main execution options
    ap.add_argument("--stage", default="all",
                    choices=["all", "validate", "diagnostics"],
                    help="validate: schema check only; diagnostics: enrich and report without writing output")

    # Input and output configuration
    ap.add_argument("--input", default=DEFAULT_INPUT,
                    help="Raw survey export (delimited UTF-8 text)")
    ap.add_argument("--delimiter", default=DEFAULT_DELIMITER,
                    help="Field delimiter for input and output")
    ap.add_argument("--header_rows", type=int, default=DEFAULT_HEADER_ROWS,
                    help="Extra rows below the header to skip (2 for Qualtrics exports)")
    ap.add_argument("--output_dir", default=".",
                    help="Output directory for the cleaned dataset")
    ap.add_argument("--out_prefix", default=OUT_PREFIX,
                    help="Prefix for output files")
    ap.add_argument("--output_csv", default=None,
                    help="Custom path for the cleaned CSV")
    ap.add_argument("--output_parquet", default=None,
                    help="Also write the cleaned dataset as Parquet to this path")
    ap.add_argument("--log_dir", default=LOG_DIR,
                    help="Directory for log files")

    # Cleaning configuration
    ap.add_argument("--duration_field", default=DEFAULT_DURATION_FIELD,
                    help="Internal column holding the response duration in seconds")
    ap.add_argument("--min_duration", type=float, default=MIN_DURATION_SECONDS,
                    help="Responses faster than this many seconds are flagged too_fast")
    ap.add_argument("--max_missing", type=int, default=MAX_MISSING_ANSWERS,
                    help="Responses with more missing answers than this are flagged high_missing")
    ap.add_argument("--test-limit", type=int, default=None,
                    help="Limit processing to the first N responses for testing")

    return ap


def process_arguments(args):
    """Process and validate command-line arguments.

    Args:
        args: Parsed argument namespace
    """
    args.input = os.path.abspath(args.input)
    args.output_dir = os.path.abspath(args.output_dir)
    args.log_dir = os.path.abspath(args.log_dir)
    if args.output_csv:
        args.output_csv = os.path.abspath(args.output_csv)
    if args.output_parquet:
        args.output_parquet = os.path.abspath(args.output_parquet)


def run_pipeline(args) -> str:
    """Run the pipeline based on arguments.

    Args:
        args: Parsed and processed argument namespace

    Returns:
        Path to the written CSV for ``--stage all``, otherwise the input path
    """
    df = run_stage_ingest(args)
    if args.stage == "validate":
        print(f"[validate] {args.input} matches the expected schema ({len(df):,} rows).")
        return args.input

    enriched = enrich(
        df,
        duration_field=args.duration_field,
        min_duration=args.min_duration,
        max_missing=args.max_missing,
    )

    if args.stage == "diagnostics":
        ensure_logdir(args.log_dir)
        reset_log(DIAGNOSTICS_LOG_FILENAME, args.log_dir)
        report_diagnostics(enriched, args.log_dir)
        return args.input
    if args.stage != "all":
        raise ValueError(f"Unknown stage: {args.stage}")

    # Project before anything is written so a broken stage aborts cleanly
    analysis = build_analysis_dataset(enriched)

    ensure_output_dir(args.output_dir)
    csv_path = run_stage_finalize(args, analysis)

    # Audit log only once the output is in place
    ensure_logdir(args.log_dir)
    reset_log(QUALITY_LOG_FILENAME, args.log_dir)
    n_rejected = write_quality_log(enriched, args.log_dir, duration_field=args.duration_field)
    print(f"[quality] Logged {n_rejected:,} rejected responses to {os.path.join(args.log_dir, QUALITY_LOG_FILENAME)}")
    return csv_path


def main(argv=None):
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    process_arguments(args)
    run_pipeline(args)
