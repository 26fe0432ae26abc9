"""
AI-attitudes survey cleaning - staged data-preparation pipeline.

This package turns a raw survey export into a quality-filtered analysis dataset:
  ingest → temporal → demographics → ordinal → multi-select → composite → quality → finalize

Every run is a single forward pass and writes auditable logs.
"""

__version__ = "1.0.0"
