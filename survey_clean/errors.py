"""Exceptions raised by the survey-cleaning pipeline."""

from typing import Iterable, List


class SurveyCleaningError(ValueError):
    """Base class for fatal pipeline errors."""


class SchemaError(SurveyCleaningError):
    """A required raw input column is missing at ingestion."""

    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(f"Input is missing required column(s): {', '.join(self.missing)}")


class ProjectionError(SurveyCleaningError):
    """A declared output column is missing from the enriched table."""

    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(
            f"Enriched table is missing output column(s): {', '.join(self.missing)}. "
            "An upstream stage was skipped or ran out of order."
        )
