"""Raw survey column names and their internal names."""

from collections import Counter
from typing import Dict, List

# Raw export name -> internal name. Raw columns not listed here are dropped.
FIELD_MAPPING: Dict[str, str] = {
    # Identifiers and metadata
    "ResponseId": "response_id",
    "StartDate": "start_date",
    "EndDate": "end_date",
    "Duration (in seconds)": "duration_seconds",
    "UserLanguage": "locale",
    # Questions
    "Q1": "ai_familiarity",
    "Q2": "ai_usage_frequency",
    "Q3": "ai_tools_used",
    "Q4_1": "ai_comfort_work",
    "Q4_2": "ai_comfort_health",
    "Q4_3": "ai_comfort_finance",
    "Q4_4": "ai_comfort_education",
    "Q4_5": "ai_comfort_creative",
    "Q5": "ai_concerns",
    "Q5_6_TEXT": "ai_concerns_other",
    "Q6_1": "ai_trust_accuracy",
    "Q6_2": "ai_trust_fairness",
    "Q6_3": "ai_trust_privacy",
    "Q6_4": "ai_trust_transparency",
    "Q7": "ai_regulation_support",
    "Q8": "ai_future_outlook",
    "Q9": "ai_job_impact",
    "Q10": "ai_comment",
    # Attention checks
    "AC1": "attention_check_1",
    "AC2": "attention_check_2",
    # Demographics
    "D1": "age",
    "D2": "sex",
    "D3": "education",
    "D4": "employment",
    "D5": "country",
}

REQUIRED_RAW_COLUMNS: List[str] = list(FIELD_MAPPING)

QUESTION_FIELDS: List[str] = [
    FIELD_MAPPING[raw] for raw in FIELD_MAPPING if raw.startswith("Q")
]


def validate_field_mapping(mapping: Dict[str, str]) -> None:
    """Check that every internal name is produced by exactly one raw column.

    Args:
        mapping: Raw name -> internal name table

    Raises:
        ValueError: If two raw columns map to the same internal name
    """
    dupes = [name for name, n in Counter(mapping.values()).items() if n > 1]
    if dupes:
        raise ValueError(f"Field mapping produces duplicate internal names: {', '.join(sorted(dupes))}")


validate_field_mapping(FIELD_MAPPING)
