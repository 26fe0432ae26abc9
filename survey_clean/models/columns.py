"""Named column groups and the declared output column set.

Groups are declared explicitly by purpose so that composite scoring, quality
flagging and diagnostics never select columns by prefix or suffix.
"""

from typing import Dict, List

from .multiselect import AI_CONCERNS, AI_TOOLS
from .scales import ORDINAL_FIELDS, numeric_column, ordinal_column

COMFORT_FIELDS = [
    "ai_comfort_work",
    "ai_comfort_health",
    "ai_comfort_finance",
    "ai_comfort_education",
    "ai_comfort_creative",
]

TRUST_FIELDS = [
    "ai_trust_accuracy",
    "ai_trust_fairness",
    "ai_trust_privacy",
    "ai_trust_transparency",
]

COLUMN_GROUPS: Dict[str, List[str]] = {
    "comfort": [numeric_column(f) for f in COMFORT_FIELDS],
    "trust": [numeric_column(f) for f in TRUST_FIELDS],
    "tools": AI_TOOLS.indicator_names,
    "concerns": AI_CONCERNS.indicator_names,
    # Closed-ended answers counted by the high_missing check
    "missingness": [numeric_column(f) for f in ORDINAL_FIELDS],
}

# Composite column -> group it averages
COMPOSITES: Dict[str, str] = {
    "ai_comfort_composite": "comfort",
    "ai_trust_composite": "trust",
}


def group_columns(group: str) -> List[str]:
    """Look up the columns of a registered group.

    Args:
        group: Logical group name, e.g. ``"comfort"``

    Returns:
        List of column names in declaration order

    Raises:
        KeyError: If the group is not registered
    """
    if group not in COLUMN_GROUPS:
        raise KeyError(f"Unknown column group: {group}")
    return list(COLUMN_GROUPS[group])


FINAL_COLUMNS: List[str] = (
    ["response_id", "survey_date", "duration_minutes"]
    + ["age_numeric", "age_group", "sex_clean", "education_clean", "employment_clean", "country_clean"]
    + [col for f in ORDINAL_FIELDS for col in (ordinal_column(f), numeric_column(f))]
    + AI_TOOLS.indicator_names + [AI_TOOLS.count_column]
    + AI_CONCERNS.indicator_names + [AI_CONCERNS.count_column]
    + list(COMPOSITES)
)
