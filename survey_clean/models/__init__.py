"""Static declarations of the survey schema: fields, scales, vocabularies and column groups."""

from .fields import FIELD_MAPPING, REQUIRED_RAW_COLUMNS, QUESTION_FIELDS, validate_field_mapping
from .scales import OrdinalScale, ORDINAL_FIELDS, ordinal_column, numeric_column
from .multiselect import Indicator, MultiSelectField, MULTISELECT_FIELDS, AI_TOOLS, AI_CONCERNS
from .columns import COLUMN_GROUPS, COMPOSITES, FINAL_COLUMNS, group_columns

__all__ = [
    "FIELD_MAPPING",
    "REQUIRED_RAW_COLUMNS",
    "QUESTION_FIELDS",
    "validate_field_mapping",
    "OrdinalScale",
    "ORDINAL_FIELDS",
    "ordinal_column",
    "numeric_column",
    "Indicator",
    "MultiSelectField",
    "MULTISELECT_FIELDS",
    "AI_TOOLS",
    "AI_CONCERNS",
    "COLUMN_GROUPS",
    "COMPOSITES",
    "FINAL_COLUMNS",
    "group_columns",
]
