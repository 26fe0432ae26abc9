"""Configuration constants and settings for the survey-cleaning pipeline."""

# Input and output configuration
DEFAULT_INPUT = "data/raw/ai_attitudes_survey.csv"
OUT_PREFIX = "ai_attitudes_clean"
LOG_DIR = "logs"

# Reading configuration
INPUT_ENCODING = "utf-8"
DEFAULT_DELIMITER = ","
DEFAULT_HEADER_ROWS = 0  # Qualtrics exports carry 2 extra rows (question text, ImportId)

# Duration source column (internal name), feeds the speed check and duration_minutes
DEFAULT_DURATION_FIELD = "duration_seconds"

# Quality thresholds
ATTENTION_PASS_VALUE = 1
MIN_DURATION_SECONDS = 30
MAX_MISSING_ANSWERS = 5

# Literals written by the survey platform for withdrawn or expired consent.
# Matched exactly (case-sensitive) and turned into missing before any recoding.
SENTINEL_VALUES = frozenset({
    "CONSENT_REVOKED",
    "CONSENT_WITHDRAWN",
    "DATA_EXPIRED",
})

# Age buckets, upper bound inclusive
AGE_BREAKS = [25, 35, 45, 55]
AGE_LABELS = ["18-25", "26-35", "36-45", "46-55", "56+"]

# Quality flag values; checks run failed_attention -> too_fast -> high_missing
FLAG_FAILED_ATTENTION = "failed_attention"
FLAG_TOO_FAST = "too_fast"
FLAG_HIGH_MISSING = "high_missing"
FLAG_GOOD = "good"
QUALITY_FLAGS = [FLAG_GOOD, FLAG_FAILED_ATTENTION, FLAG_TOO_FAST, FLAG_HIGH_MISSING]

# Log file names
QUALITY_LOG_FILENAME = "quality_flags.jsonl"
DIAGNOSTICS_LOG_FILENAME = "diagnostics.jsonl"
