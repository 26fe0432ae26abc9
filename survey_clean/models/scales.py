"""Ordered answer scales for the single-select attitude questions."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class OrdinalScale:
    """A named, totally ordered sequence of answer labels.

    Raw answers are stripped and passed through ``substitutions`` (in order)
    before being matched exactly against ``labels``. Anything that does not
    match is treated as missing.
    """

    name: str
    labels: Tuple[str, ...]
    substitutions: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.labels:
            raise ValueError(f"Scale '{self.name}' has no labels")
        if len(set(self.labels)) != len(self.labels):
            raise ValueError(f"Scale '{self.name}' has duplicate labels")

    @property
    def size(self) -> int:
        return len(self.labels)

    def match(self, value: Any) -> Optional[str]:
        """Return the scale label for a raw answer, or None if it does not match."""
        if not isinstance(value, str):
            return None
        text = value.strip()
        for old, new in self.substitutions:
            text = text.replace(old, new)
        return text if text in self.labels else None

    def position(self, value: Any) -> Optional[int]:
        """Return the 1-indexed position of a raw answer, or None."""
        label = self.match(value)
        if label is None:
            return None
        return self.labels.index(label) + 1


FAMILIARITY = OrdinalScale(
    "familiarity",
    ("Not at all familiar", "Slightly familiar", "Moderately familiar",
     "Very familiar", "Extremely familiar"),
    substitutions=(("Not familiar at all", "Not at all familiar"),),
)

FREQUENCY = OrdinalScale(
    "frequency",
    ("Never", "Less than monthly", "Monthly", "Weekly", "Daily"),
    substitutions=(("Every day", "Daily"), ("Once a week", "Weekly")),
)

COMFORT = OrdinalScale(
    "comfort",
    ("Very uncomfortable", "Uncomfortable", "Neutral", "Comfortable", "Very comfortable"),
    substitutions=(("Neither comfortable nor uncomfortable", "Neutral"),),
)

AGREEMENT = OrdinalScale(
    "agreement",
    ("Strongly disagree", "Disagree", "Neither agree nor disagree", "Agree", "Strongly agree"),
    substitutions=(("Neutral", "Neither agree nor disagree"),),
)

OUTLOOK = OrdinalScale(
    "outlook",
    ("Very negative", "Somewhat negative", "Neutral", "Somewhat positive", "Very positive"),
)

IMPACT = OrdinalScale(
    "impact",
    ("Much worse", "Somewhat worse", "No change", "Somewhat better", "Much better"),
    substitutions=(("Slightly", "Somewhat"),),
)

# Internal question name -> scale
ORDINAL_FIELDS: Dict[str, OrdinalScale] = {
    "ai_familiarity": FAMILIARITY,
    "ai_usage_frequency": FREQUENCY,
    "ai_comfort_work": COMFORT,
    "ai_comfort_health": COMFORT,
    "ai_comfort_finance": COMFORT,
    "ai_comfort_education": COMFORT,
    "ai_comfort_creative": COMFORT,
    "ai_trust_accuracy": AGREEMENT,
    "ai_trust_fairness": AGREEMENT,
    "ai_trust_privacy": AGREEMENT,
    "ai_trust_transparency": AGREEMENT,
    "ai_regulation_support": AGREEMENT,
    "ai_future_outlook": OUTLOOK,
    "ai_job_impact": IMPACT,
}


def ordinal_column(field_name: str) -> str:
    return f"{field_name}_ord"


def numeric_column(field_name: str) -> str:
    return f"{field_name}_num"
