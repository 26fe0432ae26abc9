"""Multi-select questions and the indicator vocabularies they decompose into."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Indicator:
    """A boolean attribute set when any pattern occurs in the raw answer."""

    name: str
    patterns: Tuple[str, ...]


@dataclass(frozen=True)
class MultiSelectField:
    source: str
    indicators: Tuple[Indicator, ...]
    count_column: str

    @property
    def indicator_names(self) -> List[str]:
        return [ind.name for ind in self.indicators]


AI_TOOLS = MultiSelectField(
    source="ai_tools_used",
    indicators=(
        Indicator("uses_chatgpt", ("ChatGPT", "GPT-4", "OpenAI")),
        Indicator("uses_copilot", ("Copilot",)),
        Indicator("uses_gemini", ("Gemini", "Bard")),
        Indicator("uses_claude", ("Claude",)),
        Indicator("uses_image_gen", ("image generator", "Midjourney", "DALL-E", "DALL·E", "Stable Diffusion")),
        Indicator("uses_voice_assistant", ("voice assistant", "Siri", "Alexa", "Google Assistant")),
    ),
    count_column="ai_tools_count",
)

AI_CONCERNS = MultiSelectField(
    source="ai_concerns",
    indicators=(
        Indicator("concern_job_loss", ("job", "employment")),
        Indicator("concern_privacy", ("privacy", "surveillance", "personal data")),
        Indicator("concern_misinformation", ("misinformation", "disinformation", "deepfake", "fake news")),
        Indicator("concern_bias", ("bias", "discriminat", "unfair")),
        Indicator("concern_safety", ("safety", "loss of control", "existential")),
        Indicator("concern_creativity", ("creativ", "artist")),
    ),
    count_column="ai_concerns_count",
)

MULTISELECT_FIELDS: List[MultiSelectField] = [AI_TOOLS, AI_CONCERNS]
