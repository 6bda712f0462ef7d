import math
from numbers import Real
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel


def finite_or_none(value: Any) -> Optional[float]:
    # bool is a Real subclass but never a meaningful measurement
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, Real):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys while keeping snake_case attributes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WordMetadata(BaseModel):
    word: str
    start: float
    end: float
    confidence: float = 1.0


class AudioStats(CamelModel):
    words_per_minute: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("wordsPerMinute", "wpm", "words_per_minute"),
        serialization_alias="wordsPerMinute",
    )
    duration_ms: Optional[float] = None
    silence_ratio: Optional[float] = None
    pitch_std_dev: Optional[float] = None
    pitch_mean: Optional[float] = None

    @field_validator("*", mode="before")
    @classmethod
    def _finite_or_none(cls, value: Any) -> Optional[float]:
        return finite_or_none(value)


class ScoringInput(CamelModel):
    transcript: str = ""
    reference_text: str = ""
    language_hint: str = "auto"
    audio_stats: AudioStats = Field(default_factory=AudioStats)
    feedback_locale: Optional[str] = None
    words: List[WordMetadata] = Field(default_factory=list)
    audio_duration_sec: Optional[float] = None

    @field_validator("transcript", "reference_text", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("language_hint", mode="before")
    @classmethod
    def _coerce_hint(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            return "auto"
        return value

    @field_validator("feedback_locale", mode="before")
    @classmethod
    def _coerce_feedback_locale(cls, value: Any) -> Optional[str]:
        if not isinstance(value, str) or not value.strip():
            return None
        return value.strip()

    @field_validator("audio_stats", mode="before")
    @classmethod
    def _coerce_audio_stats(cls, value: Any) -> Any:
        if isinstance(value, (AudioStats, dict)):
            return value
        return {}

    @field_validator("words", mode="before")
    @classmethod
    def _usable_words(cls, value: Any) -> List[WordMetadata]:
        if not isinstance(value, (list, tuple)):
            return []
        words = []
        for item in value:
            try:
                word = item if isinstance(item, WordMetadata) else WordMetadata.model_validate(item)
            except ValidationError:
                continue
            if math.isfinite(word.start) and math.isfinite(word.end):
                words.append(word)
        return words

    @field_validator("audio_duration_sec", mode="before")
    @classmethod
    def _coerce_duration(cls, value: Any) -> Optional[float]:
        return finite_or_none(value)


class Diagnostics(CamelModel):
    locale: str
    mode: str
    has_reference: bool
    reference_token_count: int
    hypothesis_token_count: int
    key_token_count: int
    wer: float
    substitutions: int = 0
    deletions: int = 0
    insertions: int = 0
    wpm: float
    wpm_source: str
    silence_ratio: float
    pitch_std_dev: float
    pitch_mean: float
    pitch_variability: float
    pause_count: int = 0
    total_pause_time_sec: float = 0.0
    missing_tokens: List[str] = Field(default_factory=list)
    weights: Dict[str, float] = Field(default_factory=dict)


class ScoreBreakdown(CamelModel):
    total: int = Field(..., ge=0, le=100)
    pronunciation: int = Field(..., ge=0, le=100)
    fluency: int = Field(..., ge=0, le=100)
    prosody: int = Field(..., ge=0, le=100)
    grammar: int = Field(..., ge=0, le=100)
    feedback: List[str] = Field(default_factory=list, max_length=4)
    diagnostics: Diagnostics
