from dotenv import load_dotenv
import os

load_dotenv()


def _env_float(name: str, default: float) -> float:
    """Read a numeric override from the environment, failing fast on garbage."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


# Configuration class for the scoring engine
class Config:
    # Audio statistics defaults (used when the caller supplies nothing usable)
    DEFAULT_WPM = 120.0
    DEFAULT_SILENCE_RATIO = 0.15
    DEFAULT_PITCH_STD_DEV = 30.0
    DEFAULT_PITCH_MEAN = 150.0

    # Speaking rate calibration
    IDEAL_WPM = _env_float("SCORING_IDEAL_WPM", 135.0)
    WPM_SPREAD = _env_float("SCORING_WPM_SPREAD", 25.0)
    WPM_SWEET_SPOT = 0.75
    FLUENCY_SPEED_WEIGHT = 0.65

    # Pitch variability band (std / mean) mapped onto [0, 1]
    PROSODY_VARIABILITY_FLOOR = _env_float("SCORING_PROSODY_FLOOR", 0.06)
    PROSODY_VARIABILITY_SPAN = _env_float("SCORING_PROSODY_SPAN", 0.16)

    # Pronunciation proxy
    NEUTRAL_PRONUNCIATION = 0.8
    PHONETIC_FLOOR = 0.2
    PRONUNCIATION_WORD_WEIGHT = 0.6

    # A reference shorter than this is scored as free talk
    MIN_REFERENCE_TOKENS = 3

    REFERENCE_WEIGHTS = {
        "pronunciation": 0.40,
        "fluency": 0.30,
        "prosody": 0.15,
        "grammar": 0.15,
    }
    FREE_TALK_WEIGHTS = {
        "pronunciation": 0.25,
        "fluency": 0.45,
        "prosody": 0.20,
        "grammar": 0.10,
    }

    # Feedback thresholds
    HIGH_WER_THRESHOLD = 0.3
    SILENCE_THRESHOLD = _env_float("SCORING_SILENCE_THRESHOLD", 0.3)
    SLOW_WPM_THRESHOLD = _env_float("SCORING_SLOW_WPM", 90.0)
    FAST_WPM_THRESHOLD = _env_float("SCORING_FAST_WPM", 170.0)
    GRAMMAR_COVERAGE_THRESHOLD = 0.7
    PAUSE_THRESHOLD = 0.5  # seconds
    MIN_AUDIO_DURATION_SEC = 0.5

    MAX_FEEDBACK_ITEMS = 4
    MISSING_KEYWORD_COUNT = 3
    MISSING_PREVIEW_COUNT = 5

    DEFAULT_LOCALE = "en-US"
    DEFAULT_FEEDBACK_LANGUAGE = "en"
