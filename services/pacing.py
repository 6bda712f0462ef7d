import math
from typing import Dict, Any, Optional
from config import Config
from services.utils import clamp


class PacingAnalyzer:
    def __init__(self):
        self.ideal_wpm = Config.IDEAL_WPM
        self.spread = Config.WPM_SPREAD
        self.sweet_spot = Config.WPM_SWEET_SPOT
        self.speed_weight = Config.FLUENCY_SPEED_WEIGHT
        self.slow_threshold = Config.SLOW_WPM_THRESHOLD
        self.fast_threshold = Config.FAST_WPM_THRESHOLD

    def resolve_wpm(self, words_per_minute: Optional[float], duration_ms: Optional[float], word_count: int) -> Dict[str, Any]:
        """Provided rate first, then one derived from the duration, then the default"""
        if words_per_minute is not None:
            return {"wpm": words_per_minute, "source": "provided"}
        minutes = duration_ms / 60000.0 if duration_ms is not None else 0.0
        if minutes > 0:
            wpm = word_count / minutes
            if math.isfinite(wpm):
                return {"wpm": wpm, "source": "duration"}
        return {"wpm": Config.DEFAULT_WPM, "source": "default"}

    def speed_score(self, wpm: float) -> float:
        # Logistic around the ideal rate, folded so that the sweet spot scores
        # highest and drifting either way costs the same
        exponent = -(wpm - self.ideal_wpm) / max(self.spread, 1e-9)
        logistic = 1.0 / (1.0 + math.exp(max(-700.0, min(700.0, exponent))))
        return clamp(1.0 - 2.0 * abs(logistic - self.sweet_spot))

    def analyze_pacing(self, wpm: float, silence_ratio: float) -> Dict[str, Any]:
        """Analyze speaking pace (WPM) and silence into a fluency score"""
        speed = self.speed_score(wpm)
        silence = clamp(silence_ratio)
        fluency = self.speed_weight * speed + (1.0 - self.speed_weight) * (1.0 - silence)

        if wpm < self.slow_threshold:
            pace = "slow"
        elif wpm > self.fast_threshold:
            pace = "fast"
        else:
            pace = "ok"

        return {
            "pacing_wpm": wpm,
            "speed": speed,
            "pace": pace,
            "fluency_score": clamp(fluency),
        }
