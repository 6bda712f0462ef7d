from typing import Dict, Any
from config import Config
from services.utils import clamp


class ProsodyAnalyzer:
    """Pitch variability as a stand-in for intonation."""

    def __init__(self):
        self.floor = Config.PROSODY_VARIABILITY_FLOOR
        self.span = Config.PROSODY_VARIABILITY_SPAN

    def analyze_prosody(self, pitch_std_dev: float, pitch_mean: float) -> Dict[str, Any]:
        variability = pitch_std_dev / max(1.0, pitch_mean)
        score = (variability - self.floor) / self.span if self.span > 0 else 0.0
        return {
            "pitch_variability": variability,
            "prosody_score": clamp(score),
        }
