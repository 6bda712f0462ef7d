from typing import Dict, Any
from config import Config
from services.utils import clamp


class PronunciationAnalyzer:
    def __init__(self):
        self.neutral = Config.NEUTRAL_PRONUNCIATION
        self.phonetic_floor = Config.PHONETIC_FLOOR
        self.word_weight = Config.PRONUNCIATION_WORD_WEIGHT

    def analyze_pronunciation(self, wer: float, has_reference: bool) -> Dict[str, Any]:
        """Approximate pronunciation from transcript accuracy against the reference"""
        if has_reference:
            word_accuracy = clamp(1.0 - wer)
        else:
            # Nothing to compare against
            word_accuracy = self.neutral

        # The phonetic proxy keeps a floor so a near miss never scores zero
        phonetic = (1.0 - self.phonetic_floor) * word_accuracy + self.phonetic_floor
        score = self.word_weight * word_accuracy + (1.0 - self.word_weight) * phonetic

        return {
            "word_accuracy": word_accuracy,
            "phonetic": phonetic,
            "pronunciation_score": clamp(score),
        }
