from typing import List, Dict, Any, Optional
from config import Config
from models import AudioStats, WordMetadata
from services.utils import clamp


class PauseAnalyzer:
    def __init__(self):
        self.pause_threshold = Config.PAUSE_THRESHOLD
        self.min_duration = Config.MIN_AUDIO_DURATION_SEC

    def analyze_pauses(self, words: List[WordMetadata]) -> Dict[str, Any]:
        """Analyze pause patterns between words"""
        if len(words) < 2:
            return {
                "pause_count": 0,
                "total_pause_time_sec": 0.0,
            }

        pauses = []
        for i in range(1, len(words)):
            pause_duration = words[i].start - words[i-1].end
            if pause_duration > self.pause_threshold:
                pauses.append(pause_duration)

        return {
            "pause_count": len(pauses),
            "total_pause_time_sec": round(sum(pauses), 2),
        }

    def build_audio_stats(self, words: List[WordMetadata], audio_duration_sec: Optional[float]) -> AudioStats:
        """Derive speaking rate and silence ratio from recognizer word timings.

        Without a recording length the end of the last word stands in for it.
        Pitch statistics cannot be recovered from timings and stay unset.
        """
        if not words:
            return AudioStats()
        if audio_duration_sec is None:
            audio_duration_sec = max(self.min_duration, max(w.end for w in words))
        if audio_duration_sec <= 0:
            return AudioStats()

        duration_minutes = audio_duration_sec / 60.0
        speech_time = _covered_time(words)
        return AudioStats(
            words_per_minute=len(words) / duration_minutes,
            duration_ms=audio_duration_sec * 1000.0,
            silence_ratio=clamp(1.0 - speech_time / audio_duration_sec),
        )


def _covered_time(words: List[WordMetadata]) -> float:
    # Union of word spans; recognizers sometimes emit overlapping words
    spans = sorted((w.start, w.end) for w in words if w.end > w.start)
    total = 0.0
    current_start: Optional[float] = None
    current_end = 0.0
    for start, end in spans:
        if current_start is None or start > current_end:
            if current_start is not None:
                total += current_end - current_start
            current_start, current_end = start, end
        else:
            current_end = max(current_end, end)
    if current_start is not None:
        total += current_end - current_start
    return total
