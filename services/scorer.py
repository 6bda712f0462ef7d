"""Practice scoring: transcript + reference + audio statistics -> ScoreBreakdown.

The engine is a pure function of its input. It holds no mutable state, does
no I/O, and never raises for any input shape; degenerate input produces
degraded but valid scores.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from config import Config
from models import AudioStats, Diagnostics, ScoreBreakdown, ScoringInput, WordMetadata
from services.alignment import AlignmentResult, align_tokens
from services.feedback_generator import FeedbackGenerator
from services.grammar import GrammarAnalyzer
from services.locale_detection import infer_locale
from services.pacing import PacingAnalyzer
from services.pause_analysis import PauseAnalyzer
from services.pronunciation import PronunciationAnalyzer
from services.prosody import ProsodyAnalyzer
from services.stopwords import filter_content_tokens
from services.tokenizer import tokenize
from services.utils import clamp, to_percent


@dataclass(frozen=True)
class ResolvedAudioStats:
    wpm: float
    wpm_source: str
    silence_ratio: float
    pitch_std_dev: float
    pitch_mean: float
    pause_count: int = 0
    total_pause_time_sec: float = 0.0


class ScoringEngine:
    def __init__(self):
        self.pronunciation_analyzer = PronunciationAnalyzer()
        self.pacing_analyzer = PacingAnalyzer()
        self.pause_analyzer = PauseAnalyzer()
        self.prosody_analyzer = ProsodyAnalyzer()
        self.grammar_analyzer = GrammarAnalyzer()
        self.feedback_generator = FeedbackGenerator()

    def resolve_audio_stats(self,
                            stats: AudioStats,
                            word_count: int,
                            words: Optional[List[WordMetadata]] = None,
                            audio_duration_sec: Optional[float] = None) -> ResolvedAudioStats:
        """Fill every missing statistic, from word timings where there are any,
        otherwise with its calibrated default."""
        words = words or []
        timed = self.pause_analyzer.build_audio_stats(words, audio_duration_sec)
        pauses = self.pause_analyzer.analyze_pauses(words)

        if stats.words_per_minute is None and timed.words_per_minute is not None:
            rate = {"wpm": timed.words_per_minute, "source": "timings"}
        else:
            rate = self.pacing_analyzer.resolve_wpm(stats.words_per_minute, stats.duration_ms, word_count)

        silence = stats.silence_ratio
        if silence is None:
            silence = timed.silence_ratio if timed.silence_ratio is not None else Config.DEFAULT_SILENCE_RATIO
        return ResolvedAudioStats(
            wpm=rate["wpm"],
            wpm_source=rate["source"],
            silence_ratio=clamp(silence),
            pitch_std_dev=stats.pitch_std_dev if stats.pitch_std_dev is not None else Config.DEFAULT_PITCH_STD_DEV,
            pitch_mean=stats.pitch_mean if stats.pitch_mean is not None else Config.DEFAULT_PITCH_MEAN,
            pause_count=pauses["pause_count"],
            total_pause_time_sec=pauses["total_pause_time_sec"],
        )

    def score(self, scoring_input: Union[ScoringInput, Mapping, None]) -> ScoreBreakdown:
        scoring_input = _as_scoring_input(scoring_input)

        locale = infer_locale(scoring_input.reference_text, scoring_input.transcript, scoring_input.language_hint)
        reference_tokens = tokenize(scoring_input.reference_text, locale)
        hypothesis_tokens = tokenize(scoring_input.transcript, locale)
        stats = self.resolve_audio_stats(
            scoring_input.audio_stats,
            len(hypothesis_tokens),
            scoring_input.words,
            scoring_input.audio_duration_sec,
        )

        # Fewer than MIN_REFERENCE_TOKENS reference tokens is scored as free talk
        has_reference = len(reference_tokens) >= Config.MIN_REFERENCE_TOKENS

        reference_content = [t.text for t in filter_content_tokens(reference_tokens, locale)]
        hypothesis_content = [t.text for t in filter_content_tokens(hypothesis_tokens, locale)]
        hypothesis_words = [t.text for t in hypothesis_tokens]

        if has_reference:
            alignment = align_tokens(reference_content, hypothesis_content, Config.MISSING_PREVIEW_COUNT)
        else:
            alignment = AlignmentResult(wer=0.0, distance=0)

        pronunciation = self.pronunciation_analyzer.analyze_pronunciation(alignment.wer, has_reference)
        pacing = self.pacing_analyzer.analyze_pacing(stats.wpm, stats.silence_ratio)
        prosody = self.prosody_analyzer.analyze_prosody(stats.pitch_std_dev, stats.pitch_mean)
        grammar = self.grammar_analyzer.analyze_grammar(reference_content, hypothesis_words, has_reference)

        sub_scores = {
            "pronunciation": clamp(pronunciation["pronunciation_score"]),
            "fluency": clamp(pacing["fluency_score"]),
            "prosody": clamp(prosody["prosody_score"]),
            "grammar": clamp(grammar["grammar_score"]),
        }
        weights = Config.REFERENCE_WEIGHTS if has_reference else Config.FREE_TALK_WEIGHTS
        total = to_percent(sum(weights[name] * value for name, value in sub_scores.items()))

        feedback = self.feedback_generator.generate_feedback(
            pacing,
            grammar,
            alignment.wer,
            stats.silence_ratio,
            has_reference,
            scoring_input.feedback_locale or locale,
        )

        diagnostics = Diagnostics(
            locale=locale,
            mode="reference" if has_reference else "free_talk",
            has_reference=has_reference,
            reference_token_count=len(reference_tokens),
            hypothesis_token_count=len(hypothesis_tokens),
            key_token_count=grammar["key_token_count"],
            wer=alignment.wer,
            substitutions=alignment.substitutions,
            deletions=alignment.deletions,
            insertions=alignment.insertions,
            wpm=stats.wpm,
            wpm_source=stats.wpm_source,
            silence_ratio=stats.silence_ratio,
            pitch_std_dev=stats.pitch_std_dev,
            pitch_mean=stats.pitch_mean,
            pitch_variability=prosody["pitch_variability"],
            pause_count=stats.pause_count,
            total_pause_time_sec=stats.total_pause_time_sec,
            missing_tokens=list(alignment.missing),
            weights=dict(weights),
        )

        return ScoreBreakdown(
            total=total,
            feedback=feedback,
            diagnostics=diagnostics,
            **{name: to_percent(value) for name, value in sub_scores.items()},
        )


def _as_scoring_input(value: Any) -> ScoringInput:
    if isinstance(value, ScoringInput):
        return value
    if isinstance(value, Mapping):
        return ScoringInput.model_validate(dict(value))
    return ScoringInput()


_engine = ScoringEngine()


def score(scoring_input: Union[ScoringInput, Mapping, None]) -> ScoreBreakdown:
    """Score one practice attempt with the shared, stateless engine."""
    return _engine.score(scoring_input)


def score_dict(scoring_input: Union[ScoringInput, Mapping, None]) -> Dict[str, Any]:
    return score(scoring_input).model_dump(by_alias=True)
