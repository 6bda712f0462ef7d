from typing import Dict, Any, List, Optional
from config import Config

FEEDBACK_TEMPLATES: Dict[str, Dict[str, str]] = {
    "en": {
        "high_wer": "Several words differed from the sentence. Listen to the model once more and repeat it slowly.",
        "silence": "Try to reduce long pauses and keep your speech flowing.",
        "slow": "Your speaking pace is too slow. Try to speak a bit faster.",
        "fast": "Your speaking pace is too fast. Try to slow down a bit.",
        "grammar": "Some key parts of the sentence were left out. Try to say the whole sentence.",
        "missing": "Try to include these words: {words}",
    },
    "ko": {
        "high_wer": "문장과 다른 단어가 많았어요. 예문을 다시 듣고 천천히 따라 말해 보세요.",
        "silence": "긴 멈춤을 줄이고 자연스럽게 이어서 말해 보세요.",
        "slow": "말하는 속도가 너무 느려요. 조금 더 빠르게 말해 보세요.",
        "fast": "말하는 속도가 너무 빨라요. 조금 천천히 말해 보세요.",
        "grammar": "문장의 핵심 부분이 빠졌어요. 문장 전체를 말해 보세요.",
        "missing": "다음 단어를 포함해 보세요: {words}",
    },
    "ja": {
        "high_wer": "文と違う単語がいくつかありました。お手本をもう一度聞いて、ゆっくり繰り返してみましょう。",
        "silence": "長い間を減らして、なめらかに話してみましょう。",
        "slow": "話すスピードが遅すぎます。もう少し速く話してみましょう。",
        "fast": "話すスピードが速すぎます。もう少しゆっくり話してみましょう。",
        "grammar": "文の大事な部分が抜けています。文全体を言ってみましょう。",
        "missing": "次の単語を入れてみましょう: {words}",
    },
    "zh": {
        "high_wer": "有几个词和原句不同。请再听一遍示范，然后慢慢跟读。",
        "silence": "尽量减少长时间停顿，让表达更连贯。",
        "slow": "语速太慢了，试着说得快一点。",
        "fast": "语速太快了，试着放慢一点。",
        "grammar": "句子的关键部分遗漏了，请尝试说出完整的句子。",
        "missing": "试着说出这些词：{words}",
    },
}


def feedback_language(locale: Optional[str]) -> str:
    language = (locale or "")[:2].lower()
    return language if language in FEEDBACK_TEMPLATES else Config.DEFAULT_FEEDBACK_LANGUAGE


class FeedbackGenerator:
    def __init__(self):
        self.wer_threshold = Config.HIGH_WER_THRESHOLD
        self.silence_threshold = Config.SILENCE_THRESHOLD
        self.grammar_threshold = Config.GRAMMAR_COVERAGE_THRESHOLD
        self.max_items = Config.MAX_FEEDBACK_ITEMS
        self.keyword_count = Config.MISSING_KEYWORD_COUNT

    def generate_feedback(self,
                          pacing: Dict[str, Any],
                          grammar: Dict[str, Any],
                          wer: float,
                          silence_ratio: float,
                          has_reference: bool,
                          locale: Optional[str] = None) -> List[str]:
        """Coaching tips from independent threshold rules, earliest rule first"""
        templates = FEEDBACK_TEMPLATES[feedback_language(locale)]
        feedback = []

        if has_reference and wer > self.wer_threshold:
            feedback.append(templates["high_wer"])

        if silence_ratio > self.silence_threshold:
            feedback.append(templates["silence"])

        if pacing.get("pace") in ("slow", "fast"):
            feedback.append(templates[pacing["pace"]])

        if has_reference and grammar.get("grammar_score", 1.0) < self.grammar_threshold:
            feedback.append(templates["grammar"])

        missing = _unique(grammar.get("missing_keywords", []))[:self.keyword_count]
        if has_reference and missing:
            feedback.append(templates["missing"].format(words=", ".join(missing)))

        return feedback[:self.max_items]


def _unique(words: List[str]) -> List[str]:
    return list(dict.fromkeys(words))
