"""Closed-class function words dropped before alignment and coverage scoring."""
from typing import Dict, FrozenSet, List

from services.tokenizer import Token

STOP_WORDS: Dict[str, FrozenSet[str]] = {
    "en": frozenset({
        "a", "an", "the",
        "to", "of", "in", "on", "at", "for", "by", "with", "from",
        "is", "am", "are", "was", "were", "be", "been",
        "and", "or", "but",
    }),
    "ko": frozenset({
        "은", "는", "이", "가", "을", "를", "에", "의", "도", "와", "과", "그리고",
    }),
    "ja": frozenset({
        "は", "が", "を", "に", "の", "で", "と", "も", "へ", "です", "ます",
    }),
    "zh": frozenset({
        "的", "了", "是", "在", "和", "吗", "呢", "吧",
    }),
}

EMPTY_STOP_SET: FrozenSet[str] = frozenset()


def stop_words_for(locale: str) -> FrozenSet[str]:
    """Stop-set for the language prefix of ``locale``; unknown languages get none."""
    return STOP_WORDS.get((locale or "")[:2].lower(), EMPTY_STOP_SET)


def filter_content_tokens(tokens: List[Token], locale: str) -> List[Token]:
    stop_set = stop_words_for(locale)
    content = [token for token in tokens if token.text not in stop_set]
    # A sentence made only of function words keeps them rather than vanishing
    return content if content or not tokens else list(tokens)
