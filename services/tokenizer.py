"""Locale-aware tokenization of transcripts and reference sentences."""
import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

_HAN = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]")
_HIRAGANA = re.compile(r"[\u3040-\u309f]")
_KATAKANA = re.compile(r"[\u30a0-\u30ff\u31f0-\u31ff\uff66-\uff9f]")

# Characters that stay inside a word when the right kind of character sits on
# both sides: letters for MidLetter, digits for MidNum, either for MidNumLet.
_MID_LETTER = {"\u00b7"}
_MID_NUM = {",", ";"}
_MID_NUM_LET = {".", "'", "\u2019"}

# Particles split off the front of a kana run that follows a content word,
# and polite endings split off the back of a run.
_KANA_PARTICLES = frozenset("はがをにのでともへ")
_KANA_ENDINGS = ("です", "ます")

_CONTENT_CLASSES = {"han", "katakana", "word"}

# Whitespace plus common punctuation across Latin, CJK, Korean and Japanese text
_FALLBACK_SPLIT = re.compile(
    r"[\s,.!?;:\"'()\[\]{}<>/\\\-\u2013\u2014\u2026\u00b7"
    r"\u3001\u3002\uff0c\uff0e\uff01\uff1f\uff1b\uff1a"
    r"\u300c\u300d\u300e\u300f\uff08\uff09\u3010\u3011\u300a\u300b\u3008\u3009"
    r"\uff5e\u301c\u30fb\u2018\u2019\u201c\u201d]+"
)

# Languages whose dotted/dotless I need special lower-casing
_DOTTED_I_LANGUAGES = {"tr", "az"}


@dataclass(frozen=True)
class Token:
    text: str
    locale: str


def normalize_text(text: str, locale: str) -> str:
    """NFC-normalize and lower-case ``text`` using the casing rules of ``locale``."""
    text = unicodedata.normalize("NFC", text)
    if locale[:2].lower() in _DOTTED_I_LANGUAGES:
        text = text.replace("I", "\u0131").replace("\u0130", "i")
    return text.lower()


def _char_class(ch: str) -> str:
    if _HAN.match(ch):
        return "han"
    if _HIRAGANA.match(ch):
        return "hiragana"
    if _KATAKANA.match(ch):
        return "katakana"
    if unicodedata.category(ch)[0] in "LNM":
        return "word"
    if ch in _MID_LETTER or ch in _MID_NUM or ch in _MID_NUM_LET:
        return "mid"
    return ""


def _joins(before: str, mid: str, after: str) -> bool:
    if not before or not after:
        return False
    letters = unicodedata.category(before)[0] in "LM" and unicodedata.category(after)[0] in "LM"
    digits = unicodedata.category(before)[0] == "N" and unicodedata.category(after)[0] == "N"
    if mid in _MID_NUM_LET:
        return letters or digits
    if mid in _MID_LETTER:
        return letters
    return digits


def _runs(text: str) -> List[Tuple[str, str]]:
    """Group characters into (class, text) runs; separators get class ""."""
    runs: List[Tuple[str, str]] = []
    current: List[str] = []
    current_class = ""

    for i, ch in enumerate(text):
        cls = _char_class(ch)
        if cls == "mid":
            before = text[i - 1] if i > 0 else ""
            after = text[i + 1] if i + 1 < len(text) else ""
            if current_class == "word" and _joins(before, ch, after):
                current.append(ch)
                continue
            cls = ""
        if cls == "han" or cls != current_class:
            if current:
                runs.append((current_class, "".join(current)))
            current = []
            current_class = cls
        current.append(ch)
    if current:
        runs.append((current_class, "".join(current)))
    return runs


def _split_kana_run(run: str, follows_content: bool) -> List[str]:
    if run in _KANA_ENDINGS:
        return [run]
    pieces = []
    if follows_content and len(run) > 1 and run[0] in _KANA_PARTICLES:
        pieces.append(run[0])
        run = run[1:]
    for ending in _KANA_ENDINGS:
        if len(run) > len(ending) and run.endswith(ending):
            pieces.extend([run[:-len(ending)], ending])
            return pieces
    pieces.append(run)
    return pieces


def segment_words(text: str) -> List[str]:
    """Split ``text`` into word-like segments.

    An approximation of the Unicode default word boundaries, without a
    dictionary:

    * runs of letters, digits and combining marks form one segment, so
      Hangul eojeol and accented Latin words stay whole;
    * ``'`` and ``.`` stay inside a word between two letters or two digits
      ("don't", "e.g", "3.14"), ``,`` only between digits ("1,000"); hyphens
      always split;
    * every Han character is a segment of its own;
    * katakana and hiragana runs stay together, breaking at script changes.
      A hiragana run directly after a content word loses a leading one-kana
      particle ("コーヒーをください" gives コーヒー / を / ください), and a
      trailing です or ます is split off. All-kana text without spaces is
      otherwise left as written.
    """
    segments: List[str] = []
    previous = ""
    for cls, run in _runs(text):
        if cls == "hiragana":
            segments.extend(_split_kana_run(run, previous in _CONTENT_CLASSES))
        elif cls:
            segments.append(run)
        previous = cls
    return segments


def split_on_punctuation(text: str) -> List[str]:
    """Fallback segmentation: whitespace and a fixed punctuation set."""
    return [piece for piece in _FALLBACK_SPLIT.split(text) if piece]


def has_letter_or_digit(segment: str) -> bool:
    return any(unicodedata.category(ch)[0] in "LN" for ch in segment)


_STRATEGIES: Sequence[Callable[[str], List[str]]] = (segment_words, split_on_punctuation)


def tokenize(text: str, locale: str, strategies: Sequence[Callable[[str], List[str]]] = _STRATEGIES) -> List[Token]:
    """Turn ``text`` into word-like tokens in reading order.

    Strategies are tried in order and a failing one is skipped. Never raises
    and never logs: the worst case is an empty list.
    """
    if not text:
        return []
    try:
        normalized = normalize_text(text, locale or "")
    except (TypeError, ValueError):
        return []

    for strategy in strategies:
        try:
            segments = strategy(normalized)
        except Exception:
            continue
        return [Token(segment, locale) for segment in segments if has_letter_or_digit(segment)]
    return []


def is_single_char_word(segment: str) -> bool:
    """True for a lone Han character, which is a word on its own."""
    return len(segment) == 1 and bool(_HAN.match(segment))
