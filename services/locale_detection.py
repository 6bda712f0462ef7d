"""Approximate locale inference from the script a text is written in.

This is a script heuristic, not a language identifier: Spanish and English
both come back as ``en-US``. It never raises.
"""
import re

from config import Config

_HANGUL = re.compile(r"[\u1100-\u11ff\u3130-\u318f\uac00-\ud7a3]")
_KANA = re.compile(r"[\u3040-\u309f\u30a0-\u30ff\u31f0-\u31ff\uff66-\uff9f]")
_CJK = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]")
_LATIN = re.compile(r"[A-Za-z\u00c0-\u024f]")

# Checked in order; kana must win over ideographs since Japanese mixes both.
_SCRIPT_LOCALES = (
    (_HANGUL, "ko-KR"),
    (_KANA, "ja-JP"),
    (_CJK, "zh-CN"),
    (_LATIN, "en-US"),
)


def detect_script_locale(text: str) -> str:
    for pattern, locale in _SCRIPT_LOCALES:
        if pattern.search(text):
            return locale
    return Config.DEFAULT_LOCALE


def infer_locale(reference_text: str, transcript: str = "", hint: str = "auto") -> str:
    """Pick the locale used for tokenization.

    An explicit hint is returned verbatim, without checking it against any
    list of known locales. With ``"auto"`` the reference text is inspected,
    falling back to the transcript when the reference is blank.
    """
    if hint and hint != "auto":
        return hint
    sample = reference_text if reference_text and reference_text.strip() else transcript
    return detect_script_locale(sample or "")
