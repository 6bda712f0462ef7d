import pytest

from services.tokenizer import (
    Token,
    is_single_char_word,
    normalize_text,
    segment_words,
    split_on_punctuation,
    tokenize,
)


def texts(tokens):
    return [t.text for t in tokens]


def test_latin_words_are_lowercased_and_punctuation_dropped():
    assert texts(tokenize("Hello, World! How are you?", "en-US")) == ["hello", "world", "how", "are", "you"]


def test_apostrophes_stay_inside_words_and_hyphens_split():
    assert texts(tokenize("Don't stop, well-known.", "en-US")) == ["don't", "stop", "well", "known"]


def test_tokens_carry_their_locale():
    assert tokenize("hi there", "en-GB") == [Token("hi", "en-GB"), Token("there", "en-GB")]


def test_hangul_words_are_not_split_into_syllables():
    assert texts(tokenize("안녕하세요 만나서 반가워요", "ko-KR")) == ["안녕하세요", "만나서", "반가워요"]


def test_han_characters_are_individual_segments():
    assert texts(tokenize("我喜欢咖啡。", "zh-CN")) == ["我", "喜", "欢", "咖", "啡"]


def test_kana_runs_stay_together_and_particle_splits_off():
    assert texts(tokenize("コーヒーをください", "ja-JP")) == ["コーヒー", "を", "ください"]


def test_text_is_composed_before_comparison():
    decomposed = "cafe\u0301"
    assert texts(tokenize(decomposed, "fr-FR")) == ["caf\u00e9"]


def test_turkish_dotted_and_dotless_i():
    assert normalize_text("İSTANBUL IRMAK", "tr-TR") == "istanbul ırmak"
    assert normalize_text("IRMAK", "en-US") == "irmak"


def test_digits_count_as_word_characters():
    assert texts(tokenize("Room 101, please", "en-US")) == ["room", "101", "please"]


@pytest.mark.parametrize("text", ["", "   ", "!!! ... ???", "。，"])
def test_no_word_content_gives_no_tokens(text):
    assert tokenize(text, "en-US") == []


def test_segment_words_keeps_order():
    assert segment_words("b a c") == ["b", "a", "c"]


def test_split_on_punctuation_handles_cjk_marks():
    assert split_on_punctuation("你好，世界。hello world") == ["你好", "世界", "hello", "world"]


def test_failing_strategy_falls_back_to_the_next():
    def broken(text):
        raise RuntimeError("segmenter unavailable")

    tokens = tokenize("Hello, world", "en-US", strategies=(broken, split_on_punctuation))
    assert texts(tokens) == ["hello", "world"]


def test_all_strategies_failing_gives_empty_sequence():
    def broken(text):
        raise RuntimeError("segmenter unavailable")

    assert tokenize("Hello, world", "en-US", strategies=(broken,)) == []


def test_is_single_char_word():
    assert is_single_char_word("和")
    assert not is_single_char_word("a")
    assert not is_single_char_word("和和")


def test_hiragana_words_are_not_split_into_characters():
    assert texts(tokenize("わたしはがくせいです", "ja-JP")) == ["わたしはがくせい", "です"]
    assert texts(tokenize("わたし は がくせい です", "ja-JP")) == ["わたし", "は", "がくせい", "です"]


def test_kana_after_kanji_splits_particle_and_keeps_ending_whole():
    assert texts(tokenize("私は学生です", "ja-JP")) == ["私", "は", "学", "生", "です"]


def test_dots_and_commas_join_numbers_and_abbreviations():
    assert texts(tokenize("Pi is 3.14, e.g. about 1,000 times less", "en-US")) == [
        "pi", "is", "3.14", "e.g", "about", "1,000", "times", "less",
    ]


def test_comma_between_words_still_splits():
    assert texts(tokenize("hello,world", "en-US")) == ["hello", "world"]


def test_is_single_char_word_excludes_kana():
    assert not is_single_char_word("は")


def test_strategy_failure_is_silent(caplog):
    def broken(text):
        raise RuntimeError("segmenter unavailable")

    caplog.set_level("DEBUG")
    assert texts(tokenize("Hello", "en-US", strategies=(broken, split_on_punctuation))) == ["hello"]
    assert caplog.records == []
