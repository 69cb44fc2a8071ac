import pytest

from phrase_capture.config import NO_PHRASE_REASON
from phrase_capture.extractors import support_count
from phrase_capture.phrase import NoSequenceFound, PhraseResult, extract_phrase

EXPECTED = "alpha beta gamma delta echo foxtrot golf hotel india juliet kilo lima"
NUMBERED = "1 alpha 2 beta 3 gamma 4 delta 5 echo 6 foxtrot 7 golf 8 hotel 9 india 10 juliet 11 kilo 12 lima"


@pytest.mark.parametrize(
    "text",
    [
        NUMBERED,
        f"Your recovery phrase:\n{NUMBERED}\nNever share it!",
        f"## Backup 2024 ##  {NUMBERED}  ... 13 secrets, 0 copies",
        NUMBERED.replace(" ", "\n"),
    ],
)
def test_space_numbered_phrase_survives_noise(text):
    result = extract_phrase(text)
    assert not result.failed
    assert result.phrase == EXPECTED
    assert result.method == "numbered"
    assert result.strategy == "space"
    assert result.support == 12


def test_dot_numbered_phrase_is_case_and_punctuation_insensitive():
    words = EXPECTED.split()
    text = " ".join(f"{i}. {w.capitalize()}{'!' if i % 2 else '?'}" for i, w in enumerate(words, start=1))
    result = extract_phrase(text)
    assert result.phrase == EXPECTED
    assert result.strategy == "dot"


def test_upper_case_space_numbered_phrase_is_lowercased():
    assert extract_phrase(NUMBERED.upper()).phrase == EXPECTED


def test_out_of_range_numerals_do_not_leak_into_phrase():
    result = extract_phrase(NUMBERED + " 13 extra 0 zero")
    assert result.phrase == EXPECTED
    assert "extra" not in result.words
    assert "zero" not in result.words


def test_duplicate_position_keeps_first_word():
    text = NUMBERED.replace("1 alpha", "1 alpha 1 wrong")
    assert extract_phrase(text).phrase == EXPECTED


def test_mixed_separators_fall_through_to_plain_words():
    words = EXPECTED.split()
    text = " ".join(f"{i}. {w}" if i % 2 else f"{i} {w}" for i, w in enumerate(words, start=1))
    result = extract_phrase(text)
    assert result.method == "fallback"
    assert result.phrase == EXPECTED
    assert result.candidates == {}


def test_unnumbered_text_uses_fallback():
    text = "apple banana cherry date elderberry fig grape honeydew kiwi lemon mango nectarine extra words"
    result = extract_phrase(text)
    assert result.method == "fallback"
    assert result.phrase == "apple banana cherry date elderberry fig grape honeydew kiwi lemon mango nectarine"


def test_ten_paren_positions_return_short_phrase():
    words = EXPECTED.split()[:10]
    text = " ".join(f"{i}) {w}" for i, w in enumerate(words, start=1))
    result = extract_phrase(text)
    assert result.method == "numbered"
    assert result.support == 10
    assert result.support == support_count(result.candidates)
    assert result.words == words


def test_strict_length_rejects_ten_positions():
    words = EXPECTED.split()[:10]
    text = " ".join(f"{i}) {w}" for i, w in enumerate(words, start=1))
    result = extract_phrase(text, strict_length=True)
    # only ten plain words, so the fallback cannot help either
    assert result.failed


def test_too_little_text_fails_with_reason():
    result = extract_phrase("hello world")
    assert result.failed
    assert result.phrase is None
    assert result.reason == NO_PHRASE_REASON
    assert result.to_dict() == {
        "failed": True,
        "reason": NO_PHRASE_REASON,
        "method": "missing",
        "support": 0,
        "strategy": "paren",
    }
    with pytest.raises(NoSequenceFound):
        result.unwrap()


def test_success_to_dict_and_unwrap():
    result = extract_phrase(NUMBERED)
    assert result.unwrap() == EXPECTED
    assert result.to_dict()["phrase"] == EXPECTED
    assert "failed" not in result.to_dict()


@pytest.mark.parametrize(
    "text",
    ["", " \n\t", "\x00\x01", "1) 2. 3", "12" * 50, "é ü ß 1 ø", "9" * 5000 + " word"],
)
def test_garbage_input_never_raises(text):
    result = extract_phrase(text)
    assert isinstance(result, PhraseResult)
    assert result.failed


def test_extract_phrase_is_pure():
    text = f"noise 1. Apple {NUMBERED}"
    first = extract_phrase(text)
    second = extract_phrase(text)
    assert first == second
    assert first.candidates is not second.candidates


def test_long_digit_run_before_list_does_not_break_extraction():
    result = extract_phrase("9" * 5000 + " word " + NUMBERED)
    assert result.phrase == EXPECTED
    assert result.strategy == "space"
