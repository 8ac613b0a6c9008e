import string

import pytest

from dsakit.text import CharClass, characters, classify_char, length, reverse


def test_classify_letters():
    assert all(classify_char(ch) is CharClass.CAPITAL for ch in string.ascii_uppercase)
    assert all(classify_char(ch) is CharClass.SMALL for ch in string.ascii_lowercase)


def test_classify_digits():
    assert all(classify_char(ch) is CharClass.DIGIT for ch in string.digits)


def test_classify_special_symbols():
    assert all(classify_char(ch) is CharClass.SPECIAL for ch in string.punctuation)
    assert classify_char(" ") is CharClass.SPECIAL
    assert classify_char("\x7f") is CharClass.SPECIAL


def test_classify_non_ascii():
    assert classify_char("é") is CharClass.OTHER


@pytest.mark.parametrize("bad", ["", "ab"])
def test_classify_requires_one_character(bad):
    with pytest.raises(ValueError):
        classify_char(bad)


def test_characters_round_trip():
    text = "hello, world\n"
    parts = characters(text)
    assert len(parts) == len(text)
    assert "".join(parts) == text


def test_reverse_is_an_involution():
    for text in ["", "a", "abc", "racecar", "hello world\n"]:
        assert reverse(reverse(text)) == text


def test_reverse_swaps_ends():
    text = "abcdef"
    result = reverse(text)
    assert result[0] == text[-1]
    assert result[-1] == text[0]
    assert sorted(result) == sorted(text)


def test_length_ignores_one_trailing_newline():
    assert length("hello\n") == length("hello") == len("hello")
    assert length("hi\n\n") == len("hi\n")
    assert length("") == 0