"""Character classification and simple string helpers."""

from __future__ import annotations

from enum import Enum


class CharClass(Enum):
    """The kind of an ASCII character."""

    CAPITAL = "capital"
    SMALL = "small case"
    DIGIT = "digit"
    SPECIAL = "special symbol"
    OTHER = "other"


def classify_char(ch: str) -> CharClass:
    """Classify a single character as capital, small, digit, special or other."""
    if len(ch) != 1:
        raise ValueError("expected exactly one character")
    if "A" <= ch <= "Z":
        return CharClass.CAPITAL
    if "a" <= ch <= "z":
        return CharClass.SMALL
    if "0" <= ch <= "9":
        return CharClass.DIGIT
    if ord(ch) <= 127:
        return CharClass.SPECIAL
    return CharClass.OTHER


def characters(text: str) -> list[str]:
    """Return the individual characters of *text*."""
    return list(text)


def reverse(text: str) -> str:
    """Return *text* with its characters in reverse order."""
    return text[::-1]


def length(text: str) -> int:
    """Return the length of a line of text, not counting one trailing newline."""
    return len(text.removesuffix("\n"))