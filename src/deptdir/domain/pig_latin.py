"""Pig latin word transformer.

Works on characters rather than bytes, so words containing multi-byte
characters split cleanly.
"""

from __future__ import annotations

VOWELS = frozenset("aeiou")


def _first_vowel(word: str) -> int | None:
    for index, letter in enumerate(word):
        if letter.lower() in VOWELS:
            return index
    return None


def convert_word(word: str) -> str:
    """Transform one word.

    Examples:
        >>> convert_word("first")
        'irst-fay'
        >>> convert_word("apple")
        'apple-hay'
        >>> convert_word("cbnm")
        'cbnm'
    """
    index = _first_vowel(word)
    if index is None:
        return word
    if index == 0:
        return f"{word}-hay"
    return f"{word[index:]}-{word[:index]}ay"


def convert_to_pig_latin(sentence: str) -> str:
    """Transform each whitespace-separated word and rejoin with single spaces."""
    return " ".join(convert_word(word) for word in sentence.split())
