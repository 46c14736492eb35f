"""Soundex encoder.

Maps a word to a fixed-length code: the uppercased first character
followed by digits for the consonant classes that follow it.

Letter classes:
    1: b f p v
    2: c g j k q s x z
    3: d t
    4: l
    5: m n
    6: r

Vowels, h, w, y and non-letters carry no class. Vowels separate
duplicates (a repeated class after a vowel is coded again); the other
unclassified characters are transparent.

Usage:
    from soundex import encode
    encode("Robert")   # "R163"
    encode("Ashcraft") # "A261"
"""

import logging
from types import MappingProxyType
from typing import Optional

from . import config as cfg

log = logging.getLogger(__name__)

MAX_CODE_LENGTH = cfg.FALLBACK_DEFAULTS["code_length"]

# Returned by classify() for anything that is not coded
INVALID_CLASSIFICATION: Optional[str] = None

VOWEL_SEPARATORS = frozenset("aeiou")

_LETTER_GROUPS = {
    "bfpv": "1",
    "cgjkqsxz": "2",
    "dt": "3",
    "l": "4",
    "mn": "5",
    "r": "6",
}


def _build_table() -> MappingProxyType:
    """Build the letter -> class table from the letter groups."""
    table: dict[str, str] = {}
    for letters, digit in _LETTER_GROUPS.items():
        for letter in letters:
            table[letter] = digit
    return MappingProxyType(table)


ENCODING_TABLE = _build_table()


class InvalidInputError(ValueError):
    """Raised when a word cannot be encoded."""


def classify(letter: str) -> Optional[str]:
    """Get the digit class of a letter.

    Args:
        letter: Single character, any case.

    Returns:
        Digit string "1"-"6", or INVALID_CLASSIFICATION for vowels,
        h/w/y and anything that is not an ASCII letter.
    """
    return ENCODING_TABLE.get(letter.lower(), INVALID_CLASSIFICATION)


def is_valid_classification(value: Optional[str]) -> bool:
    """Check whether a classify() result is a real class digit."""
    return value in ENCODING_TABLE.values()


def _is_separator(letter: str) -> bool:
    return letter.lower() in VOWEL_SEPARATORS


def _upper_initial(letter: str) -> str:
    # "ß".upper() is "SS"; the head must stay one character
    upper = letter.upper()
    return upper if len(upper) == 1 else letter


def _word_after_initial(word: str, skip_class: Optional[str]) -> str:
    """Return the letters left to encode after the head.

    Letters sharing the head's class are dropped until the first letter
    with a different classification, unclassified ones included.
    """
    rest = word[1:]
    start = 0
    if is_valid_classification(skip_class):
        while start < len(rest) and classify(rest[start]) == skip_class:
            start += 1
    return rest[start:]


def _zero_pad(code: str, length: int) -> str:
    return code + "0" * (length - len(code))


def encode(word: str, length: Optional[int] = None) -> str:
    """Encode a word as a Soundex code.

    Args:
        word: Non-empty word. The first character is always copied
            (uppercased) into the code, even if it is not a letter.
        length: Total code length (uses the configured default if None).

    Returns:
        Code of exactly `length` characters, right-padded with zeros.

    Raises:
        InvalidInputError: If word is empty or not a string.
        ValueError: If length is not a positive int.
    """
    if not isinstance(word, str):
        raise InvalidInputError(f"Expected a string, got {type(word).__name__}")
    if not word:
        raise InvalidInputError("Cannot encode an empty word")

    if length is None:
        length = cfg.default_code_length()
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValueError(f"Code length must be a positive int: {length!r}")

    code = _upper_initial(word[0])
    skip_class = classify(word[0])
    last_class = skip_class

    for letter in _word_after_initial(word, skip_class):
        if len(code) >= length:
            break
        digit = classify(letter)
        if not is_valid_classification(digit):
            if _is_separator(letter):
                last_class = INVALID_CLASSIFICATION
            continue
        if digit != last_class:
            code += digit
            last_class = digit

    code = _zero_pad(code, length)
    log.debug("Encoded %r as %s", word, code)
    return code
