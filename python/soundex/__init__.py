"""soundex - Classic American Soundex encoding.

Groups words that sound alike under one short code: the first letter of
the word followed by three digits for the consonants after it.

Core concepts:
    - Consonants fall into six digit classes; vowels, h, w, y and
      non-letters are not coded
    - Adjacent letters of the same class are coded once
    - A vowel between two letters of the same class codes both

Example:
    "Robert" and "Rupert" -> "R163"

Usage:
    from soundex import encode, classify, is_valid_classification

    encode("Ashcraft")                   # "A261"
    classify("k")                        # "2"
    is_valid_classification(classify("a"))  # False
"""

from .encoder import (
    ENCODING_TABLE,
    INVALID_CLASSIFICATION,
    MAX_CODE_LENGTH,
    VOWEL_SEPARATORS,
    InvalidInputError,
    classify,
    encode,
    is_valid_classification,
)

__version__ = "0.1.0"

__all__ = [
    "ENCODING_TABLE",
    "INVALID_CLASSIFICATION",
    "MAX_CODE_LENGTH",
    "VOWEL_SEPARATORS",
    "InvalidInputError",
    "classify",
    "encode",
    "is_valid_classification",
]
