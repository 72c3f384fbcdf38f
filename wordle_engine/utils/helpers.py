"""
Helper Functions

Contains utility functions used throughout the engine.
"""

import re

_LETTERS_ONLY = re.compile(r'[A-Z]+')


def normalize_word(word: str) -> str:
    """Trim surrounding whitespace and uppercase."""
    return word.strip().upper()


def is_letters_only(word: str) -> bool:
    """True when the word is non-empty and made only of A-Z (uppercase ASCII)."""
    return _LETTERS_ONLY.fullmatch(word) is not None
