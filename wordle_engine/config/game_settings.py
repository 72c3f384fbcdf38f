"""
Game Configuration Constants Module

Game rules and constants shared by the engine and the terminal shell.
Environment-driven overrides live in app_config.py; the values here are the
rules of a standard round.
"""

import string
from typing import Dict, Final, Iterable, Tuple

WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret and every guess."""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = string.ascii_uppercase

FALLBACK_WORDS: Final[Tuple[str, ...]] = ("APPLE", "CRANE", "WORLD", "CHAIR", "POINT")
"""Built-in word list used when the dictionary file is missing or yields no words."""


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters by frequency
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    # Calculate letter frequency distribution
    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
