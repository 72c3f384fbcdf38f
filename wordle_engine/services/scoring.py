"""
Scoring

Implements the Wordle letter evaluation algorithm as a pure function.
"""

from typing import List, Optional

from ..models.game import LetterState

_ALPHABET_SIZE = 26


def _letter_index(letter: str) -> int:
    """Slot of an uppercase letter in the availability counter, -1 outside A-Z."""
    index = ord(letter) - ord('A')
    return index if 0 <= index < _ALPHABET_SIZE else -1


def evaluate(secret: str, guess: str) -> List[LetterState]:
    """
    Score ``guess`` against ``secret``, one LetterState per position.

    Both words must already be uppercase and of equal length. Exact matches
    are resolved first so they claim their letters before any PRESENT credit
    is handed out; remaining positions are then resolved left to right, so a
    duplicated letter is only PRESENT as many times as the secret still has
    it available.

    Raises:
        ValueError: if the words differ in length
    """
    if len(secret) != len(guess):
        raise ValueError(
            f"Guess length {len(guess)} does not match secret length {len(secret)}"
        )

    # Availability counter built from the secret's letter histogram
    counts = [0] * _ALPHABET_SIZE
    for letter in secret:
        index = _letter_index(letter)
        if index >= 0:
            counts[index] += 1

    result: List[Optional[LetterState]] = [None] * len(guess)

    # First pass: CORRECT
    for i, (target, letter) in enumerate(zip(secret, guess)):
        if letter == target:
            result[i] = LetterState.CORRECT
            index = _letter_index(letter)
            if index >= 0:
                counts[index] -= 1

    # Second pass: PRESENT or ABSENT
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        index = _letter_index(letter)
        if index >= 0 and counts[index] > 0:
            result[i] = LetterState.PRESENT
            counts[index] -= 1
        else:
            result[i] = LetterState.ABSENT

    return result  # type: ignore[return-value]
