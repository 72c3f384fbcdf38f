"""
Game Session

State machine for a single round: one secret, a guess budget and the
ACTIVE / WON / LOST status derived from them.
"""

from typing import List, Tuple, Union

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..models.game import (
    GuessFeedback, GuessRejection, RejectReason, SessionStatus
)
from ..utils.helpers import normalize_word
from .scoring import evaluate


class GameSession:
    """
    One round of Wordle against a fixed secret.

    ``submit_guess`` is the only mutating operation. Refused guesses are
    reported as GuessRejection values and leave the session untouched. A
    finished session is never reset; start a new one instead.

    Raises:
        ValueError: if the secret is not ``word_length`` characters long
    """

    def __init__(self, secret: str, max_guesses: int = MAX_GUESSES,
                 word_length: int = WORD_LENGTH):
        self._secret = normalize_word(secret)
        if len(self._secret) != word_length:
            raise ValueError(
                f"Secret {self._secret!r} must be length {word_length}"
            )
        self._max_guesses = max_guesses
        self._word_length = word_length
        self._guesses_used = 0
        self._won = False
        self._history: List[GuessFeedback] = []

    @property
    def status(self) -> SessionStatus:
        if self._won:
            return SessionStatus.WON
        if self._guesses_used >= self._max_guesses:
            return SessionStatus.LOST
        return SessionStatus.ACTIVE

    def submit_guess(self, raw_guess: str) -> Union[GuessFeedback, GuessRejection]:
        """Score a guess and advance the session, or explain why it was refused."""
        if self.status.is_terminal:
            return GuessRejection(RejectReason.GAME_ALREADY_OVER, "Game is already over.")

        guess = normalize_word(raw_guess)
        if len(guess) != self._word_length:
            return GuessRejection(
                RejectReason.WRONG_LENGTH,
                f"Guess must be length {self._word_length}"
            )

        feedback = GuessFeedback(guess, tuple(evaluate(self._secret, guess)))
        self._guesses_used += 1
        self._history.append(feedback)

        if guess == self._secret:
            self._won = True

        return feedback

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def max_guesses(self) -> int:
        return self._max_guesses

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def guesses_used(self) -> int:
        return self._guesses_used

    @property
    def guesses_remaining(self) -> int:
        return max(self._max_guesses - self._guesses_used, 0)

    @property
    def history(self) -> Tuple[GuessFeedback, ...]:
        return tuple(self._history)

    def is_win(self) -> bool:
        return self._won

    def is_game_over(self) -> bool:
        return self._won or self._guesses_used >= self._max_guesses

    def __repr__(self) -> str:
        return (f"GameSession(status={self.status.value}, "
                f"guesses_used={self._guesses_used}/{self._max_guesses})")
