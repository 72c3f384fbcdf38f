"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterState(Enum):
    """Per-position classification of a scored guess."""
    CORRECT = "CORRECT"  # right letter, right position
    PRESENT = "PRESENT"  # right letter, wrong position
    ABSENT = "ABSENT"    # not in word, or all occurrences already claimed


class SessionStatus(Enum):
    """Lifecycle tag of a single game session."""
    ACTIVE = "ACTIVE"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionStatus.ACTIVE


class RejectReason(Enum):
    """Why a guess was refused by a session."""
    GAME_ALREADY_OVER = "GAME_ALREADY_OVER"
    WRONG_LENGTH = "WRONG_LENGTH"


@dataclass(frozen=True)
class GuessFeedback:
    """Normalized guess plus one LetterState per character."""
    guess: str
    states: Tuple[LetterState, ...]

    def is_all_correct(self) -> bool:
        return all(state is LetterState.CORRECT for state in self.states)

    def pairs(self) -> List[Tuple[str, str]]:
        """Letter/state pairs as plain strings, ready for JSON serialization."""
        return [(letter, state.value) for letter, state in zip(self.guess, self.states)]


@dataclass(frozen=True)
class GuessRejection:
    """Typed failure returned instead of feedback when a guess is refused."""
    reason: RejectReason
    message: str


@dataclass
class GameState:
    """Snapshot of a managed session."""
    game_id: str
    guesses_used: int
    max_guesses: int
    word_length: int
    status: str
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter state as string for JSON serialization
    letter_status: Dict[str, str] = field(default_factory=dict)
    secret: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.status != SessionStatus.ACTIVE.value

    @property
    def won(self) -> bool:
        return self.status == SessionStatus.WON.value
