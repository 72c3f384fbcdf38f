"""
Game Service

Manages many independent game sessions keyed by game id.
"""

import uuid
from typing import Dict, List, Optional, Tuple

from ..config import Config
from ..models.game import GameState, GuessFeedback, GuessRejection, LetterState
from ..utils.game_logger import GameLogger, game_logger
from ..utils.helpers import is_letters_only, normalize_word
from .game_session import GameSession
from .word_source import WordSource, load_word_source

# Higher rank wins when the same letter is scored differently across guesses
_STATE_PRIORITY = {
    LetterState.ABSENT: 1,
    LetterState.PRESENT: 2,
    LetterState.CORRECT: 3,
}


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - Secret selection from the word source
    - Guess validation (length, alphabet, dictionary) before scoring
    - Game state snapshots that only reveal the secret once a game is over

    Each session is owned by exactly one game id; nothing mutable is shared
    between sessions.
    """

    def __init__(self, word_source: WordSource,
                 max_guesses: int = Config.MAX_GUESSES,
                 word_length: int = Config.WORD_LENGTH,
                 logger: Optional[GameLogger] = None):
        self.word_source = word_source
        self.max_guesses = max_guesses
        self.word_length = word_length
        self.logger = logger or game_logger
        self.games: Dict[str, GameSession] = {}
        self.letter_status: Dict[str, Dict[str, str]] = {}

    def create_new_game(self, secret: Optional[str] = None) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            secret: Explicit secret, mainly for tests and daily puzzles

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        # Select random word (service keeps this secret)
        target_word = secret if secret is not None else self.word_source.random_word()

        self.games[game_id] = GameSession(target_word, self.max_guesses, self.word_length)
        self.letter_status[game_id] = {}

        self.logger.log_game_event(
            game_id, 'game_created',
            max_guesses=self.max_guesses, word_length=self.word_length
        )
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the secret).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        history = session.history
        return GameState(
            game_id=game_id,
            guesses_used=session.guesses_used,
            max_guesses=session.max_guesses,
            word_length=session.word_length,
            status=session.status.value,
            guesses=[feedback.guess for feedback in history],
            guess_results=[feedback.pairs() for feedback in history],
            letter_status=self.letter_status[game_id].copy(),
            secret=session.secret if session.is_game_over() else None
        )

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Checks run in the order a player would want to hear about them:
        game state first, then shape, then the dictionary.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        session = self.games.get(game_id)
        if session is None:
            return False, "Game not found"

        if session.is_game_over():
            return False, "Game over. Start a new game to play again."

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = normalize_word(guess)

        if len(normalized_guess) != session.word_length:
            return False, f"Please enter a {session.word_length}-letter word."

        if not is_letters_only(normalized_guess):
            return False, "Letters only, please."

        if not self.word_source.is_valid_word(normalized_guess):
            return False, "Word not in list."

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[GameState]:
        """
        Processes a guess and updates game state.

        Args:
            game_id: Unique game identifier
            guess: The word guess

        Returns:
            Updated GameState or None if invalid
        """
        is_valid, error = self.is_valid_guess(game_id, guess)
        if not is_valid:
            self.logger.log_guess(game_id, guess, False, reason=error)
            return None

        session = self.games[game_id]
        outcome = session.submit_guess(guess)
        if isinstance(outcome, GuessRejection):
            self.logger.log_guess(game_id, guess, False, reason=outcome.message)
            return None

        self._update_letter_status(self.letter_status[game_id], outcome)
        self.logger.log_guess(
            game_id, outcome.guess, True,
            pattern=[state.value for state in outcome.states],
            guesses_used=session.guesses_used
        )

        if session.is_win():
            self.logger.log_game_event(
                game_id, 'game_won',
                guesses_used=session.guesses_used, secret=session.secret
            )
        elif session.is_game_over():
            self.logger.log_game_event(
                game_id, 'game_lost',
                guesses_used=session.guesses_used, secret=session.secret,
                final_guess=outcome.guess
            )

        return self.get_game_state(game_id)

    def _update_letter_status(self, letter_status: Dict[str, str], feedback: GuessFeedback) -> None:
        """
        Updates keyboard letter tracking based on a scored guess.
        """
        for letter, new_state in zip(feedback.guess, feedback.states):
            current = letter_status.get(letter)

            # Status can only progress in priority order
            if current is None or _STATE_PRIORITY[new_state] > _STATE_PRIORITY[LetterState(current)]:
                letter_status[letter] = new_state.value

    def active_game_ids(self) -> List[str]:
        return [game_id for game_id, session in self.games.items() if not session.is_game_over()]

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            self.letter_status.pop(game_id, None)
            self.logger.log_game_event(game_id, 'game_deleted')
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config, word_source: Optional[WordSource] = None,
                            max_guesses: Optional[int] = None,
                            word_length: Optional[int] = None) -> GameService:
    """
    Initialize the global game service instance.

    ``max_guesses`` and ``word_length`` override the values of ``config_class``
    when given, e.g. from command-line flags.
    """
    global _game_service
    if max_guesses is None:
        max_guesses = config_class.MAX_GUESSES
    if word_length is None:
        word_length = config_class.WORD_LENGTH
    if word_source is None:
        word_source = load_word_source(config_class.WORDS_FILE, word_length)
    _game_service = GameService(
        word_source,
        max_guesses=max_guesses,
        word_length=word_length
    )
    return _game_service
