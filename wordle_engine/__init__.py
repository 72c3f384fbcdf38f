"""
Wordle Engine Package

A single-player word-guessing game engine: a word source, a pure scoring
algorithm and a per-round session state machine, plus a service that keeps
many sessions apart by game id.
"""

__version__ = "1.0.0"

from .config import Config
from .models import (
    GameState, GuessFeedback, GuessRejection, LetterState, RejectReason, SessionStatus
)
from .services import (
    EmptyWordSourceError,
    GameService,
    GameSession,
    WordSource,
    evaluate,
    get_game_service,
    initialize_game_service,
    load_word_source,
)

__all__ = [
    'Config',
    'GameState', 'GuessFeedback', 'GuessRejection', 'LetterState', 'RejectReason', 'SessionStatus',
    'EmptyWordSourceError', 'GameService', 'GameSession', 'WordSource', 'evaluate',
    'get_game_service', 'initialize_game_service', 'load_word_source',
]
