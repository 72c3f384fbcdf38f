"""
Services Package

Contains the scoring algorithm, the word source, the session state machine
and the multi-session game service.
"""

from .scoring import evaluate
from .word_source import EmptyWordSourceError, WordSource, load_word_source
from .game_session import GameSession
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'evaluate',
    'EmptyWordSourceError', 'WordSource', 'load_word_source',
    'GameSession',
    'GameService', 'get_game_service', 'initialize_game_service'
]
