"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import is_letters_only, normalize_word
from .game_logger import GameLogger, game_logger

__all__ = ['is_letters_only', 'normalize_word', 'GameLogger', 'game_logger']
