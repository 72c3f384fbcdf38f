"""
Data Models Package

Contains all data models and schemas used throughout the engine.
"""

from .game import (
    GameState,
    GuessFeedback,
    GuessRejection,
    LetterState,
    RejectReason,
    SessionStatus,
)

__all__ = [
    'GameState', 'GuessFeedback', 'GuessRejection',
    'LetterState', 'RejectReason', 'SessionStatus'
]
