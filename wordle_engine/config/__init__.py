"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: environment-based engine configuration
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET, FALLBACK_WORDS, MAX_GUESSES, WORD_LENGTH, get_word_statistics
)

__all__ = [
    # Engine configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'FALLBACK_WORDS', 'MAX_GUESSES', 'WORD_LENGTH', 'get_word_statistics'
]
