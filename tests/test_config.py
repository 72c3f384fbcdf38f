import json
import logging
import os

from wordle_engine.config import (
    ALPHABET, FALLBACK_WORDS, Config, TestingConfig, config, get_word_statistics
)
from wordle_engine.services import WordSource
from wordle_engine.utils import GameLogger, is_letters_only, normalize_word


def test_config_defaults():
    assert Config.WORD_LENGTH == 5
    assert Config.MAX_GUESSES == 6
    assert config['testing'] is TestingConfig
    assert config['default'] is config['development']


def test_bundled_word_list_loads_with_configured_length():
    source = WordSource.from_file(Config.WORDS_FILE, Config.WORD_LENGTH)

    assert os.path.basename(Config.WORDS_FILE) == "words.txt"
    assert source.load_error is None
    assert len(source) > 100
    assert all(len(word) == 5 for word in source)
    assert all(word in source for word in FALLBACK_WORDS)


def test_word_statistics():
    stats = get_word_statistics(["APPLE", "CRANE"])

    assert stats["total_words"] == 2
    assert stats["avg_vowel_count"] == 2.0
    assert stats["letter_frequency"]["A"] == 2
    assert stats["most_common_letters"][0] in [("A", 2), ("P", 2), ("E", 2)]
    assert get_word_statistics([]) == {"error": "Word list is empty"}


def test_helpers():
    assert ALPHABET == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert normalize_word("  crane\n") == "CRANE"
    assert is_letters_only("CRANE")
    assert not is_letters_only("")
    assert not is_letters_only("CR4NE")
    assert not is_letters_only("crane")


def test_logger_writes_structured_entries(tmp_path):
    logger = GameLogger(str(tmp_path / "nested" / "logs"), "DEBUG", name="wordle_engine.games.structured")

    logger.log_game_event("g1", "game_created", max_guesses=6)
    logger.log_error(ValueError("boom"), "new_game", "g1")
    for handler in logger.logger.handlers:
        handler.flush()

    lines = logger.log_file.read_text(encoding="utf-8").splitlines()
    created = json.loads(lines[0].split(" | ", 2)[2])
    error = json.loads(lines[1].split(" | ", 2)[2])

    assert created["event_type"] == "GAME_EVENT"
    assert created["details"] == {"game_id": "g1", "max_guesses": 6}
    assert error["details"]["error_type"] == "ValueError"
    assert logger.get_log_stats()["errors"] == 1


def test_log_stats_without_file(tmp_path):
    logger = GameLogger(str(tmp_path), name="wordle_engine.games.missing")
    logger.log_file.unlink()

    assert logger.get_log_stats() == {'error': 'No log file found for today'}


def test_named_loggers_keep_their_own_files(tmp_path):
    from wordle_engine.utils import game_logger

    handlers_before = list(game_logger.logger.handlers)
    other = GameLogger(str(tmp_path), name="wordle_engine.games.other")
    other.log_game_event("g2", "game_created")

    assert game_logger.logger.handlers == handlers_before
    assert other.logger is not game_logger.logger
    assert other.get_log_stats()["game_events"] == 1


def test_set_level_lowers_file_handler_only(tmp_path):
    logger = GameLogger(str(tmp_path), "INFO", name="wordle_engine.games.levels")

    logger.set_level("DEBUG")
    logger.logger.debug("detail")
    for handler in logger.logger.handlers:
        handler.flush()

    assert logger.logger.level == logging.DEBUG
    levels = sorted(handler.level for handler in logger.logger.handlers)
    assert levels == [logging.DEBUG, logging.WARNING]
    assert "detail" in logger.log_file.read_text(encoding="utf-8")
