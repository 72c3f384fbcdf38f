import os
import random
import tempfile

# Keep the module-level game logger out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wordle-logs-"))

import pytest

from wordle_engine.services import GameService, WordSource
from wordle_engine.utils.game_logger import GameLogger

WORDS = ["APPLE", "CRANE", "WORLD", "CHAIR", "POINT", "SPEED", "ERASE", "GRAPE"]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def word_source(rng):
    return WordSource(WORDS, rng=rng)


@pytest.fixture
def logger(tmp_path):
    return GameLogger(str(tmp_path / "logs"), name=f"wordle_engine.games.{tmp_path.name}")


@pytest.fixture
def service(word_source, logger):
    return GameService(word_source, max_guesses=6, word_length=5, logger=logger)
