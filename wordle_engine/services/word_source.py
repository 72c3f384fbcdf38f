"""
Word Source

Holds the dictionary of legal words and picks secrets from it.
"""

import logging
import random
from typing import Iterable, Iterator, List, Optional, Sequence

from ..config.game_settings import FALLBACK_WORDS, WORD_LENGTH
from ..utils.helpers import is_letters_only, normalize_word

logger = logging.getLogger(__name__)


class EmptyWordSourceError(ValueError):
    """Raised when a secret is requested from a word source holding no words."""


class WordSource:
    """
    Unique, insertion-ordered collection of uppercase candidate words.

    Words passed to the constructor are trusted and only uppercased; the
    loading helpers filter out anything that is not exactly ``word_length``
    letters A-Z. Duplicates collapse after normalization.
    """

    def __init__(self, words: Iterable[str] = (),
                 rng: Optional[random.Random] = None,
                 load_error: Optional[str] = None):
        self._words: List[str] = []
        seen = set()
        for word in words:
            normalized = normalize_word(word)
            if normalized not in seen:
                seen.add(normalized)
                self._words.append(normalized)
        self._index = seen
        self._rng = rng or random.Random()
        self.load_error = load_error

    @classmethod
    def from_lines(cls, lines: Iterable[str], word_length: int = WORD_LENGTH,
                   rng: Optional[random.Random] = None) -> 'WordSource':
        """Build a source from raw lines, silently dropping malformed or wrong-length ones."""
        accepted = []
        dropped = 0
        for line in lines:
            word = normalize_word(line)
            if len(word) == word_length and is_letters_only(word):
                accepted.append(word)
            elif word:
                dropped += 1
        if dropped:
            logger.debug("Dropped %d malformed word line(s)", dropped)
        return cls(accepted, rng=rng)

    @classmethod
    def from_file(cls, path: str, word_length: int = WORD_LENGTH,
                  rng: Optional[random.Random] = None) -> 'WordSource':
        """
        Load a line-oriented dictionary file.

        Never raises: if the file cannot be read the result is an empty
        source whose ``load_error`` explains why, so the caller can fall back
        to a built-in list. Undecodable bytes only spoil their own line,
        which the A-Z filter then drops.
        """
        try:
            with open(path, 'r', encoding='utf-8-sig', errors='replace') as f:
                source = cls.from_lines(f, word_length, rng=rng)
        except OSError as e:
            reason = f"Could not read word list {path!r}: {e}"
            logger.warning(reason)
            return cls((), rng=rng, load_error=reason)

        logger.info("Loaded %d valid words from %s", len(source), path)
        return source

    def is_empty(self) -> bool:
        return not self._words

    def is_valid_word(self, candidate: str) -> bool:
        """Case-insensitive dictionary lookup."""
        return normalize_word(candidate) in self._index

    def random_word(self) -> str:
        """Uniformly random word from the source."""
        if not self._words:
            raise EmptyWordSourceError("Cannot pick a word from an empty word source")
        return self._rng.choice(self._words)

    @property
    def words(self) -> Sequence[str]:
        return tuple(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, candidate: object) -> bool:
        return isinstance(candidate, str) and self.is_valid_word(candidate)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordSource({len(self._words)} words)"


def load_word_source(path: Optional[str], word_length: int = WORD_LENGTH,
                     fallback: Iterable[str] = FALLBACK_WORDS,
                     rng: Optional[random.Random] = None) -> WordSource:
    """
    Load the dictionary at ``path`` and substitute ``fallback`` when nothing usable was read.

    The fallback source keeps the ``load_error`` of the failed load so the
    reason stays visible to operators. Fallback words of the wrong length are
    skipped, so the result can still be empty.
    """
    source = WordSource.from_file(path, word_length, rng=rng) if path else WordSource(rng=rng)
    if not source.is_empty():
        return source

    reason = source.load_error or (
        f"No {word_length}-letter words found in {path!r}" if path else "No word list configured"
    )
    words = [word for word in fallback if len(normalize_word(word)) == word_length]
    logger.warning("%s; using %d built-in fallback words", reason, len(words))
    return WordSource(words, rng=rng, load_error=reason)
