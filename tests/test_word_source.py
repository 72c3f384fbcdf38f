import random
from collections import Counter

import pytest

from wordle_engine.config import FALLBACK_WORDS
from wordle_engine.services import EmptyWordSourceError, WordSource, load_word_source


def test_constructor_uppercases_without_filtering():
    source = WordSource(["apple", " Crane ", "toolong", "ab1"])
    assert source.words == ("APPLE", "CRANE", "TOOLONG", "AB1")


def test_duplicates_collapse_after_normalization():
    source = WordSource(["grape", "GRAPE", "Grape", "apple"])
    assert source.words == ("GRAPE", "APPLE")
    assert len(source) == 2


def test_load_file_filters_lines(tmp_path):
    feed = tmp_path / "words.txt"
    feed.write_text("apple\nBB\nGRAPE\n12345\ngrape", encoding="utf-8")

    source = WordSource.from_file(str(feed), word_length=5)

    assert set(source) == {"APPLE", "GRAPE"}
    assert len(source) == 2
    assert source.load_error is None


def test_load_file_respects_configured_length(tmp_path):
    feed = tmp_path / "words.txt"
    feed.write_text("apple\nbanana\ncherry\n  orange  \nkiwi\n", encoding="utf-8")

    source = WordSource.from_file(str(feed), word_length=6)

    assert source.words == ("BANANA", "CHERRY", "ORANGE")


def test_load_file_drops_accented_and_punctuated_lines(tmp_path):
    feed = tmp_path / "words.txt"
    feed.write_text("cafés\nit's!\nhe-ll\nhello\n\n", encoding="utf-8")

    assert WordSource.from_file(str(feed)).words == ("HELLO",)


def test_load_file_skips_byte_order_mark(tmp_path):
    feed = tmp_path / "words.txt"
    feed.write_bytes("\ufeffcrane\nslate\n".encode("utf-8"))

    assert WordSource.from_file(str(feed)).words == ("CRANE", "SLATE")


def test_undecodable_line_is_dropped_alone(tmp_path):
    feed = tmp_path / "words.txt"
    feed.write_bytes(b"crane\ncr\xffne\nslate\n")

    source = WordSource.from_file(str(feed))

    assert source.words == ("CRANE", "SLATE")
    assert source.load_error is None


def test_missing_file_yields_empty_source_with_reason(tmp_path):
    source = WordSource.from_file(str(tmp_path / "nope.txt"))

    assert source.is_empty()
    assert "nope.txt" in source.load_error


def test_directory_path_is_absorbed(tmp_path):
    source = WordSource.from_file(str(tmp_path))

    assert source.is_empty()
    assert source.load_error is not None


def test_is_valid_word_is_case_insensitive(word_source):
    assert word_source.is_valid_word("crane")
    assert word_source.is_valid_word(" Crane ")
    assert "apple" in word_source
    assert not word_source.is_valid_word("ZEBRA")
    assert 42 not in word_source


def test_random_word_on_empty_source_raises():
    with pytest.raises(EmptyWordSourceError):
        WordSource().random_word()


def test_random_word_covers_every_word():
    words = ["APPLE", "CRANE", "WORLD", "CHAIR", "POINT"]
    source = WordSource(words, rng=random.Random(99))

    picks = Counter(source.random_word() for _ in range(2000))

    assert set(picks) == set(words)
    # Uniform over five words: each lands near 400
    assert all(250 < count < 550 for count in picks.values())


def test_seeded_sources_are_reproducible():
    first = WordSource(["APPLE", "CRANE", "WORLD"], rng=random.Random(5))
    second = WordSource(["APPLE", "CRANE", "WORLD"], rng=random.Random(5))

    assert [first.random_word() for _ in range(10)] == [second.random_word() for _ in range(10)]


def test_load_word_source_prefers_file(tmp_path):
    feed = tmp_path / "words.txt"
    feed.write_text("slate\nflame\n", encoding="utf-8")

    source = load_word_source(str(feed), 5)

    assert source.words == ("SLATE", "FLAME")
    assert source.load_error is None


def test_load_word_source_falls_back_when_missing(tmp_path):
    source = load_word_source(str(tmp_path / "missing.txt"), 5)

    assert source.words == FALLBACK_WORDS
    assert "missing.txt" in source.load_error


def test_load_word_source_falls_back_when_file_has_no_valid_words(tmp_path):
    feed = tmp_path / "words.txt"
    feed.write_text("12345\nab\n", encoding="utf-8")

    source = load_word_source(str(feed), 5)

    assert source.words == FALLBACK_WORDS
    assert "No 5-letter words" in source.load_error


def test_load_word_source_skips_fallback_words_of_other_lengths():
    source = load_word_source(None, 6)

    assert source.is_empty()
    assert source.load_error == "No word list configured"
