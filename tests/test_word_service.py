"""
Testing word list loading and word picking.
"""

import random

import pytest

from golem_wordle.config.game_settings import WORDS_FILE_PATH
from golem_wordle.errors import InvalidCharsetError, NoWordsError
from golem_wordle.services.word_service import WordList, words_from

GOLEM_IS_INVINCIBLE = ["golem", "is", "invincible"]


@pytest.mark.parametrize("raw, expected", [
    (b"Hello", ["hello"]),
    (b"golem is invincible", GOLEM_IS_INVINCIBLE),
    (b" golem     is \n invincible ", GOLEM_IS_INVINCIBLE),
    (b"    golem   \n    is \n invincible ", GOLEM_IS_INVINCIBLE),
    (b"GOLEM\r\nIs\tInvincible", GOLEM_IS_INVINCIBLE),
])
def test_words_from_splits_and_lowercases(raw, expected):
    assert words_from(raw) == expected


@pytest.mark.parametrize("raw", [b"", b"        ", b"    \n     \n  "])
def test_words_from_fails_without_words(raw):
    with pytest.raises(NoWordsError) as excinfo:
        words_from(raw)

    assert str(excinfo.value) == "[NoWords] No words found in file."


def test_words_from_fails_on_invalid_utf8():
    with pytest.raises(InvalidCharsetError) as excinfo:
        words_from(b"cl\x82ippy", "words.txt")

    assert str(excinfo.value) == "[InvalidCharset] The Words file ('words.txt') contains invalid UTF-8 characters"


def test_words_from_keeps_multibyte_words():
    assert words_from("Żółw kot".encode('utf-8')) == ["żółw", "kot"]


def test_load_bundled_word_list():
    word_list = WordList.load()

    assert len(word_list) > 0
    assert "golem" in word_list.words
    assert all(word == word.lower() for word in word_list.words)


def test_load_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"clay\namulet\n")

    assert WordList.load(str(path)).words == ["clay", "amulet"]


def test_load_invalid_file_names_the_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"\xff\xfe")

    with pytest.raises(InvalidCharsetError) as excinfo:
        WordList.load(str(path))

    assert excinfo.value.path == str(path)


def test_bundled_path_points_at_package_asset():
    assert WORDS_FILE_PATH.endswith("words.txt")


@pytest.mark.parametrize("size", [1, 2, 10, 100])
def test_random_index_within_bounds(size):
    word_list = WordList([f"w{i}" for i in range(size)], random.Random(7))

    for _ in range(50):
        assert 0 <= word_list.random_index() < size


def test_pick_word_comes_from_list():
    words = ["clay", "amulet", "shem"]
    word_list = WordList(words, random.Random(42))

    assert word_list.pick_word() in words


def test_pick_word_from_empty_list_fails():
    with pytest.raises(NoWordsError):
        WordList([]).pick_word()
