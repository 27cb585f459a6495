"""
Word Service

Loads the word list once at startup and picks target words from it.
"""

import random
from typing import List, Optional

from ..config.game_settings import WORDS_FILE_PATH
from ..errors import InvalidCharsetError, NoWordsError


def words_from(raw: bytes, source: str = WORDS_FILE_PATH) -> List[str]:
    """
    Split raw word list bytes into lower-cased words.

    Args:
        raw: File content, expected to be UTF-8
        source: Where the bytes came from, used in error messages

    Returns:
        List[str]: Every whitespace or newline delimited token, lower-cased

    Raises:
        InvalidCharsetError: If the bytes are not valid UTF-8
        NoWordsError: If no word remains after splitting
    """
    try:
        content = raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidCharsetError(source) from e

    words = content.lower().split()
    if not words:
        raise NoWordsError()
    return words


class WordList:
    """
    The pool of target words.

    Built once with ``WordList.load`` and handed to the game service; its
    ``pick_word`` method is the service's word provider.
    """

    def __init__(self, words: List[str], rng: Optional[random.Random] = None):
        self.words = list(words)
        self._rng = rng or random.Random()

    @classmethod
    def load(cls, path: str = WORDS_FILE_PATH, rng: Optional[random.Random] = None) -> 'WordList':
        with open(path, 'rb') as f:
            raw = f.read()
        return cls(words_from(raw, path), rng)

    def __len__(self) -> int:
        return len(self.words)

    def random_index(self) -> int:
        return self._rng.randrange(len(self.words)) if self.words else 0

    def pick_word(self) -> str:
        """
        Returns a random word from the pool.

        Raises:
            NoWordsError: If the pool is empty
        """
        index = self.random_index()
        if index >= len(self.words):
            raise NoWordsError()
        return self.words[index]
