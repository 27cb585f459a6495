"""
Services Package

Contains the game host and the word list it draws from.
"""

from .game_service import GameService
from .word_service import WordList, words_from

__all__ = [
    'GameService',
    'WordList', 'words_from'
]
