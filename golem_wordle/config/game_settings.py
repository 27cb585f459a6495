"""
Game Configuration Constants Module

This module defines the game rules and the fixed player-facing messages.
All game parameters are centralized here to enable easy modification.
"""

import os
from datetime import timedelta
from typing import Final

IDLE_THRESHOLD: Final[timedelta] = timedelta(minutes=5)
"""
How long a session may sit untouched before the next guess re-displays
the full game description ahead of the guess summary.
"""

WORDS_FILE_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.txt'
)
"""Bundled word list: UTF-8, whitespace or newline delimited."""

TIMESTAMP_FORMAT: Final[str] = '%Y-%m-%d %H:%M:%S UTC'

# Player-facing messages
WELCOME_MESSAGE: Final[str] = "Welcome to Golem Wordle! Please describe Golem in a {word_length}-letter word."

GAME_INSTRUCTION: Final[str] = (
    "You can continue this game by using the `continue-game` command, "
    "or you can start a new game by using the `new-game` command."
)

NO_GAME_IN_PROGRESS: Final[str] = (
    "Currently no game in progress. "
    "You can start a new game by using the `new-game` command."
)

WON_MESSAGE: Final[str] = "Well done, you've guessed the word!"

LOST_MESSAGE: Final[str] = "Sorry, better luck next time. The word was '{word}'."
