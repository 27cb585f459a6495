"""
Data Models Package

Contains the game session, its verdicts and the outcomes of a guess.
"""

from .game import CharVerdict, GameSession, GuessResult, PositionIndex, render_verdicts
from .outcome import InProgress, Lost, NoGameInProgress, SessionOutcome, Won, evaluate

__all__ = [
    'CharVerdict', 'GameSession', 'GuessResult', 'PositionIndex', 'render_verdicts',
    'InProgress', 'Lost', 'NoGameInProgress', 'SessionOutcome', 'Won', 'evaluate'
]
