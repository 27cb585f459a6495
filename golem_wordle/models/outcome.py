"""
Session Outcomes

The result of feeding one guess to a game session, and the evaluation that
produces it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List

from ..config.game_settings import IDLE_THRESHOLD, LOST_MESSAGE, NO_GAME_IN_PROGRESS, WON_MESSAGE
from ..errors import InvalidGuessLengthError
from .game import CharVerdict, GameSession, GuessResult, render_verdicts


class SessionOutcome(ABC):
    """Base class for everything a guess can lead to."""

    kind = "unknown"
    is_terminal = False

    @property
    @abstractmethod
    def messages(self) -> List[str]:
        pass

    def to_dict(self) -> dict:
        return {
            'outcome': self.kind,
            'game_over': self.is_terminal,
            'messages': self.messages,
        }


@dataclass
class InProgress(SessionOutcome):
    """The guess was scored and the game goes on."""
    summaries: List[str] = field(default_factory=list)

    kind = "in_progress"

    @property
    def messages(self) -> List[str]:
        return list(self.summaries)


@dataclass
class Won(SessionOutcome):
    message: str = WON_MESSAGE

    kind = "won"
    is_terminal = True

    @property
    def messages(self) -> List[str]:
        return [self.message]


@dataclass
class Lost(SessionOutcome):
    message: str

    kind = "lost"
    is_terminal = True

    @classmethod
    def revealing(cls, word: str) -> 'Lost':
        return cls(LOST_MESSAGE.format(word=word))

    @property
    def messages(self) -> List[str]:
        return [self.message]


@dataclass
class NoGameInProgress(SessionOutcome):
    """Returned by the host when a guess arrives without a live session."""
    message: str = NO_GAME_IN_PROGRESS

    kind = "no_game"

    @property
    def messages(self) -> List[str]:
        return [self.message]


def score_guess(guess: str, session: GameSession) -> List[CharVerdict]:
    """
    Classify every character of ``guess`` against the session's word.

    Each character is judged on its own: repeated letters are not consumed,
    so every occurrence of a letter found elsewhere in the word is Present.
    """
    verdicts = []
    for index, char in enumerate(guess):
        positions = session.position_index.positions_of(char)
        if positions is None:
            result = GuessResult.ABSENT
        elif index in positions:
            result = GuessResult.CORRECT
        else:
            result = GuessResult.PRESENT
        verdicts.append(CharVerdict(char, result))
    return verdicts


def evaluate(guess: str, session: GameSession, now: datetime,
             idle_threshold: timedelta = IDLE_THRESHOLD) -> SessionOutcome:
    """
    Processes one guess against the session.

    Win and loss are decided before scoring, so the final guess of a game is
    never recorded and the history holds at most ``word_length - 1`` attempts.

    Args:
        guess: The player's raw guess
        session: Live game session, mutated only when the game goes on
        now: Current time, stored as the session's last activity
        idle_threshold: Inactivity after which the full description is repeated

    Returns:
        InProgress, Won or Lost

    Raises:
        InvalidGuessLengthError: If the guess length differs from the word's;
            the session is left untouched
    """
    if len(guess) != session.word_length:
        raise InvalidGuessLengthError(session.word_length)

    normalized_guess = guess.lower()
    if len(normalized_guess) != session.word_length:
        # Some characters expand when lower-cased
        raise InvalidGuessLengthError(session.word_length)

    if normalized_guess == session.target_word:
        return Won()

    attempts_left = session.attempts_left()
    if attempts_left <= 1:
        return Lost.revealing(session.target_word)

    verdicts = score_guess(normalized_guess, session)

    summaries = session.describe() if session.idle_since(now, idle_threshold) else []
    summaries.extend([
        f"Your guess was '{normalized_guess}'.",
        f"Here's how you did: {render_verdicts(verdicts)}.",
        f"You now have {attempts_left - 1} attempts left.",
    ])

    session.record_attempt(verdicts, now)
    return InProgress(summaries)
