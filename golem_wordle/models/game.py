"""
Game Data Models

Contains the per-character verdicts, the character position index and the
single-player game session.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence

from ..config.game_settings import GAME_INSTRUCTION, TIMESTAMP_FORMAT, WELCOME_MESSAGE


class GuessResult(Enum):
    """Classification of one guessed character."""
    CORRECT = "Correct"
    PRESENT = "Present"
    ABSENT = "Absent"


@dataclass(frozen=True)
class CharVerdict:
    """One character of a guess and how it scored."""
    character: str
    result: GuessResult

    @classmethod
    def correct(cls, character: str) -> 'CharVerdict':
        return cls(character, GuessResult.CORRECT)

    @classmethod
    def present(cls, character: str) -> 'CharVerdict':
        return cls(character, GuessResult.PRESENT)

    @classmethod
    def absent(cls, character: str) -> 'CharVerdict':
        return cls(character, GuessResult.ABSENT)

    def __str__(self) -> str:
        return f"'{self.character}' => {self.result.value}"


def render_verdicts(verdicts: Sequence[CharVerdict]) -> str:
    """Render an attempt as ``['a' => Correct, 'b' => Absent]``."""
    return "[" + ", ".join(str(verdict) for verdict in verdicts) + "]"


class PositionIndex:
    """Maps each character of a word to the positions it occupies."""

    def __init__(self, positions: Dict[str, FrozenSet[int]]):
        self._positions = positions

    @classmethod
    def build(cls, word: str) -> 'PositionIndex':
        positions: Dict[str, set] = {}
        for index, char in enumerate(word):
            positions.setdefault(char, set()).add(index)
        return cls({char: frozenset(found) for char, found in positions.items()})

    def positions_of(self, char: str) -> Optional[FrozenSet[int]]:
        """Positions of ``char`` in the word, or None if it never occurs."""
        return self._positions.get(char)

    def as_dict(self) -> Dict[str, FrozenSet[int]]:
        return dict(self._positions)

    def __eq__(self, other):
        if not isinstance(other, PositionIndex):
            return NotImplemented
        return self._positions == other._positions

    def __repr__(self):
        return f"PositionIndex({self._positions!r})"


@dataclass
class GameSession:
    """
    Server-side state of the one game in progress.

    The target word is never shown to the player except in the loss message.
    The session itself does not enforce the attempt budget; the outcome
    evaluation resolves the last possible guess to a win or a loss before it
    could ever be recorded.
    """
    target_word: str
    word_length: int
    position_index: PositionIndex
    last_activity: datetime
    attempts: List[List[CharVerdict]] = field(default_factory=list)

    @classmethod
    def create(cls, word: str, now: datetime) -> 'GameSession':
        if not word:
            raise ValueError("Target word cannot be empty")

        return cls(
            target_word=word,
            word_length=len(word),
            position_index=PositionIndex.build(word),
            last_activity=now,
        )

    def record_attempt(self, verdicts: List[CharVerdict], now: datetime) -> None:
        self.attempts.append(verdicts)
        self.last_activity = now

    def attempts_left(self) -> int:
        return self.word_length - len(self.attempts)

    def idle_since(self, now: datetime, threshold: timedelta) -> bool:
        """True when the session has not been played for longer than ``threshold``."""
        return now - self.last_activity > threshold

    def welcome(self) -> str:
        return WELCOME_MESSAGE.format(word_length=self.word_length)

    def describe(self) -> List[str]:
        """
        Human-readable summary of the game so far.

        Returns:
            List[str]: welcome line, previous guesses (or the start time),
            remaining attempts and how to carry on
        """
        timestamp = self.last_activity.strftime(TIMESTAMP_FORMAT)
        lines = [self.welcome()]

        if self.attempts:
            lines.append(f"Here are your previous {len(self.attempts)} guesses.")
            lines.extend(render_verdicts(attempt) for attempt in self.attempts)
            lines.append(f"Last time you played was on {timestamp}.")
        else:
            lines.append(f"You started this game on {timestamp}.")

        lines.append(f"You had {self.attempts_left()} attempts left.")
        lines.append(GAME_INSTRUCTION)
        return lines
