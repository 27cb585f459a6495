"""
Game Service

Hosts the single game session and exposes the three operations every
front end uses: start a new game, continue it with a guess, ask for its status.
"""

from datetime import timedelta
from typing import Callable, List, Optional

from ..config.game_settings import IDLE_THRESHOLD, NO_GAME_IN_PROGRESS
from ..models.game import GameSession
from ..models.outcome import NoGameInProgress, SessionOutcome, evaluate
from ..utils.clock import Clock, RealClock
from ..utils.game_logger import game_logger


class GameService:
    """
    Owner of at most one live game session.

    This class handles:
    - Starting a game with a word from the injected word provider
    - Feeding guesses to the session and retiring it once won or lost
    - Describing the game in progress

    One instance is created at startup and passed to the CLI or the Flask
    app; it is not safe to share between threads.
    """

    def __init__(self,
                 word_provider: Callable[[], str],
                 clock: Optional[Clock] = None,
                 idle_threshold: timedelta = IDLE_THRESHOLD):
        self.word_provider = word_provider
        self.clock = clock or RealClock()
        self.idle_threshold = idle_threshold
        self._session: Optional[GameSession] = None

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    @property
    def game_in_progress(self) -> bool:
        return self._session is not None

    def start_new_game(self) -> List[str]:
        """
        Discards any game in progress and starts a new one.

        Returns:
            List[str]: Description of the new game

        Raises:
            NoWordsError: If the word provider has nothing to offer; the
                previous game, if any, is kept
        """
        word = self.word_provider()

        self._session = GameSession.create(word, self.clock.now())
        game_logger.log_game_event('game_started', word_length=self._session.word_length)

        return self._session.describe()

    def submit_guess(self, text: str) -> SessionOutcome:
        """
        Processes a guess for the game in progress.

        Args:
            text: The player's guess; surrounding whitespace is ignored

        Returns:
            SessionOutcome: InProgress, Won or Lost, or NoGameInProgress
            when there is nothing to guess

        Raises:
            InvalidGuessLengthError: If the guess length is wrong; the game
                is unchanged and the player may try again
        """
        if self._session is None:
            return NoGameInProgress()

        session = self._session
        outcome = evaluate(text.strip(), session, self.clock.now(), self.idle_threshold)

        if outcome.is_terminal:
            self._session = None
            game_logger.log_game_event(
                f"game_{outcome.kind}",
                word_length=session.word_length,
                attempts_used=len(session.attempts) + 1,
                target_word=session.target_word
            )

        return outcome

    def query_status(self) -> List[str]:
        if self._session is None:
            return [NO_GAME_IN_PROGRESS]
        return self._session.describe()

    def end_game(self) -> bool:
        """Abandons the game in progress. Returns False if there was none."""
        if self._session is None:
            return False
        self._session = None
        game_logger.log_game_event('game_abandoned')
        return True
