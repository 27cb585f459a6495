"""
Testing the game host: starting, continuing and describing the one game.
"""

from datetime import timedelta

import pytest

from golem_wordle.config.game_settings import NO_GAME_IN_PROGRESS
from golem_wordle.errors import InvalidGuessLengthError, NoWordsError
from golem_wordle.models.outcome import InProgress, Lost, NoGameInProgress, Won
from golem_wordle.services.game_service import GameService

from conftest import WORD, WRONG_ANSWER


def test_no_game_before_start(game_service):
    assert not game_service.game_in_progress
    assert game_service.query_status() == [NO_GAME_IN_PROGRESS]
    assert game_service.submit_guess(WORD) == NoGameInProgress()


def test_start_new_game_describes_it(game_service):
    messages = game_service.start_new_game()

    assert game_service.game_in_progress
    assert game_service.session.target_word == WORD
    assert messages == game_service.session.describe()
    assert messages[0] == "Welcome to Golem Wordle! Please describe Golem in a 5-letter word."


def test_start_new_game_replaces_the_old_one(game_service):
    game_service.start_new_game()
    game_service.submit_guess(WRONG_ANSWER)

    game_service.start_new_game()

    assert game_service.session.attempts == []


def test_failed_start_keeps_the_old_game(clock):
    words = iter([WORD])

    def provider():
        word = next(words, None)
        if word is None:
            raise NoWordsError()
        return word

    game_service = GameService(provider, clock)
    game_service.start_new_game()
    game_service.submit_guess(WRONG_ANSWER)

    with pytest.raises(NoWordsError):
        game_service.start_new_game()

    assert len(game_service.session.attempts) == 1


def test_guess_is_trimmed(game_service):
    game_service.start_new_game()

    outcome = game_service.submit_guess("  abcde \n")

    assert isinstance(outcome, InProgress)


def test_invalid_length_keeps_the_game(game_service):
    game_service.start_new_game()

    with pytest.raises(InvalidGuessLengthError):
        game_service.submit_guess("")

    assert game_service.game_in_progress
    assert game_service.session.attempts == []


def test_win_retires_the_session(game_service):
    game_service.start_new_game()

    outcome = game_service.submit_guess("GOLEM")

    assert outcome == Won()
    assert not game_service.game_in_progress
    assert game_service.query_status() == [NO_GAME_IN_PROGRESS]


def test_full_losing_game(game_service):
    game_service.start_new_game()

    for _ in range(4):
        assert isinstance(game_service.submit_guess(WRONG_ANSWER), InProgress)

    outcome = game_service.submit_guess(WRONG_ANSWER)

    assert outcome == Lost("Sorry, better luck next time. The word was 'golem'.")
    assert not game_service.game_in_progress


def test_status_reflects_progress(game_service, clock):
    game_service.start_new_game()
    clock.advance(timedelta(minutes=2))
    game_service.submit_guess(WRONG_ANSWER)

    status = game_service.query_status()

    assert status[1] == "Here are your previous 1 guesses."
    assert status[3] == "Last time you played was on 2312-12-18 19:25:00 UTC."
    assert status[4] == "You had 4 attempts left."


def test_idle_threshold_is_passed_to_evaluation(clock):
    game_service = GameService(lambda: WORD, clock, idle_threshold=timedelta(seconds=10))
    game_service.start_new_game()
    clock.advance(timedelta(seconds=11))

    outcome = game_service.submit_guess(WRONG_ANSWER)

    assert outcome.messages[0].startswith("Welcome to Golem Wordle!")


def test_end_game(game_service):
    assert not game_service.end_game()

    game_service.start_new_game()

    assert game_service.end_game()
    assert not game_service.game_in_progress
