"""
Command Line Game Loop

Plays one game in the terminal: reads a guess per line until the word is
found or the attempts run out.
"""

import sys
from typing import Optional, TextIO

from .errors import InputReadError, InvalidGuessLengthError
from .services.game_service import GameService
from .utils.game_logger import game_logger


def read_guess(stream: TextIO) -> str:
    """
    Reads one guess from ``stream``.

    Raises:
        InputReadError: If the stream fails or is exhausted
    """
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError() from e

    if not line:
        raise InputReadError()
    return line.strip()


def run_cli(game_service: GameService,
            stdin: Optional[TextIO] = None,
            stdout: Optional[TextIO] = None,
            stderr: Optional[TextIO] = None) -> None:
    """
    Runs a full game against ``game_service``.

    Length errors are reported and the player is asked again; every other
    error ends the game and propagates to the caller. Streams left as None
    are the ones in ``sys`` when the game starts.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    def echo(*lines: str) -> None:
        print(*lines, sep="\n", file=stdout)

    game_service.start_new_game()
    game_logger.log_user_action(None, 'new_game')
    echo(game_service.session.welcome())

    while True:
        echo("", "Please enter your guess: ")
        guess = read_guess(stdin)
        game_logger.log_user_action(None, 'continue_game', guess=guess, guess_length=len(guess))

        try:
            outcome = game_service.submit_guess(guess)
        except InvalidGuessLengthError as e:
            print(f"*** ERROR: {e}", file=stderr)
            continue

        echo("")
        echo(*outcome.messages)

        if outcome.is_terminal:
            break
