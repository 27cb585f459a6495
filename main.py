"""
Golem Wordle - Main Entry Point

Loads the word list, builds the game service and either plays a game in the
terminal (``python main.py play``) or starts the Flask-SocketIO server
(``python main.py serve``, the default).
"""

import argparse
import sys
from datetime import timedelta

from golem_wordle import create_app
from golem_wordle.cli import run_cli
from golem_wordle.config import Config
from golem_wordle.errors import AppError
from golem_wordle.services.game_service import GameService
from golem_wordle.services.word_service import WordList
from golem_wordle.utils.game_logger import game_logger


def build_game_service(config_class=Config) -> GameService:
    """Load the word list once and wire it into a new game service."""
    word_list = WordList.load(config_class.WORDS_FILE)
    game_logger.logger.info(f"Loaded {len(word_list)} words from {config_class.WORDS_FILE}")

    return GameService(
        word_list.pick_word,
        idle_threshold=timedelta(minutes=config_class.IDLE_THRESHOLD_MINUTES)
    )


def serve(game_service: GameService) -> None:
    print("Creating Flask application...")
    app, socketio = create_app(Config, game_service)
    print("✓ Flask application created successfully")

    game_logger.logger.info("Golem Wordle Server Starting")

    print(f"\nStarting Golem Wordle Server on {Config.HOST}:{Config.PORT}")
    print(f"Debug mode: {Config.DEBUG}")
    print("=" * 50)

    socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)


def main(argv=None) -> int:
    """Main function to initialize services and run the chosen front end."""
    parser = argparse.ArgumentParser(description="Golem Wordle")
    parser.add_argument('mode', nargs='?', choices=['serve', 'play'], default='serve',
                        help="run the HTTP/Socket.IO server or play in the terminal")
    args = parser.parse_args(argv)

    try:
        game_service = build_game_service()

        if args.mode == 'play':
            run_cli(game_service)
        else:
            serve(game_service)

    except KeyboardInterrupt:
        print("\nShutting down...")
        game_logger.logger.info("Golem Wordle shutting down (KeyboardInterrupt)")
    except AppError as e:
        print(f"*** ERROR: {e}", file=sys.stderr)
        game_logger.logger.error(f"Golem Wordle stopped: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
