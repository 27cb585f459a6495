"""
Golem Wordle Application Package

A single-player word-guessing game with one shared engine behind a
command-line loop, an HTTP API and Socket.IO events.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: The GameService hosting the one game of this process

    Returns:
        Flask application instance and its SocketIO extension
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store shared instances for use in other modules
    app.socketio = socketio
    app.game_service = game_service

    return app, socketio
