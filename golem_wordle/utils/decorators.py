"""
Service Decorators

Contains decorators that hand the game service to HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify, current_app
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    The service is passed to the view as the ``game_service`` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        game_service = getattr(current_app, 'game_service', None)
        if game_service is None:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_service_required(f):
    """Decorator for WebSocket events that need the game service."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        game_service = getattr(current_app, 'game_service', None)
        if game_service is None:
            emit('error', {'error': 'Game service unavailable'})
            return

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function
