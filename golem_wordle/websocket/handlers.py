"""
WebSocket Event Handlers

Exposes the game to Socket.IO clients: new game, continue game, game status.
"""

from flask import request
from flask_socketio import emit
from ..errors import AppError, InvalidGuessLengthError
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket: client {request.sid} connected")

    @socketio.on('new_game')
    @websocket_game_service_required
    def handle_new_game(data=None, game_service=None):
        """Start a new game and send its description."""
        game_logger.log_user_action(request, 'new_game')
        try:
            messages = game_service.start_new_game()
        except AppError as e:
            game_logger.log_error(request, e, 'new_game')
            emit('error', {'error': str(e)})
            return

        emit('game_result', {
            'success': True,
            'outcome': 'in_progress',
            'game_over': False,
            'messages': messages
        })

    @socketio.on('continue_game')
    @websocket_game_service_required
    def handle_continue_game(data=None, game_service=None):
        """Submit a guess and send back how it went."""
        guess = data.get('guess') if isinstance(data, dict) else None
        if not isinstance(guess, str):
            emit('error', {'error': 'Guess is required'})
            return

        game_logger.log_user_action(request, 'continue_game', guess=guess)
        try:
            outcome = game_service.submit_guess(guess)
        except InvalidGuessLengthError as e:
            emit('error', {'error': str(e)})
            return
        except AppError as e:
            game_logger.log_error(request, e, 'continue_game')
            emit('error', {'error': str(e)})
            return

        emit('game_result', {
            'success': True,
            **outcome.to_dict()
        })

    @socketio.on('game_status')
    @websocket_game_service_required
    def handle_game_status(data=None, game_service=None):
        """Send the description of the game in progress."""
        game_logger.log_user_action(request, 'game_status')
        emit('game_result', {
            'success': True,
            'outcome': 'in_progress' if game_service.game_in_progress else 'no_game',
            'game_over': False,
            'messages': game_service.query_status()
        })
