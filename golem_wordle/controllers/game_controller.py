"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..errors import AppError, InvalidGuessLengthError
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _error_response(action, error, status):
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), status


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Start a new game, discarding any game in progress."""
    try:
        game_logger.log_user_action(request, 'new_game')

        messages = game_service.start_new_game()

        response_data = {
            'success': True,
            'messages': messages
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data,
            word_length=game_service.session.word_length
        )

        return jsonify(response_data)

    except AppError as e:
        game_logger.log_error(request, e, 'new_game')
        return _error_response('new_game', e, 500)


@game_bp.route('/guess', methods=['POST'])
@require_game_service
def continue_game(game_service):
    """Submit a guess for the game in progress."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
        return _error_response('continue_game', 'Guess is required', 400)

    guess = data['guess']

    try:
        game_logger.log_user_action(
            request, 'continue_game',
            guess=guess, guess_length=len(guess)
        )

        outcome = game_service.submit_guess(guess)

        response_data = {
            'success': True,
            **outcome.to_dict()
        }

        game_logger.log_server_response(
            request, 'continue_game', True, response_data,
            outcome=outcome.kind
        )

        return jsonify(response_data)

    except InvalidGuessLengthError as e:
        return _error_response('continue_game', e, 400)
    except AppError as e:
        game_logger.log_error(request, e, 'continue_game')
        return _error_response('continue_game', e, 500)


@game_bp.route('/status', methods=['GET'])
@require_game_service
def game_status(game_service):
    """Describe the game in progress."""
    game_logger.log_user_action(request, 'game_status')

    response_data = {
        'success': True,
        'game_in_progress': game_service.game_in_progress,
        'messages': game_service.query_status()
    }

    game_logger.log_server_response(request, 'game_status', True, response_data)

    return jsonify(response_data)


@game_bp.route('/game', methods=['DELETE'])
@require_game_service
def end_game(game_service):
    """Abandon the game in progress."""
    game_logger.log_user_action(request, 'end_game')

    success = game_service.end_game()

    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'end_game', success, response_data)

    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'game_in_progress': game_service.game_in_progress,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)

    return jsonify(response_data)
