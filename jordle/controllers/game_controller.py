"""
Game Controller

Handles the HTTP endpoints of the development game service.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({'error': 'Game service unavailable'}), 500


@game_bp.route('/dictionary', methods=['GET'])
def dictionary():
    """Return every dictionary entry as {word, desc}."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action('dictionary', request)
    entries = game_service.get_dictionary()
    game_logger.log_server_response('dictionary', True, entries, request)
    return jsonify(entries)


@game_bp.route('/new-game', methods=['GET'])
def new_game():
    """Pick a new secret word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action('new_game', request)
        game_service.start_new_game()

        response_data = {'success': True}
        game_logger.log_server_response('new_game', True, response_data, request)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(e, 'new_game', request)
        return jsonify({'error': str(e)}), 500


@game_bp.route('/check-word', methods=['POST'])
def check_word():
    """Score a guess: body {guess, attemptNumber}."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    data = request.get_json(silent=True) or {}
    guess = data.get('guess')
    attempt_number = data.get('attemptNumber', 0)

    game_logger.log_user_action('check_word', request, guess=guess, attempt_number=attempt_number)

    if not isinstance(attempt_number, int) or isinstance(attempt_number, bool) or attempt_number < 0:
        error_response = {'error': 'attemptNumber must be a non-negative integer'}
        game_logger.log_server_response('check_word', False, error_response, request)
        return jsonify(error_response), 400

    try:
        response_data = game_service.check_word(guess, attempt_number)
    except ValueError as e:
        error_response = {'error': str(e)}
        game_logger.log_server_response('check_word', False, error_response, request, guess=guess)
        return jsonify(error_response), 400

    game_logger.log_server_response('check_word', True, response_data, request,
                                    guess=guess, attempt_number=attempt_number)
    if 'solution' in response_data:
        game_logger.log_game_event('word_revealed', None, word=response_data['solution']['word'],
                                   won=response_data['isWin'], user_ip=request.remote_addr)
    return jsonify(response_data)
