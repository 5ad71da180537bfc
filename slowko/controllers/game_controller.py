"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, current_app, request, jsonify

from ..config.game_settings import get_word_statistics
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _error(action, message, status, game_id=None, **kwargs):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), status


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        mode = data.get('mode', current_app.config['DEFAULT_MODE'])
        player_id = data.get('player_id') or request.headers.get('X-Player-Id')
        hard_mode = bool(data.get('hard_mode', False))
        extra_hard = bool(data.get('extra_hard', False))

        try:
            word_length = int(data.get('word_length', current_app.config['DEFAULT_WORD_LENGTH']))
        except (TypeError, ValueError):
            return _error('new_game', 'word_length must be an integer', 400)

        game_logger.log_user_action(
            request, 'new_game',
            mode=mode, word_length=word_length, hard_mode=hard_mode, extra_hard=extra_hard
        )

        try:
            game_id = game_service.create_new_game(
                mode, word_length, hard_mode=hard_mode, extra_hard=extra_hard, player_id=player_id
            )
        except ValueError as e:
            return _error('new_game', str(e), 400)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=word_length, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error('new_game', str(e), 500)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _error('get_state', 'Game not found', 404, game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        return _error('get_state', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            return _error('submit_guess', 'Guess is required', 400, game_id)

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        if game_service.get_game_state(game_id) is None:
            return _error('submit_guess', 'Game not found', 404, game_id)

        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            return _error(
                'submit_guess', error, 400, game_id,
                validation_error=error, attempted_guess=guess
            )

        state = game_service.make_guess(game_id, guess)
        if state is None:
            # another submission changed the board between validation and commit
            return _error('submit_guess', 'Failed to process guess', 409, game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, round=state.current_round, game_over=state.game_over
        )

        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost',
                request.headers.get('X-Player-Id'),
                rounds_used=state.current_round, target_word=state.answer,
                final_guess=guess
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        return _error('submit_guess', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/hints', methods=['GET'])
def get_hints(game_id):
    """Constraints revealed so far and the answers still consistent with them."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_hints', game_id)

        constraints = game_service.get_constraints(game_id)
        if constraints is None:
            return _error('get_hints', 'Game not found', 404, game_id)

        candidates = game_service.get_candidates(game_id)
        response_data = {
            'success': True,
            'constraints': constraints.to_dict(),
            'candidate_count': len(candidates),
            'candidates': candidates
        }

        game_logger.log_server_response(request, 'get_hints', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_hints', game_id)
        return _error('get_hints', str(e), 500, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.headers.get('X-Player-Id'))

        return jsonify(response_data), 200 if success else 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        return _error('delete_game', str(e), 500, game_id)


@game_bp.route('/modes', methods=['GET'])
def get_modes():
    """Current puzzle of every mode."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_modes')

        response_data = {
            'success': True,
            'modes': game_service.get_mode_info()
        }

        game_logger.log_server_response(request, 'get_modes', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_modes')
        return _error('get_modes', str(e), 500)


@game_bp.route('/stats/<player_id>', methods=['GET'])
def get_stats(player_id):
    """Statistics of a player for one mode."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        mode = request.args.get('mode', current_app.config['DEFAULT_MODE'])
        game_logger.log_user_action(request, 'get_stats', stats_player=player_id, mode=mode)

        try:
            stats = game_service.get_player_stats(player_id, mode)
        except ValueError:
            return _error('get_stats', f'Unknown mode: {mode}', 400)

        response_data = {
            'success': True,
            'mode': mode,
            'stats': stats.to_dict()
        }

        game_logger.log_server_response(request, 'get_stats', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_stats')
        return _error('get_stats', str(e), 500)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'words': get_word_statistics(),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
