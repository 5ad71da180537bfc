from slowko.services.game_service import get_game_service
from conftest import force_solution


def _new_game(client, **payload):
    response = client.post('/api/new_game', json=payload)
    assert response.status_code == 200
    data = response.get_json()
    assert data['success']
    return data['game_id'], data['state']


def test_health(client):
    response = client.get('/api/health')

    assert response.status_code == 200
    data = response.get_json()
    assert data['status'] == 'healthy'
    assert data['words']['answers_per_length']['5'] > 0


def test_new_game_defaults(client):
    game_id, state = _new_game(client)

    assert state['game_id'] == game_id
    assert state['mode'] == 'daily'
    assert state['word_length'] == 5
    assert state['max_rounds'] == 6
    assert state['answer'] is None


def test_new_game_rejects_bad_settings(client):
    assert client.post('/api/new_game', json={'word_length': 9}).status_code == 400
    assert client.post('/api/new_game', json={'word_length': 'five'}).status_code == 400
    assert client.post('/api/new_game', json={'mode': 'weekly'}).status_code == 400


def test_guess_flow(client):
    game_id, _ = _new_game(client, player_id='player-1')
    force_solution(get_game_service(), game_id, 'RZEKA')

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'radio'})
    assert response.status_code == 200
    state = response.get_json()['state']
    assert state['guess_results'] == [['correct', 'present', 'absent', 'absent', 'absent']]

    hints = client.get(f'/api/game/{game_id}/hints').get_json()
    assert hints['candidates'] == ['RZEKA']
    assert hints['candidate_count'] == 1
    assert hints['constraints']['confirmed_position'] == {'0': 'R'}

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'RZEKA'})
    state = response.get_json()['state']
    assert state['won'] and state['answer'] == 'RZEKA'

    fetched = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert fetched['status'] == 'won'

    stats = client.get('/api/stats/player-1?mode=daily').get_json()
    assert stats['stats']['played'] == 1
    assert stats['stats']['guesses']['2'] == 1


def test_guess_errors(client):
    game_id, _ = _new_game(client)

    assert client.post(f'/api/game/{game_id}/guess', json={}).status_code == 400

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ABCDE'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Word not in word list'

    assert client.post('/api/game/missing/guess', json={'guess': 'RZEKA'}).status_code == 404


def test_hard_mode_violation_is_reported(client):
    game_id, _ = _new_game(client, hard_mode=True)
    force_solution(get_game_service(), game_id, 'RZEKA')
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'RADIO'})

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'KOTEK'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Letter 1 must be R'


def test_unknown_game(client):
    assert client.get('/api/game/missing/state').status_code == 404
    assert client.get('/api/game/missing/hints').status_code == 404


def test_delete_game(client):
    game_id, _ = _new_game(client)

    assert client.delete(f'/api/game/{game_id}').status_code == 200
    assert client.get(f'/api/game/{game_id}/state').status_code == 404
    assert client.delete(f'/api/game/{game_id}').status_code == 404


def test_modes(client):
    data = client.get('/api/modes').get_json()

    assert data['success']
    assert [entry['mode'] for entry in data['modes']] == ['daily', 'hourly', 'infinite']
    assert all(entry['word_number'] >= 1 for entry in data['modes'])


def test_stats_unknown_mode(client):
    assert client.get('/api/stats/p?mode=weekly').status_code == 400


def test_new_game_uses_configured_defaults():
    from slowko import create_app
    from slowko.config import TestingConfig
    from slowko.services.game_service import initialize_game_service

    class HourlySixConfig(TestingConfig):
        DEFAULT_MODE = 'hourly'
        DEFAULT_WORD_LENGTH = 6

    initialize_game_service("UTC")
    client = create_app(HourlySixConfig).test_client()
    _, state = _new_game(client)

    assert state['mode'] == 'hourly'
    assert state['word_length'] == 6
