import threading

import pytest

from slowko.config import ANSWER_LISTS
from slowko.services.game_service import GameService
from conftest import MIDNIGHT, force_solution


def _game(service, solution="RZEKA", **kwargs):
    game_id = service.create_new_game(now=MIDNIGHT, **kwargs)
    force_solution(service, game_id, solution)
    return game_id


def test_same_window_gets_same_solution(service):
    first = service.create_new_game("daily", 5, now=MIDNIGHT + 1000)
    second = service.create_new_game("daily", 5, now=MIDNIGHT + 5000)
    other = GameService(timezone="UTC")
    third = other.create_new_game("daily", 5, now=MIDNIGHT + 9000)

    assert service.games[first].solution == service.games[second].solution
    assert service.games[first].solution == other.games[third].solution
    assert service.games[first].word_number == 1


def test_created_game_state_hides_answer(service):
    game_id = service.create_new_game("hourly", 6, now=MIDNIGHT)
    state = service.get_game_state(game_id)

    assert state.answer is None
    assert state.word_length == 6
    assert state.current_round == 0
    assert state.status == "playing"
    assert len(service.games[game_id].solution) == 6


def test_invalid_settings(service):
    with pytest.raises(ValueError):
        service.create_new_game("daily", 9)
    with pytest.raises(ValueError):
        service.create_new_game("weekly", 5)


def test_full_game_is_won_after_three_guesses(service):
    game_id = _game(service, player_id="p1")

    first = service.make_guess(game_id, "radio")
    assert first.guess_results[0] == ["correct", "present", "absent", "absent", "absent"]

    second = service.make_guess(game_id, "RZECZ")
    assert second.guess_results[1] == ["correct", "correct", "correct", "absent", "absent"]

    final = service.make_guess(game_id, "RZEKA")
    assert final.guess_results[2] == ["correct"] * 5
    assert final.won and final.game_over
    assert final.status == "won"
    assert final.current_round == 3
    assert final.answer == "RZEKA"
    assert final.guesses == ["RADIO", "RZECZ", "RZEKA"]
    assert final.letter_status["A"] == "correct"
    assert final.letter_status["D"] == "absent"

    stats = service.get_player_stats("p1", "daily")
    assert stats.played == 1
    assert stats.guesses["3"] == 1
    assert stats.streak == 1


def test_lost_game(service):
    game_id = _game(service, player_id="p2")
    for guess in ["RADIO", "RZECZ", "KOTEK", "DOMEK", "SERCE", "LAMPA"]:
        state = service.make_guess(game_id, guess)

    assert state.status == "lost"
    assert state.game_over and not state.won
    assert state.answer == "RZEKA"
    assert service.get_player_stats("p2").guesses["fail"] == 1
    assert service.is_valid_guess(game_id, "RZEKA") == (False, "Game is already over")
    assert service.make_guess(game_id, "RZEKA") is None


def test_guess_validation(service):
    game_id = _game(service)

    assert service.is_valid_guess(game_id, "RZEKA") == (True, "")
    assert service.is_valid_guess("missing", "RZEKA") == (False, "Game not found")
    assert service.is_valid_guess(game_id, "") == (False, "Guess must be a valid string")
    assert service.is_valid_guess(game_id, "ABCDE") == (False, "Word not in word list")

    ok, error = service.is_valid_guess(game_id, "RZEK")
    assert not ok and "5 letters" in error

    ok, error = service.is_valid_guess(game_id, "QUEEN")
    assert not ok and "not a Polish letter" in error

    assert service.make_guess(game_id, "ABCDE") is None
    assert service.get_game_state(game_id).current_round == 0


def test_hard_mode(service):
    game_id = _game(service, hard_mode=True)
    service.make_guess(game_id, "RADIO")

    assert service.is_valid_guess(game_id, "KOTEK") == (False, "Letter 1 must be R")
    assert service.is_valid_guess(game_id, "RZECZ") == (False, "Guess must contain A")
    assert service.is_valid_guess(game_id, "RZEKA") == (True, "")

    easy_id = _game(service)
    service.make_guess(easy_id, "RADIO")
    assert service.is_valid_guess(easy_id, "KOTEK") == (True, "")


def test_constraints_and_candidates(service):
    game_id = _game(service)
    assert service.get_candidates(game_id) == ANSWER_LISTS[5]

    service.make_guess(game_id, "RADIO")
    constraints = service.get_constraints(game_id)

    assert constraints.confirmed_position == {0: "R"}
    assert service.get_candidates(game_id) == ["RZEKA"]
    assert service.get_constraints("missing") is None
    assert service.get_candidates("missing") is None


def test_extra_dictionary_words_are_accepted():
    service = GameService(timezone="UTC", extra_valid_words=["kabel"])
    game_id = _game(service)

    assert service.is_valid_guess(game_id, "KABEL") == (True, "")


def test_mode_info(service):
    info = {entry["mode"]: entry for entry in service.get_mode_info(now=MIDNIGHT + 1000)}

    assert set(info) == {"daily", "hourly", "infinite"}
    assert info["daily"]["seed"] == MIDNIGHT
    assert info["daily"]["word_number"] == 1
    assert info["daily"]["time_remaining_ms"] == 24 * 60 * 60 * 1000 - 1000
    assert info["infinite"]["streak"] is False


def test_delete_game(service):
    game_id = _game(service)

    assert service.delete_game(game_id)
    assert service.get_game_state(game_id) is None
    assert not service.delete_game(game_id)
    assert service.make_guess(game_id, "RZEKA") is None


def test_concurrent_submissions_never_exceed_the_board(service):
    game_id = _game(service)
    results = []

    def submit():
        results.append(service.make_guess(game_id, "RADIO"))

    threads = [threading.Thread(target=submit) for _ in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    committed = [state for state in results if state is not None]
    assert len(committed) == 6
    assert sorted(state.current_round for state in committed) == [1, 2, 3, 4, 5, 6]
    assert service.get_game_state(game_id).status == "lost"


def test_replaying_a_finished_puzzle_is_not_counted_again(service):
    for _ in range(5):
        game_id = _game(service, player_id="p3")
        assert service.make_guess(game_id, "RZEKA").won

    stats = service.get_player_stats("p3", "daily")
    assert stats.played == 1
    assert stats.streak == 1
    assert stats.max_streak == 1

    next_day = service.create_new_game("daily", 5, player_id="p3", now=MIDNIGHT + 24 * 60 * 60 * 1000)
    force_solution(service, next_day, "RZEKA")
    service.make_guess(next_day, "RZEKA")
    assert service.get_player_stats("p3", "daily").streak == 2


def test_game_deleted_during_a_guess_stays_deleted(service, monkeypatch):
    from slowko.services import game_service as game_service_module

    game_id = _game(service)
    real_evaluate = game_service_module.evaluate

    def delete_then_evaluate(*args, **kwargs):
        service.delete_game(game_id)
        return real_evaluate(*args, **kwargs)

    monkeypatch.setattr(game_service_module, "evaluate", delete_then_evaluate)

    assert service.make_guess(game_id, "RADIO") is None
    assert service.get_game_state(game_id) is None
    assert game_id not in service.games
