import os

os.environ.setdefault('LOG_TO_FILE', 'false')

from dataclasses import replace

import pytest

from slowko import create_app
from slowko.config import TestingConfig
from slowko.models import Board, LetterState
from slowko.services.game_service import GameService, initialize_game_service

C = LetterState.CORRECT
P = LetterState.PRESENT
A = LetterState.ABSENT

# 2025-08-11 00:00 UTC
MIDNIGHT = 1754870400000


def build_board(solution, guesses, max_attempts=6):
    from slowko.engine import evaluate

    board = Board(word_length=len(solution), max_attempts=max_attempts)
    for guess in guesses:
        board = board.append(guess, evaluate(guess, solution))
    return board


def force_solution(service, game_id, solution):
    service.games[game_id] = replace(service.games[game_id], solution=solution)


@pytest.fixture
def service():
    return GameService(timezone="UTC")


@pytest.fixture
def app():
    initialize_game_service("UTC")
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
