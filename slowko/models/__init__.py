"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Board,
    BoardRow,
    EvaluationRow,
    Game,
    GameState,
    GameStatus,
    LetterConstraintSet,
    LetterCount,
    LetterState,
    is_winning_row,
)
from .stats import Stats

__all__ = [
    'Board', 'BoardRow', 'EvaluationRow', 'Game', 'GameState', 'GameStatus',
    'LetterConstraintSet', 'LetterCount', 'LetterState', 'Stats', 'is_winning_row'
]
