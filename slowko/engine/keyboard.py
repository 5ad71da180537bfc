"""
Best known state of every guessed letter, as shown on the on-screen keyboard.
"""

from typing import Dict, Iterable, Union

from ..models.game import Board, BoardRow, LetterState
from .alphabet import normalize_word


def letter_states(board: Union[Board, Iterable[BoardRow]]) -> Dict[str, LetterState]:
    rows = board.rows if isinstance(board, Board) else board
    states: Dict[str, LetterState] = {}
    for board_row in rows:
        for ch, state in zip(normalize_word(board_row.guess), board_row.row):
            states[ch] = states.get(ch, LetterState.EMPTY).merge(state)
    return states
