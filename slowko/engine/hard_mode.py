"""
Hard-Mode Validator

In hard mode every guess must keep the letters confirmed correct in their
positions and reuse every letter revealed as present.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.game import Board, EvaluationRow, LetterState
from .alphabet import normalize_word


class ViolationKind(Enum):
    POSITION_LOCK = "position_lock"
    MUST_INCLUDE = "must_include"


@dataclass(frozen=True)
class Violation:
    """First hard-mode rule broken by a guess."""
    position: int
    letter: str
    kind: ViolationKind

    @property
    def message(self) -> str:
        if self.kind is ViolationKind.POSITION_LOCK:
            return f"Letter {self.position + 1} must be {self.letter}"
        return f"Guess must contain {self.letter}"

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "letter": self.letter,
            "kind": self.kind.value,
            "message": self.message,
        }


def check_hard_mode(previous_guess: str, previous_row: EvaluationRow,
                    new_guess: str) -> Optional[Violation]:
    """
    Checks a new guess against the previous guess's revealed letters.

    Position locks are checked before inclusions, left to right; only the
    first violation is reported.

    Returns:
        Violation or None if both rules are satisfied
    """
    previous = normalize_word(previous_guess)
    new = normalize_word(new_guess)

    for i, state in enumerate(previous_row):
        if state is LetterState.CORRECT and (i >= len(new) or new[i] != previous[i]):
            return Violation(i, previous[i], ViolationKind.POSITION_LOCK)

    for i, state in enumerate(previous_row):
        if state is LetterState.PRESENT and previous[i] not in new:
            return Violation(i, previous[i], ViolationKind.MUST_INCLUDE)

    return None


def check_board_hard_mode(board: Board, new_guess: str) -> Optional[Violation]:
    """Hard-mode check against the last committed row; an empty board never violates."""
    last = board.last_row
    if last is None:
        return None
    return check_hard_mode(last.guess, last.row, new_guess)
