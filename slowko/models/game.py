"""
Game Data Models

Contains all game-related data structures and enums.
Records are immutable: every state transition returns a new value.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple


class LetterState(Enum):
    """Per-letter evaluation state, ordered Empty < Absent < Present < Correct."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    EMPTY = "empty"

    @property
    def rank(self) -> int:
        return _STATE_RANK[self]

    def merge(self, other: "LetterState") -> "LetterState":
        """Return the better known of two states."""
        return other if other.rank >= self.rank else self


_STATE_RANK = {
    LetterState.EMPTY: 0,
    LetterState.ABSENT: 1,
    LetterState.PRESENT: 2,
    LetterState.CORRECT: 3,
}

EvaluationRow = Tuple[LetterState, ...]


def is_winning_row(row: EvaluationRow) -> bool:
    return bool(row) and all(state is LetterState.CORRECT for state in row)


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class BoardRow:
    """One committed guess together with its evaluation."""
    guess: str
    row: EvaluationRow

    def to_dict(self) -> Dict:
        return {"guess": self.guess, "row": [state.value for state in self.row]}


@dataclass(frozen=True)
class Board:
    """Append-only sequence of evaluated guesses."""
    word_length: int
    max_attempts: int = 6
    rows: Tuple[BoardRow, ...] = ()

    @property
    def attempts(self) -> int:
        return len(self.rows)

    @property
    def last_row(self) -> Optional[BoardRow]:
        return self.rows[-1] if self.rows else None

    @property
    def is_full(self) -> bool:
        return self.attempts >= self.max_attempts

    def append(self, guess: str, row: EvaluationRow) -> "Board":
        """
        Returns a new board with one more committed row.

        Raises:
            ValueError: If the row does not match the word length or the board is full
        """
        if len(guess) != self.word_length or len(row) != self.word_length:
            raise ValueError(
                f"Row length must be {self.word_length}, got guess of {len(guess)} and row of {len(row)}"
            )
        if self.is_full:
            raise ValueError(f"Board already holds {self.max_attempts} rows")
        return replace(self, rows=self.rows + (BoardRow(guess, tuple(row)),))


@dataclass(frozen=True)
class LetterCount:
    """Known number of occurrences of a letter in the solution."""
    min_count: int
    exact: bool = False


@dataclass(frozen=True)
class LetterConstraintSet:
    """Deductions accumulated from a board's history."""
    global_excluded: FrozenSet[str] = frozenset()
    positional_excluded: Dict[int, FrozenSet[str]] = field(default_factory=dict)
    confirmed_position: Dict[int, str] = field(default_factory=dict)
    letter_count: Dict[str, LetterCount] = field(default_factory=dict)

    def excluded_at(self, position: int) -> FrozenSet[str]:
        """Letters that cannot occupy the given position."""
        return self.global_excluded | self.positional_excluded.get(position, frozenset())

    def to_dict(self) -> Dict:
        return {
            "global_excluded": sorted(self.global_excluded),
            "positional_excluded": {
                str(pos): sorted(letters)
                for pos, letters in sorted(self.positional_excluded.items())
            },
            "confirmed_position": {
                str(pos): letter for pos, letter in sorted(self.confirmed_position.items())
            },
            "letter_count": {
                letter: {"min_count": count.min_count, "exact": count.exact}
                for letter, count in sorted(self.letter_count.items())
            },
        }


@dataclass(frozen=True)
class Game:
    """Server-side record of one game; the solution never leaves the service."""
    game_id: str
    mode: str
    solution: str
    board: Board
    seed: int
    word_number: int
    hard_mode: bool = False
    extra_hard: bool = False
    player_id: Optional[str] = None
    status: GameStatus = GameStatus.PLAYING

    @property
    def game_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    def with_guess(self, guess: str, row: EvaluationRow) -> "Game":
        """Returns the game after committing one evaluated guess."""
        board = self.board.append(guess, row)
        if is_winning_row(row):
            status = GameStatus.WON
        elif board.is_full:
            status = GameStatus.LOST
        else:
            status = GameStatus.PLAYING
        return replace(self, board=board, status=status)


@dataclass
class GameState:
    """Client-facing game state representation."""
    game_id: str
    mode: str
    word_number: int
    word_length: int
    current_round: int
    max_rounds: int
    hard_mode: bool
    status: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[str]]  # LetterState values for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
