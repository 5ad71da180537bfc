"""
Board History Aggregator

Folds the committed rows of a board into the letter constraints they reveal.
The result is recomputed from the board on every call and never patched
incrementally.
"""

from collections import Counter
from typing import Dict, Iterable, Set, Union

from ..models.game import Board, BoardRow, LetterConstraintSet, LetterCount, LetterState
from .alphabet import normalize_word
from .errors import LengthMismatch


def aggregate(board: Union[Board, Iterable[BoardRow]], word_length: int) -> LetterConstraintSet:
    """
    Derives the accumulated constraints from a board, row by row in commit order.

    Per row:
    - a Correct letter fixes its position
    - a Present letter is excluded from its position
    - the number of Correct/Present occurrences of a letter is a lower bound on
      its count; an additional Absent occurrence in the same row makes it exact
    - an Absent letter with no Correct/Present occurrence in the row, and no
      count known from earlier rows, is excluded everywhere; otherwise it is
      excluded only from that position

    Args:
        board: Board or sequence of committed rows (may be empty)
        word_length: Length of every row

    Returns:
        LetterConstraintSet: Neutral set when the board has no rows

    Raises:
        LengthMismatch: If a row does not match `word_length`
    """
    rows = board.rows if isinstance(board, Board) else tuple(board)

    global_excluded: Set[str] = set()
    positional: Dict[int, Set[str]] = {}
    confirmed: Dict[int, str] = {}
    counts: Dict[str, LetterCount] = {}

    for board_row in rows:
        guess = normalize_word(board_row.guess)
        if len(guess) != word_length or len(board_row.row) != word_length:
            raise LengthMismatch(word_length, max(len(guess), len(board_row.row)), what="row")

        found = Counter(
            ch for ch, state in zip(guess, board_row.row)
            if state in (LetterState.CORRECT, LetterState.PRESENT)
        )
        capped = {
            ch for ch, state in zip(guess, board_row.row)
            if state is LetterState.ABSENT and found[ch] > 0
        }

        for position, (ch, state) in enumerate(zip(guess, board_row.row)):
            if state is LetterState.CORRECT:
                confirmed[position] = ch
            elif state is LetterState.PRESENT:
                positional.setdefault(position, set()).add(ch)
            elif state is LetterState.ABSENT:
                if ch in global_excluded:
                    continue
                if found[ch] == 0 and ch not in counts:
                    global_excluded.add(ch)
                else:
                    positional.setdefault(position, set()).add(ch)

        for ch, seen in found.items():
            previous = counts.get(ch)
            if previous is None:
                counts[ch] = LetterCount(seen, ch in capped)
            elif previous.exact:
                continue
            else:
                counts[ch] = LetterCount(max(previous.min_count, seen), ch in capped)

    global_excluded -= set(counts)
    for position, ch in confirmed.items():
        positional.get(position, set()).discard(ch)

    return LetterConstraintSet(
        global_excluded=frozenset(global_excluded),
        positional_excluded={
            position: frozenset(letters)
            for position, letters in positional.items() if letters
        },
        confirmed_position=confirmed,
        letter_count=counts,
    )
