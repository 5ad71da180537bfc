"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm with correct handling of
repeated letters.
"""

from typing import List, Optional

from ..models.game import EvaluationRow, LetterState, is_winning_row
from .alphabet import normalize_word
from .errors import LengthMismatch
from .frequency import unmatched_letters


def evaluate(guess: str, solution: str, word_length: Optional[int] = None) -> EvaluationRow:
    """
    Evaluates a guess against the solution.

    Exact matches are marked first and consume their solution letter; the
    remaining positions draw from the leftover letters left to right, so a
    letter guessed more often than the solution contains it is marked absent
    for the surplus occurrences.

    Args:
        guess: The guessed word
        solution: The secret word
        word_length: Expected length, checked when given

    Returns:
        EvaluationRow: One LetterState per position

    Raises:
        LengthMismatch: If guess, solution and word_length disagree
    """
    g = normalize_word(guess)
    s = normalize_word(solution)
    expected = len(s) if word_length is None else word_length
    if len(s) != expected:
        raise LengthMismatch(expected, len(s), what="solution")
    if len(g) != expected:
        raise LengthMismatch(expected, len(g))

    result: List[LetterState] = [
        LetterState.CORRECT if g[i] == s[i] else LetterState.ABSENT
        for i in range(len(s))
    ]
    remaining = unmatched_letters(g, s)

    for i, state in enumerate(result):
        if state is LetterState.CORRECT:
            continue
        if remaining[g[i]] > 0:
            result[i] = LetterState.PRESENT
            remaining[g[i]] -= 1

    return tuple(result)
