"""
Candidate Filter

Turns accumulated constraints into a predicate that tells whether a word is
still consistent with everything revealed so far.
"""

import re
from typing import Iterable, List, Pattern

from ..models.game import LetterConstraintSet
from .alphabet import POLISH_ALPHABET, normalize_word
from .frequency import count_occurrences


class CandidateFilter:
    """Callable predicate built from a LetterConstraintSet."""

    def __init__(self, constraints: LetterConstraintSet, word_length: int,
                 alphabet: str = POLISH_ALPHABET):
        self.constraints = constraints
        self.word_length = word_length
        self.pattern: Pattern[str] = re.compile(
            "".join(self._position_class(position, alphabet) for position in range(word_length))
        )

    def _position_class(self, position: int, alphabet: str) -> str:
        confirmed = self.constraints.confirmed_position.get(position)
        if confirmed:
            return re.escape(confirmed)
        excluded = self.constraints.excluded_at(position)
        allowed = "".join(ch for ch in alphabet if ch not in excluded)
        if not allowed:
            return "(?!)"
        return f"[{re.escape(allowed)}]"

    def __call__(self, candidate: str) -> bool:
        word = normalize_word(candidate)
        if not self.pattern.fullmatch(word):
            return False
        for letter, count in self.constraints.letter_count.items():
            occurrences = count_occurrences(word, letter)
            if occurrences < count.min_count:
                return False
            if count.exact and occurrences != count.min_count:
                return False
        return True


def build_filter(constraints: LetterConstraintSet, word_length: int,
                 alphabet: str = POLISH_ALPHABET) -> CandidateFilter:
    """
    Builds the candidate predicate.

    Each position accepts its confirmed letter only, or any letter of the
    alphabet that is neither globally nor positionally excluded. Words that
    pass the positional pattern are then checked against the letter counts.
    """
    return CandidateFilter(constraints, word_length, alphabet)


def filter_candidates(words: Iterable[str], constraints: LetterConstraintSet,
                      word_length: int) -> List[str]:
    """Words still consistent with the constraints, in input order."""
    accepts = build_filter(constraints, word_length)
    return [word for word in words if accepts(word)]
