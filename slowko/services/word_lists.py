"""
Word List Selection

Picks the answer and guess lists for a word length and difficulty, and
parses the optional CSV dictionary (one column per word length).
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from ..config.game_settings import ANSWER_LISTS, VALID_WORDS
from ..engine.alphabet import normalize_word


@dataclass(frozen=True)
class WordListHandle:
    """Answers to draw the solution from and words accepted as guesses."""
    words: Tuple[str, ...]
    valid: FrozenSet[str]

    def contains(self, word: str) -> bool:
        word = normalize_word(word)
        return word in self.valid or word in self.words


def select_word_list(length: int, extra_hard_mode: bool = False,
                     answer_lists: Optional[Dict[int, List[str]]] = None,
                     valid_words: Optional[Iterable[str]] = None) -> WordListHandle:
    """
    Returns the word lists for a game.

    In extra hard mode both the answers and the accepted guesses are the valid
    words of the requested length. Otherwise answers come from the curated list
    for that length and any valid word is accepted.

    Raises:
        ValueError: If no word of the requested length is available
    """
    answer_lists = ANSWER_LISTS if answer_lists is None else answer_lists
    valid = frozenset(VALID_WORDS if valid_words is None else valid_words)

    if extra_hard_mode:
        filtered = tuple(sorted(word for word in valid if len(word) == length))
        if not filtered:
            raise ValueError(f"No valid words of length {length}")
        return WordListHandle(words=filtered, valid=frozenset(filtered))

    if length not in answer_lists or not answer_lists[length]:
        raise ValueError(f"No answers of length {length}")
    return WordListHandle(words=tuple(answer_lists[length]), valid=valid)


def parse_csv_dictionary(csv: str) -> Dict[int, Set[str]]:
    """
    Parses a dictionary whose header row lists word lengths.

    Each following row holds at most one word per column; words whose length
    does not match their column are dropped.
    """
    lines = csv.strip().splitlines()
    if not lines:
        return {}
    headers = [int(cell.strip()) for cell in lines[0].split(',')]
    dictionary: Dict[int, Set[str]] = {length: set() for length in headers}

    for line in lines[1:]:
        cells = line.split(',')
        for column, length in enumerate(headers):
            word = cells[column].strip().upper() if column < len(cells) else ''
            if word and len(word) == length:
                dictionary[length].add(word)

    return dictionary


def load_csv_dictionary(path: str) -> Dict[int, Set[str]]:
    with open(path, 'r', encoding='utf-8') as f:
        return parse_csv_dictionary(f.read())
