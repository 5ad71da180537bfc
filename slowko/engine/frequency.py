"""
Letter frequency tracking used for duplicate-letter tie-breaking.
"""

from collections import Counter


def unmatched_letters(guess: str, solution: str) -> Counter:
    """
    Multiset of solution letters left over after exact position matches.

    Both words must already be normalized and of equal length.
    """
    return Counter(s for g, s in zip(guess, solution) if g != s)


def count_occurrences(word: str, letter: str) -> int:
    return sum(1 for ch in word if ch == letter)
