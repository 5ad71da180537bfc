"""
Polish alphabet handling and guess normalization.
"""

from typing import Final

from .errors import InvalidCharacter, LengthMismatch

POLISH_ALPHABET: Final[str] = "AĄBCĆDEĘFGHIJKLŁMNŃOÓPRSŚTUWYZŹŻ"


def normalize_word(word: str) -> str:
    """All comparisons are done on the stripped, upper-case form."""
    return word.strip().upper()


def is_allowed_char(ch: str, alphabet: str = POLISH_ALPHABET) -> bool:
    return len(ch) == 1 and ch.upper() in alphabet


def validate_guess(guess: str, word_length: int, alphabet: str = POLISH_ALPHABET) -> str:
    """
    Normalizes a raw guess and checks it against the word length and alphabet.

    Returns:
        str: The normalized guess

    Raises:
        LengthMismatch: If the guess is not exactly `word_length` letters
        InvalidCharacter: If the guess contains a letter outside `alphabet`
    """
    normalized = normalize_word(guess)
    if len(normalized) != word_length:
        raise LengthMismatch(word_length, len(normalized))
    for position, ch in enumerate(normalized):
        if ch not in alphabet:
            raise InvalidCharacter(ch, position)
    return normalized
