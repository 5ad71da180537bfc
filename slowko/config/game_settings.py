"""
Game Configuration Constants Module

This module defines all game configuration constants and loads the word
lists shipped with the package. All game parameters are centralized here to
enable easy modification.
"""

import json
import os
from typing import Dict, Final, List

from ..engine.alphabet import POLISH_ALPHABET

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

MIN_WORD_LENGTH: Final[int] = 4
MAX_WORD_LENGTH: Final[int] = 7

WORDS_DIR: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words')


def _load_json_words(file_name: str) -> List[str]:
    """
    Load one word list from the words directory.

    Returns:
        List[str]: Uppercase words

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    json_file_path = os.path.join(WORDS_DIR, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError(f"{file_name} must contain an array of words")

    if not word_list:
        raise ValueError(f"Word list {file_name} cannot be empty")

    uppercase_words = [word.strip().upper() for word in word_list]

    for word in uppercase_words:
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            raise ValueError(f"Word '{word}' in {file_name} has unsupported length {len(word)}")
        if any(ch not in POLISH_ALPHABET for ch in word):
            raise ValueError(f"Word '{word}' in {file_name} contains non-Polish characters")

    return uppercase_words


def _load_answer_lists() -> Dict[int, List[str]]:
    return {
        length: _load_json_words(f'answers_{length}.json')
        for length in range(MIN_WORD_LENGTH, MAX_WORD_LENGTH + 1)
    }


# Possible solutions per word length
ANSWER_LISTS: Final[Dict[int, List[str]]] = _load_answer_lists()

# Every accepted guess of any supported length
VALID_WORDS: Final[List[str]] = sorted(
    set(_load_json_words('valid.json')).union(*ANSWER_LISTS.values())
)


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: Every answer list holds words of its own length only
    2. Uniqueness validation: No duplicate entries within a list
    3. Coverage validation: Every answer is also a valid guess

    Returns:
        bool: True if word lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    valid = set(VALID_WORDS)
    for length, words in ANSWER_LISTS.items():
        if not words:
            raise ValueError(f"Answer list for length {length} cannot be empty")

        for index, word in enumerate(words):
            if len(word) != length:
                raise ValueError(f"Word at index {index} '{word}' is not {length} characters long")
            if word not in valid:
                raise ValueError(f"Answer '{word}' is missing from the valid word list")

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate words found in word list {length}: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Analyzes the word lists and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - answers_per_length: Number of answers for each word length
            - valid_words: Number of accepted guesses
            - avg_vowel_count: Average vowels per answer
            - most_common_letters: Five most frequent letters across answers
    """
    answers = [word for words in ANSWER_LISTS.values() for word in words]
    if not answers:
        return {"error": "Word list is empty"}

    vowels = set('AĄEĘIOÓUY')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in answers)

    letter_frequency: Dict[str, int] = {}
    for word in answers:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "answers_per_length": {str(length): len(words) for length, words in ANSWER_LISTS.items()},
        "valid_words": len(VALID_WORDS),
        "avg_vowel_count": round(total_vowels / len(answers), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
