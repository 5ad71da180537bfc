"""
Guess Evaluation Engine

Pure, deterministic functions for evaluating guesses, tracking what a board
has revealed, validating hard-mode play and selecting the puzzle of a time
window. Nothing in this package performs I/O.
"""

from .alphabet import POLISH_ALPHABET, is_allowed_char, normalize_word, validate_guess
from .candidates import CandidateFilter, build_filter, filter_candidates
from .errors import EngineError, InvalidCharacter, LengthMismatch
from .evaluator import evaluate, is_winning_row
from .frequency import count_occurrences, unmatched_letters
from .hard_mode import Violation, ViolationKind, check_board_hard_mode, check_hard_mode
from .history import aggregate
from .keyboard import letter_states
from .seed import (
    MODES,
    GameMode,
    ModeData,
    get_mode,
    get_word_number,
    new_seed,
    pick_solution_index,
    seeded_random_int,
    time_remaining,
)

__all__ = [
    'POLISH_ALPHABET', 'is_allowed_char', 'normalize_word', 'validate_guess',
    'CandidateFilter', 'build_filter', 'filter_candidates',
    'EngineError', 'InvalidCharacter', 'LengthMismatch',
    'evaluate', 'is_winning_row',
    'count_occurrences', 'unmatched_letters',
    'Violation', 'ViolationKind', 'check_board_hard_mode', 'check_hard_mode',
    'aggregate', 'letter_states',
    'MODES', 'GameMode', 'ModeData', 'get_mode', 'get_word_number', 'new_seed',
    'pick_solution_index', 'seeded_random_int', 'time_remaining'
]
