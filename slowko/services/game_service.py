"""
Game Service

Manages game sessions on top of the evaluation engine: puzzle selection,
guess validation, committing rows and player statistics.
"""

import threading
import uuid
from typing import Dict, List, Optional, Tuple

from ..config.app_config import Config
from ..config.game_settings import MAX_ATTEMPTS, MAX_WORD_LENGTH, MIN_WORD_LENGTH
from ..engine import (
    EngineError,
    GameMode,
    MODES,
    aggregate,
    build_filter,
    check_board_hard_mode,
    evaluate,
    get_mode,
    get_word_number,
    letter_states,
    new_seed,
    pick_solution_index,
    time_remaining,
    validate_guess,
)
from ..models.game import Board, Game, GameState, GameStatus, LetterConstraintSet
from ..models.stats import Stats
from ..utils.game_logger import game_logger
from ..utils.helpers import now_millis, utc_offset_minutes
from .word_lists import WordListHandle, select_word_list


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Seeded word selection and secure answer storage
    - Guess validation (length, alphabet, dictionary, hard mode) and evaluation
    - Per-player statistics for every game mode

    Game records are immutable; a submission replaces the stored record under
    the game's lock, so concurrent submissions for one game are serialized.
    """

    def __init__(self, timezone: str = "UTC", max_attempts: int = MAX_ATTEMPTS,
                 extra_valid_words: Optional[List[str]] = None):
        self.games: Dict[str, Game] = {}
        self.stats: Dict[Tuple[str, str], Stats] = {}
        self.timezone = timezone
        self.max_attempts = max_attempts
        self.extra_valid_words = [word.upper() for word in extra_valid_words or []]
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _word_list(self, word_length: int, extra_hard: bool) -> WordListHandle:
        handle = select_word_list(word_length, extra_hard)
        if self.extra_valid_words and not extra_hard:
            extra = frozenset(word for word in self.extra_valid_words if len(word) == word_length)
            handle = WordListHandle(words=handle.words, valid=handle.valid | extra)
        return handle

    def _offset(self, at_millis: int) -> int:
        return utc_offset_minutes(self.timezone, at_millis)

    def create_new_game(self, mode: str = Config.DEFAULT_MODE,
                        word_length: int = Config.DEFAULT_WORD_LENGTH,
                        hard_mode: bool = False, extra_hard: bool = False,
                        player_id: Optional[str] = None,
                        now: Optional[int] = None) -> str:
        """
        Creates a new game session for the puzzle of the current time window.

        Args:
            mode: Game mode ("daily", "hourly", "infinite")
            word_length: Number of letters (4-7)
            hard_mode: Require revealed letters to be reused
            extra_hard: Draw answers from the full dictionary
            player_id: Player owning the game, used for statistics
            now: Current time in unix milliseconds, defaults to the clock

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the mode or word length is not supported
        """
        game_mode = get_mode(mode)
        if not MIN_WORD_LENGTH <= word_length <= MAX_WORD_LENGTH:
            raise ValueError(f"Word length must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH}")

        now = now_millis() if now is None else now
        seed = new_seed(game_mode, now, self._offset(now))
        words = self._word_list(word_length, extra_hard).words
        solution = words[pick_solution_index(seed, len(words))]

        game = Game(
            game_id=str(uuid.uuid4()),
            mode=game_mode.value,
            solution=solution,
            board=Board(word_length=word_length, max_attempts=self.max_attempts),
            seed=seed,
            word_number=get_word_number(game_mode, seed),
            hard_mode=hard_mode,
            extra_hard=extra_hard,
            player_id=player_id,
        )

        with self._registry_lock:
            self.games[game.game_id] = game
            self._locks[game.game_id] = threading.Lock()

        game_logger.log_game_event(
            game.game_id, 'game_created', player_id,
            mode=game.mode, word_number=game.word_number,
            word_length=word_length, hard_mode=hard_mode, extra_hard=extra_hard
        )
        return game.game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None
        return self._to_state(game)

    def _to_state(self, game: Game) -> GameState:
        board = game.board
        return GameState(
            game_id=game.game_id,
            mode=game.mode,
            word_number=game.word_number,
            word_length=board.word_length,
            current_round=board.attempts,
            max_rounds=board.max_attempts,
            hard_mode=game.hard_mode,
            status=game.status.value,
            game_over=game.game_over,
            won=game.status is GameStatus.WON,
            guesses=[board_row.guess for board_row in board.rows],
            guess_results=[[state.value for state in board_row.row] for board_row in board.rows],
            letter_status={letter: state.value for letter, state in letter_states(board).items()},
            answer=game.solution if game.game_over else None,
        )

    def _check_guess(self, game: Game, guess) -> Tuple[Optional[str], str]:
        """Returns the normalized guess and an empty error, or None and the error."""
        if game.game_over:
            return None, "Game is already over"

        if not guess or not isinstance(guess, str):
            return None, "Guess must be a valid string"

        try:
            normalized = validate_guess(guess, game.board.word_length)
        except EngineError as e:
            return None, str(e)

        if not self._word_list(game.board.word_length, game.extra_hard).contains(normalized):
            return None, "Word not in word list"

        if game.hard_mode:
            violation = check_board_hard_mode(game.board, normalized)
            if violation is not None:
                return None, violation.message

        return normalized, ""

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        game = self.games.get(game_id)
        if game is None:
            return False, "Game not found"
        normalized, error = self._check_guess(game, guess)
        return normalized is not None, error

    def make_guess(self, game_id: str, guess: str) -> Optional[GameState]:
        """
        Validates, evaluates and commits a guess.

        Args:
            game_id: Unique game identifier
            guess: The guessed word

        Returns:
            Updated GameState or None if the game is unknown or the guess invalid
        """
        lock = self._locks.get(game_id)
        if lock is None:
            return None

        with lock:
            game = self.games.get(game_id)
            if game is None:
                return None
            normalized, _ = self._check_guess(game, guess)
            if normalized is None:
                return None

            row = evaluate(normalized, game.solution, game.board.word_length)
            game = game.with_guess(normalized, row)
            with self._registry_lock:
                # deleted while the guess was being evaluated
                if game_id not in self.games:
                    return None
                self.games[game_id] = game

            if game.game_over:
                self._record_result(game)

        return self._to_state(game)

    def _record_result(self, game: Game) -> None:
        if game.player_id is None:
            return
        mode = MODES[GameMode(game.mode)]
        key = (game.player_id, game.mode)
        with self._registry_lock:
            stats = self.stats.get(key) or Stats.for_mode(mode)
            if stats.already_recorded(game.seed):
                game_logger.log_game_event(
                    game.game_id, 'result_not_recorded', game.player_id,
                    mode=game.mode, word_number=game.word_number
                )
                return
            if game.status is GameStatus.WON:
                stats = stats.add_win(game.board.attempts, mode, game.seed)
            else:
                stats = stats.add_loss(game.seed)
            self.stats[key] = stats

    def get_constraints(self, game_id: str) -> Optional[LetterConstraintSet]:
        """Constraints revealed so far, recomputed from the board."""
        game = self.games.get(game_id)
        if game is None:
            return None
        return aggregate(game.board, game.board.word_length)

    def get_candidates(self, game_id: str) -> Optional[List[str]]:
        """Answers of the game's list that are still consistent with the board."""
        game = self.games.get(game_id)
        if game is None:
            return None
        word_length = game.board.word_length
        accepts = build_filter(aggregate(game.board, word_length), word_length)
        return [word for word in self._word_list(word_length, game.extra_hard).words if accepts(word)]

    def get_player_stats(self, player_id: str, mode: str = "daily") -> Stats:
        game_mode = get_mode(mode)
        return self.stats.get((player_id, game_mode.value)) or Stats.for_mode(MODES[game_mode])

    def get_mode_info(self, now: Optional[int] = None) -> List[Dict]:
        """Seed, word number and time to the next puzzle for every mode."""
        now = now_millis() if now is None else now
        offset = self._offset(now)
        info = []
        for game_mode, data in MODES.items():
            seed = new_seed(game_mode, now, offset)
            info.append({
                'mode': game_mode.value,
                'name': data.name,
                'seed': seed,
                'word_number': get_word_number(game_mode, seed),
                'time_remaining_ms': time_remaining(game_mode, seed, now, offset),
                'streak': data.streak,
            })
        return info

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._registry_lock:
            if game_id in self.games:
                del self.games[game_id]
                self._locks.pop(game_id, None)
                return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(timezone: str = "UTC", max_attempts: int = MAX_ATTEMPTS,
                            extra_valid_words: Optional[List[str]] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(timezone, max_attempts, extra_valid_words)
    return _game_service
