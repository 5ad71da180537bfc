"""
Player Statistics Models

Contains per-player, per-mode statistics.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from ..engine.seed import ModeData


def _empty_distribution() -> Dict[str, int]:
    distribution = {str(n): 0 for n in range(1, 7)}
    distribution["fail"] = 0
    return distribution


@dataclass(frozen=True)
class Stats:
    """Statistics for one player in one game mode."""
    played: int = 0
    last_game: int = 0
    guesses: Dict[str, int] = field(default_factory=_empty_distribution)
    streak: Optional[int] = None
    max_streak: Optional[int] = None

    @classmethod
    def for_mode(cls, mode: ModeData) -> "Stats":
        """Fresh statistics; streaks are tracked only for modes that have them."""
        if mode.streak:
            return cls(streak=0, max_streak=0)
        return cls()

    @property
    def has_streak(self) -> bool:
        return self.streak is not None

    @property
    def wins(self) -> int:
        return sum(count for key, count in self.guesses.items() if key != "fail")

    def already_recorded(self, seed: int) -> bool:
        """Streak modes count one result per puzzle window."""
        return self.has_streak and self.played > 0 and seed <= self.last_game

    def add_win(self, guesses: int, mode: ModeData, seed: int) -> "Stats":
        """Returns the statistics after a win in `guesses` attempts."""
        distribution = dict(self.guesses)
        distribution[str(guesses)] = distribution.get(str(guesses), 0) + 1
        streak, max_streak = self.streak, self.max_streak
        if self.has_streak:
            # a gap longer than one puzzle unit breaks the streak
            streak = 1 if seed - self.last_game > mode.unit else self.streak + 1
            max_streak = max(streak, self.max_streak)
        return replace(
            self,
            played=self.played + 1,
            last_game=seed,
            guesses=distribution,
            streak=streak,
            max_streak=max_streak,
        )

    def add_loss(self, seed: int) -> "Stats":
        """Returns the statistics after a lost game."""
        distribution = dict(self.guesses)
        distribution["fail"] = distribution.get("fail", 0) + 1
        return replace(
            self,
            played=self.played + 1,
            last_game=seed,
            guesses=distribution,
            streak=0 if self.has_streak else None,
        )

    def to_dict(self) -> Dict:
        return {
            "played": self.played,
            "wins": self.wins,
            "last_game": self.last_game,
            "guesses": dict(self.guesses),
            "streak": self.streak,
            "max_streak": self.max_streak,
        }
