"""Experience points, levels, streaks and gold."""

from __future__ import annotations

from typing import Any, Optional

from nomcool.models import Difficulty
from nomcool.settings import SettingsStore

TOTAL_XP_KEY = "experience/totalXP"
GOLD_KEY = "experience/gold"
MAX_STREAK_BONUS = 5

_BASE_XP = {
    Difficulty.EASY: 1,
    Difficulty.NORMAL: 2,
    Difficulty.HARD: 4,
}


def xp_threshold_for_level(level: int) -> int:
    """Total XP needed to reach ``level``: 5 * L * (L - 1)."""
    return 5 * level * (level - 1)


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


class Experience:
    """The player's progress; XP and gold are saved, the streak is not."""

    def __init__(self, store: Optional[SettingsStore] = None) -> None:
        self.store = store if store is not None else SettingsStore()
        self.total_xp = 0
        self.gold = 0
        self.streak = 0

    def record_correct_answer(self, difficulty: Difficulty) -> None:
        self.streak += 1
        earned = _BASE_XP[difficulty] + min(self.streak, MAX_STREAK_BONUS)
        self.total_xp += earned
        self.gold += earned
        self.save()

    def record_wrong_answer(self) -> None:
        self.streak = 0
        self.save()

    def level(self) -> int:
        level = 1
        while self.total_xp >= xp_threshold_for_level(level + 1):
            level += 1
        return level

    def xp_in_current_level(self) -> int:
        return self.total_xp - xp_threshold_for_level(self.level())

    def xp_for_next_level(self) -> int:
        level = self.level()
        return xp_threshold_for_level(level + 1) - xp_threshold_for_level(level)

    def is_hard_unlocked(self) -> bool:
        return self.level() >= 2

    def spend_gold(self, amount: int) -> None:
        self.gold -= amount
        self.save()

    def save(self) -> None:
        self.store.set(TOTAL_XP_KEY, self.total_xp)
        self.store.set(GOLD_KEY, self.gold)

    def load(self) -> None:
        self.total_xp = _as_int(self.store.get(TOTAL_XP_KEY, 0))
        self.gold = _as_int(self.store.get(GOLD_KEY, 0))