"""Plain game data: difficulty, configuration, questions, results and scores."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

CORRECT = "Correct"
INCORRECT = "Incorrect"
DONT_KNOW = "I don't know"
TIME_UP = "Time's up"


class Difficulty(enum.Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


@dataclass
class GameConfig:
    """Settings chosen before a game; ``question_count`` of None means endless."""

    difficulty: Difficulty = Difficulty.NORMAL
    has_timer: bool = True
    question_count: Optional[int] = None


@dataclass(frozen=True)
class Interrogation:
    """A question and its proposed answers as (label, response) pairs."""

    question: str
    answers: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "answers", tuple((str(label), str(resp)) for label, resp in self.answers)
        )

    def correct_answer(self) -> Optional[str]:
        """Return the label of the correct answer, if there is one."""
        return next((label for label, resp in self.answers if resp == CORRECT), None)


@dataclass(frozen=True)
class Result:
    success: bool
    message: str


@dataclass
class Score:
    correct: int = 0
    total: int = 0

    def record_success(self) -> None:
        self.correct += 1
        self.total += 1

    def record_failure(self) -> None:
        self.total += 1