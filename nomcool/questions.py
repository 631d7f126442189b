"""Random multiplication questions with plausible wrong answers."""

from __future__ import annotations

import random
from typing import Any, Optional

from nomcool.models import CORRECT, DONT_KNOW, INCORRECT, Difficulty, Interrogation

_MAX_FACTOR = {
    Difficulty.EASY: 5,
    Difficulty.NORMAL: 10,
    Difficulty.HARD: 15,
}


def max_factor(difficulty: Difficulty) -> int:
    """Largest factor used at ``difficulty``."""
    return _MAX_FACTOR[difficulty]


class QuestionGenerator:
    """Builds multiplication questions; ``rng`` needs ``randint`` and ``shuffle``."""

    def __init__(self, rng: Optional[Any] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def generate(self, difficulty: Difficulty) -> Interrogation:
        top = max_factor(difficulty)
        lhs = self.rng.randint(1, top)
        rhs = self.rng.randint(1, top)
        result = lhs * rhs

        if difficulty is Difficulty.HARD:
            # Off-by-one wrong answers are hard to tell apart.
            wrong = [result + 1, result - 1 if result > 1 else result + 2]
        else:
            # Shifting one factor gives wrong answers that are easier to spot.
            def following(value: int) -> int:
                return value % top + 1

            wrong = [lhs * following(rhs), following(lhs) * rhs]

        answers = [(str(result), CORRECT)] + [(str(value), INCORRECT) for value in wrong]
        self.rng.shuffle(answers)
        answers.append((DONT_KNOW, DONT_KNOW))
        return Interrogation(f"{lhs} * {rhs}", answers)