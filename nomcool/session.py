"""One game in progress: questions, answers, score and progress display."""

from __future__ import annotations

from typing import List, Optional

from nomcool.experience import Experience
from nomcool.models import (
    CORRECT,
    DONT_KNOW,
    TIME_UP,
    GameConfig,
    Interrogation,
    Result,
    Score,
)
from nomcool.questions import QuestionGenerator

SUCCESS_MESSAGE = "Bravo !"
DONT_KNOW_MESSAGE = "Tu y arriveras !"
TIME_UP_MESSAGE = "Temps écoulé !"
WRONG_MESSAGE = "Non, ce n'est pas ça !"
UNLOCK_MESSAGE = "Level 2! Hard difficulty unlocked!"
CORRECT_ANSWER_LINE = "La bonne réponse était : {}"
REMAINING_FORMAT = "Questions restantes : {}"


class GameSession:
    """Asks questions, scores answers and rewards the player's experience."""

    def __init__(
        self,
        experience: Experience,
        generator: QuestionGenerator,
        config: Optional[GameConfig] = None,
    ) -> None:
        self.experience = experience
        self.generator = generator
        self.config = config if config is not None else GameConfig()
        self.score = Score()
        self.questions_remaining: Optional[int] = self.config.question_count
        self.last_result: Optional[Result] = None
        self.last_correct_answer: Optional[str] = None
        self.hard_unlocked_now = False
        self._finished = False
        self.current: Interrogation = self.generator.generate(self.config.difficulty)

    @property
    def _counted(self) -> bool:
        count = self.config.question_count
        return count is not None and count > 0

    def answer(self, response: str) -> Result:
        """Score ``response`` to the current question and move on."""
        if self._finished:
            raise RuntimeError("the game is over")

        was_unlocked = self.experience.is_hard_unlocked()
        self.last_correct_answer = self.current.correct_answer()

        if response == CORRECT:
            self.score.record_success()
            self.experience.record_correct_answer(self.config.difficulty)
            result = Result(True, SUCCESS_MESSAGE)
        else:
            self.score.record_failure()
            self.experience.record_wrong_answer()
            if response == DONT_KNOW:
                result = Result(False, DONT_KNOW_MESSAGE)
            elif response == TIME_UP:
                result = Result(False, TIME_UP_MESSAGE)
            else:
                result = Result(False, WRONG_MESSAGE)

        self.last_result = result
        self.hard_unlocked_now = not was_unlocked and self.experience.is_hard_unlocked()

        if self._counted and self.questions_remaining is not None:
            self.questions_remaining -= 1
            if self.questions_remaining <= 0:
                self.experience.save()
                self._finished = True
                return result

        self.current = self.generator.generate(self.config.difficulty)
        return result

    def finished(self) -> bool:
        return self._finished


def feedback_text(result: Result, correct_answer: Optional[str] = None) -> str:
    """The message shown after an answer, naming the right one on failure."""
    text = result.message
    if not result.success and correct_answer:
        text += "\n" + CORRECT_ANSWER_LINE.format(correct_answer)
    return text


def score_text(score: Score) -> str:
    return f"Score: {score.correct} / {score.total}"


def experience_lines(experience: Experience) -> List[str]:
    """Level, gold, streak (from two in a row) and XP progress."""
    lines = [f"Level {experience.level()}", f"Gold: {experience.gold}"]
    if experience.streak >= 2:
        lines.append(f"Streak x{experience.streak}!")
    lines.append(
        f"{experience.xp_in_current_level()} / {experience.xp_for_next_level()} XP"
    )
    return lines