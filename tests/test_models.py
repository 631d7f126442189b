import dataclasses

import pytest

from nomcool.models import (
    CORRECT,
    DONT_KNOW,
    INCORRECT,
    Difficulty,
    GameConfig,
    Interrogation,
    Result,
    Score,
)


def test_game_config_holds_chosen_values():
    config = GameConfig(difficulty=Difficulty.HARD, has_timer=False, question_count=5)
    assert config.difficulty is Difficulty.HARD
    assert config.has_timer is False
    assert config.question_count == 5
    assert list(Difficulty) == [Difficulty.EASY, Difficulty.NORMAL, Difficulty.HARD]


def test_game_config_defaults():
    config = GameConfig()
    assert config.difficulty is Difficulty.NORMAL
    assert config.has_timer is True
    assert config.question_count is None


def test_correct_answer_found():
    question = Interrogation(
        "3 * 4",
        [("12", CORRECT), ("15", INCORRECT), (DONT_KNOW, DONT_KNOW)],
    )
    assert question.correct_answer() == "12"
    assert question.answers[-1] == (DONT_KNOW, DONT_KNOW)


def test_correct_answer_missing():
    question = Interrogation("q", [("a", INCORRECT)])
    assert question.correct_answer() is None


def test_score_counts():
    score = Score()
    score.record_success()
    score.record_failure()
    score.record_success()
    assert score.correct == 2
    assert score.total == 3


def test_result_is_immutable():
    result = Result(True, "Bravo !")
    assert result.success is True
    assert result.message == "Bravo !"
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.success = False