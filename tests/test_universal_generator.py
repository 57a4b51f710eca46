"""Tests for the generation dispatcher and the difficulty roll."""

import random

import pytest

from core.curriculum import Grade
from core.difficulty_scaler import (
    DifficultyScaler,
    advanced_type,
    base_topic_id,
    is_advanced_type,
)
from generators import base
from generators.base import Difficulty, ProblemDraft, ProblemGenerator
from generators.universal_generator import (
    PLACEHOLDER_EXPLANATION,
    PLACEHOLDER_OPTIONS,
    UniversalGenerator,
)
from validators.answer_validator import ValidationResult


@pytest.fixture
def basic_generator():
    rng = random.Random(99)
    return UniversalGenerator(rng=rng, scaler=DifficultyScaler(advanced_probability=0.0, rng=rng))


def test_suffix_helpers():
    assert advanced_type("h2_sequence") == "h2_sequence_adv"
    assert base_topic_id("h2_sequence_adv") == "h2_sequence"
    assert base_topic_id("h2_sequence") == "h2_sequence"
    assert is_advanced_type("m1_integer_adv")
    assert not is_advanced_type("m1_integer")


def test_scaler_rejects_bad_probability():
    with pytest.raises(ValueError):
        DifficultyScaler(advanced_probability=1.5)


def test_advanced_roll_is_about_seventy_percent():
    generator = UniversalGenerator(rng=random.Random(2024))
    calls = 2000
    advanced = sum(
        generator.generate(Grade.MIDDLE_1, "m1_integer").type == "m1_integer_adv" for _ in range(calls)
    )
    assert 0.65 <= advanced / calls <= 0.75


def test_topic_without_advanced_variant_stays_basic():
    generator = UniversalGenerator(rng=random.Random(5))
    for _ in range(50):
        problem = generator.generate(Grade.HIGH_1, "h1_complex")
        assert problem.type == "h1_complex"
        assert problem.difficulty is Difficulty.BASIC


def test_resolved_advanced_type_is_not_rerolled(basic_generator):
    for _ in range(20):
        problem = basic_generator.generate(Grade.MIDDLE_3, "m3_quadratic_adv")
        assert problem.type == "m3_quadratic_adv"
        assert problem.difficulty is Difficulty.ADVANCED


def test_resolved_basic_type_stays_basic_when_forced(basic_generator):
    problem = basic_generator.generate(Grade.MIDDLE_3, "m3_quadratic")
    assert problem.type == "m3_quadratic"
    assert problem.difficulty is Difficulty.BASIC


def test_problem_is_stamped(basic_generator):
    first = basic_generator.generate("High2", "h2_sequence")
    second = basic_generator.generate(Grade.HIGH_2, "h2_sequence")

    assert first.grade is Grade.HIGH_2
    assert first.type == "h2_sequence"
    assert first.topic_id == "h2_sequence"
    assert first.id and second.id and first.id != second.id


def test_missing_advanced_type_falls_back_to_basic(basic_generator):
    problem = basic_generator.generate(Grade.HIGH_1, "h1_complex_adv")

    assert problem.type == "h1_complex"
    assert problem.difficulty is Difficulty.BASIC
    assert problem.options == ("1", "-1", "i", "-i")


def test_unknown_topic_yields_placeholder(basic_generator):
    problem = basic_generator.generate(Grade.MIDDLE_1, "zz_unknown")

    assert problem.type == "zz_unknown"
    assert problem.difficulty is Difficulty.BASIC
    assert problem.options == PLACEHOLDER_OPTIONS
    assert problem.correct_answer == 0
    assert problem.explanation == PLACEHOLDER_EXPLANATION


class _RejectEverything:
    def __init__(self):
        self.calls = 0

    def validate(self, problem):
        self.calls += 1
        return ValidationResult(correct=False, message="rejected")


def test_rejected_problems_are_resampled_then_last_kept():
    validator = _RejectEverything()
    rng = random.Random(1)
    generator = UniversalGenerator(
        rng=rng,
        scaler=DifficultyScaler(advanced_probability=0.0, rng=rng),
        validator=validator,
        max_attempts=3,
    )

    problem = generator.generate(Grade.MIDDLE_1, "m1_integer")

    assert validator.calls == 3
    assert problem.type == "m1_integer"
    assert len(problem.options) == 4


def test_generator_errors_degrade_to_placeholder(monkeypatch, basic_generator):
    def broken(rng):
        return ProblemDraft(question="q", answer="a", candidates=[], explanation="e")

    monkeypatch.setitem(base.GENERATORS, "zz_broken", ProblemGenerator("zz_broken", Difficulty.BASIC, broken))

    problem = basic_generator.generate(Grade.MIDDLE_1, "zz_broken")

    assert problem.type == "zz_broken"
    assert problem.options == PLACEHOLDER_OPTIONS
