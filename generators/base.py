"""
base.py

Shared building blocks for the topic generators: the problem dataclasses, the
generator registry keyed by resolved problem type, and the option helpers that
guarantee four distinct, shuffled choices.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from core.curriculum import Grade
from core.difficulty_scaler import base_topic_id
from formatting.text_cleaner import clean_math_text

OPTION_COUNT = 4


class Difficulty(str, Enum):
    BASIC = "Basic"
    ADVANCED = "Advanced"


@dataclass(frozen=True)
class GeneratedProblem:
    """What a generator returns before the dispatcher stamps id/grade/type."""

    question: str
    options: Tuple[str, ...]
    correct_answer: int
    explanation: str
    difficulty: Difficulty


@dataclass(frozen=True)
class ProblemInstance:
    """A fully stamped, immutable problem presented in one session slot."""

    id: str
    type: str
    grade: Grade
    difficulty: Difficulty
    question: str
    options: Tuple[str, ...]
    correct_answer: int
    explanation: str

    @property
    def topic_id(self) -> str:
        return base_topic_id(self.type)

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer]


class ProblemGenerator:
    """
    One registered generator: a resolved problem type (``m3_root`` or
    ``m3_quadratic_adv``), its difficulty tier, and the function that samples
    fresh parameters from the shared random source.
    """

    def __init__(
        self,
        problem_type: str,
        difficulty: Difficulty,
        func: Callable[[random.Random], "ProblemDraft"],
    ):
        self.problem_type = problem_type
        self.difficulty = difficulty
        self.func = func

    def generate(self, rng: random.Random) -> GeneratedProblem:
        draft = self.func(rng)
        return draft.finalize(rng, self.difficulty)

    def __repr__(self) -> str:
        return f"ProblemGenerator({self.problem_type!r}, {self.difficulty.value})"


@dataclass
class ProblemDraft:
    """
    The topic-specific part of a problem: text, the true answer and the
    distractor candidates. ``finalize`` picks three distinct distractors,
    shuffles, and locates the correct index.

    ``fixed_order`` keeps the options exactly as listed (quadrants, powers of
    i) instead of shuffling them.
    """

    question: str
    answer: Any
    candidates: Sequence[Any]
    explanation: str
    spares: Sequence[Any] = field(default_factory=tuple)
    fixed_order: Optional[Sequence[Any]] = None

    def finalize(self, rng: random.Random, difficulty: Difficulty) -> GeneratedProblem:
        if self.fixed_order is not None:
            options = [clean_math_text(str(option)) for option in self.fixed_order]
        else:
            options = build_options(self.answer, self.candidates, rng, spares=self.spares)
        answer_text = clean_math_text(str(self.answer))
        return GeneratedProblem(
            question=clean_math_text(self.question),
            options=tuple(options),
            correct_answer=options.index(answer_text),
            explanation=clean_math_text(self.explanation),
            difficulty=difficulty,
        )


GENERATORS: Dict[str, ProblemGenerator] = {}


def register(problem_type: str, difficulty: Difficulty = Difficulty.BASIC):
    """Decorator registering a draft function under a resolved problem type."""

    def decorator(func: Callable[[random.Random], ProblemDraft]):
        if problem_type in GENERATORS:
            raise ValueError(f"Duplicate generator for '{problem_type}'.")
        GENERATORS[problem_type] = ProblemGenerator(problem_type, difficulty, func)
        return func

    return decorator


def get_generator(problem_type: str) -> Optional[ProblemGenerator]:
    return GENERATORS.get(problem_type)


def has_generator(problem_type: str) -> bool:
    return problem_type in GENERATORS


# ------------------------------------------------------------------ #
# Option helpers
# ------------------------------------------------------------------ #


def shuffle_options(options: Iterable[str], rng: random.Random) -> List[str]:
    """Uniform permutation (Fisher-Yates via ``Random.shuffle``) on a copy."""
    shuffled = list(options)
    rng.shuffle(shuffled)
    return shuffled


def _integer_offsets() -> Iterable[int]:
    step = 1
    while True:
        yield step
        yield -step
        step += 1


def build_options(
    answer: Any,
    candidates: Sequence[Any],
    rng: random.Random,
    *,
    spares: Sequence[Any] = (),
) -> List[str]:
    """
    Returns the answer plus three distinct distractors, shuffled.

    Candidates are taken in order, skipping anything whose cleaned text equals
    the answer or an earlier pick. When that leaves fewer than three, the
    ``spares`` are tried next, then integer offsets from an integer answer.
    """
    answer_text = clean_math_text(str(answer))
    picked: List[str] = [answer_text]

    def take(value: Any) -> None:
        text = clean_math_text(str(value))
        if text and text not in picked:
            picked.append(text)

    for value in list(candidates) + list(spares):
        if len(picked) == OPTION_COUNT:
            break
        take(value)

    if len(picked) < OPTION_COUNT:
        if not isinstance(answer, int):
            raise ValueError(
                f"Not enough distinct distractors for answer {answer_text!r}: {picked[1:]}"
            )
        for offset in _integer_offsets():
            if len(picked) == OPTION_COUNT:
                break
            take(answer + offset)

    return shuffle_options(picked, rng)


def power(base: str, exponent: int) -> str:
    """``x^3`` notation, with ``x^1`` -> ``x`` and ``x^0`` -> ``1``."""
    if exponent == 0:
        return "1"
    if exponent == 1:
        return base
    return f"{base}^{exponent}"


def monomial(coefficient: int, base: str, exponent: int) -> str:
    """``3x^2``, with unit coefficients dropped."""
    term = power(base, exponent)
    if exponent == 0:
        return str(coefficient)
    if coefficient == 1:
        return term
    if coefficient == -1:
        return f"-{term}"
    return f"{coefficient}{term}"
