"""
universal_generator.py

Generation dispatcher. Given a grade and a topic id it decides between the
basic and advanced variant, runs the registered generator, validates the
result, and stamps it with a fresh id, the grade and the resolved type.
Generation never fails a session: missing generators fall back to the basic
variant and, failing that, to a placeholder problem.
"""

from __future__ import annotations

import logging
import random
import uuid
from typing import Optional

import generators.high_school  # noqa: F401  (registers generators)
import generators.middle_school  # noqa: F401  (registers generators)
from core.curriculum import Grade
from core.difficulty_scaler import DifficultyScaler, base_topic_id
from generators.base import (
    Difficulty,
    GeneratedProblem,
    ProblemGenerator,
    ProblemInstance,
    get_generator,
    has_generator,
)
from validators.answer_validator import ProblemValidator

logger = logging.getLogger(__name__)

MAX_GENERATION_ATTEMPTS = 5

PLACEHOLDER_QUESTION = "Problem generation error"
PLACEHOLDER_OPTIONS = ("1", "2", "3", "4")
PLACEHOLDER_EXPLANATION = "No problem generator exists for this topic."


def new_problem_id() -> str:
    return uuid.uuid4().hex


class UniversalGenerator:
    """
    Facade over the difficulty roll, the generator registry and validation.

    Typical usage:
        generator = UniversalGenerator(rng=random.Random(42))
        problem = generator.generate(Grade.MIDDLE_1, "m1_integer")

    Pass the ``problem.type`` of an existing problem back in to get another
    problem of the same topic and tier (the advanced roll is skipped for
    already-resolved advanced types).
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        scaler: Optional[DifficultyScaler] = None,
        validator: Optional[ProblemValidator] = None,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
    ):
        self.rng = rng or random.Random()
        self.scaler = scaler or DifficultyScaler(rng=self.rng)
        self.validator = validator or ProblemValidator()
        self.max_attempts = max(1, max_attempts)

    def generate(self, grade: Grade, topic_id: str) -> ProblemInstance:
        grade = Grade(grade)
        resolved = self.scaler.resolve_type(topic_id, has_generator)
        generator = get_generator(resolved)

        if generator is None:
            fallback_type = base_topic_id(topic_id)
            generator = get_generator(fallback_type)
            if generator is None:
                logger.warning("No generator for '%s'; using placeholder problem.", topic_id)
                return self._placeholder(grade, topic_id)
            logger.warning("No generator for '%s'; falling back to '%s'.", resolved, fallback_type)
            resolved = fallback_type

        result = self._run(generator)
        if result is None:
            return self._placeholder(grade, resolved)

        problem = ProblemInstance(
            id=new_problem_id(),
            type=resolved,
            grade=grade,
            difficulty=result.difficulty,
            question=result.question,
            options=result.options,
            correct_answer=result.correct_answer,
            explanation=result.explanation,
        )
        logger.debug("Generated %s problem %s", problem.type, problem.id)
        return problem

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _run(self, generator: ProblemGenerator) -> Optional[GeneratedProblem]:
        """
        Samples until the validator accepts a problem. After the attempt budget
        the last well-built but rejected problem is returned anyway; ``None``
        only when every attempt raised.
        """
        last: Optional[GeneratedProblem] = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                candidate = generator.generate(self.rng)
            except ValueError:
                logger.warning(
                    "Generator %r failed on attempt %d.", generator, attempt, exc_info=True
                )
                continue
            verdict = self.validator.validate(candidate)
            if verdict.correct:
                return candidate
            logger.debug("Rejected %r output: %s %s", generator, verdict.message, verdict.details)
            last = candidate

        if last is not None:
            logger.warning(
                "Generator %r produced no valid problem in %d attempts; using last.",
                generator,
                self.max_attempts,
            )
        return last

    @staticmethod
    def _placeholder(grade: Grade, problem_type: str) -> ProblemInstance:
        return ProblemInstance(
            id=new_problem_id(),
            type=problem_type,
            grade=grade,
            difficulty=Difficulty.BASIC,
            question=PLACEHOLDER_QUESTION,
            options=PLACEHOLDER_OPTIONS,
            correct_answer=0,
            explanation=PLACEHOLDER_EXPLANATION,
        )


def generate_problem(grade: Grade, topic_id: str, rng: Optional[random.Random] = None) -> ProblemInstance:
    """
    Convenience function for one-off generation.
    """

    return UniversalGenerator(rng=rng).generate(grade, topic_id)


if __name__ == "__main__":
    generator = UniversalGenerator(rng=random.Random(3))
    for topic in ("m1_integer", "m3_quadratic", "h3_integration"):
        problem = generator.generate(Grade.MIDDLE_1, topic)
        print(problem.type, "->", problem.question, problem.options, problem.correct_answer)
