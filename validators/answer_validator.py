"""
answer_validator.py

SymPy-based checks that a generated multiple-choice problem is well formed:
exactly four options, a correct index that points into them, and no two
options that say the same thing. "Same thing" covers exact text matches and
numerically equal spellings such as ``1/2`` and ``0.5``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Dict, List, Optional, Sequence

from sympy import Expr, sympify
from sympy.core.sympify import SympifyError

from generators.base import OPTION_COUNT, GeneratedProblem, ProblemInstance

# digits, decimal points, arithmetic and parentheses only
NUMERIC_PATTERN = re.compile(r"^[\d\s.+\-*/()]+$")


@dataclass
class ValidationResult:
    """
    Represents the outcome of a single validation attempt.
    """

    correct: bool
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class ProblemValidator:
    """
    Validates the structural invariants of a problem.

    Usage:
        validator = ProblemValidator()
        result = validator.validate(problem)
        if not result.correct:
            ...
    """

    def __init__(self, *, tolerance: float = 1e-9):
        self.tolerance = tolerance

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def validate(self, problem: GeneratedProblem | ProblemInstance) -> ValidationResult:
        options = list(problem.options)

        if len(options) != OPTION_COUNT:
            return ValidationResult(
                correct=False,
                message=f"Expected {OPTION_COUNT} options, got {len(options)}.",
                details={"options": options},
            )

        if not 0 <= problem.correct_answer < OPTION_COUNT:
            return ValidationResult(
                correct=False,
                message="Correct answer index is out of range.",
                details={"correct_answer": problem.correct_answer},
            )

        blank = [idx for idx, option in enumerate(options) if not option.strip()]
        if blank:
            return ValidationResult(
                correct=False,
                message="Options must not be blank.",
                details={"blank_indices": blank},
            )

        duplicates = self.find_duplicates(options)
        if duplicates:
            return ValidationResult(
                correct=False,
                message="Two or more options are equivalent.",
                details={"duplicate_pairs": duplicates, "options": options},
            )

        return ValidationResult(
            correct=True,
            message="Problem is well formed.",
            details={"correct_option": options[problem.correct_answer]},
        )

    def find_duplicates(self, options: Sequence[str]) -> List[tuple]:
        values = [self._to_number(option) for option in options]
        pairs = []
        for (i, left), (j, right) in combinations(enumerate(options), 2):
            if left.strip() == right.strip():
                pairs.append((i, j))
            elif values[i] is not None and values[j] is not None and self._numbers_match(values[i], values[j]):
                pairs.append((i, j))
        return pairs

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _to_number(self, text: str) -> Optional[Expr]:
        """
        Parses an option as a plain number. Anything symbolic, relational or
        not parseable (``x > 4``, ``Quadrant II``, ``√2/2``) yields ``None`` and
        is compared as text only.
        """
        text = text.replace("−", "-")
        if not NUMERIC_PATTERN.match(text):
            return None
        try:
            expr = sympify(text)
        except SympifyError:
            return None
        if isinstance(expr, Expr) and expr.is_number and expr.is_real:
            return expr
        return None

    def _numbers_match(self, left: Expr, right: Expr) -> bool:
        return abs(left.evalf() - right.evalf()) <= self.tolerance


def validate_problem(problem: GeneratedProblem | ProblemInstance) -> ValidationResult:
    """
    Convenience function for one-off validations.
    """

    return ProblemValidator().validate(problem)


if __name__ == "__main__":
    from generators.base import Difficulty

    demo = GeneratedProblem(
        question="Which is one half?",
        options=("1/2", "0.5", "2", "1/4"),
        correct_answer=0,
        explanation="",
        difficulty=Difficulty.BASIC,
    )
    print(validate_problem(demo))
