"""
difficulty_scaler.py

Single place to ask, "Should this next problem be the basic or the advanced
variant of its topic?" Topics that ship an advanced generator are promoted to
it on a biased coin flip; everything else passes through untouched.

Resolved problem types carry the advanced marker as a suffix on the topic id
(``m1_integer`` -> ``m1_integer_adv``), so the helpers below are shared by the
dispatcher, the session controller and the report.
"""

from __future__ import annotations

import random
from typing import Callable, Optional

ADVANCED_SUFFIX = "_adv"
ADVANCED_PROBABILITY = 0.7


def is_advanced_type(problem_type: str) -> bool:
    return problem_type.endswith(ADVANCED_SUFFIX)


def base_topic_id(problem_type: str) -> str:
    """Strips the advanced marker: ``h2_sequence_adv`` -> ``h2_sequence``."""
    if is_advanced_type(problem_type):
        return problem_type[: -len(ADVANCED_SUFFIX)]
    return problem_type


def advanced_type(topic_id: str) -> str:
    return f"{topic_id}{ADVANCED_SUFFIX}"


class DifficultyScaler:
    """
    Resolves a requested topic id to the concrete generator type.

    A request that already names a resolved type (advanced suffix present) is
    never re-rolled, which is what keeps a retried advanced problem advanced.
    Pass ``advanced_probability=0.0`` or ``1.0`` to pin the outcome in tests.
    """

    def __init__(
        self,
        advanced_probability: float = ADVANCED_PROBABILITY,
        rng: Optional[random.Random] = None,
    ):
        if not 0.0 <= advanced_probability <= 1.0:
            raise ValueError(
                f"Invalid advanced_probability: {advanced_probability}. Must be between 0 and 1."
            )
        self.advanced_probability = advanced_probability
        self.rng = rng or random.Random()

    # --------------------------------------------------------------------- #
    # Public API
    # --------------------------------------------------------------------- #

    def resolve_type(self, topic_id: str, has_generator: Callable[[str], bool]) -> str:
        if is_advanced_type(topic_id):
            return topic_id

        candidate = advanced_type(topic_id)
        if has_generator(candidate) and self.roll_advanced():
            return candidate
        return topic_id

    def roll_advanced(self) -> bool:
        return self.rng.random() < self.advanced_probability


if __name__ == "__main__":
    # Quick smoke test
    scaler = DifficultyScaler(rng=random.Random(7))
    rolls = [scaler.resolve_type("m1_integer", lambda _: True) for _ in range(1000)]
    print(sum(is_advanced_type(r) for r in rolls) / len(rolls))
