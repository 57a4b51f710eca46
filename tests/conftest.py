"""Shared fixtures for the session, generator and web tests."""

import random

import pytest

from core.difficulty_scaler import DifficultyScaler
from core.session import SessionController
from generators.universal_generator import UniversalGenerator


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def tick(self, ms: int) -> None:
        self.now += ms


def make_controller(seed: int = 1234, advanced_probability: float = 0.0, clock=None) -> SessionController:
    rng = random.Random(seed)
    generator = UniversalGenerator(
        rng=rng,
        scaler=DifficultyScaler(advanced_probability=advanced_probability, rng=rng),
    )
    return SessionController(rng=rng, generator=generator, clock=clock or FakeClock())


def wrong_option(controller: SessionController) -> int:
    problem = controller.state.current_slot.problem
    return (problem.correct_answer + 1) % 4


def right_option(controller: SessionController) -> int:
    return controller.state.current_slot.problem.correct_answer


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(clock):
    """Controller with the advanced roll pinned to the basic variant."""
    return make_controller(clock=clock)
