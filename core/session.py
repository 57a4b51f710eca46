"""
session.py

The quiz session state machine. One ``SessionController`` owns the single
``SessionState`` of the process and exposes the four learner-driven
transitions: ``start``, ``submit_answer``, ``advance`` and ``reset``.

A session is 20 slots. Each slot allows up to three attempts: a wrong answer
replaces the slot's problem with a fresh one of the same resolved type; a
correct answer (or a third wrong one) moves on to a random topic of the grade.
Transitions that do not apply in the current state are ignored and return
``False`` so late or duplicated UI events are harmless.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from core.curriculum import Grade
from core.topic_planner import TopicPlanner
from generators.base import OPTION_COUNT, ProblemInstance
from generators.universal_generator import UniversalGenerator

logger = logging.getLogger(__name__)

SESSION_LENGTH = 20
MAX_RETRIES = 2


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


class SessionPhase(str, Enum):
    NO_SESSION = "no_session"
    ACTIVE = "active"
    FINISHED = "finished"


@dataclass
class SlotRecord:
    """
    One slot of the session: the problem currently presented there and the
    learner's last submission against it (``answer``/``correct`` stay ``None``
    while unanswered).
    """

    problem: ProblemInstance
    started_at: int
    answer: Optional[int] = None
    correct: Optional[bool] = None
    duration_ms: Optional[int] = None

    @property
    def answered(self) -> bool:
        return self.correct is not None


@dataclass
class SessionState:
    grade: Optional[Grade] = None
    slots: List[SlotRecord] = field(default_factory=list)
    current_index: int = 0
    retry_count: int = 0
    is_finished: bool = False
    score: int = 0
    session_started_at: int = 0

    @property
    def phase(self) -> SessionPhase:
        if self.grade is None:
            return SessionPhase.NO_SESSION
        if self.is_finished:
            return SessionPhase.FINISHED
        return SessionPhase.ACTIVE

    @property
    def current_slot(self) -> Optional[SlotRecord]:
        if not self.slots:
            return None
        return self.slots[self.current_index]

    # Parallel views used by the presentation snapshot.

    @property
    def problems(self) -> List[ProblemInstance]:
        return [slot.problem for slot in self.slots]

    @property
    def answers(self) -> List[Optional[int]]:
        return [slot.answer for slot in self.slots]

    @property
    def results(self) -> List[Optional[bool]]:
        return [slot.correct for slot in self.slots]

    @property
    def slot_start_times(self) -> List[int]:
        return [slot.started_at for slot in self.slots]

    @property
    def solve_durations(self) -> List[Optional[int]]:
        return [slot.duration_ms for slot in self.slots]


class SessionController:
    """
    Holds the session state behind the transition methods.

    ``rng`` is the shared random source for topic choice, the advanced roll
    and problem parameters; ``clock`` returns wall-clock milliseconds. Both
    are injectable so tests can drive a session deterministically.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        generator: Optional[UniversalGenerator] = None,
        clock: Callable[[], int] = wall_clock_ms,
    ):
        self.rng = rng or random.Random()
        self.generator = generator or UniversalGenerator(rng=self.rng)
        self.clock = clock
        self.state = SessionState()
        self._planner: Optional[TopicPlanner] = None

    # --------------------------------------------------------------------- #
    # Transitions
    # --------------------------------------------------------------------- #

    def start(self, grade: Grade) -> bool:
        if self.state.phase is not SessionPhase.NO_SESSION:
            logger.warning("Ignoring start: a session is already %s.", self.state.phase.value)
            return False

        grade = Grade(grade)
        self._planner = TopicPlanner(grade, rng=self.rng)
        topic = self._planner.initial_topic()
        problem = self.generator.generate(grade, topic.id)
        now = self.clock()

        self.state = SessionState(
            grade=grade,
            slots=[SlotRecord(problem=problem, started_at=now)],
            session_started_at=now,
        )
        logger.info("Started %s session on topic %s", grade.value, problem.type)
        return True

    def submit_answer(self, option_index: int) -> bool:
        slot = self._active_slot("submit_answer")
        if slot is None:
            return False
        if slot.answered:
            logger.warning("Ignoring submit_answer: slot %d is already answered.", self.state.current_index)
            return False
        if not 0 <= option_index < OPTION_COUNT:
            logger.warning("Ignoring submit_answer: option %r is out of range.", option_index)
            return False

        slot.answer = option_index
        slot.correct = option_index == slot.problem.correct_answer
        slot.duration_ms = self.clock() - slot.started_at
        logger.debug(
            "Slot %d answered %d (%s)",
            self.state.current_index,
            option_index,
            "correct" if slot.correct else "incorrect",
        )
        return True

    def advance(self) -> bool:
        slot = self._active_slot("advance")
        if slot is None:
            return False
        if not slot.answered:
            logger.warning("Ignoring advance: slot %d has no answer yet.", self.state.current_index)
            return False

        if slot.correct:
            self.state.score += 1
            self._move_to_new_slot()
        elif self.state.retry_count < MAX_RETRIES:
            self._retry_slot(slot)
        else:
            logger.debug("Slot %d exhausted after %d attempts", self.state.current_index, MAX_RETRIES + 1)
            self._move_to_new_slot()
        return True

    def reset(self) -> None:
        self.state = SessionState()
        self._planner = None
        logger.debug("Session reset")

    # --------------------------------------------------------------------- #
    # Internal helpers
    # --------------------------------------------------------------------- #

    def _active_slot(self, action: str) -> Optional[SlotRecord]:
        phase = self.state.phase
        if phase is not SessionPhase.ACTIVE:
            logger.warning("Ignoring %s: session is %s.", action, phase.value)
            return None
        return self.state.current_slot

    def _retry_slot(self, slot: SlotRecord) -> None:
        state = self.state
        # same resolved type keeps both topic and difficulty tier
        problem = self.generator.generate(state.grade, slot.problem.type)
        state.slots[state.current_index] = SlotRecord(
            problem=problem,
            started_at=self.clock(),
            duration_ms=slot.duration_ms,
        )
        state.retry_count += 1
        logger.debug("Slot %d retry %d with %s", state.current_index, state.retry_count, problem.type)

    def _move_to_new_slot(self) -> None:
        state = self.state
        topic = self._planner.next_topic()
        problem = self.generator.generate(state.grade, topic.id)
        state.retry_count = 0

        if state.current_index + 1 == SESSION_LENGTH:
            state.is_finished = True
            logger.info("Session finished with score %d/%d", state.score, SESSION_LENGTH)
            return

        state.slots.append(SlotRecord(problem=problem, started_at=self.clock()))
        state.current_index += 1
        logger.debug("Moved to slot %d (%s)", state.current_index, problem.type)
