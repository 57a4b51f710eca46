"""
report.py

Derived end-of-session report: score percentage, elapsed time, per-topic
accuracy, a qualitative message, and a slot-by-slot review. Nothing here
mutates the session; the report is recomputed from the state on demand.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from core.curriculum import get_topic_title
from core.session import SESSION_LENGTH, SessionPhase, SessionState
from formatting.text_cleaner import format_duration

# (minimum percentage, band key, message), checked top to bottom
MESSAGE_BANDS: List[Tuple[int, str, str]] = [
    (90, "excellent", "Outstanding! That is nearly perfect."),
    (70, "good", "Well done! A little more practice and you will have it."),
    (50, "fair", "Good effort. Let's strengthen the fundamentals a bit more."),
    (0, "encourage", "Keep going! Steady practice will build your skills."),
]


@dataclass
class TopicStat:
    topic_id: str
    title: str
    total: int = 0
    correct: int = 0

    @property
    def percentage(self) -> int:
        if not self.total:
            return 0
        return round_half_up(100 * self.correct / self.total)


@dataclass
class SlotReview:
    number: int
    topic_id: str
    topic_title: str
    difficulty: str
    question: str
    options: List[str]
    correct_answer: int
    answer: Optional[int]
    correct: bool
    explanation: str
    solve_seconds: Optional[int]


@dataclass
class SessionReport:
    grade: str
    score: int
    total: int
    percentage: int
    total_time_ms: int
    total_time_text: str
    average_seconds: int
    message_band: str
    message: str
    topics: List[TopicStat] = field(default_factory=list)
    slots: List[SlotReview] = field(default_factory=list)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def message_for_percentage(percentage: int) -> Tuple[str, str]:
    for minimum, band, message in MESSAGE_BANDS:
        if percentage >= minimum:
            return band, message
    return MESSAGE_BANDS[-1][1], MESSAGE_BANDS[-1][2]


def build_report(state: SessionState, now_ms: int) -> Optional[SessionReport]:
    """
    Summarises a finished session as of ``now_ms``. Returns ``None`` for a
    session that has not finished.
    """
    if state.phase is not SessionPhase.FINISHED:
        return None

    percentage = round_half_up(100 * state.score / SESSION_LENGTH)
    total_ms = max(now_ms - state.session_started_at, 0)
    total_seconds = total_ms // 1000
    band, message = message_for_percentage(percentage)

    topics: Dict[str, TopicStat] = {}
    reviews: List[SlotReview] = []
    for number, slot in enumerate(state.slots, start=1):
        problem = slot.problem
        topic_id = problem.topic_id
        title = get_topic_title(state.grade, topic_id)
        stat = topics.setdefault(topic_id, TopicStat(topic_id=topic_id, title=title))
        stat.total += 1
        if slot.correct:
            stat.correct += 1

        reviews.append(
            SlotReview(
                number=number,
                topic_id=topic_id,
                topic_title=title,
                difficulty=problem.difficulty.value,
                question=problem.question,
                options=list(problem.options),
                correct_answer=problem.correct_answer,
                answer=slot.answer,
                correct=bool(slot.correct),
                explanation=problem.explanation,
                solve_seconds=None if slot.duration_ms is None else slot.duration_ms // 1000,
            )
        )

    return SessionReport(
        grade=state.grade.value,
        score=state.score,
        total=SESSION_LENGTH,
        percentage=percentage,
        total_time_ms=total_ms,
        total_time_text=format_duration(total_seconds),
        average_seconds=total_seconds // SESSION_LENGTH,
        message_band=band,
        message=message,
        topics=list(topics.values()),
        slots=reviews,
    )
