"""
session_tools.py

Entry points that turn the core dataclasses into serializable payloads for the
web surface (or any other presentation layer).
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from core.curriculum import GRADES, get_topics
from core.report import build_report
from core.session import MAX_RETRIES, SESSION_LENGTH, SessionController, SessionPhase
from generators.base import ProblemInstance
from schemas.session import (
    GradePayload,
    ProblemPayload,
    SessionReportPayload,
    SessionSnapshot,
    TopicPayload,
)


def _to_problem_payload(problem: ProblemInstance) -> ProblemPayload:
    return ProblemPayload(
        id=problem.id,
        type=problem.type,
        grade=problem.grade,
        difficulty=problem.difficulty.value,
        question=problem.question,
        options=list(problem.options),
        correct_answer=problem.correct_answer,
        explanation=problem.explanation,
    )


def _next_action(controller: SessionController) -> Optional[str]:
    state = controller.state
    slot = state.current_slot
    if state.phase is not SessionPhase.ACTIVE or slot is None or not slot.answered:
        return None
    if slot.correct:
        return "next"
    return "retry" if state.retry_count < MAX_RETRIES else "move_on"


def build_snapshot_payload(controller: SessionController) -> SessionSnapshot:
    state = controller.state
    problems = [_to_problem_payload(problem) for problem in state.problems]
    return SessionSnapshot(
        phase=state.phase.value,
        current_grade=state.grade,
        problems=problems,
        current_problem=problems[state.current_index] if problems else None,
        current_index=state.current_index,
        answers=state.answers,
        results=state.results,
        retry_count=state.retry_count,
        attempt=state.retry_count + 1,
        is_finished=state.is_finished,
        score=state.score,
        total_slots=SESSION_LENGTH,
        session_start_time=state.session_started_at,
        slot_start_times=state.slot_start_times,
        solve_durations=state.solve_durations,
        next_action=_next_action(controller),
    )


def build_report_payload(controller: SessionController) -> Optional[SessionReportPayload]:
    report = build_report(controller.state, controller.clock())
    if report is None:
        return None
    data: Dict[str, Any] = asdict(report)
    data["topics"] = [
        {**asdict(stat), "percentage": stat.percentage} for stat in report.topics
    ]
    return SessionReportPayload(**data)


def list_grades_payload() -> List[GradePayload]:
    return [
        GradePayload(
            id=grade,
            label=label,
            topics=[TopicPayload(id=topic.id, title=topic.title) for topic in get_topics(grade)],
        )
        for grade, label in GRADES
    ]


if __name__ == "__main__":
    controller = SessionController()
    controller.start("Middle1")
    print(build_snapshot_payload(controller).model_dump_json(indent=2))
