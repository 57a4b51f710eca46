from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from core.curriculum import Grade


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class StartSessionRequest(BaseModel):
    """Body of a start request from the presentation layer."""
    grade: Grade = Field(..., description="Grade identifier, e.g. 'Middle1'.")


class SubmitAnswerRequest(BaseModel):
    option: int = Field(..., ge=0, le=3, description="Index of the chosen option (0-3).")


# =============================================================================
# CATALOG SCHEMAS
# =============================================================================

class TopicPayload(BaseModel):
    id: str
    title: str


class GradePayload(BaseModel):
    id: Grade
    label: str
    topics: List[TopicPayload]


# =============================================================================
# SNAPSHOT SCHEMAS
# =============================================================================

class ProblemPayload(BaseModel):
    id: str
    type: str
    grade: Grade
    difficulty: Literal["Basic", "Advanced"]
    question: str
    options: List[str] = Field(..., min_length=4, max_length=4)
    correct_answer: int = Field(..., ge=0, le=3)
    explanation: str


class SessionSnapshot(BaseModel):
    """Read-only view of the session handed to the presentation layer."""

    phase: Literal["no_session", "active", "finished"]
    current_grade: Optional[Grade] = None
    problems: List[ProblemPayload] = Field(default_factory=list)
    current_problem: Optional[ProblemPayload] = None
    current_index: int = 0
    answers: List[Optional[int]] = Field(default_factory=list)
    results: List[Optional[bool]] = Field(default_factory=list)
    retry_count: int = 0
    attempt: int = 1
    is_finished: bool = False
    score: int = 0
    total_slots: int
    session_start_time: int = 0
    slot_start_times: List[int] = Field(default_factory=list)
    solve_durations: List[Optional[int]] = Field(default_factory=list)
    next_action: Optional[Literal["next", "retry", "move_on"]] = Field(
        None, description="What advance() will do for the current slot, once answered."
    )


# =============================================================================
# REPORT SCHEMAS
# =============================================================================

class TopicStatPayload(BaseModel):
    topic_id: str
    title: str
    total: int
    correct: int
    percentage: int


class SlotReviewPayload(BaseModel):
    number: int
    topic_id: str
    topic_title: str
    difficulty: Literal["Basic", "Advanced"]
    question: str
    options: List[str]
    correct_answer: int
    answer: Optional[int] = None
    correct: bool
    explanation: str
    solve_seconds: Optional[int] = None


class SessionReportPayload(BaseModel):
    grade: Grade
    score: int
    total: int
    percentage: int
    total_time_ms: int
    total_time_text: str
    average_seconds: int
    message_band: Literal["excellent", "good", "fair", "encourage"]
    message: str
    topics: List[TopicStatPayload] = Field(default_factory=list)
    slots: List[SlotReviewPayload] = Field(default_factory=list)
