"""
Payload schemas shared between the session tools and the web surface.
"""

from .session import (
    StartSessionRequest,
    SubmitAnswerRequest,
    TopicPayload,
    GradePayload,
    ProblemPayload,
    SessionSnapshot,
    TopicStatPayload,
    SlotReviewPayload,
    SessionReportPayload,
)

__all__ = [
    "StartSessionRequest",
    "SubmitAnswerRequest",
    "TopicPayload",
    "GradePayload",
    "ProblemPayload",
    "SessionSnapshot",
    "TopicStatPayload",
    "SlotReviewPayload",
    "SessionReportPayload",
]
