"""
curriculum.py

Static curriculum catalog for the self-study quiz. Maps each grade (three
middle-school years, three high-school years) to the ordered list of topics a
session can draw from. It acts as the *read-only lookup table* for the topic
planner, the generation dispatcher, and the report.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Grade(str, Enum):
    MIDDLE_1 = "Middle1"
    MIDDLE_2 = "Middle2"
    MIDDLE_3 = "Middle3"
    HIGH_1 = "High1"
    HIGH_2 = "High2"
    HIGH_3 = "High3"

    @property
    def label(self) -> str:
        return GRADE_LABELS[self]


class TopicId(str, Enum):
    M1_INTEGER = "m1_integer"
    M1_EQUATION = "m1_equation"
    M1_FUNCTION = "m1_function"
    M2_RATIONAL = "m2_rational"
    M2_INEQUALITY = "m2_inequality"
    M2_LINEAR_FUNCTION = "m2_linear_function"
    M3_ROOT = "m3_root"
    M3_FACTORIZATION = "m3_factorization"
    M3_QUADRATIC = "m3_quadratic"
    H1_POLYNOMIAL = "h1_polynomial"
    H1_COMPLEX = "h1_complex"
    H1_INEQUALITY = "h1_inequality"
    H2_EXPONENT = "h2_exponent"
    H2_TRIGONOMETRY = "h2_trigonometry"
    H2_SEQUENCE = "h2_sequence"
    H3_LIMIT = "h3_limit"
    H3_DIFFERENTIATION = "h3_differentiation"
    H3_INTEGRATION = "h3_integration"


@dataclass(frozen=True)
class TopicDescriptor:
    id: str
    title: str
    grade: Grade


GRADE_LABELS: Dict[Grade, str] = {
    Grade.MIDDLE_1: "Middle School Year 1",
    Grade.MIDDLE_2: "Middle School Year 2",
    Grade.MIDDLE_3: "Middle School Year 3",
    Grade.HIGH_1: "High School Year 1",
    Grade.HIGH_2: "High School Year 2",
    Grade.HIGH_3: "High School Year 3",
}

# Ordered middle school first, then high school.
GRADES: List[Tuple[Grade, str]] = [(grade, GRADE_LABELS[grade]) for grade in Grade]


def _topics(grade: Grade, *entries: Tuple[TopicId, str]) -> Tuple[TopicDescriptor, ...]:
    return tuple(TopicDescriptor(id=topic.value, title=title, grade=grade) for topic, title in entries)


CURRICULUM: Dict[Grade, Tuple[TopicDescriptor, ...]] = {
    Grade.MIDDLE_1: _topics(
        Grade.MIDDLE_1,
        (TopicId.M1_INTEGER, "Integers and Rational Numbers"),
        (TopicId.M1_EQUATION, "Linear Equations"),
        (TopicId.M1_FUNCTION, "Coordinate Plane and Graphs"),
    ),
    Grade.MIDDLE_2: _topics(
        Grade.MIDDLE_2,
        (TopicId.M2_RATIONAL, "Rational Numbers and Repeating Decimals"),
        (TopicId.M2_INEQUALITY, "Linear Inequalities"),
        (TopicId.M2_LINEAR_FUNCTION, "Linear Functions"),
    ),
    Grade.MIDDLE_3: _topics(
        Grade.MIDDLE_3,
        (TopicId.M3_ROOT, "Square Roots and Real Numbers"),
        (TopicId.M3_FACTORIZATION, "Factorization"),
        (TopicId.M3_QUADRATIC, "Quadratic Equations"),
    ),
    Grade.HIGH_1: _topics(
        Grade.HIGH_1,
        (TopicId.H1_POLYNOMIAL, "Polynomial Operations"),
        (TopicId.H1_COMPLEX, "Complex Numbers"),
        (TopicId.H1_INEQUALITY, "Inequalities"),
    ),
    Grade.HIGH_2: _topics(
        Grade.HIGH_2,
        (TopicId.H2_EXPONENT, "Exponential and Logarithmic Functions"),
        (TopicId.H2_TRIGONOMETRY, "Trigonometric Functions"),
        (TopicId.H2_SEQUENCE, "Sequences"),
    ),
    Grade.HIGH_3: _topics(
        Grade.HIGH_3,
        (TopicId.H3_LIMIT, "Limits of Sequences"),
        (TopicId.H3_DIFFERENTIATION, "Differentiation"),
        (TopicId.H3_INTEGRATION, "Integration"),
    ),
}

_TOPIC_INDEX: Dict[str, TopicDescriptor] = {
    topic.id: topic for topics in CURRICULUM.values() for topic in topics
}


def get_topics(grade: Grade) -> List[TopicDescriptor]:
    """
    Returns the ordered topic list for a grade. Never empty for a valid grade;
    an unknown grade raises ``ValueError``.
    """
    return list(CURRICULUM[Grade(grade)])


def get_topic(topic_id: str) -> Optional[TopicDescriptor]:
    return _TOPIC_INDEX.get(topic_id)


def get_topic_title(grade: Grade, topic_id: str) -> str:
    """Display title for a topic within a grade, or the raw id when unknown."""
    for topic in CURRICULUM.get(Grade(grade), ()):
        if topic.id == topic_id:
            return topic.title
    return topic_id
