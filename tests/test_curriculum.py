"""Tests for the curriculum catalog and the topic planner."""

import random

import pytest

from core.curriculum import GRADES, Grade, get_topic, get_topic_title, get_topics
from core.topic_planner import TopicPlanner


def test_six_grades_in_order():
    assert [grade for grade, _ in GRADES] == [
        Grade.MIDDLE_1,
        Grade.MIDDLE_2,
        Grade.MIDDLE_3,
        Grade.HIGH_1,
        Grade.HIGH_2,
        Grade.HIGH_3,
    ]
    assert Grade.HIGH_1.label == "High School Year 1"


@pytest.mark.parametrize("grade", list(Grade))
def test_topics_are_non_empty_and_stable(grade):
    topics = get_topics(grade)
    assert topics
    assert topics == get_topics(grade)
    assert all(topic.grade is grade for topic in topics)


def test_get_topics_rejects_unknown_grade():
    with pytest.raises(ValueError):
        get_topics("Grade9")


def test_topic_lookup_and_titles():
    assert get_topic("m3_root").title == "Square Roots and Real Numbers"
    assert get_topic("nope") is None
    assert get_topic_title(Grade.HIGH_3, "h3_integration") == "Integration"
    assert get_topic_title(Grade.HIGH_3, "m1_integer") == "m1_integer"


def test_planner_starts_on_first_topic():
    planner = TopicPlanner(Grade.MIDDLE_2, random.Random(0))
    assert planner.initial_topic().id == "m2_rational"


def test_planner_draws_every_topic():
    planner = TopicPlanner(Grade.HIGH_2, random.Random(0))
    drawn = {planner.next_topic().id for _ in range(200)}
    assert drawn == {"h2_exponent", "h2_trigonometry", "h2_sequence"}
