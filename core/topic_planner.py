"""
topic_planner.py

Decides which curriculum topic the next slot of a session should practise.
A session always opens on the grade's first topic; every slot after that is a
uniform draw over the grade's full topic list (the topic just finished
included).
"""

from __future__ import annotations

import random
from typing import List, Optional

from core.curriculum import Grade, TopicDescriptor, get_topics


class TopicPlanner:
    """
    Typical usage:
        planner = TopicPlanner(Grade.MIDDLE_1)
        first = planner.initial_topic()
        later = planner.next_topic()
    """

    def __init__(self, grade: Grade, rng: Optional[random.Random] = None):
        self.grade = Grade(grade)
        self.rng = rng or random.Random()
        self.topics: List[TopicDescriptor] = get_topics(self.grade)

    def initial_topic(self) -> TopicDescriptor:
        return self.topics[0]

    def next_topic(self) -> TopicDescriptor:
        return self.rng.choice(self.topics)


if __name__ == "__main__":
    planner = TopicPlanner(Grade.HIGH_2, random.Random(1))
    print(planner.initial_topic())
    print([planner.next_topic().id for _ in range(5)])
