# src/swipe_times/services/fact_pool.py
import random
from typing import List, Optional

from swipe_times.core.log_manager import logger
from swipe_times.models import TABLE_MIN, TABLE_MAX
from swipe_times.schemas import Fact


def generate_facts() -> List[Fact]:
    """Every A x B for A, B in the table range, each pair exactly once."""
    return [
        Fact(multiplicand=a, multiplier=b)
        for a in range(TABLE_MIN, TABLE_MAX + 1)
        for b in range(TABLE_MIN, TABLE_MAX + 1)
    ]


class FactPool:
    """
    The facts not yet graded correct in the current session.
    Order carries no meaning; draws pick a uniformly random index.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._facts: List[Fact] = []

    def initialize(self):
        self._facts = generate_facts()
        logger.debug(f"Fact pool initialized with {len(self._facts)} facts.")

    def draw_random(self) -> Optional[Fact]:
        """
        Removes and returns a random fact.
        Returns None once the pool is empty; that is the end-of-session signal, not an error.
        """
        if not self._facts:
            return None
        index = self._rng.randrange(len(self._facts))
        return self._facts.pop(index)

    def reinsert(self, fact: Fact):
        self._facts.append(fact)

    def size(self) -> int:
        return len(self._facts)

    def __len__(self) -> int:
        return len(self._facts)

    def __contains__(self, fact: Fact) -> bool:
        return fact in self._facts
