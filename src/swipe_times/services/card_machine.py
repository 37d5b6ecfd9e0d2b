# src/swipe_times/services/card_machine.py
from typing import Callable, Optional

from swipe_times.core.log_manager import logger
from swipe_times.models import CardPhase, Grade
from swipe_times.schemas import Fact
from swipe_times.services.fact_pool import FactPool
from swipe_times.services.metrics import MetricsAccumulator


class CardStateMachine:
    """
    Drives one card at a time through NO_CARD -> CARD_SHOWN -> ANSWER_REVEALED,
    back to CARD_SHOWN for the next draw, and into FINISHED once the pool is empty.

    Out-of-sequence calls (a second tap, a swipe before the reveal, anything after
    FINISHED) are ignored and reported back as False. They never raise.
    """

    def __init__(
        self,
        pool: FactPool,
        metrics: MetricsAccumulator,
        on_finished: Optional[Callable[[], None]] = None,
    ):
        self._pool = pool
        self._metrics = metrics
        self._on_finished = on_finished
        self._phase = CardPhase.NO_CARD
        self._current: Optional[Fact] = None

    # --- READ-ONLY STATE ---

    @property
    def phase(self) -> CardPhase:
        return self._phase

    @property
    def current_fact(self) -> Optional[Fact]:
        return self._current

    @property
    def is_revealed(self) -> bool:
        return self._phase is CardPhase.ANSWER_REVEALED

    @property
    def is_finished(self) -> bool:
        return self._phase is CardPhase.FINISHED

    # --- TRANSITIONS ---

    def load_next(self) -> Optional[Fact]:
        """
        Draws the next card. Valid from any phase.
        An empty pool moves the machine to FINISHED and fires on_finished.
        """
        fact = self._pool.draw_random()

        if fact is None:
            self._current = None
            if self._phase is not CardPhase.FINISHED:
                self._phase = CardPhase.FINISHED
                logger.debug("Pool exhausted; card machine finished.")
                if self._on_finished:
                    self._on_finished()
            return None

        self._current = fact
        self._phase = CardPhase.CARD_SHOWN
        return fact

    def reveal(self) -> bool:
        if self._phase is not CardPhase.CARD_SHOWN:
            logger.debug(f"Reveal ignored in phase {self._phase.value}.")
            return False

        self._phase = CardPhase.ANSWER_REVEALED
        return True

    def grade(self, outcome: Grade) -> bool:
        """
        Records the learner's verdict on the revealed card and moves on.
        Incorrect cards go back into the pool; correct ones are retired.
        """
        if self._phase is not CardPhase.ANSWER_REVEALED:
            logger.debug(f"Grade '{outcome.value}' ignored in phase {self._phase.value}.")
            return False

        fact = self._current
        correct = outcome is Grade.CORRECT

        self._metrics.record_grade(correct)
        if not correct:
            self._pool.reinsert(fact)

        logger.debug(f"Graded '{fact.question}' as {outcome.value}; {self._pool.size()} left in pool.")

        self._current = None
        self.load_next()
        return True
