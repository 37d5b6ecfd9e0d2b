# src/swipe_times/services/drill_service.py
import math
import random
import time
from typing import Callable, List, Optional, Tuple

from swipe_times.core.log_manager import logger
from swipe_times.models import TOTAL_FACTS, SwipeDirection
from swipe_times.schemas import SessionReport
from swipe_times.services.card_machine import CardStateMachine
from swipe_times.services.fact_pool import FactPool
from swipe_times.services.metrics import MetricsAccumulator

# --- CONSTANTS ---
NOT_AVAILABLE = "N/A"


class DrillSession:
    """
    One learner's drill run: start -> {reveal -> grade}* -> end.

    Owns the fact pool, the metrics and the card machine. A page creates one
    instance per client; start_session() throws away whatever the previous run left.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        on_session_end: Optional[Callable[[SessionReport], None]] = None,
    ):
        self._rng = rng or random.Random()
        self._clock = clock
        self.on_session_end = on_session_end

        self._report: Optional[SessionReport] = None
        self._started = False
        self._build_components()

    def _build_components(self):
        self.pool = FactPool(self._rng)
        self.metrics = MetricsAccumulator(self._clock)
        self.machine = CardStateMachine(self.pool, self.metrics, on_finished=self.end_session)

    # --- SESSION LIFECYCLE ---

    def start_session(self):
        self._build_components()
        self._report = None
        self._started = True

        self.metrics.reset()
        self.pool.initialize()
        logger.info(f"Drill session started with {self.pool.size()} facts.")

        self.machine.load_next()

    def end_session(self):
        """Called by the card machine once the pool is exhausted."""
        self._report = self.metrics.finalize()
        logger.info(
            f"Drill session ended after {self._report.total_graded} cards "
            f"({self._report.correct_graded} correct)."
        )
        if self.on_session_end:
            self.on_session_end(self._report)

    # --- COMMANDS ---

    def reveal(self) -> bool:
        return self.machine.reveal()

    def grade(self, direction: SwipeDirection) -> bool:
        return self.machine.grade(direction.to_grade())

    # --- QUERIES ---

    def get_current_question_label(self) -> str:
        fact = self.machine.current_fact
        return fact.question if fact else ""

    def get_current_answer(self) -> Optional[int]:
        """The answer, but only once it has been revealed."""
        if not self.machine.is_revealed:
            return None
        return self.machine.current_fact.answer

    def get_progress_fraction(self) -> float:
        return (TOTAL_FACTS - self.pool.size()) / TOTAL_FACTS

    def get_session_report(self) -> Optional[SessionReport]:
        return self._report

    @property
    def cards_remaining(self) -> int:
        """Facts not yet mastered, including the one on screen."""
        return self.pool.size() + (1 if self.machine.current_fact else 0)

    @property
    def is_active(self) -> bool:
        return self._started and not self.machine.is_finished

    @property
    def is_finished(self) -> bool:
        return self.machine.is_finished


# --- REPORT FORMATTING ---

def _fmt(value: float) -> str:
    return NOT_AVAILABLE if math.isnan(value) else f"{value:.2f}"


def summarize_report(report: SessionReport) -> List[Tuple[str, str]]:
    """
    Rows for the results table as (translation key, display value).
    Accuracy of a zero-card session shows as N/A.
    """
    accuracy = _fmt(report.accuracy_percent)
    if accuracy != NOT_AVAILABLE:
        accuracy = f"{accuracy}%"

    return [
        ("result_total_cards", str(report.total_graded)),
        ("result_accuracy", accuracy),
        ("result_time_taken", _fmt(report.time_taken_seconds)),
        ("result_seconds_per_card", _fmt(report.seconds_per_card)),
        ("result_cards_per_second", _fmt(report.cards_per_second)),
    ]
