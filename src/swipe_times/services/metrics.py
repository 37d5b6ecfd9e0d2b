# src/swipe_times/services/metrics.py
import math
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from swipe_times.core.log_manager import logger
from swipe_times.schemas import SessionReport


def compute_report(total_graded: int, correct_graded: int, time_taken_seconds: float) -> SessionReport:
    """
    Derives the summary metrics from raw counters.
    Zero graded cards gives NaN accuracy (0/0), never an exception.
    """
    time_taken_seconds = max(0.0, time_taken_seconds)

    accuracy = 100 * correct_graded / total_graded if total_graded > 0 else math.nan
    seconds_per_card = time_taken_seconds / total_graded if total_graded > 0 else 0.0
    cards_per_second = total_graded / time_taken_seconds if time_taken_seconds > 0 else 0.0

    return SessionReport(
        total_graded=total_graded,
        correct_graded=correct_graded,
        time_taken_seconds=time_taken_seconds,
        accuracy_percent=accuracy,
        seconds_per_card=seconds_per_card,
        cards_per_second=cards_per_second,
    )


class MetricsAccumulator:
    """
    Counts graded cards during a run and turns them into a SessionReport at the end.
    The clock is a monotonic seconds source; swap it out in tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.total_graded = 0
        self.correct_graded = 0
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.started_at: Optional[datetime] = None

    def reset(self):
        self.total_graded = 0
        self.correct_graded = 0
        self.start_time = self._clock()
        self.end_time = None
        self.started_at = datetime.now(timezone.utc)

    def record_grade(self, correct: bool):
        self.total_graded += 1
        if correct:
            self.correct_graded += 1

    def finalize(self) -> SessionReport:
        self.end_time = self._clock()
        start = self.start_time if self.start_time is not None else self.end_time

        report = compute_report(self.total_graded, self.correct_graded, self.end_time - start)
        report = report.model_copy(update={
            "started_at": self.started_at,
            "ended_at": datetime.now(timezone.utc),
        })

        logger.info(
            f"Session finalized: {report.total_graded} graded, {report.correct_graded} correct, "
            f"{report.time_taken_seconds:.2f}s."
        )
        return report
