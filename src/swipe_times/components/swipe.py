from typing import Any, Callable, Optional

from nicegui import events, ui

from swipe_times.config import SWIPE_THRESHOLD_PX
from swipe_times.core.log_manager import logger
from swipe_times.models import SwipeDirection


def classify_swipe(
    start_x: Optional[float],
    end_x: Optional[float],
    threshold: float = SWIPE_THRESHOLD_PX,
) -> Optional[SwipeDirection]:
    """
    Turns the horizontal travel of a gesture into a direction.
    Travel of `threshold` px or less is not a swipe and yields None.
    """
    if start_x is None or end_x is None:
        return None

    delta = end_x - start_x
    if abs(delta) <= threshold:
        return None
    return SwipeDirection.LEFT if delta < 0 else SwipeDirection.RIGHT


def _client_x(args: Any) -> Optional[float]:
    # emit() with a single value may arrive bare or wrapped in a list
    if isinstance(args, (list, tuple)):
        args = args[0] if args else None
    try:
        return float(args)
    except (TypeError, ValueError):
        return None


class SwipeCard(ui.card):
    """
    A card surface that reports taps and horizontal touch swipes.
    Only touch events are tracked; a mouse drag would also fire a click and reveal the next card.
    """

    def __init__(
        self,
        on_tap: Optional[Callable[[], Any]] = None,
        on_swipe: Optional[Callable[[SwipeDirection], Any]] = None,
        threshold: float = SWIPE_THRESHOLD_PX,
    ):
        super().__init__()
        self._on_tap = on_tap
        self._on_swipe = on_swipe
        self.threshold = threshold
        self._start_x: Optional[float] = None

        self.on('click', self._handle_click)
        self.on('touchstart', self._handle_touch_start, js_handler='(e) => emit(e.touches[0].clientX)')
        self.on('touchend', self._handle_touch_end, js_handler='(e) => emit(e.changedTouches[0].clientX)')

    def _handle_click(self, _: events.GenericEventArguments):
        if self._on_tap:
            self._on_tap()

    def _handle_touch_start(self, e: events.GenericEventArguments):
        self._start_x = _client_x(e.args)

    def _handle_touch_end(self, e: events.GenericEventArguments):
        direction = classify_swipe(self._start_x, _client_x(e.args), self.threshold)
        self._start_x = None

        if direction is None:
            return
        logger.debug(f"Swipe {direction.value} detected.")
        if self._on_swipe:
            self._on_swipe(direction)
