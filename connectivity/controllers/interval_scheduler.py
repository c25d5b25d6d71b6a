"""
Interval Scheduler

Owns at most one repeating timer. Setting up a new timer replaces the old
one; clearing an unarmed scheduler does nothing.
"""

import logging
import threading
from typing import Callable, Optional

from connectivity.constants import SCHEDULER_JOIN_TIMEOUT


class IntervalScheduler:
    """
    Repeating timer running a handler on a background thread.

    Usage:
        scheduler = IntervalScheduler()
        scheduler.setup(handler, 1000)  # every second
        ...
        scheduler.clear()
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

        self._timer_thread: Optional[threading.Thread] = None
        self._timer_stop_event: Optional[threading.Event] = None
        self._lock = threading.Lock()

    def setup(self, handler: Callable[[], None], period_ms: float) -> None:
        """
        Arm the timer, replacing any timer already armed.

        Args:
            handler: Called every period_ms. Exceptions are not caught here
                     and end the timer thread.
            period_ms: Period in milliseconds (must be positive)

        Raises:
            ValueError: If period_ms is not positive
        """
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive: {period_ms}")

        self.clear()

        # Each timer gets its own event so a replaced timer can never
        # be woken up by the next one
        stop_event = threading.Event()
        thread = threading.Thread(
            target=self._timer_worker,
            args=(handler, period_ms / 1000.0, stop_event),
            daemon=True,
            name="IntervalScheduler",
        )

        with self._lock:
            self._timer_stop_event = stop_event
            self._timer_thread = thread
            thread.start()
        self.logger.debug(f"Interval timer armed ({period_ms}ms)")

    def clear(self) -> None:
        """Disarm the timer if armed"""
        with self._lock:
            thread, stop_event = self._timer_thread, self._timer_stop_event
            self._timer_thread = None
            self._timer_stop_event = None

        if thread is None:
            return

        stop_event.set()
        # A handler may clear its own scheduler
        if thread is not threading.current_thread():
            thread.join(timeout=SCHEDULER_JOIN_TIMEOUT)
        self.logger.debug("Interval timer cleared")

    def is_armed(self) -> bool:
        """
        Check whether a timer is currently running.

        False after clear(), and also after a handler exception ended
        the timer thread.
        """
        with self._lock:
            thread = self._timer_thread
        return thread is not None and thread.is_alive()

    def _timer_worker(
        self,
        handler: Callable[[], None],
        period: float,
        stop_event: threading.Event,
    ) -> None:
        """Call handler every period seconds until stop_event is set"""
        while not stop_event.wait(period):
            handler()
