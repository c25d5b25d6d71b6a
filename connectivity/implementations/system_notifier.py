"""
System Interface Notifier Implementation

Real interface-change notifier for Linux/macOS hosts.

There is no portable push API for interface changes, so a background thread
polls core.network.check_interface_connectivity() and emits an event each
time the result flips. Because only changes are emitted, the current state
must be fetched once with query_current() after subscribing.
"""

import logging
import threading
from concurrent.futures import Future
from typing import Callable, Dict, List, Optional

from config.settings import INTERFACE_POLL_INTERVAL
from connectivity.constants import CONNECTION_CHANGE_EVENT
from connectivity.interfaces.interface_notifier_interface import (
    ConnectionHandler,
    InterfaceNotifierInterface,
)
from core.network import check_interface_connectivity


class SystemInterfaceNotifier(InterfaceNotifierInterface):
    """
    Polling notifier backed by the host's routing table.

    Usage:
        notifier = SystemInterfaceNotifier()
        notifier.subscribe("connectionChange", print)
        ...
        notifier.unsubscribe("connectionChange", print)  # stops polling
    """

    def __init__(
        self,
        poll_interval: float = INTERFACE_POLL_INTERVAL,
        check: Callable[[], bool] = check_interface_connectivity,
    ):
        """
        Initialize system notifier.

        Args:
            poll_interval: Seconds between interface checks
            check: Function returning True when an interface is up
                   (override in tests)
        """
        self.logger = logging.getLogger(__name__)
        self.poll_interval = poll_interval
        self._check = check

        self._handlers: Dict[str, List[ConnectionHandler]] = {}
        self._lock = threading.Lock()

        # Poll lock guards the poll thread and its stop event; taken before
        # _lock whenever both are needed
        self._poll_lock = threading.Lock()
        self._poll_thread: Optional[threading.Thread] = None
        self._poll_stop_event: Optional[threading.Event] = None
        self._last_state: Optional[bool] = None

    @property
    def delivers_initial_state(self) -> bool:
        return False

    def subscribe(self, event_name: str, handler: ConnectionHandler) -> None:
        with self._poll_lock:
            with self._lock:
                self._handlers.setdefault(event_name, []).append(handler)
            self._start_polling()

    def unsubscribe(self, event_name: str, handler: ConnectionHandler) -> None:
        with self._poll_lock:
            with self._lock:
                handlers = self._handlers.get(event_name, [])
                if handler in handlers:
                    handlers.remove(handler)
                if any(self._handlers.values()):
                    return
            poller = self._detach_poller()

        self._join_poller(poller)

    def query_current(self) -> "Future[bool]":
        future: "Future[bool]" = Future()

        def worker():
            try:
                future.set_result(self._check())
            except Exception as e:
                future.set_exception(e)

        threading.Thread(
            target=worker,
            daemon=True,
            name="InterfaceQuery",
        ).start()
        return future

    # =========================================================================
    # POLLING
    # =========================================================================

    def _start_polling(self) -> None:
        """Start a poll thread if none is running (caller holds _poll_lock)"""
        if self._poll_thread and self._poll_thread.is_alive():
            return

        # Each poller gets its own event so a poller that outlived its
        # join timeout is never revived by the next one
        stop_event = threading.Event()
        # Seed with the current value so only real changes are emitted
        self._last_state = self._check()
        self._poll_stop_event = stop_event
        self._poll_thread = threading.Thread(
            target=self._poll_worker,
            args=(stop_event,),
            daemon=True,
            name="InterfacePoller",
        )
        self._poll_thread.start()
        self.logger.debug("Interface polling started")

    def _stop_polling(self) -> None:
        """Stop the poll thread"""
        with self._poll_lock:
            poller = self._detach_poller()
        self._join_poller(poller)

    def _detach_poller(self):
        """Take ownership of the running poller (caller holds _poll_lock)"""
        poller = (self._poll_thread, self._poll_stop_event)
        self._poll_thread = None
        self._poll_stop_event = None
        return poller

    def _join_poller(self, poller) -> None:
        thread, stop_event = poller
        if thread is None:
            return

        stop_event.set()
        # A handler may unsubscribe from the poll thread itself
        if thread is not threading.current_thread():
            thread.join(timeout=self.poll_interval + 1.0)
        self.logger.debug("Interface polling stopped")

    def _poll_worker(self, stop_event: threading.Event) -> None:
        """Background thread that emits on every interface state flip"""
        while not stop_event.wait(self.poll_interval):
            try:
                is_up = self._check()
                if is_up == self._last_state or stop_event.is_set():
                    continue

                self._last_state = is_up
                self.logger.info(
                    f"Network interface {'up' if is_up else 'down'}",
                )
                self._emit(CONNECTION_CHANGE_EVENT, is_up)

            except Exception as e:
                self.logger.error(f"Interface poller error: {e}", exc_info=True)

    def _emit(self, event_name: str, is_connected: bool) -> None:
        with self._lock:
            handlers = list(self._handlers.get(event_name, []))
        for handler in handlers:
            handler(is_connected)
