"""
Mock Interface Notifier Implementation

Simulated interface-change notifier for testing.
Lets tests push events and control the one-shot query by hand.
"""

import logging
import threading
from concurrent.futures import Future
from typing import Dict, List, Optional

from connectivity.constants import CONNECTION_CHANGE_EVENT
from connectivity.interfaces.interface_notifier_interface import (
    ConnectionHandler,
    InterfaceNotifierInterface,
)


class MockInterfaceNotifier(InterfaceNotifierInterface):
    """
    Mock notifier for testing.

    Usage:
        notifier = MockInterfaceNotifier(delivers_initial_state=False,
                                         initial_state=False)
        monitor = ConnectivityMonitor(notifier=notifier, ...)
        monitor.start()          # query resolves immediately with False
        notifier.emit(True)      # simulate interface coming up
    """

    def __init__(
        self,
        delivers_initial_state: bool = True,
        initial_state: Optional[bool] = False,
    ):
        """
        Initialize mock notifier.

        Args:
            delivers_initial_state: Value of the capability flag
            initial_state: Value query_current() resolves with.
                           None leaves the future pending until
                           resolve_query() is called.
        """
        self.logger = logging.getLogger(__name__)
        self._delivers_initial_state = delivers_initial_state
        self._initial_state = initial_state

        self._handlers: Dict[str, List[ConnectionHandler]] = {}
        self._pending_queries: List["Future[bool]"] = []
        self._lock = threading.Lock()

        # Call counters
        self.subscribe_count = 0
        self.unsubscribe_count = 0
        self.query_count = 0

    @property
    def delivers_initial_state(self) -> bool:
        return self._delivers_initial_state

    def subscribe(self, event_name: str, handler: ConnectionHandler) -> None:
        with self._lock:
            self._handlers.setdefault(event_name, []).append(handler)
            self.subscribe_count += 1
        self.logger.debug(f"[MOCK] Subscribed to {event_name}")

    def unsubscribe(self, event_name: str, handler: ConnectionHandler) -> None:
        with self._lock:
            handlers = self._handlers.get(event_name, [])
            if handler in handlers:
                handlers.remove(handler)
            self.unsubscribe_count += 1
        self.logger.debug(f"[MOCK] Unsubscribed from {event_name}")

    def query_current(self) -> "Future[bool]":
        future: "Future[bool]" = Future()
        with self._lock:
            self.query_count += 1
            if self._initial_state is None:
                self._pending_queries.append(future)
                return future

        future.set_result(self._initial_state)
        return future

    # =========================================================================
    # TEST HELPER METHODS
    # =========================================================================

    def emit(
        self,
        is_connected: bool,
        event_name: str = CONNECTION_CHANGE_EVENT,
    ) -> None:
        """Deliver an event to every subscribed handler"""
        with self._lock:
            handlers = list(self._handlers.get(event_name, []))
        for handler in handlers:
            handler(is_connected)

    def resolve_query(self, is_connected: bool) -> None:
        """Resolve every pending query_current() future"""
        with self._lock:
            pending, self._pending_queries = self._pending_queries, []
        for future in pending:
            future.set_result(is_connected)

    def fail_query(self, error: Exception) -> None:
        """Fail every pending query_current() future"""
        with self._lock:
            pending, self._pending_queries = self._pending_queries, []
        for future in pending:
            future.set_exception(error)

    def get_handlers(
        self,
        event_name: str = CONNECTION_CHANGE_EVENT,
    ) -> List[ConnectionHandler]:
        """Handlers currently subscribed to an event"""
        with self._lock:
            return list(self._handlers.get(event_name, []))
