"""
Interface Notifier Interface

Contract for the network-interface change notifier.

The notifier reports interface association ("connected"/"disconnected"),
which is NOT proof of internet reachability. Some notifiers push the current
state as soon as a handler subscribes; others only report changes, and the
current state must then be queried once with query_current().
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Callable

# Handler signature: handler(is_connected)
ConnectionHandler = Callable[[bool], None]


class InterfaceNotifierInterface(ABC):
    """
    Abstract base class for interface-change notifiers.

    Usage:
        notifier.subscribe("connectionChange", handler)
        if not notifier.delivers_initial_state:
            notifier.query_current().add_done_callback(...)
        notifier.unsubscribe("connectionChange", handler)
    """

    @property
    @abstractmethod
    def delivers_initial_state(self) -> bool:
        """
        Whether subscribe() is followed by a proactive initial event.

        Returns:
            True if no one-shot query is needed after subscribing
        """

    @abstractmethod
    def subscribe(self, event_name: str, handler: ConnectionHandler) -> None:
        """
        Register a handler for an event.

        The handler may be called many times, from any thread.

        Args:
            event_name: Event to listen for ("connectionChange")
            handler: Called with the new interface state
        """

    @abstractmethod
    def unsubscribe(self, event_name: str, handler: ConnectionHandler) -> None:
        """
        Remove a previously registered handler.

        Args:
            event_name: Event the handler was registered for
            handler: The exact handler passed to subscribe()
        """

    @abstractmethod
    def query_current(self) -> "Future[bool]":
        """
        Query the current interface state once.

        Returns:
            Future resolving to True if an interface is up
        """
