"""
Connectivity Monitor

Reconciles interface-change events, active probes, periodic polling and
foreground/background status into one authoritative "is connected" boolean.

State Flow:
    CONNECTED (initial) <----> DISCONNECTED
    Transitions happen only through reconciliation:
    - interface event trusted directly (should_ping=False)
    - probe result after an interface "up" event (should_ping=True)
    - probe result after an interval tick

Interface events:
- should_ping=True: "down" is trusted immediately, "up" only triggers a probe
- should_ping=False: every event is trusted as the new state

Threading:
- Events arrive on the notifier's thread, ticks on the scheduler's thread
- start() and stop() are serialized, so a concurrent stop() never leaves
  a subscription or a timer behind
- Each store and its listener dispatch run as one unit; probe completions
  are last-write-wins (a slow probe may overwrite a newer event)
- After stop(), reconciliation is a no-op
"""

import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Dict, List, Optional, Union

from connectivity.constants import (
    CONNECTION_CHANGE_EVENT,
    DEFAULT_HTTP_METHOD,
    DEFAULT_PING_IN_BACKGROUND,
    DEFAULT_PING_INTERVAL,
    DEFAULT_PING_ONLY_IF_OFFLINE,
    DEFAULT_PING_SERVER_URL,
    DEFAULT_PING_TIMEOUT,
    DEFAULT_SHOULD_PING,
    HttpMethod,
)
from connectivity.controllers.interval_scheduler import IntervalScheduler
from connectivity.factory import create_app_state, create_notifier, create_probe
from connectivity.interfaces.app_state_interface import (
    AppStateInterface,
    is_foreground,
)
from connectivity.interfaces.interface_notifier_interface import (
    ConnectionHandler,
    InterfaceNotifierInterface,
)
from connectivity.interfaces.probe_interface import ProbeInterface
from connectivity.models.connectivity_state import ConnectivityState
from connectivity.utils.validation_utils import (
    to_http_method,
    validate_monitor_params,
)

ConnectivityListener = Callable[[bool], None]


class ConnectivityMonitor:
    """
    Single source of truth for internet connectivity.

    Usage:
        monitor = ConnectivityMonitor(
            ping_interval=10000,
            on_connectivity_change=lambda online: print("online:", online),
        )
        monitor.start()
        ...
        monitor.stop()

        # Or as a context manager
        with ConnectivityMonitor() as monitor:
            print(monitor.is_connected)
    """

    def __init__(
        self,
        notifier: Optional[InterfaceNotifierInterface] = None,
        app_state: Optional[AppStateInterface] = None,
        probe: Optional[ProbeInterface] = None,
        scheduler: Optional[IntervalScheduler] = None,
        should_ping: bool = DEFAULT_SHOULD_PING,
        ping_interval: float = DEFAULT_PING_INTERVAL,
        ping_only_if_offline: bool = DEFAULT_PING_ONLY_IF_OFFLINE,
        ping_in_background: bool = DEFAULT_PING_IN_BACKGROUND,
        ping_timeout: float = DEFAULT_PING_TIMEOUT,
        ping_server_url: str = DEFAULT_PING_SERVER_URL,
        http_method: Union[HttpMethod, str] = DEFAULT_HTTP_METHOD,
        on_connectivity_change: Optional[ConnectivityListener] = None,
    ):
        """
        Initialize connectivity monitor.

        Configuration is validated before anything else happens, so an
        invalid value means no collaborator is ever created or touched.

        Args:
            notifier: Interface-change notifier, or None to auto-create
            app_state: Foreground status provider, or None to auto-create
            probe: Reachability probe, or None to auto-create
            scheduler: Interval scheduler, or None for a new one
            should_ping: Verify interface "up" events with a probe
            ping_interval: Polling period in milliseconds (0 = no polling)
            ping_only_if_offline: Periodic probe only while disconnected
            ping_in_background: Allow probes while the app is backgrounded
            ping_timeout: Probe timeout in milliseconds
            ping_server_url: Probe endpoint
            http_method: HEAD or OPTIONS
            on_connectivity_change: Called with the new value on every
                                    reconciliation

        Raises:
            ConfigurationError: If any parameter has the wrong type or value
        """
        validate_monitor_params(
            ping_timeout,
            ping_server_url,
            should_ping,
            ping_interval,
            ping_only_if_offline,
            ping_in_background,
            http_method,
            on_connectivity_change,
        )

        self.logger = logging.getLogger(__name__)

        # Configuration (immutable after construction)
        self.should_ping = should_ping
        self.ping_interval = ping_interval
        self.ping_only_if_offline = ping_only_if_offline
        self.ping_in_background = ping_in_background
        self.ping_timeout = ping_timeout
        self.ping_server_url = ping_server_url
        self.http_method = to_http_method(http_method)
        self.on_connectivity_change = on_connectivity_change

        # Collaborators - either provided or auto-created
        self.notifier = notifier or create_notifier()
        self.app_state = app_state or create_app_state()
        self.probe = probe or create_probe()
        self.scheduler = scheduler or IntervalScheduler()

        self.state = ConnectivityState()

        # Consumers notified on every reconciliation
        self._listeners: List[ConnectivityListener] = []

        # State lock guards the stored value and listener list; the notify
        # lock keeps store and dispatch together (reentrant for callbacks
        # that reconcile again); the lifecycle lock serializes start/stop
        self._lock = threading.Lock()
        self._notify_lock = threading.RLock()
        self._lifecycle_lock = threading.RLock()
        self._connection_change_handler: Optional[ConnectionHandler] = None
        self._started = False
        self._stopped = False

        self.logger.info(
            f"Connectivity monitor initialized "
            f"(should_ping={should_ping}, ping_interval={ping_interval}ms, "
            f"url={ping_server_url}, method={self.http_method.value})",
        )

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self) -> None:
        """
        Subscribe to interface events and arm polling.

        If the notifier does not push an initial state, the current state is
        queried once and fed through the same handler as live events. The
        query may resolve after start() returns.

        Raises:
            RuntimeError: If the monitor was already stopped
        """
        with self._lifecycle_lock:
            with self._lock:
                if self._stopped:
                    raise RuntimeError(
                        "Connectivity monitor was stopped and cannot restart",
                    )
                if self._started:
                    self.logger.warning("Connectivity monitor already started")
                    return
                self._started = True
                handler = self.get_connection_change_handler()
                self._connection_change_handler = handler

            self.notifier.subscribe(CONNECTION_CHANGE_EVENT, handler)

            if self.ping_interval > 0:
                self.scheduler.setup(self._on_interval_tick, self.ping_interval)

            if not self.notifier.delivers_initial_state:
                self.logger.debug("Querying initial interface state")
                self.notifier.query_current().add_done_callback(
                    self._on_initial_state,
                )

            self.logger.info("Connectivity monitor started")

    def stop(self) -> None:
        """
        Unsubscribe and clear the interval timer.

        Idempotent: only the first call releases anything. Reconciliation
        stops immediately; releasing waits for a start() in progress on
        another thread. An in-flight probe is not cancelled, but its result
        is discarded.
        """
        with self._lock:
            if self._stopped:
                return
            self._stopped = True

        with self._lifecycle_lock:
            with self._lock:
                handler = self._connection_change_handler
                self._connection_change_handler = None

            if handler is not None:
                self.notifier.unsubscribe(CONNECTION_CHANGE_EVENT, handler)

            self.scheduler.clear()

        self.logger.info("Connectivity monitor stopped")

    def is_running(self) -> bool:
        """Check if the monitor is started and not yet stopped"""
        return self._started and not self._stopped

    # =========================================================================
    # EVENT DISPATCH
    # =========================================================================

    def get_connection_change_handler(self) -> ConnectionHandler:
        """
        Pick the interface-event strategy.

        Returns:
            handle_interface_change when should_ping (verify),
            handle_connectivity_change otherwise (trust directly)
        """
        if self.should_ping:
            return self.handle_interface_change
        return self.handle_connectivity_change

    def handle_interface_change(self, is_connected: bool) -> None:
        """
        Verify strategy for interface events.

        A reported disconnection is trusted as-is, since no probe can
        succeed without an interface. A reported connection is only a
        trigger for check_internet().
        """
        self.logger.debug(f"Interface event: {'up' if is_connected else 'down'}")
        if not is_connected:
            self.handle_connectivity_change(False)
        else:
            self.check_internet()

    def check_internet(self) -> Optional[bool]:
        """
        Run the active verification probe and reconcile to its result.

        Skipped (no probe, no state change, no callback) while the app is
        not in the foreground and ping_in_background is False.

        Returns:
            Probe result, or None if the check was skipped
        """
        if self._stopped:
            return None

        status = self.app_state.current_status()
        if not self.ping_in_background and not is_foreground(status):
            self.logger.debug(f"Skipping probe while app is {status}")
            return None

        has_internet = self.probe.probe(
            self.ping_timeout,
            self.ping_server_url,
            self.http_method,
        )
        self.logger.debug(f"Probe result: {has_internet}")
        self.handle_connectivity_change(has_internet)
        return has_internet

    def interval_handler(self) -> None:
        """
        Periodic tick.

        With ping_only_if_offline, probes only run while disconnected.
        """
        if self.ping_only_if_offline and self.state.is_connected:
            return
        self.check_internet()

    def _on_interval_tick(self) -> None:
        """Scheduler entry point; keeps the timer alive across failures"""
        try:
            self.interval_handler()
        except Exception as e:
            self.logger.error(f"Interval check error: {e}", exc_info=True)

    def _on_initial_state(self, future: "Future[bool]") -> None:
        """Feed the one-shot query result through the live event handler"""
        with self._lock:
            handler = self._connection_change_handler
        if handler is None:
            self.logger.debug("Initial state arrived after stop, ignoring")
            return

        try:
            is_connected = future.result()
        except Exception as e:
            self.logger.warning(f"Initial interface query failed: {e}")
            return

        handler(is_connected)

    # =========================================================================
    # RECONCILIATION
    # =========================================================================

    def handle_connectivity_change(self, is_connected: bool) -> None:
        """
        Store a new connectivity value and notify consumers.

        The value is stored and broadcast even if unchanged.
        Store and dispatch are not interleaved across threads, so the last
        value consumers receive is always the stored one.
        Does nothing once the monitor is stopped.
        """
        with self._notify_lock:
            with self._lock:
                if self._stopped:
                    self.logger.debug(
                        f"Ignoring connectivity update after stop: {is_connected}",
                    )
                    return
                was_connected = self.state.is_connected
                self.state.update(is_connected)
                listeners = list(self._listeners)

            if was_connected != is_connected:
                self.logger.info(f"Connectivity changed: {self.state}")
            else:
                self.logger.debug(f"Connectivity confirmed: {self.state}")

            for listener in listeners:
                self._trigger_callback(listener, is_connected)

            if self.on_connectivity_change:
                self._trigger_callback(self.on_connectivity_change, is_connected)

    def _trigger_callback(self, callback: ConnectivityListener, value: bool) -> None:
        """Invoke a consumer callback, logging failures"""
        try:
            callback(value)
        except Exception as e:
            self.logger.error(f"Error in connectivity callback: {e}", exc_info=True)

    # =========================================================================
    # CONSUMER SURFACE
    # =========================================================================

    @property
    def is_connected(self) -> bool:
        """Current reported connectivity"""
        return self.state.is_connected

    def get_state(self) -> Dict[str, Any]:
        """
        Snapshot for consumers.

        Returns:
            {"is_connected": bool}
        """
        with self._lock:
            return self.state.to_dict()

    def add_listener(self, listener: ConnectivityListener) -> None:
        """Register a callback invoked with the value on every reconciliation"""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: ConnectivityListener) -> None:
        """Unregister a listener (no-op if unknown)"""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # =========================================================================
    # CONTEXT MANAGER
    # =========================================================================

    def __enter__(self):
        """
        Start monitoring on entry.

        Usage:
            with ConnectivityMonitor() as monitor:
                ...
        """
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Always stop; exceptions propagate"""
        self.stop()
        return False

    def __repr__(self) -> str:
        return (
            f"ConnectivityMonitor(state={self.state}, "
            f"running={self.is_running()})"
        )
