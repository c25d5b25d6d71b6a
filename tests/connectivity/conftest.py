"""
Connectivity Test Configuration and Fixtures

Shared fixtures for connectivity module tests.

To use pytest:
    pip install -e ".[test]"
    pytest tests/connectivity/
"""

import pytest

from connectivity.constants import AppStatus
from connectivity.controllers.connectivity_monitor import ConnectivityMonitor
from connectivity.implementations.app_state import MockAppState
from connectivity.implementations.mock_notifier import MockInterfaceNotifier
from connectivity.implementations.mock_probe import MockProbe

# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def mock_notifier():
    """
    Provide a notifier that pushes its own initial state (no query needed).

    Usage:
        def test_event(monitor, mock_notifier):
            mock_notifier.emit(False)
    """
    return MockInterfaceNotifier(delivers_initial_state=True)


@pytest.fixture
def mock_probe():
    """Provide a probe that reports the internet as reachable."""
    return MockProbe(result=True)


@pytest.fixture
def mock_app_state():
    """Provide an app state that starts in the foreground."""
    return MockAppState(AppStatus.ACTIVE)


@pytest.fixture
def fake_scheduler():
    """
    Provide a scheduler that never fires on its own.

    Tests drive ticks by hand with fake_scheduler.tick().
    """

    class FakeScheduler:
        def __init__(self):
            self.handler = None
            self.period_ms = None
            self.setup_count = 0
            self.clear_count = 0

        def setup(self, handler, period_ms):
            """Record the handler instead of starting a thread"""
            self.handler = handler
            self.period_ms = period_ms
            self.setup_count += 1

        def clear(self):
            self.handler = None
            self.clear_count += 1

        def is_armed(self) -> bool:
            return self.handler is not None

        def tick(self):
            """Simulate one timer firing"""
            self.handler()

    return FakeScheduler()


# =============================================================================
# MONITOR FIXTURES
# =============================================================================


@pytest.fixture
def make_monitor(mock_notifier, mock_app_state, mock_probe, fake_scheduler):
    """
    Provide a builder for monitors wired to the mock collaborators.

    Every monitor built is stopped after the test.

    Usage:
        def test_monitor(make_monitor):
            monitor = make_monitor(should_ping=False)
    """
    monitors = []

    def _make(**kwargs):
        kwargs.setdefault("notifier", mock_notifier)
        kwargs.setdefault("app_state", mock_app_state)
        kwargs.setdefault("probe", mock_probe)
        kwargs.setdefault("scheduler", fake_scheduler)
        monitor = ConnectivityMonitor(**kwargs)
        monitors.append(monitor)
        return monitor

    yield _make

    for monitor in monitors:
        monitor.stop()


@pytest.fixture
def monitor(make_monitor):
    """Provide a started monitor with default configuration."""
    monitor = make_monitor()
    monitor.start()
    return monitor


# =============================================================================
# CALLBACK TRACKING FIXTURES
# =============================================================================


@pytest.fixture
def callback_tracker():
    """
    Provide helper for tracking callback calls.

    Usage:
        def test_callback(make_monitor, callback_tracker):
            monitor = make_monitor(on_connectivity_change=callback_tracker.track)
            ...
            assert callback_tracker.values == [True]
    """

    class CallbackTracker:
        def __init__(self):
            self.values = []

        def track(self, value):
            """Record a callback invocation"""
            self.values.append(value)

        def was_called(self) -> bool:
            return len(self.values) > 0

        def get_call_count(self) -> int:
            return len(self.values)

        def reset(self):
            self.values.clear()

    return CallbackTracker()
