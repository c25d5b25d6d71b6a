"""
System Notifier Tests

Tests for SystemInterfaceNotifier with the interface check replaced:
- Change-only emission from the poll thread
- Polling starts on subscribe and stops with the last unsubscribe
- One-shot query via Future

To run:
    pytest tests/connectivity/implementations/test_system_notifier.py -v
"""

import threading

import pytest

from connectivity.constants import CONNECTION_CHANGE_EVENT
from connectivity.implementations.system_notifier import SystemInterfaceNotifier


class FakeInterface:
    """Switchable stand-in for check_interface_connectivity()"""

    def __init__(self, is_up: bool = True):
        self.is_up = is_up

    def __call__(self) -> bool:
        return self.is_up


@pytest.fixture
def interface():
    return FakeInterface(is_up=True)


@pytest.fixture
def notifier(interface):
    notifier = SystemInterfaceNotifier(poll_interval=0.01, check=interface)
    yield notifier
    notifier._stop_polling()


@pytest.mark.unit
def test_notifier_requires_query(notifier):
    """Test the notifier does not push an initial state."""
    assert notifier.delivers_initial_state is False


@pytest.mark.unit
def test_query_current_resolves(notifier, interface):
    interface.is_up = False

    assert notifier.query_current().result(timeout=2.0) is False


@pytest.mark.unit
def test_query_current_propagates_check_errors():
    def broken():
        raise OSError("no sockets")

    notifier = SystemInterfaceNotifier(poll_interval=0.01, check=broken)

    with pytest.raises(OSError):
        notifier.query_current().result(timeout=2.0)


@pytest.mark.slow
def test_notifier_emits_on_change(notifier, interface):
    """Test a flip of the interface state reaches subscribers."""
    received = []
    changed = threading.Event()

    def handler(is_connected):
        received.append(is_connected)
        changed.set()

    notifier.subscribe(CONNECTION_CHANGE_EVENT, handler)
    interface.is_up = False

    assert changed.wait(timeout=2.0)
    assert received[0] is False


@pytest.mark.slow
def test_notifier_does_not_emit_without_change(notifier):
    """Test a stable interface produces no events."""
    received = []
    notifier.subscribe(CONNECTION_CHANGE_EVENT, received.append)

    threading.Event().wait(0.1)

    assert received == []


@pytest.mark.unit
def test_polling_follows_subscriptions(notifier):
    """Test the poll thread lives only while handlers are subscribed."""

    def handler(_value):
        pass

    notifier.subscribe(CONNECTION_CHANGE_EVENT, handler)
    assert notifier._poll_thread is not None

    notifier.unsubscribe(CONNECTION_CHANGE_EVENT, handler)
    assert notifier._poll_thread is None


@pytest.mark.slow
def test_resubscribe_after_slow_handler_keeps_one_poller(notifier, interface):
    """Test a poller that outlived its join timeout exits once its handler returns."""
    dispatching = threading.Event()
    release = threading.Event()

    def slow_handler(_value):
        dispatching.set()
        release.wait(timeout=5.0)

    notifier.subscribe(CONNECTION_CHANGE_EVENT, slow_handler)
    old_poller = notifier._poll_thread
    interface.is_up = False
    assert dispatching.wait(timeout=2.0)

    # Join times out while the handler is still busy
    notifier.unsubscribe(CONNECTION_CHANGE_EVENT, slow_handler)
    assert old_poller.is_alive()

    notifier.subscribe(CONNECTION_CHANGE_EVENT, lambda _value: None)
    new_poller = notifier._poll_thread
    release.set()
    old_poller.join(timeout=2.0)

    assert old_poller.is_alive() is False
    assert new_poller is not old_poller
    assert new_poller.is_alive()
