"""
Connectivity Implementations Package

Concrete probe, notifier and app-state implementations.
"""

from connectivity.implementations.app_state import MockAppState, StaticAppState
from connectivity.implementations.http_probe import HttpProbe
from connectivity.implementations.mock_notifier import MockInterfaceNotifier
from connectivity.implementations.mock_probe import MockProbe
from connectivity.implementations.system_notifier import SystemInterfaceNotifier

# Public API (sorted alphabetically)
__all__ = [
    "HttpProbe",
    "MockAppState",
    "MockInterfaceNotifier",
    "MockProbe",
    "StaticAppState",
    "SystemInterfaceNotifier",
]
