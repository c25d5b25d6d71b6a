"""
Connectivity Interfaces Package

Exposes abstract interfaces that define contracts for the monitor's
collaborators.
"""

from connectivity.interfaces.app_state_interface import (
    AppStateInterface,
    is_foreground,
)
from connectivity.interfaces.interface_notifier_interface import (
    ConnectionHandler,
    InterfaceNotifierInterface,
)
from connectivity.interfaces.probe_interface import ProbeInterface

# Public API (sorted alphabetically)
__all__ = [
    "AppStateInterface",
    "ConnectionHandler",
    "InterfaceNotifierInterface",
    "ProbeInterface",
    "is_foreground",
]
