"""
Connectivity Module

Reports whether the host currently has usable internet access by combining
a fast network-interface signal with an optional active HTTP probe.

Public API:
    - ConnectivityMonitor: Reconciles events, probes and polling into one state
    - ConnectivityState: Reported status
    - IntervalScheduler: Single repeating timer
    - MonitorConfig: YAML-backed monitor options
    - ConfigurationError: Raised on invalid monitor parameters
    - check_internet_connection: One-shot connectivity check
    - ConnectivityFactory / create_*: Collaborator factories

Usage:
    from connectivity import ConnectivityMonitor

    monitor = ConnectivityMonitor(
        ping_interval=10000,
        on_connectivity_change=lambda online: print("online:", online),
    )
    monitor.start()
    ...
    monitor.stop()
"""

from connectivity.config import MonitorConfig
from connectivity.constants import AppStatus, ConnectionState, HttpMethod
from connectivity.controllers.connectivity_monitor import ConnectivityMonitor
from connectivity.controllers.interval_scheduler import IntervalScheduler
from connectivity.factory import (
    ConnectivityFactory,
    create_app_state,
    create_notifier,
    create_probe,
)
from connectivity.models.connectivity_state import ConnectivityState
from connectivity.utils.connection_utils import check_internet_connection
from connectivity.utils.validation_utils import ConfigurationError

# Public API (sorted alphabetically)
__all__ = [
    "AppStatus",
    "ConfigurationError",
    "ConnectionState",
    "ConnectivityFactory",
    "ConnectivityMonitor",
    "ConnectivityState",
    "HttpMethod",
    "IntervalScheduler",
    "MonitorConfig",
    "check_internet_connection",
    "create_app_state",
    "create_notifier",
    "create_probe",
]
