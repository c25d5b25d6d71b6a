"""
Controllers Package

High-level connectivity controllers.
"""

from connectivity.controllers.connectivity_monitor import ConnectivityMonitor
from connectivity.controllers.interval_scheduler import IntervalScheduler

# Public API (sorted alphabetically)
__all__ = [
    "ConnectivityMonitor",
    "IntervalScheduler",
]
