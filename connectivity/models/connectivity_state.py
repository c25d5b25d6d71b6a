"""
Connectivity State Model

The single source of truth for the reported connectivity status.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from connectivity.constants import INITIAL_CONNECTION_STATE, ConnectionState


@dataclass
class ConnectivityState:
    """
    Reported connectivity status owned by a ConnectivityMonitor.

    Created when the monitor is constructed and mutated only by
    reconciliation. Lives as long as the monitor does.
    """

    is_connected: bool = INITIAL_CONNECTION_STATE

    # Monotonic timestamp of the last reconciliation (None = never reconciled)
    last_changed: Optional[float] = None

    # Number of reconciliations applied so far
    update_count: int = field(default=0)

    def update(self, is_connected: bool) -> None:
        """Store a new value unconditionally (no de-duplication)"""
        self.is_connected = is_connected
        self.last_changed = time.monotonic()
        self.update_count += 1

    @property
    def state(self) -> ConnectionState:
        """Current value as a state machine member"""
        return ConnectionState.from_bool(self.is_connected)

    def to_dict(self) -> Dict[str, Any]:
        """Consumer-facing snapshot"""
        return {"is_connected": self.is_connected}

    def __str__(self) -> str:
        return self.state.value
