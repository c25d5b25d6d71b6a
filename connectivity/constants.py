"""
Connectivity Constants

Centralized configuration for the connectivity module.
"""

from enum import Enum

from config.settings import (
    PING_HTTP_METHOD,
    PING_INTERVAL_MS,
    PING_SERVER_URL,
    PING_TIMEOUT_MS,
)

# =============================================================================
# NOTIFIER EVENTS
# =============================================================================

# The only event the monitor subscribes to
CONNECTION_CHANGE_EVENT = "connectionChange"

# =============================================================================
# ENUMS
# =============================================================================


class HttpMethod(Enum):
    """HTTP methods allowed for the reachability probe"""

    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class AppStatus(Enum):
    """Foreground/background status of the host application"""

    ACTIVE = "active"
    BACKGROUND = "background"
    INACTIVE = "inactive"


class ConnectionState(Enum):
    """Two-state machine mapped 1:1 onto the is_connected boolean"""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    @classmethod
    def from_bool(cls, is_connected: bool) -> "ConnectionState":
        return cls.CONNECTED if is_connected else cls.DISCONNECTED


# =============================================================================
# MONITOR DEFAULTS
# =============================================================================
# Import from central config.settings to maintain single source of truth

DEFAULT_SHOULD_PING = True
DEFAULT_PING_INTERVAL = PING_INTERVAL_MS
DEFAULT_PING_ONLY_IF_OFFLINE = True
DEFAULT_PING_IN_BACKGROUND = False
DEFAULT_PING_TIMEOUT = PING_TIMEOUT_MS
DEFAULT_PING_SERVER_URL = PING_SERVER_URL
DEFAULT_HTTP_METHOD = PING_HTTP_METHOD

# Optimistic default before the first event arrives
INITIAL_CONNECTION_STATE = True

# How long stop() waits for the scheduler thread to exit (seconds)
SCHEDULER_JOIN_TIMEOUT = 2.0
