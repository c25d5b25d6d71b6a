"""
Connection Utilities

One-shot connectivity check for callers that do not need a long-running
monitor (scripts, startup checks).
"""

import logging
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Optional, Union

from connectivity.constants import (
    DEFAULT_HTTP_METHOD,
    DEFAULT_PING_SERVER_URL,
    DEFAULT_PING_TIMEOUT,
    HttpMethod,
)
from connectivity.factory import create_notifier, create_probe
from connectivity.interfaces.interface_notifier_interface import (
    InterfaceNotifierInterface,
)
from connectivity.interfaces.probe_interface import ProbeInterface
from connectivity.utils.validation_utils import (
    to_http_method,
    validate_check_params,
)

logger = logging.getLogger(__name__)


def check_internet_connection(
    notifier: Optional[InterfaceNotifierInterface] = None,
    probe: Optional[ProbeInterface] = None,
    url: str = DEFAULT_PING_SERVER_URL,
    timeout_ms: float = DEFAULT_PING_TIMEOUT,
    should_ping: bool = True,
    method: Union[HttpMethod, str] = DEFAULT_HTTP_METHOD,
) -> bool:
    """
    Check internet access once.

    Queries the interface state first: no interface means no internet,
    without a probe. Otherwise the probe decides, unless should_ping is
    False, in which case the interface state is trusted.

    Args:
        notifier: Interface notifier, or None to auto-create
        probe: Reachability probe, or None to auto-create
        url: Probe endpoint
        timeout_ms: Limit for the interface query and for the probe
        should_ping: Verify an "up" interface with a probe
        method: HEAD or OPTIONS

    Returns:
        True if internet is reachable

    Raises:
        ConfigurationError: If url, timeout_ms, should_ping or method is
                            invalid (checked before any query)

    Example:
        if not check_internet_connection():
            print("Offline")
    """
    validate_check_params(timeout_ms, url, should_ping, method)

    notifier = notifier or create_notifier()

    try:
        is_connected = notifier.query_current().result(timeout=timeout_ms / 1000.0)
    except FutureTimeoutError:
        logger.warning(f"Interface query timed out after {timeout_ms}ms")
        return False
    except Exception as e:
        logger.warning(f"Interface query failed: {e}")
        return False

    if not is_connected:
        logger.debug("No network interface, skipping probe")
        return False

    if not should_ping:
        return True

    probe = probe or create_probe()
    return probe.probe(timeout_ms, url, to_http_method(method))
