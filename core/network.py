"""
Network Interface Checker

Simple utility to check whether the host has a usable network interface.
This is the fast local signal: it says an interface with a route is up,
NOT that the internet is reachable (captive portals, dead uplinks).
"""

import logging
import socket
from typing import Tuple

from config.settings import (
    INTERFACE_CHECK_HOST,
    INTERFACE_CHECK_PORT,
)


def check_interface_connectivity(
    host: str = INTERFACE_CHECK_HOST,
    port: int = INTERFACE_CHECK_PORT,
) -> bool:
    """
    Check if any network interface can route to the outside world.

    Connects a UDP socket to an external address. For UDP, connect() only
    asks the kernel to pick a route and local address; no packet is sent.

    Returns:
        True if a route exists, False otherwise

    Note:
        - Returns in microseconds, no network round trip
        - Loopback-only hosts report False
        - Exceptions are caught and logged silently
    """
    logger = logging.getLogger(__name__)

    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect((host, port))
            local_address = sock.getsockname()[0]
        return not local_address.startswith("127.") and local_address != "0.0.0.0"
    except OSError:
        # Network is unreachable / no route to host
        return False
    except Exception as e:
        logger.debug(f"Unexpected error in interface check: {e}")
        return False


def get_interface_status() -> Tuple[bool, str]:
    """
    Get human-readable interface status.

    Returns:
        Tuple of (is_up, status_string)

    Example:
        is_up, status = get_interface_status()
        print(status)  # Output: Network interface up
    """
    is_up = check_interface_connectivity()
    status = "Network interface up" if is_up else "No network interface"
    return is_up, status
