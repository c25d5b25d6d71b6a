"""
Core utilities and modules.

Public API:
    - check_interface_connectivity: Check if a network interface is up
    - get_interface_status: Get human-readable interface status

Usage:
    from core.network import check_interface_connectivity

    if check_interface_connectivity():
        print("Interface up")
"""

from core.network import check_interface_connectivity, get_interface_status

__all__ = [
    "check_interface_connectivity",
    "get_interface_status",
]
