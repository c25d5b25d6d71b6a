"""
Connectivity Factory

Factory pattern for creating the monitor's collaborators.
One place decides between real and mock implementations,
so controllers never import concrete classes.
"""

import logging
from typing import Literal

from connectivity.constants import AppStatus
from connectivity.implementations.app_state import MockAppState, StaticAppState
from connectivity.implementations.http_probe import HttpProbe
from connectivity.implementations.mock_notifier import MockInterfaceNotifier
from connectivity.implementations.mock_probe import MockProbe
from connectivity.implementations.system_notifier import SystemInterfaceNotifier
from connectivity.interfaces.app_state_interface import AppStateInterface
from connectivity.interfaces.interface_notifier_interface import (
    InterfaceNotifierInterface,
)
from connectivity.interfaces.probe_interface import ProbeInterface

# Type alias
CollaboratorMode = Literal["auto", "real", "mock"]


class ConnectivityFactory:
    """
    Factory for creating probe, notifier and app-state implementations.

    Usage:
        # Auto-detect (real implementation if it can be built, mock otherwise)
        probe = ConnectivityFactory.create_probe()

        # Force mock mode (useful for testing)
        notifier = ConnectivityFactory.create_notifier(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_probe(cls, mode: CollaboratorMode = "auto") -> ProbeInterface:
        """
        Create a reachability probe.

        Args:
            mode: "auto" (detect), "real" (force HTTP), "mock" (force simulation)

        Returns:
            ProbeInterface implementation (HttpProbe or MockProbe)

        Raises:
            RuntimeError: If mode="real" but the HTTP probe cannot be built
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Probe (forced)")
            return MockProbe()

        if mode == "real":
            try:
                probe = HttpProbe()
                cls._logger.info("Creating HTTP Probe (forced)")
                return probe
            except Exception as e:
                raise RuntimeError(
                    f"HTTP probe requested but not available: {e}",
                ) from e

        # mode == "auto" - try real first, fall back to mock
        try:
            probe = HttpProbe()
            cls._logger.info("Creating HTTP Probe (auto-detected)")
            return probe
        except Exception as e:
            cls._logger.warning(f"HTTP probe not available ({e}), using Mock Probe")
            return MockProbe()

    @classmethod
    def create_notifier(
        cls,
        mode: CollaboratorMode = "auto",
    ) -> InterfaceNotifierInterface:
        """
        Create an interface-change notifier.

        Args:
            mode: "auto" (detect), "real" (force system), "mock" (force simulation)

        Returns:
            InterfaceNotifierInterface implementation

        Raises:
            RuntimeError: If mode="real" but the system notifier is unavailable
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Notifier (forced)")
            return MockInterfaceNotifier()

        if mode == "real":
            try:
                notifier = SystemInterfaceNotifier()
                cls._logger.info("Creating System Notifier (forced)")
                return notifier
            except Exception as e:
                raise RuntimeError(
                    f"System notifier requested but not available: {e}",
                ) from e

        # mode == "auto" - try real first, fall back to mock
        try:
            notifier = SystemInterfaceNotifier()
            cls._logger.info("Creating System Notifier (auto-detected)")
            return notifier
        except Exception as e:
            cls._logger.warning(
                f"System notifier not available ({e}), using Mock Notifier",
            )
            return MockInterfaceNotifier()

    @classmethod
    def create_app_state(cls, mode: CollaboratorMode = "auto") -> AppStateInterface:
        """
        Create a foreground/background status provider.

        Headless processes are always in the foreground, so "auto" and
        "real" both return a StaticAppState reporting "active".

        Args:
            mode: "auto", "real" or "mock"

        Returns:
            AppStateInterface implementation
        """
        if mode == "mock":
            cls._logger.info("Creating Mock App State (forced)")
            return MockAppState()

        cls._logger.debug("Creating static app state (always active)")
        return StaticAppState(AppStatus.ACTIVE)


# Convenience functions for quick creation
# These are shortcuts for the most common usage patterns


def create_probe(force_mock: bool = False) -> ProbeInterface:
    """
    Quick probe creation with simple mock override.

    Example:
        probe = create_probe()
        probe = create_probe(force_mock=True)  # Testing
    """
    mode = "mock" if force_mock else "auto"
    return ConnectivityFactory.create_probe(mode=mode)


def create_notifier(force_mock: bool = False) -> InterfaceNotifierInterface:
    """Quick notifier creation with simple mock override."""
    mode = "mock" if force_mock else "auto"
    return ConnectivityFactory.create_notifier(mode=mode)


def create_app_state(force_mock: bool = False) -> AppStateInterface:
    """Quick app-state creation with simple mock override."""
    mode = "mock" if force_mock else "auto"
    return ConnectivityFactory.create_app_state(mode=mode)
