"""
Probe Interface

Abstract interface for active reachability checks.
Follows Dependency Inversion Principle - the monitor depends on this
abstraction, not on a concrete HTTP client.
"""

from abc import ABC, abstractmethod

from connectivity.constants import HttpMethod


class ProbeInterface(ABC):
    """
    Abstract base class for reachability probes.

    Implementations issue exactly one request per call and never raise:
    every failure is reported as False.
    """

    @abstractmethod
    def probe(self, timeout_ms: float, url: str, method: HttpMethod) -> bool:
        """
        Check whether the given URL is reachable.

        Args:
            timeout_ms: Maximum time to wait for a response (milliseconds)
            url: Endpoint to contact
            method: HTTP method (HEAD or OPTIONS)

        Returns:
            True if a successful response arrived in time, False otherwise

        Example:
            if probe.probe(3000, "https://www.google.com/", HttpMethod.HEAD):
                print("Online")
        """
