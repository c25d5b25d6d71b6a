"""
Mock Probe Implementation

Simulated reachability probe for testing without network access.

This is a "Fake" (test double) - it has working logic but no real network.
"""

import logging
import threading
import time
from typing import List, Optional, Tuple

from connectivity.constants import HttpMethod
from connectivity.interfaces.probe_interface import ProbeInterface


class MockProbe(ProbeInterface):
    """
    Mock probe for testing.

    Usage:
        probe = MockProbe(result=False)
        probe.probe(3000, "https://example.com", HttpMethod.HEAD)  # False
        probe.set_result(True)
        assert probe.get_call_count() == 1
    """

    def __init__(self, result: bool = True, delay: float = 0.0):
        """
        Initialize mock probe.

        Args:
            result: Value every probe call returns
            delay: Seconds each probe call blocks before returning
        """
        self.logger = logging.getLogger(__name__)
        self._result = result
        self._delay = delay
        self._calls: List[Tuple[float, str, HttpMethod]] = []
        self._lock = threading.Lock()

    def probe(self, timeout_ms: float, url: str, method: HttpMethod) -> bool:
        with self._lock:
            self._calls.append((timeout_ms, url, method))
            result = self._result
            delay = self._delay

        if delay:
            time.sleep(delay)

        self.logger.debug(f"[MOCK] Probe {url} -> {result}")
        return result

    # =========================================================================
    # TEST HELPER METHODS
    # =========================================================================

    def set_result(self, result: bool) -> None:
        """Change the value returned by subsequent probes"""
        with self._lock:
            self._result = result

    def set_delay(self, delay: float) -> None:
        """Change how long subsequent probes block (seconds)"""
        with self._lock:
            self._delay = delay

    def get_call_count(self) -> int:
        """Number of probe() calls so far"""
        with self._lock:
            return len(self._calls)

    def get_last_call(self) -> Optional[Tuple[float, str, HttpMethod]]:
        """(timeout_ms, url, method) of the most recent call"""
        with self._lock:
            return self._calls[-1] if self._calls else None

    def reset(self) -> None:
        """Clear call history"""
        with self._lock:
            self._calls.clear()
