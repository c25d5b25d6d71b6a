"""
HTTP Probe Implementation

Real reachability check using the requests library.
"""

import logging
from typing import Optional

import requests

from connectivity.constants import HttpMethod
from connectivity.interfaces.probe_interface import ProbeInterface


class HttpProbe(ProbeInterface):
    """
    Issues one HTTP request and reports whether it succeeded.

    Usage:
        probe = HttpProbe()
        online = probe.probe(3000, "https://www.google.com/", HttpMethod.HEAD)
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize HTTP probe.

        Args:
            session: requests session to reuse, or None for one-off requests.
                     A session keeps connections alive between probes, which
                     hides a dead uplink for as long as the pooled socket lives,
                     so the default is a fresh connection per probe.
        """
        self.logger = logging.getLogger(__name__)
        self._session = session

    def probe(self, timeout_ms: float, url: str, method: HttpMethod) -> bool:
        """
        Send one request and wait at most timeout_ms for the response.

        Returns:
            True on a 2xx response (after redirects), False otherwise
        """
        method_name = method.value if isinstance(method, HttpMethod) else str(method)
        request = self._session.request if self._session else requests.request

        try:
            response = request(
                method_name,
                url,
                timeout=timeout_ms / 1000.0,
                allow_redirects=True,
                headers={"Cache-Control": "no-cache"},
            )
            reachable = 200 <= response.status_code < 300
            self.logger.debug(
                f"Probe {method_name} {url} -> {response.status_code}",
            )
            return reachable
        except requests.Timeout:
            self.logger.debug(f"Probe {method_name} {url} timed out ({timeout_ms}ms)")
            return False
        except requests.RequestException as e:
            # Network unavailable, DNS lookup failed, connection refused
            self.logger.debug(f"Probe {method_name} {url} failed: {e}")
            return False
        except Exception as e:
            self.logger.debug(f"Unexpected error in probe: {e}")
            return False
