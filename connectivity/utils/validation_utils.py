"""
Validation Utilities

Construction-time checks for ConnectivityMonitor parameters.

Each parameter is checked in a fixed order and the first violation raises
ConfigurationError, so building a monitor is the single failure point for a
bad configuration.
"""

from typing import Any, Optional

from connectivity.constants import HttpMethod


class ConfigurationError(Exception):
    """
    Exception raised for invalid monitor configuration.

    Attributes:
        parameter: Name of the offending parameter
    """

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


def is_number(value: Any) -> bool:
    """True for int/float values (bool is rejected even though it subclasses int)"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_http_method(value: Any) -> bool:
    """True for HttpMethod members and their string names"""
    if isinstance(value, HttpMethod):
        return True
    return isinstance(value, str) and value in HttpMethod.__members__


def _require(condition: bool, kind: str, parameter: str) -> None:
    if not condition:
        raise ConfigurationError(
            f"you should pass a {kind} as {parameter} parameter",
            parameter=parameter,
        )


def _require_http_method(value: Any) -> None:
    if not is_valid_http_method(value):
        raise ConfigurationError(
            "http_method parameter should be either HEAD or OPTIONS",
            parameter="http_method",
        )


def _require_non_negative(value: float, parameter: str) -> None:
    if value < 0:
        raise ConfigurationError(
            f"{parameter} parameter cannot be negative", parameter=parameter
        )


def validate_monitor_params(
    ping_timeout: Any,
    ping_server_url: Any,
    should_ping: Any,
    ping_interval: Any,
    ping_only_if_offline: Any,
    ping_in_background: Any,
    http_method: Any,
    on_connectivity_change: Any,
) -> None:
    """
    Validate monitor configuration.

    Args:
        ping_timeout: Probe timeout in milliseconds (number)
        ping_server_url: Probe endpoint (string)
        should_ping: Whether probes verify interface events (boolean)
        ping_interval: Polling period in milliseconds, 0 disables (number)
        ping_only_if_offline: Skip periodic probes while connected (boolean)
        ping_in_background: Allow probes while backgrounded (boolean)
        http_method: HEAD or OPTIONS
        on_connectivity_change: Callback or None

    Raises:
        ConfigurationError: On the first violation, in argument order

    Example:
        validate_monitor_params(3000, "https://example.com", True, 0,
                                True, False, "HEAD", None)
    """
    _require(is_number(ping_timeout), "number", "ping_timeout")
    _require(isinstance(ping_server_url, str), "string", "ping_server_url")
    _require(isinstance(should_ping, bool), "boolean", "should_ping")
    _require(is_number(ping_interval), "number", "ping_interval")
    _require(
        isinstance(ping_only_if_offline, bool), "boolean", "ping_only_if_offline"
    )
    _require(isinstance(ping_in_background, bool), "boolean", "ping_in_background")

    _require_http_method(http_method)

    _require(
        on_connectivity_change is None or callable(on_connectivity_change),
        "function",
        "on_connectivity_change",
    )

    # Range checks run after every type check
    _require_non_negative(ping_timeout, "ping_timeout")
    _require_non_negative(ping_interval, "ping_interval")


def validate_check_params(
    ping_timeout: Any,
    ping_server_url: Any,
    should_ping: Any,
    http_method: Any,
) -> None:
    """
    Validate the options used by a one-shot connectivity check.

    Same messages and order as validate_monitor_params() for the
    parameters both share.

    Raises:
        ConfigurationError: On the first violation
    """
    _require(is_number(ping_timeout), "number", "ping_timeout")
    _require(isinstance(ping_server_url, str), "string", "ping_server_url")
    _require(isinstance(should_ping, bool), "boolean", "should_ping")
    _require_http_method(http_method)
    _require_non_negative(ping_timeout, "ping_timeout")


def to_http_method(value: Any) -> HttpMethod:
    """Normalize a validated http_method value to HttpMethod"""
    if isinstance(value, HttpMethod):
        return value
    return HttpMethod[value]
