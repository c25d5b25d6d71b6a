"""
Utilities Package

Parameter validation and one-shot connectivity checks.
"""

from connectivity.utils.connection_utils import check_internet_connection
from connectivity.utils.validation_utils import (
    ConfigurationError,
    is_number,
    is_valid_http_method,
    to_http_method,
    validate_check_params,
    validate_monitor_params,
)

# Public API (sorted alphabetically)
__all__ = [
    "ConfigurationError",
    "check_internet_connection",
    "is_number",
    "is_valid_http_method",
    "to_http_method",
    "validate_check_params",
    "validate_monitor_params",
]
