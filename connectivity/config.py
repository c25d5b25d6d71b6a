"""
Connectivity Configuration Handler

Manages the YAML configuration file for monitor settings.
Provides defaults; type validation happens when the monitor is built.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from config.settings import MONITOR_CONFIG_FILE
from connectivity.constants import (
    DEFAULT_HTTP_METHOD,
    DEFAULT_PING_IN_BACKGROUND,
    DEFAULT_PING_INTERVAL,
    DEFAULT_PING_ONLY_IF_OFFLINE,
    DEFAULT_PING_SERVER_URL,
    DEFAULT_PING_TIMEOUT,
    DEFAULT_SHOULD_PING,
)


class MonitorConfig:
    """
    Monitor configuration with YAML file support.

    Reads from config/connectivity.yaml if it exists,
    otherwise uses defaults from constants.py.

    Usage:
        config = MonitorConfig()
        monitor = ConnectivityMonitor(**config.to_monitor_kwargs())
    """

    # Default config file location
    DEFAULT_CONFIG_PATH = Path(MONITOR_CONFIG_FILE)

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = use default)
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path) if config_path else self.DEFAULT_CONFIG_PATH

        # Load configuration (defaults + file overrides)
        self._config = self._load_config()

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from constants"""
        return {
            # Probe behaviour
            "should_ping": DEFAULT_SHOULD_PING,
            "ping_timeout": DEFAULT_PING_TIMEOUT,
            "ping_server_url": DEFAULT_PING_SERVER_URL,
            "http_method": DEFAULT_HTTP_METHOD,

            # Polling
            "ping_interval": DEFAULT_PING_INTERVAL,
            "ping_only_if_offline": DEFAULT_PING_ONLY_IF_OFFLINE,
            "ping_in_background": DEFAULT_PING_IN_BACKGROUND,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        # Start with defaults
        config = self._get_defaults()

        if not self.config_path.exists():
            self.logger.info(
                f"Config file not found at {self.config_path}. Using defaults."
            )
            return config

        try:
            with open(self.config_path, "r") as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self.logger.warning(
                f"Failed to load config from {self.config_path}: {e}. "
                f"Using defaults."
            )
            return config

        if not isinstance(file_config, dict):
            self.logger.warning(
                f"Config file {self.config_path} is not a mapping. Using defaults."
            )
            return config

        # Merge file config with defaults (file overrides defaults)
        for key, value in file_config.items():
            if key not in config:
                self.logger.warning(f"Ignoring unknown config key: {key}")
                continue
            config[key] = value

        self.logger.info(f"Loaded config from {self.config_path}")
        return config

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def should_ping(self) -> bool:
        """Whether interface "up" events are verified with a probe"""
        return self._config["should_ping"]

    @property
    def ping_interval(self) -> float:
        """Polling period in milliseconds (0 = disabled)"""
        return self._config["ping_interval"]

    @property
    def ping_only_if_offline(self) -> bool:
        return self._config["ping_only_if_offline"]

    @property
    def ping_in_background(self) -> bool:
        return self._config["ping_in_background"]

    @property
    def ping_timeout(self) -> float:
        """Probe timeout in milliseconds"""
        return self._config["ping_timeout"]

    @property
    def ping_server_url(self) -> str:
        return self._config["ping_server_url"]

    @property
    def http_method(self) -> str:
        return self._config["http_method"]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return self._config.get(key, default)

    def reload(self) -> None:
        """Reload configuration from file"""
        self._config = self._load_config()
        self.logger.info("Configuration reloaded")

    def to_monitor_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ConnectivityMonitor"""
        return self._config.copy()

    def __repr__(self) -> str:
        """Human-readable representation"""
        return f"MonitorConfig(path={self.config_path})"
