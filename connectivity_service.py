"""
Connectivity Service

Long-running process that reports internet connectivity for this host.
Wires a ConnectivityMonitor to the real collaborators and logs every change.

Architecture:
- Interface changes come from SystemInterfaceNotifier (route polling)
- Interface "up" events and interval ticks are verified with HttpProbe
- Headless process, so the app state is always "active"
- Options from config/connectivity.yaml (see MonitorConfig)

Usage:
    python connectivity_service.py                 # run until SIGINT/SIGTERM
    python connectivity_service.py --once          # one check, exit 0/1
    (exit status 2 means the configuration is invalid)
    python connectivity_service.py --config my.yaml --verbose
"""

import argparse
import logging
import logging.handlers
import signal
import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional

from config.settings import (
    LOG_DIR,
    LOG_FALLBACK_DIR,
    LOG_SERVICE_FILE,
    SERVICE_LOOP_INTERVAL,
)
from connectivity import (
    ConfigurationError,
    ConnectivityMonitor,
    MonitorConfig,
    check_internet_connection,
    create_app_state,
    create_notifier,
    create_probe,
)
from connectivity.utils.validation_utils import validate_monitor_params

# Exit status for an invalid configuration file
EXIT_CONFIG_ERROR = 2


class ConnectivityService:
    """
    Main service coordinator.

    Usage:
        service = ConnectivityService()
        service.run()  # Blocks until shutdown
    """

    def __init__(self, config: Optional[MonitorConfig] = None, monitor=None):
        """
        Initialize service and build the monitor.

        Args:
            config: Monitor configuration (None = load default YAML file)
            monitor: Prebuilt monitor (testing), or None to build one

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.logger = logging.getLogger(__name__)
        self.logger.info("Initializing Connectivity Service...")

        self.config = config or MonitorConfig()
        self.running = False
        self.change_count = 0
        self.start_time: Optional[float] = None

        self.monitor = monitor or ConnectivityMonitor(
            notifier=create_notifier(),
            app_state=create_app_state(),
            probe=create_probe(),
            **self.config.to_monitor_kwargs(),
        )
        self.monitor.add_listener(self._handle_connectivity_change)

        self.logger.info("Connectivity Service initialized successfully")

    def run(self) -> None:
        """
        Main service loop.

        Runs until shutdown signal received.
        """
        # Register signal handlers for graceful shutdown
        signal.signal(signal.SIGTERM, self._signal_handler)
        signal.signal(signal.SIGINT, self._signal_handler)

        self.running = True
        self.start_time = time.time()
        self.monitor.start()
        self.logger.info("Connectivity Service running")

        try:
            while self.running:
                time.sleep(SERVICE_LOOP_INTERVAL)
        except KeyboardInterrupt:
            self.logger.info("Keyboard interrupt received")
        finally:
            self._shutdown()

    def status(self) -> Dict[str, Any]:
        """
        Get service status.

        Returns:
            Dictionary with connectivity and service counters
        """
        uptime = time.time() - self.start_time if self.start_time else 0.0
        status = self.monitor.get_state()
        status.update(
            {
                "running": self.running,
                "changes": self.change_count,
                "uptime_seconds": round(uptime, 1),
            },
        )
        return status

    def _handle_connectivity_change(self, is_connected: bool) -> None:
        """Log every reconciliation"""
        self.change_count += 1
        if is_connected:
            self.logger.info("Internet: available")
        else:
            self.logger.warning("Internet: unavailable")

    def _signal_handler(self, signum, _frame):
        """
        Handle shutdown signals.

        Args:
            signum: Signal number
            _frame: Current stack frame (unused, required by signal API)
        """
        signal_name = signal.Signals(signum).name
        self.logger.info(f"Received signal {signal_name}, shutting down...")
        self.running = False

    def _shutdown(self) -> None:
        """Graceful shutdown"""
        self.logger.info("Shutting down Connectivity Service...")
        self.running = False
        self.monitor.stop()
        self.logger.info("Connectivity Service stopped")


def _rotating_handler(path: Path) -> logging.Handler:
    """Daily rotation, 7 days kept"""
    return logging.handlers.TimedRotatingFileHandler(
        str(path),
        when="midnight",
        backupCount=7,
        encoding="utf-8",
    )


def setup_logging(verbose: bool = False) -> None:
    """
    Setup logging with rotation.

    Logs to both console and file with rotation:
    - Daily rotation
    - Keep 7 days of logs
    """
    level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger()
    logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s | %(name)s",
    )

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = Path(LOG_DIR) / LOG_SERVICE_FILE
    try:
        file_handler = _rotating_handler(log_file)
    except (PermissionError, FileNotFoundError):
        # LOG_DIR missing or not writable, log next to the working directory
        fallback_log = Path(LOG_FALLBACK_DIR) / LOG_SERVICE_FILE
        fallback_log.parent.mkdir(exist_ok=True)
        logger.warning(f"Cannot write to {log_file}, using fallback: {fallback_log}")
        file_handler = _rotating_handler(fallback_log)

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Monitor internet connectivity for this host",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with monitor options (default: config/connectivity.yaml)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Check connectivity once and exit (0 = online, 1 = offline)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main entry point for the service.

    Sets up logging, validates the configuration, and runs the service
    (or a single check with --once).

    Returns:
        Process exit status
    """
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    logger = logging.getLogger(__name__)
    config = MonitorConfig(args.config)

    try:
        validate_monitor_params(
            on_connectivity_change=None,
            **config.to_monitor_kwargs(),
        )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration in {config.config_path}: {e}")
        return EXIT_CONFIG_ERROR

    if args.once:
        online = check_internet_connection(
            url=config.ping_server_url,
            timeout_ms=config.ping_timeout,
            should_ping=config.should_ping,
            method=config.http_method,
        )
        logger.info(f"Internet {'available' if online else 'unavailable'}")
        return 0 if online else 1

    logger.info("=" * 60)
    logger.info("Connectivity Service Starting")
    logger.info("=" * 60)

    try:
        service = ConnectivityService(config)
        service.run()
    except Exception as e:
        logger.critical(f"Fatal error in main: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
