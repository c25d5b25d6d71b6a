"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Environment overrides belong in .env, NOT here
- Import these settings in modules: from config.settings import PING_TIMEOUT_MS
- Durations handed to the monitor are milliseconds, everything else is seconds
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# ACTIVE PROBE CONFIGURATION
# =============================================================================

# Endpoint used to verify real internet reachability
PING_SERVER_URL = os.getenv("PING_SERVER_URL", "https://www.google.com/")

# Probe timeout (milliseconds)
PING_TIMEOUT_MS = int(os.getenv("PING_TIMEOUT_MS", "3000"))

# Periodic probe interval (milliseconds) - 0 disables polling
PING_INTERVAL_MS = int(os.getenv("PING_INTERVAL_MS", "0"))

# HTTP method for the probe (HEAD or OPTIONS)
PING_HTTP_METHOD = os.getenv("PING_HTTP_METHOD", "HEAD")

# =============================================================================
# INTERFACE MONITORING CONFIGURATION
# =============================================================================

# How often the system notifier re-checks the local interface (seconds)
INTERFACE_POLL_INTERVAL = float(os.getenv("INTERFACE_POLL_INTERVAL", "2.0"))

# Address used to ask the kernel for a route (no packets are sent)
INTERFACE_CHECK_HOST = "8.8.8.8"  # Google DNS - reliable external host
INTERFACE_CHECK_PORT = 53  # DNS port

# =============================================================================
# SERVICE CONFIGURATION
# =============================================================================

# YAML file with monitor options (optional)
MONITOR_CONFIG_FILE = os.getenv("MONITOR_CONFIG_FILE", "config/connectivity.yaml")

# Main loop tick while the service is running (seconds)
SERVICE_LOOP_INTERVAL = 0.5

# Logging Configuration
LOG_DIR = os.getenv("LOG_DIR", "/var/log/connectivity")
LOG_SERVICE_FILE = os.getenv("LOG_FILE", "service.log")
LOG_FALLBACK_DIR = "logs"
