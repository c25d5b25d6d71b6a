"""
Monitor Configuration Tests

Tests for MonitorConfig YAML loading.

To run:
    pytest tests/connectivity/test_monitor_config.py -v
"""

import pytest
import yaml

from connectivity.config import MonitorConfig
from connectivity.constants import DEFAULT_PING_SERVER_URL, DEFAULT_PING_TIMEOUT
from connectivity.controllers.connectivity_monitor import ConnectivityMonitor
from connectivity.utils.validation_utils import ConfigurationError


@pytest.fixture
def config_file(tmp_path):
    """Provide a path for a YAML config file inside a temp directory."""
    return tmp_path / "connectivity.yaml"


def write_yaml(path, data):
    with open(path, "w") as f:
        yaml.safe_dump(data, f)


@pytest.mark.unit
def test_defaults_when_file_missing(config_file):
    config = MonitorConfig(config_file)

    assert config.should_ping is True
    assert config.ping_timeout == DEFAULT_PING_TIMEOUT
    assert config.ping_server_url == DEFAULT_PING_SERVER_URL
    assert config.ping_only_if_offline is True
    assert config.ping_in_background is False
    assert not config_file.exists()


@pytest.mark.unit
def test_file_overrides_defaults(config_file):
    write_yaml(config_file, {"ping_interval": 5000, "http_method": "OPTIONS"})

    config = MonitorConfig(config_file)

    assert config.ping_interval == 5000
    assert config.http_method == "OPTIONS"
    assert config.should_ping is True


@pytest.mark.unit
def test_unknown_keys_ignored(config_file):
    write_yaml(config_file, {"ping_interval": 1000, "color": "blue"})

    config = MonitorConfig(config_file)

    assert config.get("color") is None
    assert "color" not in config.to_monitor_kwargs()


@pytest.mark.unit
def test_invalid_yaml_falls_back_to_defaults(config_file):
    config_file.write_text("ping_interval: [unclosed\n")

    config = MonitorConfig(config_file)

    assert config.ping_timeout == DEFAULT_PING_TIMEOUT


@pytest.mark.unit
def test_non_mapping_falls_back_to_defaults(config_file):
    config_file.write_text("- just\n- a list\n")

    config = MonitorConfig(config_file)

    assert config.should_ping is True


@pytest.mark.unit
def test_reload_picks_up_changes(config_file):
    config = MonitorConfig(config_file)
    write_yaml(config_file, {"ping_in_background": True})

    config.reload()

    assert config.ping_in_background is True


@pytest.mark.unit
def test_kwargs_build_monitor(
    config_file, mock_notifier, mock_app_state, mock_probe, fake_scheduler
):
    write_yaml(config_file, {"ping_interval": 2000, "should_ping": False})
    config = MonitorConfig(config_file)

    monitor = ConnectivityMonitor(
        notifier=mock_notifier,
        app_state=mock_app_state,
        probe=mock_probe,
        scheduler=fake_scheduler,
        **config.to_monitor_kwargs(),
    )

    assert monitor.ping_interval == 2000
    assert monitor.should_ping is False


@pytest.mark.unit
def test_bad_file_value_rejected_by_monitor(config_file, mock_notifier, mock_app_state, mock_probe):
    """Test type errors in the YAML surface when the monitor is built."""
    write_yaml(config_file, {"ping_timeout": "fast"})
    config = MonitorConfig(config_file)

    with pytest.raises(ConfigurationError, match="ping_timeout"):
        ConnectivityMonitor(
            notifier=mock_notifier,
            app_state=mock_app_state,
            probe=mock_probe,
            **config.to_monitor_kwargs(),
        )
