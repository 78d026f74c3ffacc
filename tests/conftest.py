"""Pytest configuration and shared fixtures."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

from hourcast.config.env import EnvConfig
from hourcast.config.settings import ConfigurationManager
from hourcast.config.types import AppConfig

@pytest.fixture(scope="session")
def test_data_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)

@pytest.fixture
def test_config(test_data_dir):
    """Default configuration pointing at test hosts."""
    global_config = EnvConfig.get_global_config()
    global_config['geocoder']['url'] = 'https://geocoder.test'
    global_config['weather']['url'] = 'https://weather.test'
    global_config['user_agent'] = 'hourcast-tests'
    return AppConfig(global_config=global_config, config_dir=str(test_data_dir))

@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, test_data_dir):
    """Isolate tests from the user's environment and the config singleton."""
    for env_var in EnvConfig.ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setenv("HOURCAST_CONFIG_DIR", str(test_data_dir))

    ConfigurationManager._instance = None

    yield

    ConfigurationManager._instance = None
    config_file = test_data_dir / "config.yaml"
    if config_file.exists():
        os.remove(config_file)
