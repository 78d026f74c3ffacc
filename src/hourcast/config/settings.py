"""Configuration settings for the hourcast application."""

import os
from pathlib import Path
from typing import Any

import yaml

from hourcast.config.env import EnvConfig
from hourcast.config.types import AppConfig
from hourcast.config.types import GlobalConfig
from hourcast.config.utils import deep_merge
from hourcast.config.utils import resolve_path
from hourcast.exceptions import ConfigError


class ConfigurationManager:
    """Centralized configuration management with caching."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._config: AppConfig | None = None
        self._config_path: Path | None = None
        self._initialized = True

    def load_config(self, config_dir: str | None = None) -> AppConfig:
        """Load configuration with caching."""
        if self._config is not None:
            return self._config

        self._config_path = _get_config_path(config_dir)
        self._config = AppConfig(
            global_config=_load_global_config(self._config_path),
            config_dir=str(self._config_path)
        )
        return self._config

def _get_config_path(config_dir: str | None = None) -> Path:
    """Get configuration directory path."""
    return resolve_path(
        config_dir or os.getenv("HOURCAST_CONFIG_DIR", os.path.dirname(os.path.abspath(__file__)))
    )

def _read_yaml(config_file: Path) -> dict[str, Any]:
    try:
        with open(config_file, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}", {"file": str(config_file)}) from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(
            f"Configuration file {config_file} must contain a mapping",
            {"file": str(config_file)}
        )
    return loaded

def _load_global_config(config_path: Path) -> GlobalConfig:
    """Load global configuration from defaults, YAML file and environment.

    Environment variables take precedence over the file.
    """
    global_config = EnvConfig.get_global_config()

    config_file = config_path / "config.yaml"
    if config_file.exists():
        global_config = deep_merge(global_config, _read_yaml(config_file))

        # Relative log files live next to the config file
        log_file = global_config['logging'].get('file')
        if log_file:
            global_config['logging']['file'] = str(resolve_path(log_file, config_path))

    EnvConfig.update_config_from_env(global_config)
    return global_config
