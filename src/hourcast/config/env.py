"""Environment variable handling for configuration."""

import os
from typing import Any

from hourcast.config.types import GlobalConfig


DEFAULT_USER_AGENT = 'hourcast/0.1 (hourcast@example.com)'

class EnvConfig:
    """Environment variable configuration."""

    # Mapping of environment variables to configuration paths
    ENV_MAPPING = {
        'HOURCAST_USER_AGENT': ('user_agent',),
        'HOURCAST_DISPLAY_TIMEZONE': ('display_timezone',),
        'HOURCAST_GEOCODER_URL': ('geocoder', 'url'),
        'HOURCAST_GEOCODER_BENCHMARK': ('geocoder', 'benchmark'),
        'HOURCAST_WEATHER_URL': ('weather', 'url'),
        'HOURCAST_LOG_LEVEL': ('logging', 'level'),
        'HOURCAST_LOG_FILE': ('logging', 'file'),
    }

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @staticmethod
    def _set_nested_value(config: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
        """Set value in nested dictionary using path tuple."""
        current = config
        for part in path[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[path[-1]] = value

    @classmethod
    def update_config_from_env(cls, config: dict[str, Any]) -> None:
        """Update configuration dictionary with environment variables.

        Args:
            config: Configuration dictionary to update
        """
        for env_var, path in cls.ENV_MAPPING.items():
            value = cls.get_env_value(env_var)
            if value is not None:
                cls._set_nested_value(config, path, value)

    @classmethod
    def get_global_config(cls) -> GlobalConfig:
        """Get default global configuration."""
        return {
            'user_agent': DEFAULT_USER_AGENT,
            'display_timezone': 'UTC',
            'timeout': {
                'connect': 7.0,
                'read': 20.0
            },
            'geocoder': {
                'url': 'https://geocoding.geo.census.gov',
                'benchmark': 'Public_AR_Current'
            },
            'weather': {
                'url': 'https://api.weather.gov'
            },
            'defaults': {
                'properties': 'temperature',
                'hours': 12,
                'offset': 0
            },
            'logging': {
                'level': 'WARNING',
                'file': None,
                'format': 'text'
            }
        }
