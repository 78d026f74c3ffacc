"""Configuration type definitions."""

from dataclasses import dataclass
from typing import Optional, TypedDict


class TimeoutConfig(TypedDict):
    """HTTP timeouts in seconds."""
    connect: float
    read: float

class GeocoderConfig(TypedDict):
    """Address geocoder configuration."""
    url: str
    benchmark: str

class WeatherApiConfig(TypedDict):
    """Forecast grid API configuration."""
    url: str

class DefaultsConfig(TypedDict):
    """Default forecast request values."""
    properties: str
    hours: int
    offset: int

class LoggingConfig(TypedDict):
    """Logging configuration."""
    level: str
    file: Optional[str]
    format: str

class GlobalConfig(TypedDict):
    """Global configuration structure."""
    user_agent: str
    display_timezone: str
    timeout: TimeoutConfig
    geocoder: GeocoderConfig
    weather: WeatherApiConfig
    defaults: DefaultsConfig
    logging: LoggingConfig

@dataclass
class AppConfig:
    """Application configuration."""
    global_config: GlobalConfig
    config_dir: str = "config"

    @property
    def user_agent(self) -> str:
        return str(self.global_config['user_agent'])

    @property
    def display_timezone(self) -> str:
        return str(self.global_config['display_timezone'])

    @property
    def timeout(self) -> tuple[float, float]:
        """Request timeout as ``(connect, read)``."""
        timeout = self.global_config['timeout']
        return float(timeout['connect']), float(timeout['read'])

    @property
    def geocoder(self) -> GeocoderConfig:
        return self.global_config['geocoder']

    @property
    def weather(self) -> WeatherApiConfig:
        return self.global_config['weather']

    @property
    def defaults(self) -> DefaultsConfig:
        return self.global_config['defaults']

    @property
    def logging(self) -> LoggingConfig:
        return self.global_config['logging']
