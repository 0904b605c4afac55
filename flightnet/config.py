"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for configuration: data
file locations, search defaults and logging.

Configuration can be overridden via environment variables:
- FLIGHTNET_NETWORK_DATA_DIR=/path/to/data
- FLIGHTNET_SEARCH_DEFAULT_MAX_STOPS=2
- FLIGHTNET_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class NetworkConfig(BaseSettings):
    """Flight data configuration.

    Environment variables prefixed with FLIGHTNET_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="FLIGHTNET_NETWORK_")

    data_dir: Path = Field(default_factory=lambda: PROJECT_ROOT / "data")
    flights_file: str = "flights.csv"
    airports_file: str = "airports.csv"
    default_country: str = "USA"

    @property
    def flights_path(self) -> Path:
        """Full path to flights CSV file."""
        return self.data_dir / self.flights_file

    @property
    def airports_path(self) -> Path:
        """Full path to airports CSV file."""
        return self.data_dir / self.airports_file


class SearchConfig(BaseSettings):
    """Route search defaults.

    Environment variables prefixed with FLIGHTNET_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="FLIGHTNET_SEARCH_")

    default_max_stops: int = Field(default=3, ge=0)
    default_max_cost: Decimal = Field(default=Decimal("1000"), ge=0)
    hub_count: int = Field(default=5, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with FLIGHTNET_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="FLIGHTNET_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.network.flights_path)
        print(config.search.default_max_stops)

    Environment variables prefixed with FLIGHTNET_.
    """

    model_config = SettingsConfigDict(env_prefix="FLIGHTNET_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
