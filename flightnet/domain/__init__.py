"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    AirportNotFoundError,
    ConfigurationError,
    FlightDataError,
    FlightNetworkError,
    NoRouteFoundError,
)
from .models import (
    Airport,
    Flight,
    NetworkStatistics,
    RouteResult,
    normalize_code,
    to_decimal,
)

__all__ = [
    # Models
    "Airport",
    "Flight",
    "NetworkStatistics",
    "RouteResult",
    "normalize_code",
    "to_decimal",
    # Errors
    "FlightNetworkError",
    "FlightDataError",
    "AirportNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
