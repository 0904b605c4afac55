"""Typed domain errors for the flight network.

The graph core never raises for "not found" conditions; these errors
are used by the ingestion adapters and by the strict service API, so
callers can choose between exceptions and empty results.

All errors inherit from FlightNetworkError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class FlightNetworkError(Exception):
    """Base error for the flight network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class FlightDataError(FlightNetworkError):
    """Flight or airport data could not be loaded.

    Attributes:
        file_path: Path to the data file if relevant
        line_number: 1-based line number of the offending row, if any
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class AirportNotFoundError(FlightNetworkError):
    """Airport code not present in the network.

    Attributes:
        airport_code: The code that was not found
    """

    airport_code: str = ""


@dataclass
class NoRouteFoundError(FlightNetworkError):
    """No path exists between the requested airports.

    Attributes:
        origin: Origin airport code
        destination: Destination airport code
    """

    origin: str = ""
    destination: str = ""


@dataclass
class ConfigurationError(FlightNetworkError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
