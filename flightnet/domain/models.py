"""Immutable domain models for the flight route network.

All models are frozen dataclasses with slots. These models have no
external dependencies and represent the core concepts of the network:
airports (vertices), flights (directed edges) and the results computed
on top of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

Number = Union[Decimal, int, float, str]


def normalize_code(code: Optional[str]) -> str:
    """Return the canonical (stripped, upper-cased) form of an airport code.

    ``None`` and whitespace-only input normalize to the empty string.
    """
    if code is None:
        return ""
    return code.strip().upper()


def to_decimal(value: Number) -> Decimal:
    """Coerce a numeric value to ``Decimal`` without float artefacts."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid decimal value: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Decimal value must be finite, got {value!r}")
    return result


@dataclass(frozen=True, slots=True)
class Airport:
    """An airport, i.e. a vertex of the network.

    Attributes:
        code: Airport identifier (e.g., 'SEA'), case-insensitive
        name: Human-readable airport name
        city: City served by the airport
        country: Country where the airport is located
    """

    code: str
    name: str = ""
    city: str = ""
    country: str = ""

    def __str__(self) -> str:
        return f"{self.code} - {self.name} ({self.city}, {self.country})"


@dataclass(frozen=True, slots=True)
class Flight:
    """A scheduled connection, i.e. a directed weighted edge.

    Several flights may link the same pair of airports (different
    carriers or prices).

    Attributes:
        origin: Departure airport code
        destination: Arrival airport code
        carrier: Airline operating the flight
        duration: Flight duration in minutes
        cost: Ticket price
    """

    origin: str
    destination: str
    carrier: str = ""
    duration: int = 0
    cost: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        """Validate duration and coerce cost to Decimal."""
        object.__setattr__(self, "cost", to_decimal(self.cost))
        if self.duration < 0:
            raise ValueError(
                f"Flight duration must be non-negative, got {self.duration}"
            )
        if self.cost < 0:
            raise ValueError(f"Flight cost must be non-negative, got {self.cost}")

    def __str__(self) -> str:
        hours, minutes = divmod(self.duration, 60)
        return (
            f"{self.origin} -> {self.destination} | {self.carrier} | "
            f"{hours}h {minutes}m | ${self.cost:.2f}"
        )


@dataclass(frozen=True, slots=True)
class NetworkStatistics:
    """Aggregate metrics over the whole network.

    Attributes:
        airport_count: Number of vertices
        flight_count: Number of edges
        average_connections: Mean out-degree over all airports
        most_connected: Codes tied for the highest out-degree (sorted)
        max_connections: Highest out-degree
        least_connected: Codes tied for the lowest out-degree (sorted)
        min_connections: Lowest out-degree
        average_cost: Mean flight cost (0 without flights)
        average_duration: Mean flight duration in minutes (0 without flights)
    """

    airport_count: int
    flight_count: int
    average_connections: float
    most_connected: tuple[str, ...]
    max_connections: int
    least_connected: tuple[str, ...]
    min_connections: int
    average_cost: Decimal
    average_duration: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    """A route resolved into the concrete flights used for each leg.

    Attributes:
        path: Ordered tuple of airport codes forming the route
        legs: Cheapest direct flight for each consecutive pair
        total_cost: Sum of leg costs
        total_duration: Sum of leg durations in minutes
    """

    path: tuple[str, ...]
    legs: tuple[Flight, ...] = field(default_factory=tuple)
    total_cost: Decimal = Decimal("0")
    total_duration: int = 0

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of hops (edges) in the route."""
        return max(len(self.path) - 1, 0)
