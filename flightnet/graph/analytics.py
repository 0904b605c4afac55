"""Read-only network analytics.

Hub detection, isolated-airport detection and aggregate statistics.
Every function takes the vertex and adjacency stores of a
``FlightNetwork`` and never mutates them.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Mapping, Optional

from ..domain.models import Airport, NetworkStatistics
from .search import Routes


def find_hub_airports(routes: Routes, top_n: int) -> List[str]:
    """Return the ``top_n`` airports with the most outgoing flights.

    Ties on out-degree are broken by code, ascending.
    """
    if top_n <= 0:
        return []
    ranked = sorted(routes.items(), key=lambda item: (-len(item[1]), item[0]))
    return [code for code, _ in ranked[:top_n]]


def find_isolated_airports(
    airports: Mapping[str, Airport], routes: Routes
) -> List[str]:
    """Return airports with neither outgoing nor incoming flights, sorted."""
    has_incoming = {
        flight.destination for flights in routes.values() for flight in flights
    }
    return sorted(
        code
        for code in airports
        if not routes.get(code) and code not in has_incoming
    )


def calculate_network_statistics(
    airports: Mapping[str, Airport], routes: Routes
) -> Optional[NetworkStatistics]:
    """Compute aggregate metrics, or ``None`` for an empty network."""
    if not airports:
        return None

    degrees = {code: len(routes.get(code, ())) for code in airports}
    all_flights = [flight for flights in routes.values() for flight in flights]
    total_flights = len(all_flights)

    max_connections = max(degrees.values())
    min_connections = min(degrees.values())

    if all_flights:
        average_cost = sum((f.cost for f in all_flights), Decimal("0")) / total_flights
        average_duration = sum(f.duration for f in all_flights) / total_flights
    else:
        average_cost = Decimal("0")
        average_duration = 0.0

    return NetworkStatistics(
        airport_count=len(airports),
        flight_count=total_flights,
        average_connections=total_flights / len(degrees),
        most_connected=tuple(
            sorted(c for c, d in degrees.items() if d == max_connections)
        ),
        max_connections=max_connections,
        least_connected=tuple(
            sorted(c for c, d in degrees.items() if d == min_connections)
        ),
        min_connections=min_connections,
        average_cost=average_cost,
        average_duration=average_duration,
    )


def format_statistics(stats: Optional[NetworkStatistics]) -> str:
    """Render statistics as a human-readable report."""
    if stats is None:
        return "No airports in the network."

    lines = [
        "=== Network Statistics ===",
        f"Total Airports: {stats.airport_count}",
        f"Total Flights: {stats.flight_count}",
        f"Average Connections per Airport: {stats.average_connections:.2f}",
        f"Most Connected Airport(s): {', '.join(stats.most_connected)} "
        f"({stats.max_connections} connections)",
        f"Least Connected Airport(s): {', '.join(stats.least_connected)} "
        f"({stats.min_connections} connections)",
        f"Average Flight Cost: ${stats.average_cost:.2f}",
        f"Average Flight Duration: {stats.average_duration:.0f} minutes "
        f"({stats.average_duration / 60:.1f} hours)",
    ]
    return "\n".join(lines)
