"""The flight route network.

``FlightNetwork`` is a directed multigraph. Airports are the vertices and
flights are the weighted edges. It owns two stores keyed by the
canonical (upper-cased) airport code:

- the vertex store, ``code -> Airport``;
- the adjacency store, ``origin code -> [Flight, ...]`` in insertion order.

Construction is best-effort: invalid input is logged and ignored, never
raised. Queries never raise for unknown airports or missing routes. They
return ``None`` or an empty list instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

from ..domain.models import (
    Airport,
    Flight,
    NetworkStatistics,
    Number,
    normalize_code,
    to_decimal,
)
from . import analytics, search
from .airport_cities import AIRPORT_CITIES, city_for


@dataclass
class FlightNetwork:
    """Flight route graph with pathfinding and analytics.

    Attributes:
        default_country: Country given to airports created implicitly
        city_lookup: Code to city table used for implicit airports
    """

    default_country: str = "USA"
    city_lookup: Mapping[str, str] = field(default_factory=lambda: AIRPORT_CITIES)

    _airports: Dict[str, Airport] = field(default_factory=dict, init=False, repr=False)
    _routes: Dict[str, List[Flight]] = field(default_factory=dict, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_airport(self, airport: Optional[Airport]) -> bool:
        """Add an airport as a vertex.

        An existing code is left untouched. The airport is never
        overwritten.

        Args:
            airport: The airport to add.

        Returns:
            True if a new vertex was created, False otherwise.
        """
        if airport is None or not normalize_code(airport.code):
            self._logger.warning(
                "Rejected airport with missing code",
                extra={"airport": repr(airport)},
            )
            return False

        code = normalize_code(airport.code)
        if code in self._airports:
            self._logger.debug("Airport already present", extra={"code": code})
            return False

        self._airports[code] = replace(airport, code=code)
        self._routes.setdefault(code, [])
        return True

    def add_flight(self, flight: Optional[Flight]) -> bool:
        """Add a flight as a directed edge.

        Unknown endpoints are created on the fly. Their city comes from
        ``city_lookup`` and falls back to the code itself.

        Args:
            flight: The flight to add.

        Returns:
            True if the flight was recorded, False if it was rejected.
        """
        if (
            flight is None
            or not normalize_code(flight.origin)
            or not normalize_code(flight.destination)
        ):
            self._logger.warning(
                "Rejected flight with missing airport code",
                extra={"flight": repr(flight)},
            )
            return False

        origin = normalize_code(flight.origin)
        destination = normalize_code(flight.destination)

        for code in (origin, destination):
            if code not in self._airports:
                self._add_implicit_airport(code)

        self._routes.setdefault(origin, []).append(
            replace(flight, origin=origin, destination=destination)
        )
        return True

    def add_flights(self, flights: Iterable[Optional[Flight]]) -> int:
        """Add many flights and return how many were accepted."""
        return sum(1 for flight in flights if self.add_flight(flight))

    def _add_implicit_airport(self, code: str) -> None:
        city = city_for(code, self.city_lookup)
        self._logger.debug(
            "Creating airport referenced by flight",
            extra={"code": code, "city": city},
        )
        self.add_airport(
            Airport(
                code=code,
                name=f"{city} Airport",
                city=city,
                country=self.default_country,
            )
        )

    def get_airport(self, code: Optional[str]) -> Optional[Airport]:
        """Return the airport for a code (case-insensitive), or None."""
        return self._airports.get(normalize_code(code))

    @property
    def airports(self) -> List[Airport]:
        """All airports sorted by code."""
        return [self._airports[code] for code in sorted(self._airports)]

    @property
    def flights(self) -> List[Flight]:
        """All flights in adjacency order."""
        return [flight for flights in self._routes.values() for flight in flights]

    @property
    def airport_count(self) -> int:
        return len(self._airports)

    @property
    def flight_count(self) -> int:
        return sum(len(flights) for flights in self._routes.values())

    def out_degree(self, code: Optional[str]) -> int:
        """Number of flights leaving an airport (0 if unknown)."""
        return len(self._routes.get(normalize_code(code), ()))

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and normalize_code(code) in self._airports

    def __len__(self) -> int:
        return len(self._airports)

    def __iter__(self) -> Iterator[str]:
        return iter(self._airports)

    def find_direct_flights(
        self, origin: Optional[str], destination: Optional[str]
    ) -> List[Flight]:
        """Return every flight from origin to destination, in insertion order."""
        origin_code = normalize_code(origin)
        destination_code = normalize_code(destination)
        if not origin_code or not destination_code:
            return []
        return [
            flight
            for flight in self._routes.get(origin_code, ())
            if flight.destination == destination_code
        ]

    def get_destinations_from(self, origin: Optional[str]) -> List[str]:
        """Return the distinct airports one flight away, sorted."""
        origin_code = normalize_code(origin)
        if not origin_code:
            return []
        return sorted({f.destination for f in self._routes.get(origin_code, ())})

    def find_cheapest_direct_flight(
        self, origin: Optional[str], destination: Optional[str]
    ) -> Optional[Flight]:
        """Return the cheapest direct flight. The first one listed wins ties."""
        flights = self.find_direct_flights(origin, destination)
        if not flights:
            return None
        return min(flights, key=lambda f: f.cost)

    def _known_pair(
        self, origin: Optional[str], destination: Optional[str]
    ) -> Optional[tuple[str, str]]:
        origin_code = normalize_code(origin)
        destination_code = normalize_code(destination)
        if not origin_code or not destination_code:
            return None
        if origin_code not in self._airports or destination_code not in self._airports:
            self._logger.debug(
                "Route requested for unknown airport",
                extra={"origin": origin_code, "destination": destination_code},
            )
            return None
        return origin_code, destination_code

    def find_route(
        self, origin: Optional[str], destination: Optional[str]
    ) -> Optional[List[str]]:
        """Find a route with the fewest flights (breadth-first search).

        Returns:
            Airport codes in travel order, or None if there is no route.
        """
        pair = self._known_pair(origin, destination)
        if pair is None:
            return None
        origin_code, destination_code = pair
        if origin_code == destination_code:
            return [origin_code]
        return search.breadth_first_route(self._routes, origin_code, destination_code)

    def find_shortest_route(
        self, origin: Optional[str], destination: Optional[str]
    ) -> Optional[List[str]]:
        """Alias of ``find_route``: shortest means fewest flights."""
        return self.find_route(origin, destination)

    def find_cheapest_route(
        self, origin: Optional[str], destination: Optional[str]
    ) -> Optional[List[str]]:
        """Find the route with the lowest total cost (Dijkstra).

        If several routes cost the same, the one whose frontier entry was
        pushed first is returned.

        Returns:
            Airport codes in travel order, or None if there is no route.
        """
        pair = self._known_pair(origin, destination)
        if pair is None:
            return None
        origin_code, destination_code = pair
        if origin_code == destination_code:
            return [origin_code]
        result = search.cheapest_route(
            self._routes, self._airports, origin_code, destination_code
        )
        if result is None:
            return None
        path, _ = result
        return path

    def find_routes_by_criteria(
        self,
        origin: Optional[str],
        destination: Optional[str],
        max_stops: int,
        max_cost: Number,
    ) -> List[List[str]]:
        """Enumerate every route within ``max_stops`` flights and ``max_cost``.

        Args:
            origin: Origin airport code.
            destination: Destination airport code.
            max_stops: Maximum number of flights per route.
            max_cost: Inclusive cost ceiling.

        Returns:
            All matching routes, possibly empty.
        """
        pair = self._known_pair(origin, destination)
        if pair is None:
            return []
        origin_code, destination_code = pair
        found = search.routes_by_criteria(
            self._routes,
            origin_code,
            destination_code,
            max_stops,
            to_decimal(max_cost),
        )
        self._logger.debug(
            "Criteria search done",
            extra={
                "origin": origin_code,
                "destination": destination_code,
                "max_stops": max_stops,
                "routes": len(found),
            },
        )
        return found

    def find_hub_airports(self, top_n: int) -> List[str]:
        """Return the ``top_n`` airports with the most departing flights."""
        return analytics.find_hub_airports(self._routes, top_n)

    def find_isolated_airports(self) -> List[str]:
        """Return airports with no flights in or out, sorted by code."""
        return analytics.find_isolated_airports(self._airports, self._routes)

    def calculate_network_statistics(self) -> Optional[NetworkStatistics]:
        """Return aggregate metrics, or None if the network has no airports."""
        return analytics.calculate_network_statistics(self._airports, self._routes)

    def get_route_cost(self, route: Optional[Sequence[str]]) -> Optional[Decimal]:
        """Sum the cheapest direct fare for each leg of a route.

        Returns:
            The total cost, or None if the route has fewer than two
            airports or a leg has no direct flight.
        """
        legs = self.resolve_legs(route)
        if legs is None:
            return None
        return sum((flight.cost for flight in legs), Decimal("0"))

    def get_route_duration(self, route: Optional[Sequence[str]]) -> Optional[int]:
        """Sum the duration of the cheapest flight on each leg of a route."""
        legs = self.resolve_legs(route)
        if legs is None:
            return None
        return sum(flight.duration for flight in legs)

    def resolve_legs(self, route: Optional[Sequence[str]]) -> Optional[List[Flight]]:
        """Map each consecutive pair of a route to its cheapest direct flight."""
        if route is None or len(route) < 2:
            return None
        legs: List[Flight] = []
        for origin, destination in zip(route, route[1:]):
            flight = self.find_cheapest_direct_flight(origin, destination)
            if flight is None:
                return None
            legs.append(flight)
        return legs
