"""Flight network service - Main orchestrator.

Builds the network from a repository, answers route requests with
resolved legs and renders the text views used by the console.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence

from ..config import AppConfig, get_config
from ..domain.errors import (
    AirportNotFoundError,
    ConfigurationError,
    NoRouteFoundError,
)
from ..domain.models import Number, RouteResult, normalize_code, to_decimal
from ..graph.analytics import format_statistics
from ..graph.network import FlightNetwork
from ..ports.flights import FlightRepositoryPort

RouteFinder = Callable[[FlightNetwork, str, str], Optional[List[str]]]

ROUTE_STRATEGIES: Dict[str, RouteFinder] = {
    "fewest_stops": FlightNetwork.find_route,
    "cheapest": FlightNetwork.find_cheapest_route,
}


@dataclass
class FlightNetworkService:
    """Main service for querying the flight network.

    Attributes:
        repository: Supplies airports and flights
        config: Application configuration
    """

    repository: FlightRepositoryPort
    config: AppConfig = field(default_factory=get_config)

    _network: Optional[FlightNetwork] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def network(self) -> FlightNetwork:
        """The network, built on first access."""
        if self._network is None:
            self._network = self.build_network()
        return self._network

    def build_network(self) -> FlightNetwork:
        """Build a fresh network from the repository.

        Explicit airports are added first so their names win over the
        ones generated for airports only seen in flights.

        Raises:
            FlightDataError: If the repository cannot load its data.
        """
        network = FlightNetwork(default_country=self.config.network.default_country)

        airports = self.repository.list_airports()
        for airport in airports:
            network.add_airport(airport)

        flights = self.repository.load()
        loaded = network.add_flights(flights)

        self._logger.info(
            f"Successfully loaded {loaded} flights",
            extra={"airports": network.airport_count, "flights": loaded},
        )
        return network

    def reload(self) -> FlightNetwork:
        """Drop cached data and rebuild the network."""
        self.repository.clear_cache()
        self._network = self.build_network()
        return self._network

    def plan_route(
        self,
        origin: str,
        destination: str,
        strategy: str = "fewest_stops",
    ) -> RouteResult:
        """Find a route and resolve the flight used on each leg.

        Args:
            origin: Origin airport code.
            destination: Destination airport code.
            strategy: "fewest_stops" (BFS) or "cheapest" (Dijkstra).

        Returns:
            RouteResult with path, legs and totals.

        Raises:
            ConfigurationError: If the strategy is unknown.
            AirportNotFoundError: If either airport is not in the network.
            NoRouteFoundError: If no route exists.
        """
        finder = ROUTE_STRATEGIES.get(strategy)
        if finder is None:
            raise ConfigurationError(
                f"Unknown route strategy: {strategy!r}",
                setting_name="strategy",
                expected_type=" | ".join(sorted(ROUTE_STRATEGIES)),
            )

        network = self.network
        for code in (origin, destination):
            if network.get_airport(code) is None:
                raise AirportNotFoundError(
                    f"Airport not in network: {code}",
                    airport_code=normalize_code(code),
                )

        path = finder(network, origin, destination)
        if not path:
            self._logger.warning(
                "No route found",
                extra={"origin": origin, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No route from {normalize_code(origin)} to {normalize_code(destination)}",
                origin=normalize_code(origin),
                destination=normalize_code(destination),
            )

        route = self.to_route_result(path)
        self._logger.info(
            "Route found",
            extra={
                "origin": origin,
                "destination": destination,
                "strategy": strategy,
                "stops": route.num_stops,
                "cost": str(route.total_cost),
            },
        )
        return route

    def plan_route_safe(
        self,
        origin: str,
        destination: str,
        strategy: str = "fewest_stops",
    ) -> RouteResult:
        """Like plan_route(), but returns an empty RouteResult on failure."""
        finder = ROUTE_STRATEGIES.get(strategy)
        if finder is None:
            return RouteResult(path=())
        path = finder(self.network, origin, destination)
        if not path:
            return RouteResult(path=())
        return self.to_route_result(path)

    def plan_routes_by_criteria(
        self,
        origin: str,
        destination: str,
        max_stops: Optional[int] = None,
        max_cost: Optional[Number] = None,
    ) -> List[RouteResult]:
        """Enumerate routes within stop and cost limits.

        Limits default to the configured search defaults.
        """
        stops = self.config.search.default_max_stops if max_stops is None else max_stops
        cost = (
            self.config.search.default_max_cost
            if max_cost is None
            else to_decimal(max_cost)
        )
        paths = self.network.find_routes_by_criteria(origin, destination, stops, cost)
        return [self.to_route_result(path) for path in paths]

    def to_route_result(self, path: Sequence[str]) -> RouteResult:
        """Resolve a list of codes into a RouteResult."""
        legs = self.network.resolve_legs(path) or []
        return RouteResult(
            path=tuple(path),
            legs=tuple(legs),
            total_cost=sum((leg.cost for leg in legs), Decimal("0")),
            total_duration=sum(leg.duration for leg in legs),
        )

    def format_route(self, route: Optional[RouteResult]) -> str:
        """Format a route as a human-readable itinerary."""
        if route is None or route.is_empty:
            return "No route to display."

        lines = [
            f"Route: {' -> '.join(route.path)}",
            f"Total stops: {route.num_stops}",
        ]
        if not route.legs:
            return "\n".join(lines)

        lines.append("")
        lines.append("Flight Details:")
        for index, leg in enumerate(route.legs, start=1):
            lines.append(f"  {index}. {leg}")

        hours, minutes = divmod(route.total_duration, 60)
        lines.append("")
        lines.append(f"Total Cost: ${route.total_cost:.2f}")
        lines.append(
            f"Total Duration: {route.total_duration} minutes ({hours}h {minutes}m)"
        )
        return "\n".join(lines)

    def format_airports(self) -> str:
        """Format every airport with its number of departing flights."""
        network = self.network
        if network.airport_count == 0:
            return "No airports in the network."

        lines = [
            f"=== All Airports ({network.airport_count} total) ===",
            f"{'Code':<5} {'City':<20} {'Connections':<12}",
            "-" * 40,
        ]
        for airport in network.airports:
            connections = network.out_degree(airport.code)
            lines.append(f"{airport.code:<5} {airport.city:<20} {connections:<12}")
        return "\n".join(lines)

    def format_statistics(self) -> str:
        """Format the network statistics report."""
        return format_statistics(self.network.calculate_network_statistics())
