"""Interactive console for exploring the flight network.

Loads the network from the configured CSV files, then loops over a
small menu until the user quits.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from .config import ObservabilityConfig, get_config
from .container import get_container
from .domain.errors import FlightDataError
from .domain.models import to_decimal
from .services import FlightNetworkService

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU = """
=== Flight Network ===
1) List airports
2) Direct flights
3) Route with fewest stops
4) Cheapest route
5) Routes by stops and budget
6) Hub airports
7) Isolated airports
8) Network statistics
0) Quit"""


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure root logging from the observability settings."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)


def run(
    service: FlightNetworkService,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    """Run the menu loop against a service until the user quits."""
    network = service.network

    def ask_pair() -> tuple[str, str]:
        origin = input_fn("Origin code: ").strip()
        destination = input_fn("Destination code: ").strip()
        return origin, destination

    while True:
        output_fn(MENU)
        choice = input_fn("Choice: ").strip().lower()

        if choice in {"0", "q", "quit", "exit"}:
            output_fn("Goodbye.")
            return

        if choice == "1":
            output_fn(service.format_airports())

        elif choice == "2":
            origin, destination = ask_pair()
            flights = network.find_direct_flights(origin, destination)
            if not flights:
                output_fn(f"No direct flights from {origin} to {destination}.")
            for flight in flights:
                output_fn(str(flight))

        elif choice in {"3", "4"}:
            origin, destination = ask_pair()
            strategy = "fewest_stops" if choice == "3" else "cheapest"
            route = service.plan_route_safe(origin, destination, strategy)
            output_fn(service.format_route(route))

        elif choice == "5":
            origin, destination = ask_pair()
            search = service.config.search
            stops_raw = input_fn(f"Max stops [{search.default_max_stops}]: ").strip()
            cost_raw = input_fn(f"Max cost [{search.default_max_cost}]: ").strip()
            try:
                max_stops = int(stops_raw) if stops_raw else None
                max_cost = to_decimal(cost_raw) if cost_raw else None
            except ValueError:
                output_fn("Invalid number.")
                continue
            routes = service.plan_routes_by_criteria(
                origin, destination, max_stops, max_cost
            )
            output_fn(f"Found {len(routes)} route(s).")
            for route in routes:
                output_fn(
                    f"  {' -> '.join(route.path)} (${route.total_cost:.2f})"
                )

        elif choice == "6":
            hubs = network.find_hub_airports(service.config.search.hub_count)
            for code in hubs:
                output_fn(f"  {code}: {network.out_degree(code)} departures")

        elif choice == "7":
            isolated = network.find_isolated_airports()
            output_fn(", ".join(isolated) if isolated else "No isolated airports.")

        elif choice == "8":
            output_fn(service.format_statistics())

        else:
            output_fn("Unknown choice.")


def main() -> None:
    configure_logging()
    service: FlightNetworkService = get_container().resolve(FlightNetworkService)
    try:
        service.network
    except FlightDataError as e:
        print(f"Error: {e}")
        sys.exit(1)
    run(service)


if __name__ == "__main__":
    main()
