"""Flight data ports - Abstractions for loading the route network.

These protocols define the contract between the network core and
whatever supplies it with airports and flights (CSV files, a database,
test fixtures).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Airport, Flight


class FlightRepositoryPort(Protocol):
    """Port for loading flight data.

    Implementations:
    - adapters/flights/csv_repository.py (CSVFlightRepository)
    - adapters/flights/memory_repository.py (InMemoryFlightRepository)

    The repository parses and validates raw records. Rows it cannot
    parse are reported and skipped, never passed to the network.
    """

    def load(self) -> Sequence[Flight]:
        """Load all flights.

        Returns:
            The parsed flights, in source order.
        """
        ...

    def list_airports(self) -> Sequence[Airport]:
        """List explicitly defined airports.

        Airports that only appear in flights need not be listed; the
        network creates them on demand.

        Returns:
            Sequence of airports, possibly empty.
        """
        ...

    def clear_cache(self) -> None:
        """Drop any cached data so the next load re-reads the source."""
        ...
