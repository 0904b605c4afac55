"""In-memory flight repository.

Serves airports and flights that are already parsed. Useful in tests
and when embedding the network in another application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ...domain.models import Airport, Flight


@dataclass
class InMemoryFlightRepository:
    """FlightRepositoryPort backed by plain sequences."""

    flights: Sequence[Flight] = field(default_factory=tuple)
    airports: Sequence[Airport] = field(default_factory=tuple)

    def load(self) -> Sequence[Flight]:
        return list(self.flights)

    def list_airports(self) -> Sequence[Airport]:
        return list(self.airports)

    def clear_cache(self) -> None:
        pass
