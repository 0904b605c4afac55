"""Flight data adapters - Implementations of FlightRepositoryPort.

Available implementations:
- CSVFlightRepository: Loads flights and airports from CSV files
- InMemoryFlightRepository: Serves pre-parsed records
"""

from .csv_repository import CSVFlightRepository
from .memory_repository import InMemoryFlightRepository

__all__ = ["CSVFlightRepository", "InMemoryFlightRepository"]
