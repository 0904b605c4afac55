"""CSV Flight Repository adapter.

Loads the route network from CSV files:

- ``flights.csv`` with the header ``origin,destination,airline,duration,cost``
- ``airports.csv`` (optional) with the header ``code,name,city,country``

Header names are matched case-insensitively. Rows that cannot be
parsed are logged and skipped, so one bad line never aborts a bulk
load.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from ...config import NetworkConfig, get_config
from ...domain.errors import FlightDataError
from ...domain.models import Airport, Flight, normalize_code, to_decimal


def _normalize_header(fieldnames: Sequence[str]) -> List[str]:
    """Match column names regardless of case and surrounding spaces."""
    return [name.strip().lower() for name in fieldnames]


@dataclass
class CSVFlightRepository:
    """Flight repository that loads from CSV files.

    This adapter implements FlightRepositoryPort.

    Attributes:
        config: Network configuration (paths, file names)
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _flights: Optional[List[Flight]] = field(default=None, repr=False)
    _airports: Optional[List[Airport]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Sequence[Flight]:
        """Load all flights from the flights CSV file.

        Returns:
            The parsed flights, in file order.

        Raises:
            FlightDataError: If the file is missing, unreadable or not UTF-8.
        """
        if self._flights is not None:
            return self._flights

        path = self.config.flights_path
        self._logger.debug("Loading flights", extra={"flights_path": str(path)})

        if not path.exists():
            raise FlightDataError(
                f"Flight data file not found: {path}",
                file_path=str(path),
            )

        try:
            flights = self._load_flights_from_csv()
        except (OSError, UnicodeError, csv.Error) as e:
            raise FlightDataError(
                f"Failed to load flights: {e}",
                file_path=str(path),
                cause=e,
            )

        self._flights = flights
        self._logger.info(
            "Flights loaded",
            extra={"flights": len(flights), "file": str(path)},
        )
        return flights

    def _load_flights_from_csv(self) -> List[Flight]:
        """Internal method to parse the flights file."""
        flights: List[Flight] = []

        with self.config.flights_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None:
                self._logger.warning(
                    "Empty flight data file",
                    extra={"file": str(self.config.flights_path)},
                )
                return flights
            reader.fieldnames = _normalize_header(reader.fieldnames)

            for row in reader:
                try:
                    flights.append(self._parse_flight(row))
                except ValueError as e:
                    self._logger.warning(
                        f"Skipping line {reader.line_num}: {e}",
                        extra={"line": reader.line_num, "error": str(e)},
                    )

        return flights

    @staticmethod
    def _parse_flight(row: Mapping[str, Optional[str]]) -> Flight:
        """Build a Flight from a CSV row, raising ValueError if malformed."""
        fields: Dict[str, str] = {
            key: (row.get(key) or "").strip()
            for key in ("origin", "destination", "airline", "duration", "cost")
        }
        missing = [key for key, value in fields.items() if not value]
        if missing:
            raise ValueError(f"missing column(s): {', '.join(missing)}")

        return Flight(
            origin=normalize_code(fields["origin"]),
            destination=normalize_code(fields["destination"]),
            carrier=fields["airline"],
            duration=int(fields["duration"]),
            cost=to_decimal(fields["cost"]),
        )

    def list_airports(self) -> Sequence[Airport]:
        """List airports from the optional airports CSV file.

        Returns:
            Sequence of airports, empty if the file does not exist.
        """
        if self._airports is not None:
            return self._airports

        airports: List[Airport] = []
        path = self.config.airports_path

        if not path.exists():
            self._logger.debug("No airport file", extra={"airports_path": str(path)})
            self._airports = airports
            return airports

        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                if reader.fieldnames is not None:
                    reader.fieldnames = _normalize_header(reader.fieldnames)
                for row in reader:
                    code = normalize_code(row.get("code"))
                    if not code:
                        continue
                    name = (row.get("name") or "").strip()
                    city = (row.get("city") or "").strip()
                    country = (row.get("country") or "").strip()
                    airports.append(
                        Airport(
                            code=code,
                            name=name or code,
                            city=city or code,
                            country=country or self.config.default_country,
                        )
                    )
        except (OSError, UnicodeError, csv.Error) as e:
            raise FlightDataError(
                f"Failed to load airports: {e}",
                file_path=str(path),
                cause=e,
            )

        self._airports = airports
        return airports

    def clear_cache(self) -> None:
        """Clear cached flight and airport data."""
        self._flights = None
        self._airports = None
        self._logger.debug("Flight cache cleared")
