"""City names for the airport codes the network knows about.

Used only to give a readable name to airports that are created
implicitly when a flight references a code that was never added.
"""

from __future__ import annotations

from typing import Mapping, Optional

AIRPORT_CITIES: Mapping[str, str] = {
    "SEA": "Seattle",
    "PDX": "Portland",
    "SFO": "San Francisco",
    "LAX": "Los Angeles",
    "LAS": "Las Vegas",
    "PHX": "Phoenix",
    "DEN": "Denver",
    "DFW": "Dallas",
    "IAH": "Houston",
    "ORD": "Chicago",
    "MSP": "Minneapolis",
    "DTW": "Detroit",
    "ATL": "Atlanta",
    "MIA": "Miami",
    "JFK": "New York",
    "BOS": "Boston",
}


def city_for(code: str, cities: Optional[Mapping[str, str]] = None) -> str:
    """Return the city for an upper-cased code, or the code itself if unknown."""
    table = AIRPORT_CITIES if cities is None else cities
    return table.get(code, code)
