"""Top-level package for the flight route network.

The network stores airports and flights as a directed weighted graph.
It answers direct-flight queries, fewest-stop (BFS) and cheapest
(Dijkstra) route searches, enumerates routes under stop and cost
limits, and computes network statistics.
"""

from .domain.models import Airport, Flight, NetworkStatistics, RouteResult
from .graph.network import FlightNetwork

__all__ = ["Airport", "Flight", "FlightNetwork", "NetworkStatistics", "RouteResult"]
