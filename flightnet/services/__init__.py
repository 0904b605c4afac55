"""Services layer - Application orchestration.

Available services:
- FlightNetworkService: Builds the network and answers route requests
"""

from .network_service import ROUTE_STRATEGIES, FlightNetworkService

__all__ = ["FlightNetworkService", "ROUTE_STRATEGIES"]
