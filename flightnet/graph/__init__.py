"""Graph-related code for representing the flight route network.

This subpackage contains the in-memory network (airports and flights),
the path-finding algorithms that run on it and read-only analytics.
"""

from .network import FlightNetwork

__all__ = ["FlightNetwork"]
