"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the network core and external
adapters. They enable dependency injection and make the system testable.
"""

from .flights import FlightRepositoryPort

__all__ = ["FlightRepositoryPort"]
