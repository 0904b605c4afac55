"""Shared fixtures for the flight network test suite."""

from decimal import Decimal

import pytest

from flightnet.config import reset_config
from flightnet.container import reset_container
from flightnet.domain.models import Airport, Flight
from flightnet.graph.network import FlightNetwork


@pytest.fixture(autouse=True)
def fresh_config():
    """Ensure every test sees a freshly loaded configuration."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def diamond_network() -> FlightNetwork:
    """A -> B -> C -> D with a cheap shortcut A -> C."""
    network = FlightNetwork()
    for code in "ABCD":
        network.add_airport(Airport(code, f"{code} Airport", f"{code} City", "USA"))
    network.add_flight(Flight("A", "B", "Air", 60, Decimal("10")))
    network.add_flight(Flight("B", "C", "Air", 60, Decimal("10")))
    network.add_flight(Flight("A", "C", "Air", 90, Decimal("5")))
    network.add_flight(Flight("C", "D", "Air", 30, Decimal("1")))
    return network


@pytest.fixture
def west_coast_network() -> FlightNetwork:
    """Small real-world network with parallel flights and a cycle."""
    network = FlightNetwork()
    flights = [
        Flight("SEA", "PDX", "Alaska", 55, Decimal("89")),
        Flight("SEA", "SFO", "Alaska", 125, Decimal("149")),
        Flight("SEA", "SFO", "United", 130, Decimal("139")),
        Flight("PDX", "SFO", "Alaska", 100, Decimal("119")),
        Flight("SFO", "LAX", "Southwest", 85, Decimal("79")),
        Flight("LAX", "SEA", "Delta", 160, Decimal("179")),
        Flight("SFO", "DEN", "United", 150, Decimal("169")),
    ]
    network.add_flights(flights)
    return network
