"""Tests for BFS, Dijkstra and constrained route enumeration."""

import itertools
import random
from decimal import Decimal

import pytest

from flightnet.domain.models import Airport, Flight
from flightnet.graph import search
from flightnet.graph.network import FlightNetwork


def random_network(seed: int, size: int = 6, density: float = 0.35) -> FlightNetwork:
    """Build a small random directed network, with some parallel flights."""
    rng = random.Random(seed)
    codes = [f"N{i}" for i in range(size)]
    network = FlightNetwork()
    for code in codes:
        network.add_airport(Airport(code, code, code, "USA"))
    for origin, destination in itertools.permutations(codes, 2):
        if rng.random() < density:
            for _ in range(rng.choice([1, 1, 2])):
                network.add_flight(
                    Flight(origin, destination, "X", 60, Decimal(rng.randint(1, 50)))
                )
    return network


def simple_paths(network: FlightNetwork, origin: str, destination: str):
    """Every simple path between two airports, by brute force."""
    if origin == destination:
        yield [origin]
        return
    others = [c for c in network if c not in (origin, destination)]
    for length in range(len(others) + 1):
        for middle in itertools.permutations(others, length):
            path = [origin, *middle, destination]
            if all(
                network.find_direct_flights(a, b) for a, b in zip(path, path[1:])
            ):
                yield path


def reachable(network: FlightNetwork, origin: str) -> set:
    closure = {origin}
    changed = True
    while changed:
        changed = False
        for flight in network.flights:
            if flight.origin in closure and flight.destination not in closure:
                closure.add(flight.destination)
                changed = True
    return closure


SEEDS = range(8)


class TestReconstructPath:
    def test_walks_parent_links(self):
        parents = {"B": "A", "C": "B", "D": "C"}

        assert search.reconstruct_path(parents, "A", "D") == ["A", "B", "C", "D"]

    def test_start_equals_end(self):
        assert search.reconstruct_path({}, "A", "A") == ["A"]

    def test_broken_chain_returns_empty(self):
        assert search.reconstruct_path({"D": "C"}, "A", "D") == []


class TestFindRoute:
    def test_fewest_hops(self, diamond_network):
        assert diamond_network.find_route("A", "D") == ["A", "C", "D"]

    def test_is_case_insensitive(self, diamond_network):
        assert diamond_network.find_route("a", "d") == ["A", "C", "D"]

    def test_shortest_route_is_alias(self, diamond_network):
        assert diamond_network.find_shortest_route("A", "D") == diamond_network.find_route(
            "A", "D"
        )

    def test_origin_equals_destination(self, diamond_network):
        assert diamond_network.find_route("B", "b") == ["B"]

    @pytest.mark.parametrize(
        "origin,destination", [("A", "ZZZ"), ("ZZZ", "A"), ("", "A"), (None, "A")]
    )
    def test_invalid_or_unknown_airport(self, diamond_network, origin, destination):
        assert diamond_network.find_route(origin, destination) is None

    def test_unreachable(self, diamond_network):
        assert diamond_network.find_route("D", "A") is None

    def test_tie_broken_by_flight_insertion_order(self):
        network = FlightNetwork()
        network.add_flight(Flight("A", "X", "Air", 60, Decimal("100")))
        network.add_flight(Flight("A", "Y", "Air", 60, Decimal("1")))
        network.add_flight(Flight("Y", "Z", "Air", 60, Decimal("1")))
        network.add_flight(Flight("X", "Z", "Air", 60, Decimal("100")))

        assert network.find_route("A", "Z") == ["A", "X", "Z"]

    def test_cycles_terminate(self, west_coast_network):
        assert west_coast_network.find_route("SEA", "DEN") == ["SEA", "SFO", "DEN"]
        assert west_coast_network.find_route("LAX", "PDX") == ["LAX", "SEA", "PDX"]

    @pytest.mark.parametrize("seed", SEEDS)
    def test_hop_count_is_minimal(self, seed):
        network = random_network(seed)
        for origin, destination in itertools.product(network, repeat=2):
            paths = list(simple_paths(network, origin, destination))
            route = network.find_route(origin, destination)
            if not paths:
                assert route is None
                continue
            assert route[0] == origin and route[-1] == destination
            assert network.get_route_cost(route) is not None or len(route) == 1
            assert len(route) - 1 == min(len(p) - 1 for p in paths)


class TestFindCheapestRoute:
    def test_cheapest_total_cost(self, diamond_network):
        route = diamond_network.find_cheapest_route("A", "D")

        assert route == ["A", "C", "D"]
        assert diamond_network.get_route_cost(route) == Decimal("6")

    def test_prefers_more_hops_when_cheaper(self):
        network = FlightNetwork()
        network.add_flight(Flight("A", "C", "Air", 60, Decimal("10")))
        network.add_flight(Flight("A", "B", "Air", 60, Decimal("3")))
        network.add_flight(Flight("B", "C", "Air", 60, Decimal("4")))

        assert network.find_cheapest_route("A", "C") == ["A", "B", "C"]

    def test_uses_cheapest_parallel_flight(self, west_coast_network):
        route = west_coast_network.find_cheapest_route("SEA", "SFO")

        assert route == ["SEA", "SFO"]
        assert west_coast_network.get_route_cost(route) == Decimal("139")

    def test_equal_cost_tie_is_first_pushed(self):
        network = FlightNetwork()
        network.add_flight(Flight("A", "X", "Air", 60, Decimal("5")))
        network.add_flight(Flight("A", "Y", "Air", 60, Decimal("5")))
        network.add_flight(Flight("X", "Z", "Air", 60, Decimal("5")))
        network.add_flight(Flight("Y", "Z", "Air", 60, Decimal("5")))

        assert network.find_cheapest_route("A", "Z") == ["A", "X", "Z"]

    def test_zero_cost_flights(self):
        network = FlightNetwork()
        network.add_flight(Flight("A", "B", "Free", 60, Decimal("0")))
        network.add_flight(Flight("B", "C", "Free", 60, Decimal("0")))

        assert network.find_cheapest_route("A", "C") == ["A", "B", "C"]

    def test_origin_equals_destination(self, diamond_network):
        assert diamond_network.find_cheapest_route("C", "C") == ["C"]

    def test_unknown_and_unreachable(self, diamond_network):
        assert diamond_network.find_cheapest_route("A", "ZZZ") is None
        assert diamond_network.find_cheapest_route("D", "A") is None
        assert diamond_network.find_cheapest_route("  ", "A") is None

    def test_search_function_returns_cost(self, diamond_network):
        path, cost = search.cheapest_route(
            diamond_network._routes, diamond_network._airports, "A", "D"
        )

        assert path == ["A", "C", "D"]
        assert cost == Decimal("6")

    @pytest.mark.parametrize("seed", SEEDS)
    def test_cost_is_minimal(self, seed):
        network = random_network(seed)
        generous = Decimal("1000000")
        for origin, destination in itertools.permutations(network, 2):
            route = network.find_cheapest_route(origin, destination)
            candidates = network.find_routes_by_criteria(
                origin, destination, len(network), generous
            )
            if not candidates:
                assert route is None
                continue
            best = min(network.get_route_cost(p) for p in candidates)
            assert network.get_route_cost(route) == best

    @pytest.mark.parametrize("seed", SEEDS)
    def test_no_route_iff_unreachable(self, seed):
        network = random_network(seed, density=0.2)
        for origin, destination in itertools.product(network, repeat=2):
            is_reachable = destination in reachable(network, origin)
            assert (network.find_route(origin, destination) is not None) == is_reachable
            assert (
                network.find_cheapest_route(origin, destination) is not None
            ) == is_reachable


class TestFindRoutesByCriteria:
    def test_returns_all_matching_routes(self, diamond_network):
        routes = diamond_network.find_routes_by_criteria("A", "D", 3, Decimal("100"))

        assert sorted(routes) == [["A", "B", "C", "D"], ["A", "C", "D"]]

    def test_max_stops_limits_hops(self, diamond_network):
        assert diamond_network.find_routes_by_criteria("A", "D", 2, 100) == [
            ["A", "C", "D"]
        ]
        assert diamond_network.find_routes_by_criteria("A", "D", 1, 100) == []

    def test_max_cost_is_inclusive(self, diamond_network):
        assert diamond_network.find_routes_by_criteria("A", "D", 3, 6) == [
            ["A", "C", "D"]
        ]
        assert diamond_network.find_routes_by_criteria("A", "D", 3, "5.99") == []

    def test_origin_equals_destination(self, diamond_network):
        assert diamond_network.find_routes_by_criteria("A", "A", 0, 0) == [["A"]]

    def test_unknown_airport(self, diamond_network):
        assert diamond_network.find_routes_by_criteria("A", "ZZZ", 3, 100) == []
        assert diamond_network.find_routes_by_criteria("", "D", 3, 100) == []

    def test_never_revisits_airport(self, west_coast_network):
        routes = west_coast_network.find_routes_by_criteria("SEA", "LAX", 6, 10_000)

        assert routes
        for route in routes:
            assert len(route) == len(set(route))

    def test_parallel_flights_reported_once(self, west_coast_network):
        routes = west_coast_network.find_routes_by_criteria("SEA", "SFO", 1, 10_000)

        assert routes == [["SEA", "SFO"]]

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("max_stops,max_cost", [(1, 30), (2, 60), (3, 80)])
    def test_sound_and_complete(self, seed, max_stops, max_cost):
        network = random_network(seed)
        limit = Decimal(max_cost)
        for origin, destination in itertools.permutations(network, 2):
            found = network.find_routes_by_criteria(
                origin, destination, max_stops, limit
            )
            expected = [
                path
                for path in simple_paths(network, origin, destination)
                if len(path) - 1 <= max_stops
                and network.get_route_cost(path) <= limit
            ]
            assert sorted(found) == sorted(expected)
