"""Route search over the flight adjacency relation.

This module holds the traversal algorithms used by ``FlightNetwork``:

- breadth-first search for the route with the fewest hops,
- Dijkstra's algorithm for the route with the lowest total cost,
- bounded depth-first enumeration of every route meeting stop and cost
  limits.

All functions are pure. They expect already-normalized airport codes and
an adjacency mapping from origin code to its outgoing flights, in
insertion order. Validation of inputs is the caller's job.
"""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from ..domain.models import Flight

# Adjacency relation: origin code -> outgoing flights (insertion order)
Routes = Mapping[str, Sequence[Flight]]

INFINITY = Decimal("Infinity")


def reconstruct_path(parents: Mapping[str, str], start: str, end: str) -> List[str]:
    """Rebuild the path from ``start`` to ``end`` out of a parent map.

    Parameters
    ----------
    parents:
        Mapping from each discovered code to the code it was reached from.
    start:
        Code the search started from.
    end:
        Code the search ended on.

    Returns
    -------
    list[str]
        Codes in travel order, or an empty list if the parent chain is
        broken before reaching ``start``.
    """
    path: List[str] = []
    current = end
    while current != start:
        path.append(current)
        if current not in parents:
            return []
        current = parents[current]
    path.append(start)
    path.reverse()
    return path


def breadth_first_route(
    routes: Routes, origin: str, destination: str
) -> Optional[List[str]]:
    """Find the route with the fewest flights between two airports.

    Neighbours are expanded in adjacency (flight insertion) order, so
    among several equally short routes the first one discovered wins.

    Returns
    -------
    list[str] or None
        The route from ``origin`` to ``destination`` (inclusive), or
        ``None`` if ``destination`` is unreachable.
    """
    queue: deque[str] = deque([origin])
    visited: Set[str] = {origin}
    parents: Dict[str, str] = {}

    while queue:
        current = queue.popleft()

        if current == destination:
            return reconstruct_path(parents, origin, destination) or None

        for flight in routes.get(current, ()):
            neighbor = flight.destination
            if neighbor not in visited:
                visited.add(neighbor)
                parents[neighbor] = current
                queue.append(neighbor)

    return None


def cheapest_route(
    routes: Routes,
    vertices: Iterable[str],
    origin: str,
    destination: str,
) -> Optional[Tuple[List[str], Decimal]]:
    """Find the route with the lowest summed flight cost using Dijkstra.

    The frontier is a binary heap of ``(cost, sequence, code)`` entries.
    There is no decrease-key: an improved vertex is pushed again and
    outdated entries are discarded when popped. The sequence number makes
    entries with equal cost come out in insertion order.

    Costs must be non-negative, which ``Flight`` enforces.

    Returns
    -------
    (list[str], Decimal) or None
        The route and its total cost, or ``None`` if ``destination`` is
        unreachable.
    """
    distances: Dict[str, Decimal] = {code: INFINITY for code in vertices}
    distances[origin] = Decimal("0")
    parents: Dict[str, str] = {}
    finalized: Set[str] = set()

    counter = itertools.count()
    heap: List[Tuple[Decimal, int, str]] = [(Decimal("0"), next(counter), origin)]

    while heap:
        current_cost, _, current = heapq.heappop(heap)

        if current in finalized:
            continue

        finalized.add(current)

        if current == destination:
            path = reconstruct_path(parents, origin, destination)
            if not path:
                return None
            return path, current_cost

        for flight in routes.get(current, ()):
            neighbor = flight.destination
            new_cost = current_cost + flight.cost
            if new_cost < distances.get(neighbor, INFINITY):
                distances[neighbor] = new_cost
                parents[neighbor] = current
                heapq.heappush(heap, (new_cost, next(counter), neighbor))

    return None


def routes_by_criteria(
    routes: Routes,
    origin: str,
    destination: str,
    max_stops: int,
    max_cost: Decimal,
) -> List[List[str]]:
    """Enumerate every simple route within stop and cost limits.

    This is a brute-force depth-first search. Its cost grows
    exponentially with ``max_stops`` on dense networks.

    Parameters
    ----------
    max_stops:
        Maximum number of flights (edges) in a route.
    max_cost:
        Inclusive upper bound on the summed flight cost.

    Returns
    -------
    list[list[str]]
        Every distinct matching route in discovery order. A route never
        visits the same airport twice. Parallel flights that yield the same
        sequence of airports are reported once. When ``origin ==
        destination`` the single zero-hop route is returned.
    """
    found: List[List[str]] = []
    _explore(
        routes,
        origin,
        destination,
        max_stops,
        max_cost,
        Decimal("0"),
        [origin],
        {origin},
        found,
    )
    distinct = dict.fromkeys(tuple(path) for path in found)
    return [list(path) for path in distinct]


def _explore(
    routes: Routes,
    current: str,
    destination: str,
    max_stops: int,
    max_cost: Decimal,
    current_cost: Decimal,
    path: List[str],
    visited: Set[str],
    found: List[List[str]],
) -> None:
    if current == destination:
        found.append(list(path))
        return

    if len(path) - 1 >= max_stops:
        return

    for flight in routes.get(current, ()):
        neighbor = flight.destination
        new_cost = current_cost + flight.cost
        if new_cost > max_cost or neighbor in visited:
            continue

        path.append(neighbor)
        visited.add(neighbor)
        try:
            _explore(
                routes,
                neighbor,
                destination,
                max_stops,
                max_cost,
                new_cost,
                path,
                visited,
                found,
            )
        finally:
            path.pop()
            visited.discard(neighbor)
