"""
Pytest configuration and shared fixtures.

Fixture graphs:
- triangle: A-B 10 km, B-C 5 km, A-C 20 km, plus an isolated city D
- weighted: six cities where the cheapest route and the fewest-roads route differ
- bundled: the Sri Lanka map shipped with the package
"""

from __future__ import annotations

import itertools
from typing import Dict, Iterable, List, Tuple

import matplotlib
import pytest

matplotlib.use("Agg")

from city_search_lab.core.graph import Graph, graph_from_dict
from city_search_lab.problems.sri_lanka import sri_lanka_graph


def _node(cid, lat, lon, kind="capital"):
    return {"id": cid, "type": kind, "lat": lat, "lon": lon}


def _link(a, b, d):
    return {"source": a, "target": b, "distance": d}


TRIANGLE_DOC = {
    # a couple of km apart, so straight-line distance stays below every road
    "nodes": [
        _node("A", 7.00, 80.00),
        _node("B", 7.01, 80.00, "economic-center"),
        _node("C", 7.02, 80.00, "economic-center"),
        _node("D", 7.03, 80.00),
    ],
    "links": [_link("A", "B", 10), _link("B", "C", 5), _link("A", "C", 20)],
}

WEIGHTED_DOC = {
    # all within ~100 m of each other; every road is >= 1 km
    "nodes": [
        _node("S", 7.0000, 80.0000),
        _node("A", 7.0002, 80.0002),
        _node("B", 7.0004, 80.0000),
        _node("C", 7.0006, 80.0002),
        _node("D", 7.0008, 80.0000),
        _node("G", 7.0009, 80.0003, "economic-center"),
    ],
    "links": [
        _link("S", "A", 2), _link("S", "B", 5), _link("A", "B", 1), _link("A", "C", 6),
        _link("B", "C", 2), _link("B", "D", 7), _link("C", "D", 1), _link("C", "G", 8),
        _link("D", "G", 3),
    ],
}


@pytest.fixture
def triangle() -> Graph:
    return graph_from_dict(TRIANGLE_DOC)


@pytest.fixture
def weighted() -> Graph:
    return graph_from_dict(WEIGHTED_DOC)


@pytest.fixture(scope="session")
def bundled() -> Graph:
    return sri_lanka_graph()


# ---- reference answers -----------------------------------------------------------

def simple_paths(graph: Graph, start: str, goal: str) -> Iterable[Tuple[str, ...]]:
    """Every cycle-free path start -> goal (fine for the small fixtures)."""
    stack = [(start,)]
    while stack:
        path = stack.pop()
        if path[-1] == goal:
            yield path
            continue
        for nb in graph.neighbors(path[-1]):
            if nb.id not in path:
                stack.append(path + (nb.id,))


def brute_force_cost(graph: Graph, start: str, goal: str) -> float:
    return min(graph.path_cost(p) for p in simple_paths(graph, start, goal))


def all_pairs(graph: Graph, costs: bool) -> Dict[Tuple[str, str], float]:
    """Floyd-Warshall over road distances (costs=True) or road counts (costs=False)."""
    ids = [c.id for c in graph.cities]
    inf = float("inf")
    d = {(a, b): (0.0 if a == b else inf) for a in ids for b in ids}
    for road in graph.roads:
        w = road.distance if costs else 1.0
        d[road.source, road.target] = min(d[road.source, road.target], w)
        d[road.target, road.source] = min(d[road.target, road.source], w)
    for k, i, j in itertools.product(ids, ids, ids):
        if d[i, k] + d[k, j] < d[i, j]:
            d[i, j] = d[i, k] + d[k, j]
    return d


def assert_valid_path(graph: Graph, path: List[str], start: str, goals: Iterable[str]) -> None:
    assert path[0] == start
    assert path[-1] in set(goals)
    assert len(set(path)) == len(path), f"path repeats a city: {path}"
    for a, b in zip(path, path[1:]):
        assert graph.has_edge(a, b), f"{a} and {b} are not adjacent"
