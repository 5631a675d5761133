# city_search_lab/core/heuristics.py
# Straight-line (great-circle) distance between cities, used by greedy and A*.
# Roads are never shorter than the great circle between their ends, so this never overestimates.
from __future__ import annotations

import math
from typing import Dict, Iterable

import numpy as np

from .config import EARTH_RADIUS_KM
from .graph import CityId, Graph


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    p1, p2 = math.radians(lat1), math.radians(lat2)
    dlat = p2 - p1
    dlon = math.radians(lon2) - math.radians(lon1)
    a = math.sin(dlat / 2) ** 2 + math.cos(p1) * math.cos(p2) * math.sin(dlon / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def straight_line_distance(graph: Graph, a: CityId, b: CityId) -> float:
    """Great-circle km between two cities; inf if either is unknown."""
    c1, c2 = graph.city_by_id(a), graph.city_by_id(b)
    if c1 is None or c2 is None:
        return math.inf
    return haversine_km(c1.lat, c1.lon, c2.lat, c2.lon)


def haversine_matrix(lat1, lon1, lat2, lon2) -> np.ndarray:
    """Vectorised haversine: rows are the first point set, columns the second."""
    p1 = np.radians(np.asarray(lat1, dtype=float))[:, None]
    l1 = np.radians(np.asarray(lon1, dtype=float))[:, None]
    p2 = np.radians(np.asarray(lat2, dtype=float))[None, :]
    l2 = np.radians(np.asarray(lon2, dtype=float))[None, :]
    a = np.sin((p2 - p1) / 2) ** 2 + np.cos(p1) * np.cos(p2) * np.sin((l2 - l1) / 2) ** 2
    return EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def nearest_goal_table(graph: Graph, goals: Iterable[CityId]) -> Dict[CityId, float]:
    """
    h(c) = min over goals of straight_line_distance(c, goal), for every city at once.
    Taking the minimum keeps the estimate admissible with several goals.
    Unknown goals are ignored; with no known goal every entry is inf.
    """
    cities = graph.cities
    targets = [graph.city_by_id(g) for g in goals]
    targets = [t for t in targets if t is not None]
    if not cities:
        return {}
    if not targets:
        return {c.id: math.inf for c in cities}
    d = haversine_matrix(
        [c.lat for c in cities], [c.lon for c in cities],
        [t.lat for t in targets], [t.lon for t in targets],
    )
    nearest = d.min(axis=1)
    return {c.id: float(v) for c, v in zip(cities, nearest)}
