# city_search_lab/problems/sri_lanka.py
# The bundled map: Sri Lankan provincial capitals and dedicated economic centres (DECs),
# joined by main-road distances in km.
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from ..core.config import CITIES_PATH, DEFAULT_GOAL, DEFAULT_START
from ..core.goals import GoalSpec
from ..core.graph import Graph, load_graph
from ..core.problem import RouteProblem


@lru_cache(maxsize=None)
def _load(path: str) -> Graph:
    return load_graph(path)


def sri_lanka_graph(path: Optional[str | Path] = None) -> Graph:
    """Load (once per path) and return the city graph; graphs are read-only so sharing is safe."""
    return _load(str(path or CITIES_PATH))


def sri_lanka_problem(start: str = DEFAULT_START, goal: GoalSpec = DEFAULT_GOAL) -> RouteProblem:
    """
    Factory for a ready-to-use RouteProblem on the bundled map.
    """
    return RouteProblem(sri_lanka_graph(), start, goal)
