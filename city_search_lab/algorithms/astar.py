# city_search_lab/algorithms/astar.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search
from ..core.control import SearchContext
from ..core.problem import RouteProblem

def a_star_search(problem: RouteProblem, ctx: Optional[SearchContext] = None):
    # f = g + h; straight-line distance never exceeds the road distance
    return best_first_search(problem, f=lambda n: n.path_cost + problem.heuristic(n.state), name="A*", ctx=ctx)
