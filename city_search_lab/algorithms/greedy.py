# city_search_lab/algorithms/greedy.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search
from ..core.control import SearchContext
from ..core.problem import RouteProblem

def greedy_best_first_search(problem: RouteProblem, ctx: Optional[SearchContext] = None):
    # greedy: f = h only, road cost ignored
    return best_first_search(problem, f=lambda n: problem.heuristic(n.state), name="Greedy", ctx=ctx)
