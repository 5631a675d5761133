# This code implements Uniform Cost Search (UCS) by reusing the generic best-first search function.
# city_search_lab/algorithms/ucs.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search
from ..core.control import SearchContext
from ..core.problem import RouteProblem

def uniform_cost_search(problem: RouteProblem, ctx: Optional[SearchContext] = None):
    return best_first_search(problem, f=lambda n: n.path_cost, name="UCS", ctx=ctx)
