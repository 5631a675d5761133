from __future__ import annotations
from typing import Optional
from .depth_limited import bounded_dfs
from ..core.config import MAX_ITERATIVE_DEPTH
from ..core.control import SearchContext
from ..core.metrics import SearchOutcome, SearchStats, MeasuredRun
from ..core.problem import RouteProblem
from ..core.utils import cancelled, failure, solution

def iterative_deepening_search(problem: RouteProblem, max_depth: int = MAX_ITERATIVE_DEPTH,
                               ctx: Optional[SearchContext] = None) -> SearchOutcome:
    """
    Iterative Deepening DFS: depth-limited passes with limits 0..max_depth.
    Counters accumulate over all passes; each pass starts with fresh path/discovered state.
    """
    name = "IDDFS"
    ctx = ctx or SearchContext()
    stats = SearchStats()

    with MeasuredRun() as meter:
        for limit in range(max_depth + 1):
            if ctx.cancelled:
                return cancelled(name, problem, stats, meter)
            ctx.iteration_boundary(limit)

            goal, _ = bounded_dfs(problem, limit, ctx, stats)
            if goal is not None:
                return solution(name, problem, goal, stats, meter, ctx)
        if ctx.cancelled:
            return cancelled(name, problem, stats, meter)

    return failure(name, problem, f"No path found within maximum depth of {max_depth}", stats, meter)
