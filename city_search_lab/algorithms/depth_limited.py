# city_search_lab/algorithms/depth_limited.py
# Depth-Limited Search (DLS). Runs on an explicit stack whose frames record their depth,
# so traversal depth never depends on Python's recursion limit.
# Cycle check is path membership only: a city may be revisited through another branch.
from __future__ import annotations
from typing import Optional, Tuple
from ..core.config import DEFAULT_DEPTH_LIMIT
from ..core.control import SearchContext
from ..core.frontiers import LIFOStack
from ..core.node import Node
from ..core.metrics import SearchOutcome, SearchStats, MeasuredRun
from ..core.problem import RouteProblem
from ..core.utils import cancelled, failure, solution

DEPTH_LIMIT_REACHED = "Depth limit reached"
NO_PATH_WITHIN_LIMIT = "No path found within depth limit"

def bounded_dfs(problem: RouteProblem, limit: int, ctx: SearchContext,
                stats: SearchStats) -> Tuple[Optional[Node], bool]:
    """
    One depth-bounded pass, adding to `stats` (never resetting it).
    Returns (goal node or None, cutoff) where cutoff says some node sat at the bound.
    Returns early with (None, cutoff) if the run is cancelled.
    """
    root = Node(problem.initial_state())
    frontier = LIFOStack()
    frontier.push(root)
    discovered = {root.state}
    stats.nodes_discovered += 1
    cutoff = False

    while len(frontier):
        if ctx.cancelled:
            return None, cutoff

        node = frontier.pop()
        stats.nodes_explored += 1
        ctx.explore_start(node.state)
        if problem.is_goal(node.state):
            return node, cutoff

        if node.depth >= limit:
            cutoff = True
        else:
            children = []
            for child in node.expand(problem):
                stats.edges_processed += 1
                if not node.on_path(child.state):
                    children.append(child)
            for child in reversed(children):
                if child.state not in discovered:
                    discovered.add(child.state)
                    stats.nodes_discovered += 1
                frontier.push(child)
        ctx.explore_end(node.state)

    return None, cutoff

def depth_limited_search(problem: RouteProblem, limit: int = DEFAULT_DEPTH_LIMIT,
                         ctx: Optional[SearchContext] = None) -> SearchOutcome:
    name = "DLS"
    ctx = ctx or SearchContext()
    stats = SearchStats()

    with MeasuredRun() as meter:
        goal, cutoff = bounded_dfs(problem, limit, ctx, stats)
        if goal is not None:
            return solution(name, problem, goal, stats, meter, ctx)
        if ctx.cancelled:
            return cancelled(name, problem, stats, meter)

    reason = DEPTH_LIMIT_REACHED if cutoff else NO_PATH_WITHIN_LIMIT
    return failure(name, problem, reason, stats, meter)
