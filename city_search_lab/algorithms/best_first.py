from __future__ import annotations
from typing import Callable, Optional
from ..core.control import SearchContext
from ..core.frontiers import PriorityQueue
from ..core.node import Node
from ..core.metrics import SearchOutcome, SearchStats, MeasuredRun
from ..core.problem import RouteProblem
from ..core.utils import cancelled, failure, no_path_reason, solution

def best_first_search(
    problem: RouteProblem,
    f: Callable[[Node], float],
    name: str = "BestFirst",
    ctx: Optional[SearchContext] = None,
) -> SearchOutcome:
    """
    Generic best-first graph search, lowest f first (ties: first pushed, first popped).
    Duplicates may sit on the frontier; the visited check happens on pop and stale
    entries are dropped without counting as explored.
    """
    ctx = ctx or SearchContext()
    stats = SearchStats()
    root = Node(problem.initial_state())

    frontier = PriorityQueue(priority=f)
    frontier.push(root)
    discovered = {root.state}
    stats.nodes_discovered = 1
    visited = set()

    with MeasuredRun() as meter:
        while frontier:
            if ctx.cancelled:
                return cancelled(name, problem, stats, meter)

            node = frontier.pop()
            if node.state in visited:
                continue
            visited.add(node.state)
            stats.nodes_explored += 1
            ctx.explore_start(node.state)
            if problem.is_goal(node.state):
                return solution(name, problem, node, stats, meter, ctx)

            for child in node.expand(problem):
                stats.edges_processed += 1
                if child.state in visited:
                    continue
                if child.state not in discovered:
                    discovered.add(child.state)
                    stats.nodes_discovered += 1
                frontier.push(child)
            ctx.explore_end(node.state)

    return failure(name, problem, no_path_reason(problem), stats, meter)
