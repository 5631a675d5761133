from __future__ import annotations
from typing import Optional
from ..core.control import SearchContext
from ..core.frontiers import FIFOQueue
from ..core.node import Node
from ..core.metrics import SearchOutcome, SearchStats, MeasuredRun
from ..core.problem import RouteProblem
from ..core.utils import cancelled, failure, no_path_reason, solution

def breadth_first_search(problem: RouteProblem, ctx: Optional[SearchContext] = None) -> SearchOutcome:
    name = "BFS"
    ctx = ctx or SearchContext()
    stats = SearchStats()
    root = Node(problem.initial_state())
    frontier = FIFOQueue()
    frontier.push(root)
    reached = {root.state}  # marked on enqueue
    stats.nodes_discovered = 1

    with MeasuredRun() as meter:
        while frontier:
            if ctx.cancelled:
                return cancelled(name, problem, stats, meter)

            node = frontier.pop()
            stats.nodes_explored += 1
            ctx.explore_start(node.state)
            if problem.is_goal(node.state):
                return solution(name, problem, node, stats, meter, ctx)

            for child in node.expand(problem):
                stats.edges_processed += 1
                if child.state not in reached:
                    reached.add(child.state)
                    stats.nodes_discovered += 1
                    frontier.push(child)
            ctx.explore_end(node.state)

    return failure(name, problem, no_path_reason(problem), stats, meter)
