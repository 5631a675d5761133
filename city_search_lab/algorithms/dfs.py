# city_search_lab/algorithms/dfs.py
# Depth-First Search with a LIFO stack. Children are pushed in reverse road order so the
# first neighbor is the first one explored.
from __future__ import annotations
from typing import Optional
from ..core.control import SearchContext
from ..core.frontiers import LIFOStack
from ..core.node import Node
from ..core.metrics import SearchOutcome, SearchStats, MeasuredRun
from ..core.problem import RouteProblem
from ..core.utils import cancelled, failure, no_path_reason, solution

def depth_first_search(problem: RouteProblem, ctx: Optional[SearchContext] = None) -> SearchOutcome:
    name = "DFS"
    ctx = ctx or SearchContext()
    stats = SearchStats()
    root = Node(problem.initial_state())
    frontier = LIFOStack()
    frontier.push(root)
    reached = {root.state}
    stats.nodes_discovered = 1

    with MeasuredRun() as meter:
        while len(frontier):
            if ctx.cancelled:
                return cancelled(name, problem, stats, meter)

            node = frontier.pop()
            stats.nodes_explored += 1
            ctx.explore_start(node.state)
            if problem.is_goal(node.state):
                return solution(name, problem, node, stats, meter, ctx)

            children = list(node.expand(problem))
            stats.edges_processed += len(children)
            for child in reversed(children):
                if child.state not in reached:
                    reached.add(child.state)
                    stats.nodes_discovered += 1
                    frontier.push(child)
            ctx.explore_end(node.state)

    return failure(name, problem, no_path_reason(problem), stats, meter)
