# city_search_lab/algorithms/bidirectional.py
# Bidirectional breadth-first search: one FIFO frontier grows from the start, one from the goal,
# alternating a single expansion each. Roads are undirected, so the backward side uses the same map.
# It stops at the first meeting city, which is not always on a fewest-roads route, and it ignores
# road lengths; the result is a valid route, not necessarily the shortest or the cheapest.
from __future__ import annotations
from typing import Dict, Optional, Tuple
from ..core.control import SearchContext
from ..core.frontiers import FIFOQueue
from ..core.graph import CityId
from ..core.node import Node
from ..core.metrics import SearchOutcome, SearchStats, MeasuredRun
from ..core.problem import RouteProblem
from ..core.utils import cancelled, failure, no_path_reason, solution

Reached = Dict[CityId, Tuple[CityId, ...]]

def _join(forward: Tuple[CityId, ...], backward: Tuple[CityId, ...]) -> Tuple[CityId, ...]:
    # both end at the meeting city; backward runs goal -> meeting city
    return forward + tuple(reversed(backward[:-1]))

def bidirectional_search(problem: RouteProblem, ctx: Optional[SearchContext] = None) -> SearchOutcome:
    name = "Bidirectional"
    ctx = ctx or SearchContext()
    stats = SearchStats()
    problem_b = problem.reversed()

    start_f = Node(problem.initial_state())
    start_b = Node(problem_b.initial_state())
    frontier_f, frontier_b = FIFOQueue(), FIFOQueue()
    frontier_f.push(start_f)
    frontier_b.push(start_b)
    reached_f: Reached = {start_f.state: start_f.path}
    reached_b: Reached = {start_b.state: start_b.path}
    discovered = {start_f.state, start_b.state}
    stats.nodes_discovered = len(discovered)

    def step(frontier: FIFOQueue, reached: Reached, other: Reached, p: RouteProblem,
             forward: bool) -> Optional[Tuple[CityId, ...]]:
        node = frontier.pop()
        stats.nodes_explored += 1
        ctx.explore_start(node.state)
        if node.state in other:
            if forward:
                return _join(node.path, other[node.state])
            return _join(other[node.state], node.path)

        for child in node.expand(p):
            stats.edges_processed += 1
            if child.state not in reached:
                reached[child.state] = child.path
                frontier.push(child)
                if child.state not in discovered:
                    discovered.add(child.state)
                    stats.nodes_discovered += 1
        ctx.explore_end(node.state)
        return None

    with MeasuredRun() as meter:
        while frontier_f and frontier_b:
            for frontier, reached, other, p, forward in (
                (frontier_f, reached_f, reached_b, problem, True),
                (frontier_b, reached_b, reached_f, problem_b, False),
            ):
                if not frontier:
                    continue
                if ctx.cancelled:
                    return cancelled(name, problem, stats, meter)
                path = step(frontier, reached, other, p, forward)
                if path is not None:
                    return solution(name, problem, Node(path[-1], path), stats, meter, ctx)

    return failure(name, problem, no_path_reason(problem), stats, meter)
