# city_search_lab/core/utils.py
# Turns the end state of a strategy into its SearchOutcome.
from __future__ import annotations

from .control import SearchContext
from .metrics import MeasuredRun, SearchOutcome, SearchStats, SearchStatus
from .node import Node
from .problem import RouteProblem

CANCELLED_REASON = "Search cancelled"


def no_path_reason(problem: RouteProblem) -> str:
    if problem.goals.is_single:
        return "No path exists between the cities"
    return "No path exists to any goal"


def solution(name: str, problem: RouteProblem, node: Node, stats: SearchStats,
             meter: MeasuredRun, ctx: SearchContext) -> SearchOutcome:
    """Highlight the path, then price it against the map (not the frontier's g)."""
    ctx.show_path(node.path)
    return SearchOutcome(
        algorithm=name,
        status=SearchStatus.SUCCESS,
        path=node.path,
        cost=problem.graph.path_cost(node.path),
        reached_goal=node.state,
        goals=tuple(problem.goals),
        nodes_explored=stats.nodes_explored,
        nodes_discovered=stats.nodes_discovered,
        edges_processed=stats.edges_processed,
        execution_time_ms=meter.elapsed_ms,
    )


def failure(name: str, problem: RouteProblem, reason: str, stats: SearchStats,
            meter: MeasuredRun, status: SearchStatus = SearchStatus.EXHAUSTED) -> SearchOutcome:
    return SearchOutcome(
        algorithm=name,
        status=status,
        failure_reason=reason,
        goals=tuple(problem.goals),
        nodes_explored=stats.nodes_explored,
        nodes_discovered=stats.nodes_discovered,
        edges_processed=stats.edges_processed,
        execution_time_ms=meter.elapsed_ms,
    )


def cancelled(name: str, problem: RouteProblem, stats: SearchStats, meter: MeasuredRun) -> SearchOutcome:
    return failure(name, problem, CANCELLED_REASON, stats, meter, status=SearchStatus.CANCELLED)
