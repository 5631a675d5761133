# city_search_lab/runner.py
# Entry point for one search: validates the request, picks the strategy, runs it.
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Dict, Optional

from .algorithms.astar import a_star_search
from .algorithms.bfs import breadth_first_search
from .algorithms.bidirectional import bidirectional_search
from .algorithms.catalog import Strategy
from .algorithms.depth_limited import depth_limited_search
from .algorithms.dfs import depth_first_search
from .algorithms.greedy import greedy_best_first_search
from .algorithms.ids import iterative_deepening_search
from .algorithms.ucs import uniform_cost_search
from .core.config import DEFAULT_DEPTH_LIMIT, MAX_ITERATIVE_DEPTH
from .core.control import SearchContext, SearchControl, SearchObserver
from .core.errors import ConfigurationError
from .core.goals import GoalSet, GoalSpec
from .core.graph import CityId, Graph
from .core.metrics import SearchOutcome, SearchStatus
from .core.problem import RouteProblem

logger = logging.getLogger(__name__)

Runner = Callable[[RouteProblem, SearchContext, int, int], SearchOutcome]

# one entry per Strategy member
_DISPATCH: Dict[Strategy, Runner] = {
    Strategy.BFS: lambda p, ctx, dl, md: breadth_first_search(p, ctx),
    Strategy.DFS: lambda p, ctx, dl, md: depth_first_search(p, ctx),
    Strategy.UCS: lambda p, ctx, dl, md: uniform_cost_search(p, ctx),
    Strategy.DLS: lambda p, ctx, dl, md: depth_limited_search(p, dl, ctx),
    Strategy.IDDFS: lambda p, ctx, dl, md: iterative_deepening_search(p, md, ctx),
    Strategy.BIDIRECTIONAL: lambda p, ctx, dl, md: bidirectional_search(p, ctx),
    Strategy.GREEDY: lambda p, ctx, dl, md: greedy_best_first_search(p, ctx),
    Strategy.ASTAR: lambda p, ctx, dl, md: a_star_search(p, ctx),
}


def _check_depth(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{what} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{what} must be positive, got {value}")
    return value


def prepare_search(graph: Graph, strategy: str | Strategy, start: CityId, goal: GoalSpec,
                   depth_limit: Optional[int] = None,
                   max_iterative_depth: Optional[int] = None):
    """Validate a request. Returns (strategy, problem, depth_limit, max_depth) or raises ConfigurationError."""
    strategy = Strategy.parse(strategy)
    if start not in graph:
        raise ConfigurationError(f"start city {start!r} is not on the map")
    goals = GoalSet(goal)
    if not len(goals):
        raise ConfigurationError("at least one goal city is required")
    for g in goals:
        if g not in graph:
            raise ConfigurationError(f"goal city {g!r} is not on the map")
    if start in goals:
        raise ConfigurationError("start and destination cities must be different")
    if strategy is Strategy.BIDIRECTIONAL and not goals.is_single:
        raise ConfigurationError("bidirectional search supports exactly one goal")
    dl = _check_depth(DEFAULT_DEPTH_LIMIT if depth_limit is None else depth_limit, "depth limit")
    md = _check_depth(MAX_ITERATIVE_DEPTH if max_iterative_depth is None else max_iterative_depth,
                      "maximum iterative depth")
    return strategy, RouteProblem(graph, start, goals), dl, md


def run_search(graph: Graph, strategy: str | Strategy, start: CityId, goal: GoalSpec,
               depth_limit: Optional[int] = None,
               max_iterative_depth: Optional[int] = None,
               observer: Optional[SearchObserver] = None,
               control: Optional[SearchControl] = None) -> SearchOutcome:
    """
    Run one search and return its outcome.

    goal is a city id or an iterable of ids (stop at the first one reached).
    depth_limit applies to DLS, max_iterative_depth to IDDFS.
    control defaults to an unpaced, never-cancelled run.
    Raises ConfigurationError for a bad request; "no path" is a normal outcome.
    """
    strategy, problem, dl, md = prepare_search(graph, strategy, start, goal, depth_limit, max_iterative_depth)
    ctx = SearchContext(control, observer)
    logger.info("Starting %s from %s to %s", strategy.value, start, " / ".join(problem.goals))
    outcome = _DISPATCH[strategy](problem, ctx, dl, md)
    if outcome.status is SearchStatus.CANCELLED:
        logger.warning("%s cancelled after %d nodes", strategy.value, outcome.nodes_explored)
    else:
        logger.info("%s finished: %s, explored=%d, %dms", strategy.value, outcome.status.value,
                    outcome.nodes_explored, outcome.execution_time_ms)
    return outcome


class SearchSession:
    """
    Runs one search at a time on a worker thread so the caller stays responsive,
    and exposes pause / resume / cancel for the run in flight.
    """

    def __init__(self, graph: Graph, delay_ms: float = 0.0):
        self.graph = graph
        self.delay_ms = delay_ms
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="search")
        self._future: Optional[Future] = None
        self._control: Optional[SearchControl] = None

    @property
    def running(self) -> bool:
        return self._future is not None and not self._future.done()

    def start(self, strategy: str | Strategy, start: CityId, goal: GoalSpec,
              observer: Optional[SearchObserver] = None,
              depth_limit: Optional[int] = None,
              max_iterative_depth: Optional[int] = None) -> Future:
        if self.running:
            raise ConfigurationError("a search is already running; cancel it or wait for it to finish")
        if not isinstance(goal, str):
            goal = tuple(goal)
        # validate on the caller's thread so bad requests fail immediately
        prepare_search(self.graph, strategy, start, goal, depth_limit, max_iterative_depth)
        self._control = SearchControl(self.delay_ms)
        self._future = self._executor.submit(
            run_search, self.graph, strategy, start, goal,
            depth_limit, max_iterative_depth, observer, self._control,
        )
        return self._future

    def pause(self) -> None:
        if self._control is not None:
            self._control.pause()

    def resume(self) -> None:
        if self._control is not None:
            self._control.resume()

    def cancel(self) -> None:
        if self._control is not None:
            self._control.cancel()

    def result(self, timeout: Optional[float] = None) -> SearchOutcome:
        if self._future is None:
            raise RuntimeError("no search has been started")
        return self._future.result(timeout)

    def close(self) -> None:
        self.cancel()
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "SearchSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False
