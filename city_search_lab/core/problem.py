# Defines the route-finding problem every strategy is run on (start, goal set, map, heuristic).
# city_search_lab/core/problem.py
from __future__ import annotations

from typing import Dict, List, Optional

from .errors import ConfigurationError
from .goals import GoalSet, GoalSpec
from .graph import CityId, Graph, Neighbor
from .heuristics import nearest_goal_table


class RouteProblem:
    """
    Route search on a city graph.
    States are city ids; ACTIONS(s) are the roads out of s; RESULT is the neighbor city;
    step cost is the road distance. heuristic(s) is the straight-line distance to the
    nearest goal (computed lazily, once per problem).
    """

    def __init__(self, graph: Graph, start: CityId, goals: GoalSpec):
        self.graph = graph
        self.start = start
        self.goals = goals if isinstance(goals, GoalSet) else GoalSet(goals)
        self._h: Optional[Dict[CityId, float]] = None

    def initial_state(self) -> CityId:
        return self.start

    def is_goal(self, s: CityId) -> bool:
        return self.goals.is_goal(s)

    def actions(self, s: CityId) -> List[Neighbor]:
        return self.graph.neighbors(s)

    def heuristic(self, s: CityId) -> float:
        if self._h is None:
            self._h = nearest_goal_table(self.graph, self.goals)
        return self._h.get(s, float("inf"))

    def reversed(self) -> "RouteProblem":
        """Same map, searched from the goal back to the start (bidirectional search)."""
        if not self.goals.is_single:
            raise ConfigurationError("backward search needs exactly one goal")
        return RouteProblem(self.graph, self.goals.first, self.start)

    def __repr__(self) -> str:
        return f"RouteProblem(start={self.start!r}, goals={list(self.goals)!r})"
