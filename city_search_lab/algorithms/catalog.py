# city_search_lab/algorithms/catalog.py
# The closed set of strategies, their display names and textbook properties.
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict

from ..core.errors import ConfigurationError


class Strategy(str, enum.Enum):
    BFS = "bfs"
    DFS = "dfs"
    UCS = "ucs"
    DLS = "dls"
    IDDFS = "iddfs"
    BIDIRECTIONAL = "bidirectional"
    GREEDY = "greedy"
    ASTAR = "astar"

    @classmethod
    def parse(cls, name: str | Strategy) -> "Strategy":
        if isinstance(name, Strategy):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            known = ", ".join(s.value for s in cls)
            raise ConfigurationError(f"unknown search algorithm {name!r} (expected one of: {known})") from None

    @property
    def informed(self) -> bool:
        return self in (Strategy.GREEDY, Strategy.ASTAR)


@dataclass(frozen=True)
class AlgorithmInfo:
    name: str
    time: str
    space: str
    optimal: str
    complete: str
    summary: str


_INFO: Dict[Strategy, AlgorithmInfo] = {
    Strategy.BFS: AlgorithmInfo(
        "Breadth-First Search", "O(V + E)", "O(V)", "Yes (unweighted)", "Yes",
        "BFS explores nodes level by level, guaranteeing the shortest path in unweighted graphs."),
    Strategy.DFS: AlgorithmInfo(
        "Depth-First Search", "O(V + E)", "O(V)", "No", "No (infinite spaces)",
        "DFS explores as far as possible along each branch before backtracking."),
    Strategy.UCS: AlgorithmInfo(
        "Uniform-Cost Search", "O(b^⌈C*/ε⌉)", "O(b^⌈C*/ε⌉)", "Yes", "Yes",
        "UCS expands the lowest-cost node first, guaranteeing an optimal solution."),
    Strategy.DLS: AlgorithmInfo(
        "Depth-Limited Search", "O(b^l)", "O(bl)", "No", "No",
        "DLS is DFS with a depth limit to avoid infinite paths."),
    Strategy.IDDFS: AlgorithmInfo(
        "Iterative Deepening DFS", "O(b^d)", "O(bd)", "Yes (unweighted)", "Yes",
        "IDDFS combines benefits of DFS and BFS by gradually increasing the depth limit."),
    Strategy.BIDIRECTIONAL: AlgorithmInfo(
        "Bidirectional Search", "O(b^(d/2))", "O(b^(d/2))", "No (first meeting, not always fewest roads)", "Yes",
        "Bidirectional search runs two searches simultaneously from start and goal."),
    Strategy.GREEDY: AlgorithmInfo(
        "Greedy Best-First Search", "O(b^m)", "O(b^m)", "No", "No",
        "Greedy search uses the heuristic to guide the search toward the goal."),
    Strategy.ASTAR: AlgorithmInfo(
        "A* Search", "O(b^d)", "O(b^d)", "Yes (admissible heuristic)", "Yes",
        "A* combines actual cost and heuristic for optimal pathfinding."),
}


def describe(strategy: str | Strategy) -> AlgorithmInfo:
    return _INFO[Strategy.parse(strategy)]


def format_properties(strategy: str | Strategy) -> str:
    info = describe(strategy)
    return "\n".join([
        "Algorithm Properties",
        f"Time Complexity: {info.time}",
        f"Space Complexity: {info.space}",
        f"Optimal: {info.optimal}",
        f"Complete: {info.complete}",
        info.summary,
    ])
