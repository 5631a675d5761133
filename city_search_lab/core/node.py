# city_search_lab/core/node.py
# Frontier entry: a city plus the path that reached it (start first) and its accumulated road cost.
from __future__ import annotations

from typing import Iterator, Tuple

from .graph import CityId
from .problem import RouteProblem


class Node:
    __slots__ = ("state", "path", "path_cost")

    def __init__(self, state: CityId, path: Tuple[CityId, ...] | None = None, path_cost: float = 0.0):
        self.state = state
        self.path = path if path is not None else (state,)
        self.path_cost = float(path_cost)

    @property
    def depth(self) -> int:
        return len(self.path) - 1

    def on_path(self, s: CityId) -> bool:
        return s in self.path

    def expand(self, problem: RouteProblem) -> Iterator["Node"]:
        """One child per road out of this city, in road order (already-seen cities included)."""
        for nb in problem.actions(self.state):
            yield Node(nb.id, self.path + (nb.id,), self.path_cost + nb.distance)

    def __repr__(self) -> str:
        return f"Node({self.state!r}, depth={self.depth}, g={self.path_cost:g})"
