# city_search_lab/core/goals.py
# Lets every strategy accept one goal city or a set of them.
# A search stops at the FIRST goal its own expansion order reaches. That is not
# the nearest goal in general (no multi-destination routing is attempted).
from __future__ import annotations

from typing import Iterable, Iterator, Tuple, Union

from .graph import CityId

GoalSpec = Union[CityId, Iterable[CityId]]


class GoalSet:
    """Ordered, duplicate-free set of goal cities."""

    def __init__(self, goals: GoalSpec):
        if isinstance(goals, str):
            goals = (goals,)
        ordered = []
        for g in goals:
            if g not in ordered:
                ordered.append(g)
        self._goals: Tuple[CityId, ...] = tuple(ordered)

    def __contains__(self, city_id: object) -> bool:
        return city_id in self._goals

    def __iter__(self) -> Iterator[CityId]:
        return iter(self._goals)

    def __len__(self) -> int:
        return len(self._goals)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GoalSet):
            return set(self._goals) == set(other._goals)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._goals))

    @property
    def first(self) -> CityId:
        return self._goals[0]

    @property
    def is_single(self) -> bool:
        return len(self._goals) == 1

    def is_goal(self, city_id: CityId) -> bool:
        return city_id in self._goals

    def __repr__(self) -> str:
        return f"GoalSet({list(self._goals)!r})"
