# city_search_lab/core/frontiers.py
# The three frontier disciplines the strategies draw nodes from. Each holds Nodes and is
# falsy when empty, so a strategy loops with `while frontier:`.
from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Callable, Deque, List, Tuple

from .node import Node


class FIFOQueue:
    """Oldest node first (BFS, bidirectional)."""

    def __init__(self) -> None:
        self._nodes: Deque[Node] = deque()

    def push(self, node: Node) -> None:
        self._nodes.append(node)

    def pop(self) -> Node:
        return self._nodes.popleft()

    def __len__(self) -> int:
        return len(self._nodes)


class LIFOStack:
    """Newest node first (DFS, depth-limited passes)."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def push(self, node: Node) -> None:
        self._nodes.append(node)

    def pop(self) -> Node:
        return self._nodes.pop()

    def __len__(self) -> int:
        return len(self._nodes)


class PriorityQueue:
    """
    Lowest priority(node) first. Entries with equal priority leave in the order they
    were pushed, so UCS, greedy and A* break ties by neighbor enumeration order.
    """

    def __init__(self, priority: Callable[[Node], float]):
        self.priority = priority
        self._heap: List[Tuple[float, int, Node]] = []
        self._order = itertools.count()

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (self.priority(node), next(self._order), node))

    def pop(self) -> Node:
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)
