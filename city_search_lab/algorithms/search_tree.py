# city_search_lab/algorithms/search_tree.py
# Static previews of the search tree a strategy would walk, used to illustrate it before a run.
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .catalog import Strategy
from ..core.graph import CityId
from ..core.heuristics import straight_line_distance
from ..core.problem import RouteProblem


@dataclass
class TreeNode:
    name: CityId
    is_goal: bool
    children: List["TreeNode"] = field(default_factory=list)

    def size(self) -> int:
        return 1 + sum(c.size() for c in self.children)

    def depth(self) -> int:
        return 1 + max((c.depth() for c in self.children), default=0)


def _ordered_children(problem: RouteProblem, city: CityId, strategy: Strategy) -> List[CityId]:
    neighbors = problem.actions(city)
    if strategy is Strategy.UCS:
        neighbors = sorted(neighbors, key=lambda nb: nb.distance)
    elif strategy.informed:
        # the preview orders by the first goal only
        goal = problem.goals.first
        neighbors = sorted(neighbors, key=lambda nb: straight_line_distance(problem.graph, nb.id, goal))
    ids = [nb.id for nb in neighbors]
    if strategy is Strategy.DFS:
        ids.reverse()
    return ids


def build_search_tree(problem: RouteProblem, strategy: str | Strategy, max_depth: int,
                      goal_tail: Optional[int] = None) -> TreeNode:
    """
    Every simple path from the start up to max_depth roads, children in the order the
    strategy considers them. With goal_tail=k, at most k more levels are kept below a goal.
    """
    strategy = Strategy.parse(strategy)

    def build(city: CityId, path: Tuple[CityId, ...], depth_left: int, tail: Optional[int]) -> TreeNode:
        is_goal = problem.is_goal(city)
        if is_goal and goal_tail is not None:
            tail = goal_tail
        node = TreeNode(city, is_goal)
        if depth_left == 0 or (tail is not None and tail <= 0):
            return node
        here = path + (city,)
        for child in _ordered_children(problem, city, strategy):
            if child in here:
                continue
            node.children.append(
                build(child, here, depth_left - 1, None if tail is None else tail - 1)
            )
        return node

    return build(problem.start, (), max_depth, None)


def build_level_tree(problem: RouteProblem) -> TreeNode:
    """Breadth-wise tree of simple paths, stopping as soon as every goal has appeared."""
    root = TreeNode(problem.start, problem.is_goal(problem.start))
    wanted = set(problem.goals)
    found = set()
    queue = deque([(root, (problem.start,))])
    while queue and found != wanted:
        tree_node, path = queue.popleft()
        if tree_node.is_goal:
            found.add(tree_node.name)
            if found == wanted:
                break
        for nb in problem.actions(tree_node.name):
            if nb.id in path:
                continue
            child = TreeNode(nb.id, problem.is_goal(nb.id))
            tree_node.children.append(child)
            queue.append((child, path + (nb.id,)))
    return root
