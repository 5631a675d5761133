"""Tests for the frontier containers."""

from city_search_lab.core.frontiers import FIFOQueue, LIFOStack, PriorityQueue
from city_search_lab.core.node import Node


def drain(frontier):
    out = []
    while frontier:
        out.append(frontier.pop().state)
    return out


class TestFrontiers:
    def test_fifo_and_lifo_order(self):
        fifo, lifo = FIFOQueue(), LIFOStack()
        for s in "ABC":
            fifo.push(Node(s))
            lifo.push(Node(s))
        assert len(fifo) == len(lifo) == 3
        assert drain(fifo) == ["A", "B", "C"]
        assert drain(lifo) == ["C", "B", "A"]

    def test_priority_ties_leave_in_push_order(self):
        pq = PriorityQueue(priority=lambda n: n.path_cost)
        for state, cost in [("X", 5), ("A", 2), ("B", 5), ("C", 2), ("D", 1)]:
            pq.push(Node(state, path_cost=cost))
        assert drain(pq) == ["D", "A", "C", "X", "B"]

    def test_empty_frontier_is_falsy(self):
        assert not FIFOQueue()
        assert not PriorityQueue(priority=lambda n: 0.0)
