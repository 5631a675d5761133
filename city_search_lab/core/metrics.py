# city_search_lab/core/metrics.py
from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .graph import CityId


class SearchStatus(str, enum.Enum):
    SUCCESS = "success"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"


@dataclass
class SearchStats:
    """
    Counters shared by every strategy:
    - nodes_explored: nodes actually processed (popped and not skipped as already visited)
    - nodes_discovered: distinct nodes ever put on a frontier, start included
    - edges_processed: neighbor edges examined while expanding, including ones to seen nodes
    """
    nodes_explored: int = 0
    nodes_discovered: int = 0
    edges_processed: int = 0


@dataclass(frozen=True)
class SearchOutcome:
    algorithm: str
    status: SearchStatus
    nodes_explored: int
    nodes_discovered: int
    edges_processed: int
    execution_time_ms: int
    path: Tuple[CityId, ...] = ()
    cost: Optional[float] = None
    reached_goal: Optional[CityId] = None
    failure_reason: Optional[str] = None
    goals: Tuple[CityId, ...] = field(default=())

    @property
    def success(self) -> bool:
        return self.status is SearchStatus.SUCCESS

    @property
    def path_length(self) -> int:
        return len(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "success": self.success,
            "status": self.status.value,
            "path": list(self.path),
            "cost": self.cost,
            "reached_goal": self.reached_goal,
            "goals": list(self.goals),
            "nodes_explored": self.nodes_explored,
            "nodes_discovered": self.nodes_discovered,
            "edges_processed": self.edges_processed,
            "execution_time_ms": self.execution_time_ms,
            "failure_reason": self.failure_reason,
        }


class MeasuredRun:
    """
    Context manager for wall-clock timing.
    Safe to query .elapsed_ms *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None

    def __enter__(self) -> "MeasuredRun":
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        return False  # don't suppress exceptions

    @property
    def elapsed_ms(self) -> int:
        """Whole milliseconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0
        end = self.t1 if self.t1 is not None else time.perf_counter()
        return int(round((end - self.t0) * 1000))


def format_outcome(outcome: SearchOutcome, title: Optional[str] = None) -> str:
    lines = [f"{title or outcome.algorithm} Results"]
    if outcome.success:
        lines.append(f"Path Found: {' → '.join(outcome.path)}")
        lines.append(f"Total Distance: {outcome.cost:g} km")
        if len(outcome.goals) > 1:
            lines.append(f"Reached Goal: {outcome.reached_goal}")
        lines.append(f"Nodes Explored: {outcome.nodes_explored}")
        lines.append(f"Path Length: {outcome.path_length} cities")
    else:
        lines.append("No path found")
        lines.append(f"Nodes Explored: {outcome.nodes_explored}")
        if outcome.failure_reason:
            lines.append(f"Reason: {outcome.failure_reason}")
    lines.append(f"Nodes Discovered: {outcome.nodes_discovered}")
    lines.append(f"Edges Processed: {outcome.edges_processed}")
    lines.append(f"Execution Time: {outcome.execution_time_ms}ms")
    return "\n".join(lines)
