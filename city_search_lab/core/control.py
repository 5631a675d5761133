# city_search_lab/core/control.py
# Seam between a running search and whoever watches it (a UI, the CLI, a test).
# Strategies yield twice per expanded node: explore_start before processing it and
# explore_end after its successors are generated. Pause blocks at the next yield point;
# cancel is checked by the strategy at the top of every expansion step.
from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from .config import PAUSE_POLL_S
from .graph import CityId

logger = logging.getLogger(__name__)


class SearchObserver:
    """Progress callbacks. Override what you need; the engine never relies on them."""

    def on_explore_start(self, node_id: CityId) -> None: ...
    def on_explore_end(self, node_id: CityId) -> None: ...
    def on_path_step(self, node_id: CityId, index: int) -> None: ...
    def on_iteration_boundary(self, depth: int) -> None: ...


class SearchControl:
    """
    Pause / resume / cancel for ONE search invocation, safe to drive from another thread.
    delay_ms paces the yield points for animation; 0 disables pacing.
    """

    def __init__(self, delay_ms: float = 0.0):
        self.delay_ms = float(delay_ms)
        self._resumed = threading.Event()
        self._resumed.set()
        self._cancelled = threading.Event()

    def pause(self) -> None:
        self._resumed.clear()

    def resume(self) -> None:
        self._resumed.set()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def is_paused(self) -> bool:
        return not self._resumed.is_set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def wait_if_paused(self) -> None:
        # a cancelled run must not stay parked on a pause
        while not self._resumed.wait(PAUSE_POLL_S):
            if self._cancelled.is_set():
                return

    def sleep(self, fraction: float = 1.0) -> None:
        if self.delay_ms > 0:
            self._cancelled.wait(self.delay_ms * fraction / 1000.0)


class SearchContext:
    """What a strategy sees of the outside world during one run."""

    def __init__(self, control: Optional[SearchControl] = None, observer: Optional[SearchObserver] = None):
        self.control = control if control is not None else SearchControl()
        self.observer = observer

    @property
    def cancelled(self) -> bool:
        return self.control.cancelled

    def explore_start(self, node_id: CityId) -> None:
        logger.debug("Exploring: %s", node_id)
        self._yield_point("on_explore_start", node_id)

    def explore_end(self, node_id: CityId) -> None:
        self._yield_point("on_explore_end", node_id)

    def iteration_boundary(self, depth: int) -> None:
        logger.debug("IDDFS: trying depth limit %d", depth)
        self._yield_point("on_iteration_boundary", depth)

    def show_path(self, path: Sequence[CityId]) -> None:
        for i, node_id in enumerate(path):
            if self.cancelled:
                return
            self.control.wait_if_paused()
            self._notify("on_path_step", node_id, i)
            self.control.sleep(0.5)

    def _yield_point(self, event: str, *args) -> None:
        self.control.wait_if_paused()
        self._notify(event, *args)
        self.control.sleep()

    def _notify(self, event: str, *args) -> None:
        handler = getattr(self.observer, event, None) if self.observer is not None else None
        if handler is None:
            return
        try:
            handler(*args)
        except Exception:
            # observer errors are logged and never reach the search state
            logger.exception("observer %s%r raised; search continues", event, args)
