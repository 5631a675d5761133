"""Tests for pause / resume / cancel, pacing, observer isolation and SearchSession."""

import logging
import threading
import time

import pytest

from city_search_lab.core.control import SearchControl, SearchObserver
from city_search_lab.core.errors import ConfigurationError
from city_search_lab.core.metrics import SearchStatus
from city_search_lab.core.utils import CANCELLED_REASON
from city_search_lab.runner import SearchSession, run_search

ALL = ["bfs", "dfs", "ucs", "dls", "iddfs", "bidirectional", "greedy", "astar"]


class CancelAfter(SearchObserver):
    """Cancels the run once `n` nodes have finished expanding."""

    def __init__(self, control, n):
        self.control = control
        self.n = n
        self.closed = 0

    def on_explore_end(self, node_id):
        self.closed += 1
        if self.closed == self.n:
            self.control.cancel()


class Exploding(SearchObserver):
    def on_explore_start(self, node_id):
        raise RuntimeError("observer bug")


class TestCancellation:
    @pytest.mark.parametrize("algo", ALL)
    def test_cancel_stops_after_the_current_step(self, bundled, algo):
        control = SearchControl()
        out = run_search(bundled, algo, "Colombo", "Jaffna",
                         observer=CancelAfter(control, 2), control=control)
        assert out.status is SearchStatus.CANCELLED
        assert out.failure_reason == CANCELLED_REASON
        assert out.nodes_explored == 2
        assert out.path == ()

    def test_cancel_before_start(self, triangle):
        control = SearchControl()
        control.cancel()
        out = run_search(triangle, "bfs", "A", "C", control=control)
        assert out.status is SearchStatus.CANCELLED
        assert out.nodes_explored == 0

    def test_cancel_is_logged_as_warning(self, bundled, caplog):
        control = SearchControl()
        with caplog.at_level(logging.WARNING, logger="city_search_lab.runner"):
            run_search(bundled, "bfs", "Colombo", "Jaffna",
                       observer=CancelAfter(control, 1), control=control)
        assert any("cancelled after 1 nodes" in r.getMessage() for r in caplog.records)


class TestPause:
    def test_paused_run_makes_no_progress_until_resumed(self, triangle):
        control = SearchControl()
        control.pause()
        seen = []

        class Seen(SearchObserver):
            def on_explore_start(self, node_id):
                seen.append(node_id)

        result = {}
        worker = threading.Thread(
            target=lambda: result.setdefault("out", run_search(triangle, "ucs", "A", "C",
                                                               observer=Seen(), control=control)))
        worker.start()
        time.sleep(0.3)
        assert control.is_paused
        assert seen == []
        control.resume()
        worker.join(timeout=5)
        assert not worker.is_alive()
        assert result["out"].success
        assert seen == ["A", "B", "C"]

    def test_cancel_releases_a_paused_run(self, triangle):
        control = SearchControl()
        control.pause()
        result = {}
        worker = threading.Thread(
            target=lambda: result.setdefault("out", run_search(triangle, "bfs", "A", "C", control=control)))
        worker.start()
        time.sleep(0.2)
        control.cancel()
        worker.join(timeout=5)
        assert not worker.is_alive()
        assert result["out"].status is SearchStatus.CANCELLED
        assert result["out"].nodes_explored <= 1


class TestPacing:
    def test_delay_slows_the_run(self, triangle):
        out = run_search(triangle, "ucs", "A", "C", control=SearchControl(delay_ms=20))
        # five paced yield points plus three half-delay path steps
        assert out.execution_time_ms >= 100

    def test_unpaced_by_default(self, triangle):
        assert SearchControl().delay_ms == 0


class TestObserverIsolation:
    def test_observer_errors_do_not_change_the_result(self, triangle, caplog):
        plain = run_search(triangle, "astar", "A", "C")
        with caplog.at_level(logging.ERROR, logger="city_search_lab.core.control"):
            noisy = run_search(triangle, "astar", "A", "C", observer=Exploding())
        assert noisy.path == plain.path
        assert noisy.cost == plain.cost
        assert noisy.nodes_explored == plain.nodes_explored
        assert any("observer" in r.getMessage() for r in caplog.records)

    def test_partial_observer(self, triangle):
        class OnlyPath(SearchObserver):
            def __init__(self):
                self.steps = []

            def on_path_step(self, node_id, index):
                self.steps.append(node_id)

        obs = OnlyPath()
        run_search(triangle, "bfs", "A", "C", observer=obs)
        assert obs.steps == ["A", "C"]


class TestSearchSession:
    def test_runs_in_background(self, bundled):
        with SearchSession(bundled) as session:
            future = session.start("astar", "Colombo", "Jaffna")
            out = session.result(timeout=10)
        assert future.done()
        assert out.success
        assert out.path[-1] == "Jaffna"

    def test_bad_request_fails_on_the_callers_thread(self, bundled):
        with SearchSession(bundled) as session:
            with pytest.raises(ConfigurationError):
                session.start("bfs", "Colombo", "Atlantis")
            assert not session.running

    def test_one_search_at_a_time_and_cancel(self, bundled):
        with SearchSession(bundled, delay_ms=50) as session:
            session.start("bfs", "Colombo", "Jaffna")
            assert session.running
            with pytest.raises(ConfigurationError, match="already running"):
                session.start("dfs", "Colombo", "Jaffna")
            session.pause()
            session.resume()
            session.cancel()
            out = session.result(timeout=10)
        assert out.status is SearchStatus.CANCELLED

    def test_goal_generator_is_consumed_once(self, bundled):
        with SearchSession(bundled) as session:
            session.start("bfs", "Colombo", (g for g in ["Meegoda", "Galle"]))
            out = session.result(timeout=10)
        assert out.success
        assert out.goals == ("Meegoda", "Galle")

    def test_depth_options_are_passed_through(self, bundled):
        with SearchSession(bundled) as session:
            session.start("iddfs", "Colombo", "Jaffna", max_iterative_depth=6)
            assert session.result(timeout=10).success
            session.start("dls", "Colombo", "Kandy", depth_limit=1)
            out = session.result(timeout=10)
        assert out.failure_reason == "Depth limit reached"

    def test_misspelled_option_is_rejected(self, bundled):
        with SearchSession(bundled) as session:
            with pytest.raises(TypeError):
                session.start("dls", "Colombo", "Kandy", depthLimit=3)
            assert not session.running

    def test_result_before_start(self, bundled):
        with SearchSession(bundled) as session:
            with pytest.raises(RuntimeError):
                session.result()
