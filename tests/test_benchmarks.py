"""Tests for the benchmark runner and the plotting helpers."""

import json

import matplotlib.pyplot as plt

from city_search_lab.algorithms.catalog import Strategy
from city_search_lab.benchmarks import plot_results, run_all
from city_search_lab.core import config
from city_search_lab.plots.plotting import bar_compare, draw_route
from city_search_lab.runner import run_search


class TestRunAll:
    def test_one_row_per_strategy(self, triangle, capsys):
        rows = run_all.run_all(triangle, "A", ["C"])
        assert len(rows) == len(Strategy)
        assert all(r["success"] for r in rows)
        by_name = {r["algo"]: r for r in rows}
        assert by_name["Uniform-Cost Search"]["cost"] == 15
        assert by_name["Breadth-First Search"]["cost"] == 20
        assert "Running A* Search" in capsys.readouterr().out

    def test_rejected_strategy_becomes_a_row(self, triangle):
        rows = run_all.run_all(triangle, "A", ["B", "C"], [Strategy.BFS, Strategy.BIDIRECTIONAL])
        assert rows[0]["success"]
        assert not rows[1]["success"]
        assert "exactly one goal" in rows[1]["reason"]

    def test_depth_bounds_come_from_config(self, bundled, monkeypatch):
        assert run_all.DEFAULT_DEPTH_LIMIT == config.DEFAULT_DEPTH_LIMIT
        assert run_all.MAX_ITERATIVE_DEPTH == config.MAX_ITERATIVE_DEPTH
        monkeypatch.setattr(run_all, "MAX_ITERATIVE_DEPTH", 1)
        # Kandy is two roads from Colombo
        (row,) = run_all.run_all(bundled, "Colombo", ["Kandy"], [Strategy.IDDFS])
        assert not row["success"]
        assert row["reason"] == "No path found within maximum depth of 1"

    def test_results_table(self, triangle):
        df = run_all.results_table(run_all.run_all(triangle, "A", ["C"]))
        assert list(df.columns) == run_all.COLUMNS
        assert len(df) == len(Strategy)
        assert df["nodes_explored"].min() >= 1

    def test_main_writes_json_and_plots(self, tmp_path, capsys):
        results = tmp_path / "results.json"
        run_all.main(["--goal", "Kandy", "--out", str(results)])
        doc = json.loads(results.read_text())
        assert doc["goals"] == ["Kandy"]
        assert len(doc["results"]) == len(Strategy)

        plot_results.main(["--results", str(results), "--out-dir", str(tmp_path / "plots")])
        for _, _, _, filename in plot_results.CHARTS:
            assert (tmp_path / "plots" / filename).stat().st_size > 0
        table = (tmp_path / "plots" / "results.md").read_text()
        assert table.startswith("| Algorithm |")


class TestPlotting:
    def test_bar_compare(self, triangle):
        outcomes = [run_search(triangle, s, "A", "C") for s in ("bfs", "ucs", "astar")]
        fig = bar_compare(outcomes, title="triangle")
        assert len(fig.axes) == 4
        plt.close(fig)

    def test_draw_route(self, bundled):
        out = run_search(bundled, "astar", "Colombo", "Kandy")
        ax = draw_route(bundled, out, title="A*")
        assert ax.get_title() == "A*"
        # one line per road plus the route
        assert len(ax.lines) == len(bundled.roads) + 1
        plt.close(ax.figure)

    def test_draw_map_without_route(self, triangle):
        ax = draw_route(triangle)
        assert len(ax.lines) == len(triangle.roads)
        plt.close(ax.figure)
