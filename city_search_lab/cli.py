# city_search_lab/cli.py
"""
Run one search on the city map from the terminal and watch it explore.

  python -m city_search_lab.cli --algo astar --start Colombo --goal Meegoda
  python -m city_search_lab.cli --algo bfs --goal Meegoda --goal Dambulla --delay-ms 0
  python -m city_search_lab.cli --list

Ctrl+C cancels the running search (the partial counters are still reported).
"""
from __future__ import annotations

import argparse
import logging
import sys

from .algorithms.catalog import Strategy, format_properties
from .algorithms.search_tree import TreeNode, build_search_tree
from .core.config import ANIMATION_DELAY_MS, DEFAULT_GOAL, DEFAULT_START, MAX_ITERATIVE_DEPTH
from .core.control import SearchObserver
from .core.errors import ConfigurationError, GraphDataError
from .core.metrics import format_outcome
from .problems.sri_lanka import sri_lanka_graph
from .runner import SearchSession, prepare_search


class ConsoleObserver(SearchObserver):
    def __init__(self, out=None):
        self.out = out

    def on_explore_start(self, node_id):
        print(f"  exploring  {node_id}", file=self.out, flush=True)

    def on_path_step(self, node_id, index):
        print(f"  path[{index}]    {node_id}", file=self.out, flush=True)

    def on_iteration_boundary(self, depth):
        print(f"-- depth limit {depth} --", file=self.out, flush=True)


def print_tree(node: TreeNode, indent: str = "", out=None) -> None:
    mark = " (goal)" if node.is_goal else ""
    print(f"{indent}{node.name}{mark}", file=out)
    for child in node.children:
        print_tree(child, indent + "  ", out)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Classic graph search on a city road map.")
    ap.add_argument("--algo", default="bfs", choices=[s.value for s in Strategy])
    ap.add_argument("--start", default=DEFAULT_START)
    ap.add_argument("--goal", action="append", help="goal city (repeat for several goals)")
    ap.add_argument("--depth-limit", type=int, default=None, help="DLS depth bound")
    ap.add_argument("--max-depth", type=int, default=None,
                    help=f"IDDFS maximum depth (default {MAX_ITERATIVE_DEPTH})")
    ap.add_argument("--delay-ms", type=float, default=ANIMATION_DELAY_MS, help="pause between steps")
    ap.add_argument("--data", default=None, help="graph JSON (defaults to the bundled map)")
    ap.add_argument("--tree", type=int, metavar="DEPTH", default=None,
                    help="print the search tree preview down to DEPTH instead of searching")
    ap.add_argument("--plot", default=None, metavar="PNG", help="save a map of the route found")
    ap.add_argument("--list", action="store_true", help="list the cities and exit")
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        graph = sri_lanka_graph(args.data)
    except GraphDataError as e:
        print(f"Failed to load city data: {e}", file=sys.stderr)
        return 2

    if args.list:
        print("Capitals:         " + ", ".join(c.id for c in graph.capitals()))
        print("Economic centres: " + ", ".join(c.id for c in graph.economic_centers()))
        return 0

    goals = args.goal or [DEFAULT_GOAL]

    if args.tree is not None:
        try:
            _, problem, _, _ = prepare_search(graph, args.algo, args.start, goals)
        except ConfigurationError as e:
            print(f"Invalid search: {e}", file=sys.stderr)
            return 2
        print_tree(build_search_tree(problem, args.algo, args.tree, goal_tail=2))
        return 0

    with SearchSession(graph, delay_ms=args.delay_ms) as session:
        try:
            session.start(args.algo, args.start, goals, observer=ConsoleObserver(),
                          depth_limit=args.depth_limit, max_iterative_depth=args.max_depth)
        except ConfigurationError as e:
            print(f"Invalid search: {e}", file=sys.stderr)
            return 2
        try:
            outcome = session.result()
        except KeyboardInterrupt:
            session.cancel()
            outcome = session.result()

    print()
    print(format_outcome(outcome))
    print()
    print(format_properties(args.algo))

    if args.plot and outcome.success:
        # matplotlib only when a picture is asked for
        import matplotlib
        matplotlib.use("Agg")
        from .plots.plotting import draw_route
        ax = draw_route(graph, outcome, title=f"{outcome.algorithm}: {args.start} → {outcome.reached_goal}")
        ax.figure.savefig(args.plot, dpi=160)
        print(f"Wrote {args.plot}")
    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(main())
