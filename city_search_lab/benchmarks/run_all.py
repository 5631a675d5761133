# city_search_lab/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Dict, List, Sequence

import pandas as pd

from ..algorithms.catalog import Strategy, describe
from ..core.config import DEFAULT_DEPTH_LIMIT, DEFAULT_GOAL, DEFAULT_START, MAX_ITERATIVE_DEPTH
from ..core.errors import ConfigurationError
from ..core.graph import Graph
from ..problems.sri_lanka import sri_lanka_graph
from ..runner import run_search


COLUMNS = ["algo", "success", "cost", "path_length", "nodes_explored",
           "nodes_discovered", "edges_processed", "time_ms", "reason"]


def run_all(graph: Graph, start: str, goals: Sequence[str],
            strategies: Sequence[Strategy] = tuple(Strategy)) -> List[Dict]:
    """One unpaced run per strategy; a rejected request becomes a row with its error."""
    rows = []
    for strategy in strategies:
        name = describe(strategy).name
        print(f"→ Running {name} ...")
        try:
            r = run_search(graph, strategy, start, list(goals),
                           depth_limit=DEFAULT_DEPTH_LIMIT, max_iterative_depth=MAX_ITERATIVE_DEPTH)
        except ConfigurationError as e:
            print(f"  {name}: REJECTED {e}")
            rows.append({"algo": name, "success": False, "reason": str(e)})
            continue
        print(
            f"  {name}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"cost={r.cost} "
            f"explored={r.nodes_explored}, "
            f"time={r.execution_time_ms}ms"
        )
        rows.append({
            "algo": name,
            "success": r.success,
            "cost": r.cost,
            "path": list(r.path),
            "path_length": r.path_length,
            "nodes_explored": r.nodes_explored,
            "nodes_discovered": r.nodes_discovered,
            "edges_processed": r.edges_processed,
            "time_ms": r.execution_time_ms,
            "reason": r.failure_reason,
        })
    return rows


def results_table(rows: List[Dict]) -> pd.DataFrame:
    return pd.DataFrame(rows).reindex(columns=COLUMNS)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Run every search strategy on the bundled city map.")
    ap.add_argument("--start", default=DEFAULT_START)
    ap.add_argument("--goal", action="append", help="goal city (repeat for several goals)")
    ap.add_argument("--data", default=None, help="graph JSON (defaults to the bundled map)")
    ap.add_argument("--out", default="results.json", help="where to write the JSON results")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    graph = sri_lanka_graph(args.data)
    goals = args.goal or [DEFAULT_GOAL]
    rows = run_all(graph, args.start, goals)

    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(results_table(rows).to_string(index=False))

    out = {"start": args.start, "goals": goals, "results": rows, "ts": time.time()}
    out_path = Path(args.out)
    out_path.write_text(json.dumps(out, indent=2))
    print(f"Wrote {out_path}")


if __name__ == "__main__":
    main()
