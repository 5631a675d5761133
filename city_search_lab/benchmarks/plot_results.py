# city_search_lab/benchmarks/plot_results.py
# Bar charts and a markdown summary from the results.json written by run_all.
from __future__ import annotations
import argparse
import json
from pathlib import Path
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

CHARTS = [
    ("nodes_explored", "Nodes Explored (lower is better)", "nodes", "nodes_explored.png"),
    ("edges_processed", "Edges Processed (lower is better)", "edges", "edges_processed.png"),
    ("cost", "Path Cost (lower is better)", "km", "cost.png"),
]

def load_results(path: Path) -> pd.DataFrame:
    """Successful runs only; failed or rejected strategies have nothing to chart."""
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m city_search_lab.benchmarks.run_all")
    df = pd.DataFrame(json.loads(path.read_text()).get("results", []))
    if df.empty or "success" not in df:
        raise SystemExit("No successful rows to plot.")
    df = df[df["success"].fillna(False).astype(bool)]
    if df.empty:
        raise SystemExit("No successful rows to plot.")
    return df.reset_index(drop=True)

def chart(df: pd.DataFrame, metric: str, title: str, ylabel: str):
    ordered = df.sort_values(metric, na_position="last", kind="stable")
    values = ordered[metric].fillna(0).tolist()
    fig, ax = plt.subplots(figsize=(6, 4))
    positions = range(len(ordered))
    ax.bar(positions, values)
    ax.set_xticks(list(positions))
    ax.set_xticklabels(ordered["algo"], rotation=20, ha="right")
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    pad = 0.01 * (max(values) or 1)
    for pos, value in zip(positions, values):
        ax.text(pos, value + pad, f"{value:g}", ha="center", va="bottom", fontsize=8)
    fig.tight_layout()
    return fig

def markdown_table(df: pd.DataFrame) -> str:
    out = [
        "| Algorithm | Cost (km) | Path | Explored | Discovered | Edges | Time (ms) |",
        "|---|---:|---|---:|---:|---:|---:|",
    ]
    for row in df.itertuples(index=False):
        route = " → ".join(row.path) if isinstance(row.path, list) else ""
        out.append(f"| {row.algo} | {row.cost:g} | {route} | {row.nodes_explored} | "
                   f"{row.nodes_discovered} | {row.edges_processed} | {row.time_ms} |")
    return "\n".join(out)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot benchmark results written by run_all.")
    ap.add_argument("--results", default="results.json")
    ap.add_argument("--out-dir", default=".")
    args = ap.parse_args(argv)
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    df = load_results(Path(args.results))

    md_path = out_dir / "results.md"
    md_path.write_text(markdown_table(df), encoding="utf-8")
    print(f"Wrote {md_path}")

    for metric, title, ylabel, filename in CHARTS:
        fig = chart(df, metric, title, ylabel)
        fig.savefig(out_dir / filename, dpi=160)
        plt.close(fig)
        print(f"Wrote {out_dir / filename}")

if __name__ == "__main__":
    main()
