# city_search_lab/plots/plotting.py
# Bar plots comparing search outcomes, and a map of the cities with the found route drawn on it.
from __future__ import annotations
from typing import Optional, Sequence
import matplotlib.pyplot as plt
from ..core.graph import CityCategory, Graph
from ..core.metrics import SearchOutcome

def bar_compare(outcomes: Sequence[SearchOutcome], title="Search Comparison"):
    names = [o.algorithm for o in outcomes]
    explored = [o.nodes_explored for o in outcomes]
    edges = [o.edges_processed for o in outcomes]
    costs = [o.cost if o.cost is not None else 0 for o in outcomes]
    times = [o.execution_time_ms for o in outcomes]

    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    axs = axs.ravel()
    axs[0].bar(names, explored); axs[0].set_title("Nodes Explored"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, costs); axs[1].set_title("Path Cost (km)"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, edges); axs[2].set_title("Edges Processed"); axs[2].tick_params(axis='x', rotation=45)
    axs[3].bar(names, times); axs[3].set_title("Time (ms)"); axs[3].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig

_STYLE = {
    CityCategory.CAPITAL: dict(color="tab:red", marker="s", label="Capital"),
    CityCategory.ECONOMIC_CENTER: dict(color="tab:green", marker="o", label="Economic centre"),
}

def draw_route(graph: Graph, outcome: Optional[SearchOutcome] = None, ax=None, title: str = ""):
    """Cities at (lon, lat), roads as grey lines labelled in km, the outcome's path in bold."""
    if ax is None:
        _, ax = plt.subplots(figsize=(7, 9))

    for road in graph.roads:
        a, b = graph.city(road.source), graph.city(road.target)
        ax.plot([a.lon, b.lon], [a.lat, b.lat], color="0.75", linewidth=1, zorder=1)
        ax.text((a.lon + b.lon) / 2, (a.lat + b.lat) / 2, f"{road.distance:g}", fontsize=6, color="0.4")

    for category, style in _STYLE.items():
        cities = [c for c in graph.cities if c.category is category]
        if cities:
            ax.scatter([c.lon for c in cities], [c.lat for c in cities], zorder=3, **style)
    for c in graph.cities:
        ax.annotate(c.id, (c.lon, c.lat), xytext=(4, 4), textcoords="offset points", fontsize=7)

    if outcome is not None and outcome.path:
        pts = [graph.city(cid) for cid in outcome.path]
        ax.plot([p.lon for p in pts], [p.lat for p in pts], color="tab:blue", linewidth=3, zorder=2,
                label=f"{outcome.algorithm} route ({outcome.cost:g} km)")
        ax.scatter([pts[0].lon], [pts[0].lat], s=120, facecolors="none", edgecolors="black", zorder=4)
        ax.scatter([pts[-1].lon], [pts[-1].lat], s=120, marker="*", color="gold", edgecolors="black", zorder=4)

    ax.set_xlabel("longitude")
    ax.set_ylabel("latitude")
    ax.set_aspect("equal", adjustable="datalim")
    ax.legend(loc="lower right", fontsize=7)
    if title:
        ax.set_title(title)
    return ax
