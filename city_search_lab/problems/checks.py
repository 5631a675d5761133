from __future__ import annotations

from ..core.graph import Graph
from ..core.heuristics import straight_line_distance


def sanity_check_graph(graph: Graph, tolerance_km: float = 1e-6) -> str:
    """
    Walks every road and checks it is not shorter than the great circle between its
    ends (straight-line heuristic stays admissible), and that every city has a road.
    """
    for road in graph.roads:
        sld = straight_line_distance(graph, road.source, road.target)
        if road.distance + tolerance_km < sld:
            raise AssertionError(
                f"road {road.source} - {road.target} is {road.distance} km but the cities are "
                f"{sld:.1f} km apart; the straight-line heuristic would overestimate"
            )
    isolated = sorted(c.id for c in graph.cities if not graph.neighbors(c.id))
    if isolated:
        raise AssertionError(f"cities without roads: {', '.join(isolated)}")
    return f"OK: {len(graph)} cities, {len(graph.roads)} roads; heuristic admissible on every road."
