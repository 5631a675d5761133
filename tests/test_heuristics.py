"""Tests for the straight-line distance heuristic."""

import math

import pytest

from city_search_lab.core.heuristics import (
    haversine_km,
    nearest_goal_table,
    straight_line_distance,
)
from city_search_lab.core.problem import RouteProblem


class TestHaversine:
    def test_one_degree_along_a_meridian(self):
        assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(6371.0 * math.pi / 180, rel=1e-9)

    def test_same_point_is_zero(self):
        assert haversine_km(6.9271, 79.8612, 6.9271, 79.8612) == 0.0

    def test_symmetric(self):
        a = haversine_km(6.9271, 79.8612, 9.6615, 80.0255)
        b = haversine_km(9.6615, 80.0255, 6.9271, 79.8612)
        assert a == pytest.approx(b)

    def test_colombo_to_kandy(self, bundled):
        # roughly 94 km as the crow flies
        assert straight_line_distance(bundled, "Colombo", "Kandy") == pytest.approx(94.3, abs=1.0)

    def test_unknown_city_is_infinite(self, bundled):
        assert straight_line_distance(bundled, "Colombo", "Atlantis") == math.inf


class TestNearestGoalTable:
    def test_matches_scalar_minimum(self, bundled):
        goals = ["Jaffna", "Galle"]
        table = nearest_goal_table(bundled, goals)
        assert set(table) == {c.id for c in bundled.cities}
        for cid, h in table.items():
            expected = min(straight_line_distance(bundled, cid, g) for g in goals)
            assert h == pytest.approx(expected, rel=1e-9, abs=1e-9)

    def test_zero_on_every_goal(self, bundled):
        problem = RouteProblem(bundled, "Colombo", ["Jaffna", "Galle"])
        assert problem.heuristic("Jaffna") == pytest.approx(0.0, abs=1e-9)
        assert problem.heuristic("Galle") == pytest.approx(0.0, abs=1e-9)
        assert problem.heuristic("Colombo") > 0

    def test_never_overestimates_true_road_distance(self, bundled):
        from conftest import all_pairs

        dist = all_pairs(bundled, costs=True)
        problem = RouteProblem(bundled, "Colombo", "Jaffna")
        for city in bundled.cities:
            assert problem.heuristic(city.id) <= dist[city.id, "Jaffna"] + 1e-9

    def test_no_known_goal_gives_infinity(self, triangle):
        table = nearest_goal_table(triangle, ["Z"])
        assert all(math.isinf(v) for v in table.values())
