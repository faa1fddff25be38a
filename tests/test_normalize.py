"""Tests for route clean-up helpers."""

from cable_router.layout.routing.normalize import (
    drop_zero_length,
    ensure_orthogonal_route,
    preserve_connection_points,
    simplify_route,
)


class TestEnsureOrthogonal:
    def test_horizontal_first_when_wider(self):
        assert ensure_orthogonal_route([(0, 0), (10, 5)]) == [(0, 0), (10, 0), (10, 5)]

    def test_vertical_first_when_taller(self):
        assert ensure_orthogonal_route([(0, 0), (3, 10)]) == [(0, 0), (0, 10), (3, 10)]

    def test_tie_goes_horizontal(self):
        assert ensure_orthogonal_route([(0, 0), (5, 5)]) == [(0, 0), (5, 0), (5, 5)]

    def test_orthogonal_route_unchanged(self):
        route = [(0, 0), (0, 10), (20, 10)]
        assert ensure_orthogonal_route(route) == route

    def test_existing_points_kept(self):
        route = [(0, 0), (10, 10), (30, 0)]
        result = ensure_orthogonal_route(route)
        for p in route:
            assert p in result

    def test_short_routes(self):
        assert ensure_orthogonal_route([]) == []
        assert ensure_orthogonal_route([(1, 1)]) == [(1, 1)]


def test_drop_zero_length():
    assert drop_zero_length([(0, 0), (0, 0), (5, 0)]) == [(0, 0), (5, 0)]
    assert drop_zero_length([(0, 0), (5, 0), (5, 0)]) == [(0, 0), (5, 0)]
    assert drop_zero_length([(0, 0), (5, 0), (5, 0), (5, 7)]) == [(0, 0), (5, 0), (5, 7)]


class TestPreserveConnectionPoints:
    def test_pins_both_ends(self):
        route = [(1, 1), (10, 1), (10, 20)]
        result = preserve_connection_points(route, (0, 0), (10, 20))
        assert result == [(0, 0), (10, 0), (10, 20)]

    def test_moves_neighbour_of_pinned_target(self):
        route = [(0, 0), (0, 50), (99, 50), (100, 100)]
        result = preserve_connection_points(route, (0, 0), (100, 100))
        assert result[0] == (0, 0)
        assert result[-1] == (100, 100)
        assert (100, 50) in result

    def test_degenerate_route(self):
        result = preserve_connection_points([(3, 3)], (0, 0), (10, 5))
        assert result == [(0, 0), (10, 0), (10, 5)]

    def test_output_is_orthogonal(self):
        route = [(2, 3), (2, 40), (77, 40), (80, 90)]
        result = preserve_connection_points(route, (0, 0), (81, 95))
        assert result[0] == (0, 0)
        assert result[-1] == (81, 95)
        for a, b in zip(result, result[1:]):
            assert a[0] == b[0] or a[1] == b[1]
            assert a != b


class TestSimplify:
    def test_removes_collinear_points(self):
        route = [(0, 0), (5, 0), (10, 0), (10, 10)]
        assert simplify_route(route) == [(0, 0), (10, 0), (10, 10)]

    def test_keeps_corners(self):
        route = [(0, 0), (10, 0), (10, 10), (20, 10)]
        assert simplify_route(route) == route

    def test_folds_turn_back(self):
        route = [(0, 0), (0, 10), (0, 5), (5, 5)]
        assert simplify_route(route) == [(0, 0), (0, 5), (5, 5)]

    def test_keep_reversals(self):
        route = [(0, 0), (0, 10), (0, 5), (5, 5)]
        assert simplify_route(route, keep_reversals=True) == route

    def test_keep_reversals_still_drops_straight_points(self):
        route = [(0, 0), (0, 5), (0, 10), (5, 10)]
        assert simplify_route(route, keep_reversals=True) == [(0, 0), (0, 10), (5, 10)]

    def test_never_creates_diagonal(self):
        route = [(0, 0), (0, 10), (5, 10)]
        assert simplify_route(route) == route

    def test_two_points(self):
        assert simplify_route([(0, 0), (5, 0)]) == [(0, 0), (5, 0)]
