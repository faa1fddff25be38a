"""Tests for geometry primitives."""

from cable_router.layout.routing.common import (
    dominant_axis_corner,
    edge_midpoints,
    is_orthogonal,
    node_bounds,
    segment_intersects_node,
)
from cable_router.parser.model import Node, NodeEdge


def _node(x=0.0, y=0.0, w=100.0, h=70.0):
    return Node(id="n", name="N", x=x, y=y, width=w, height=h)


def test_node_bounds():
    b = node_bounds(_node(250, 100))
    assert (b.left, b.right, b.top, b.bottom) == (200, 300, 65, 135)


def test_node_bounds_padding():
    b = node_bounds(_node(), padding=5)
    assert (b.left, b.right, b.top, b.bottom) == (-55, 55, -40, 40)


def test_expanded_matches_padding():
    assert node_bounds(_node()).expanded(20) == node_bounds(_node(), 20)


def test_edge_midpoints():
    mids = edge_midpoints(_node(250, 100))
    assert mids[NodeEdge.TOP] == (250, 65)
    assert mids[NodeEdge.RIGHT] == (300, 100)
    assert mids[NodeEdge.BOTTOM] == (250, 135)
    assert mids[NodeEdge.LEFT] == (200, 100)


def test_is_orthogonal():
    assert is_orthogonal((0, 0), (10, 0))
    assert is_orthogonal((0, 0), (0, 10))
    assert is_orthogonal((3, 3), (3, 3))
    assert not is_orthogonal((0, 0), (1, 1))


def test_dominant_axis_corner_prefers_horizontal_on_tie():
    assert dominant_axis_corner((0, 0), (5, 5)) == (5, 0)
    assert dominant_axis_corner((0, 0), (10, 3)) == (10, 0)
    assert dominant_axis_corner((0, 0), (3, 10)) == (0, 10)


class TestSegmentIntersection:
    def test_horizontal_hit_on_padded_border(self):
        assert segment_intersects_node((-100, 40), (100, 40), _node(), padding=5)

    def test_horizontal_miss_beyond_padding(self):
        assert not segment_intersects_node((-100, 41), (100, 41), _node(), padding=5)

    def test_horizontal_miss_short_of_node(self):
        assert not segment_intersects_node((-200, 0), (-56, 0), _node(), padding=5)

    def test_vertical_hit(self):
        assert segment_intersects_node((55, -100), (55, 100), _node(), padding=5)

    def test_vertical_miss(self):
        assert not segment_intersects_node((56, -100), (56, 100), _node(), padding=5)

    def test_reversed_direction(self):
        assert segment_intersects_node((100, 0), (-100, 0), _node())

    def test_diagonal_never_intersects(self):
        assert not segment_intersects_node((-100, -100), (100, 100), _node())

    def test_zero_size_node(self):
        node = _node(w=0, h=0)
        assert segment_intersects_node((-10, 0), (10, 0), node)
        assert not segment_intersects_node((-10, 1), (10, 1), node)
