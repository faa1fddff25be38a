"""Shared geometry helpers for cable routing."""

from __future__ import annotations

from dataclasses import dataclass

from cable_router.parser.model import Node, NodeEdge, Point


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle in canvas coordinates (Y grows downward)."""

    left: float
    right: float
    top: float
    bottom: float

    def expanded(self, padding: float) -> Bounds:
        return Bounds(
            left=self.left - padding,
            right=self.right + padding,
            top=self.top - padding,
            bottom=self.bottom + padding,
        )


def node_bounds(node: Node, padding: float = 0.0) -> Bounds:
    """Return the bounding rectangle of a node, optionally padded."""
    half_w = node.width / 2
    half_h = node.height / 2
    return Bounds(
        left=node.x - half_w - padding,
        right=node.x + half_w + padding,
        top=node.y - half_h - padding,
        bottom=node.y + half_h + padding,
    )


def edge_midpoints(node: Node) -> dict[NodeEdge, Point]:
    """Return the midpoint of each of the four node edges."""
    half_w = node.width / 2
    half_h = node.height / 2
    return {
        NodeEdge.TOP: (node.x, node.y - half_h),
        NodeEdge.RIGHT: (node.x + half_w, node.y),
        NodeEdge.BOTTOM: (node.x, node.y + half_h),
        NodeEdge.LEFT: (node.x - half_w, node.y),
    }


def is_orthogonal(a: Point, b: Point) -> bool:
    """True if the segment a-b is horizontal, vertical or zero-length."""
    return a[0] == b[0] or a[1] == b[1]


def is_zero_length(a: Point, b: Point) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def dominant_axis_corner(a: Point, b: Point) -> Point:
    """Corner that turns the diagonal a-b into two orthogonal legs.

    Moves horizontally first when the horizontal delta is at least the
    vertical one, vertically first otherwise.
    """
    if abs(b[0] - a[0]) >= abs(b[1] - a[1]):
        return (b[0], a[1])
    return (a[0], b[1])


def segment_intersects_node(
    start: Point,
    end: Point,
    node: Node,
    padding: float = 0.0,
) -> bool:
    """Check whether an orthogonal segment touches a (padded) node rectangle.

    Diagonal segments never intersect.
    """
    if not is_orthogonal(start, end):
        return False

    bounds = node_bounds(node, padding)

    if start[1] == end[1]:
        y = start[1]
        min_x = min(start[0], end[0])
        max_x = max(start[0], end[0])
        return (
            bounds.top <= y <= bounds.bottom
            and max_x >= bounds.left
            and min_x <= bounds.right
        )

    x = start[0]
    min_y = min(start[1], end[1])
    max_y = max(start[1], end[1])
    return (
        bounds.left <= x <= bounds.right
        and max_y >= bounds.top
        and min_y <= bounds.bottom
    )
