"""Connection-point selection: which node edge a cable uses, and where."""

from __future__ import annotations

from cable_router.layout.constants import (
    ALIGNMENT_THRESHOLD,
    EDGE_SPREAD_MAX,
    EDGE_SPREAD_RATIO,
)
from cable_router.layout.routing.common import edge_midpoints
from cable_router.parser.model import Node, NodeEdge, Point


def determine_optimal_edges(source: Node, target: Node) -> tuple[NodeEdge, NodeEdge]:
    """Pick the source and target edges for a cable between two nodes.

    Nodes nearly aligned on one axis face each other across the other
    axis. Otherwise the axis with the larger centre separation wins;
    ties go to top/bottom.
    """
    dx = target.x - source.x
    dy = target.y - source.y
    abs_dx = abs(dx)
    abs_dy = abs(dy)

    horizontally_aligned = abs_dy < ALIGNMENT_THRESHOLD
    vertically_aligned = abs_dx < ALIGNMENT_THRESHOLD

    if horizontally_aligned and not vertically_aligned:
        use_sides = True
    elif vertically_aligned and not horizontally_aligned:
        use_sides = False
    else:
        use_sides = abs_dx > abs_dy

    if use_sides:
        if dx > 0:
            return NodeEdge.RIGHT, NodeEdge.LEFT
        return NodeEdge.LEFT, NodeEdge.RIGHT
    if dy > 0:
        return NodeEdge.BOTTOM, NodeEdge.TOP
    return NodeEdge.TOP, NodeEdge.BOTTOM


def calculate_connection_point(
    node: Node,
    edge: NodeEdge,
    index: int,
    total: int,
    force_center: bool = False,
) -> Point:
    """Return the exact border point for the index-th of total cables on an edge.

    Cables sharing an edge are spread evenly around its midpoint, within
    min(40% of the edge length, 30) on each side. The coordinate across
    the edge always stays on the border.
    """
    x, y = edge_midpoints(node)[edge]
    if force_center or total <= 1:
        return (x, y)

    edge_length = node.width if edge.is_horizontal else node.height
    max_offset = min(edge_length * EDGE_SPREAD_RATIO, EDGE_SPREAD_MAX)
    spacing = (2 * max_offset) / (total + 1)
    offset = (index + 1) * spacing - max_offset

    if edge.is_horizontal:
        return (x + offset, y)
    return (x, y + offset)
