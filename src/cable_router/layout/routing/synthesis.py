"""Initial route synthesis: perpendicular stubs joined by one corner."""

from __future__ import annotations

from cable_router.layout.constants import EXIT_DISTANCE
from cable_router.parser.model import NodeEdge, Point


def exit_point(point: Point, edge: NodeEdge, distance: float = EXIT_DISTANCE) -> Point:
    """Step straight out of a node edge by ``distance``."""
    x, y = point
    if edge == NodeEdge.TOP:
        return (x, y - distance)
    if edge == NodeEdge.RIGHT:
        return (x + distance, y)
    if edge == NodeEdge.BOTTOM:
        return (x, y + distance)
    return (x - distance, y)


def generate_orthogonal_route(
    source_point: Point,
    target_point: Point,
    source_edge: NodeEdge,
    target_edge: NodeEdge,
) -> list[Point]:
    """Build a minimal-bend route between two border points.

    Returns [source, exit, corner, approach, target]. The corner keeps
    the exit's coordinate along the source stub axis and the approach's
    coordinate along the other axis, so exit-corner-approach is always
    orthogonal.
    """
    source_exit = exit_point(source_point, source_edge)
    target_approach = exit_point(target_point, target_edge)

    # Top/bottom edges exit vertically
    source_vertical = source_edge.is_horizontal
    target_vertical = target_edge.is_horizontal

    if source_vertical == target_vertical:
        # Parallel stubs (U or S shape)
        if source_vertical:
            corner = (target_approach[0], source_exit[1])
        else:
            corner = (source_exit[0], target_approach[1])
    else:
        # Perpendicular stubs (L shape)
        corner = (
            target_approach[0] if source_vertical else source_exit[0],
            source_exit[1] if source_vertical else target_approach[1],
        )

    return [source_point, source_exit, corner, target_approach, target_point]
