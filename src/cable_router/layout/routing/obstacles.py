"""Obstacle avoidance: rectangular detours around intervening nodes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cable_router.layout.constants import (
    DETOUR_CLEARANCE,
    DETOUR_PADDING,
    OBSTACLE_PADDING,
)
from cable_router.layout.routing.common import (
    dominant_axis_corner,
    is_orthogonal,
    is_zero_length,
    node_bounds,
    segment_intersects_node,
)
from cable_router.layout.routing.normalize import (
    ensure_orthogonal_route,
    simplify_route,
)
from cable_router.parser.model import Node, Point

logger = logging.getLogger(__name__)


def create_simple_detour(start: Point, end: Point, node: Node) -> list[Point]:
    """Replace the segment start-end by a bypass around ``node``.

    Horizontal segments pass above the node when they sit at or above its
    centre, below otherwise; vertical segments pass left or right by the
    same rule. The bypass runs DETOUR_CLEARANCE beyond the node bounds
    padded by DETOUR_PADDING.
    """
    if not is_orthogonal(start, end):
        end = dominant_axis_corner(start, end)

    box = node_bounds(node).expanded(DETOUR_PADDING)

    if start[1] == end[1]:
        go_above = start[1] <= node.y
        detour_y = box.top - DETOUR_CLEARANCE if go_above else box.bottom + DETOUR_CLEARANCE
        return [start, (start[0], detour_y), (end[0], detour_y), end]

    go_left = start[0] <= node.x
    detour_x = box.left - DETOUR_CLEARANCE if go_left else box.right + DETOUR_CLEARANCE
    return [start, (detour_x, start[1]), (detour_x, end[1]), end]


def avoid_obstacles(
    route: list[Point],
    nodes: Sequence[Node],
    source_id: str,
    target_id: str,
) -> list[Point]:
    """Detour around every node a route segment crosses.

    The route's own endpoint nodes are not obstacles. Each segment is
    tested against the remaining nodes in input order and the first hit
    wins. Detours are not re-checked against other nodes.
    """
    if len(route) < 2:
        return list(route)

    obstacles = [n for n in nodes if n.id not in (source_id, target_id)]
    route = ensure_orthogonal_route(route)
    if not obstacles:
        return route

    result = [route[0]]
    for start, end in zip(route, route[1:]):
        if is_zero_length(start, end):
            continue

        hit = next(
            (n for n in obstacles if segment_intersects_node(start, end, n, OBSTACLE_PADDING)),
            None,
        )
        if hit is None:
            result.append(end)
            continue

        logger.debug(
            "Segment (%g,%g)-(%g,%g) crosses node %s, detouring",
            start[0], start[1], end[0], end[1], hit.id,
        )
        result.extend(create_simple_detour(start, end, hit)[1:])

    return simplify_route(result)
