"""Route clean-up: orthogonality, pinned endpoints and redundant bends."""

from __future__ import annotations

from cable_router.layout.routing.common import (
    dominant_axis_corner,
    is_orthogonal,
    is_zero_length,
)
from cable_router.parser.model import Point


def ensure_orthogonal_route(route: list[Point]) -> list[Point]:
    """Split every diagonal step into two orthogonal legs.

    Existing points are never moved; only corners are inserted.
    """
    if len(route) < 2:
        return list(route)

    result = [route[0]]
    for curr in route[1:]:
        prev = result[-1]
        if not is_orthogonal(prev, curr):
            result.append(dominant_axis_corner(prev, curr))
        result.append(curr)
    return result


def drop_zero_length(route: list[Point]) -> list[Point]:
    """Remove consecutive duplicate points, keeping both route ends."""
    if len(route) <= 2:
        return list(route)

    result = [route[0]]
    for p in route[1:-1]:
        if not is_zero_length(result[-1], p):
            result.append(p)
    last = route[-1]
    if len(result) > 1 and is_zero_length(result[-1], last):
        result[-1] = last
    else:
        result.append(last)
    return result


def preserve_connection_points(
    route: list[Point],
    source_point: Point,
    target_point: Point,
) -> list[Point]:
    """Pin a route's ends to the exact connection points.

    If pinning leaves the first or last segment diagonal, the neighbouring
    interior point is moved onto the pinned point's axis (dominant-axis
    rule). Any diagonal this creates further in is split afterwards.
    """
    if len(route) < 2:
        return ensure_orthogonal_route([source_point, target_point])

    result = list(route)
    result[0] = source_point
    result[-1] = target_point

    if len(result) > 2:
        first, second = result[0], result[1]
        if not is_orthogonal(first, second):
            if abs(second[0] - first[0]) >= abs(second[1] - first[1]):
                result[1] = (second[0], first[1])
            else:
                result[1] = (first[0], second[1])

        last, before = result[-1], result[-2]
        if not is_orthogonal(before, last):
            if abs(last[0] - before[0]) >= abs(last[1] - before[1]):
                result[-2] = (before[0], last[1])
            else:
                result[-2] = (last[0], before[1])

    return drop_zero_length(ensure_orthogonal_route(result))


def _between(a: float, b: float, c: float) -> bool:
    return min(a, c) <= b <= max(a, c)


def simplify_route(route: list[Point], keep_reversals: bool = False) -> list[Point]:
    """Remove interior points that sit on a straight run.

    A point is kept whenever dropping it would leave a diagonal between
    its neighbours. Turn-back points (the route reverses along the same
    line) are folded away too, unless ``keep_reversals`` is set.
    """
    route = drop_zero_length(route)
    if len(route) <= 2:
        return route

    result = [route[0]]
    for i in range(1, len(route) - 1):
        prev = result[-1]
        curr = route[i]
        nxt = route[i + 1]

        if not is_orthogonal(prev, nxt):
            result.append(curr)
            continue

        if prev[0] == curr[0] == nxt[0]:
            if not keep_reversals or _between(prev[1], curr[1], nxt[1]):
                continue
        elif prev[1] == curr[1] == nxt[1]:
            if not keep_reversals or _between(prev[0], curr[0], nxt[0]):
                continue

        result.append(curr)

    result.append(route[-1])
    return result
