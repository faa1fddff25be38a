"""Channel integration: forced routing through channels and opportunistic snapping.

Forced cables visit an explicit, ordered list of channels and skip the
regular synthesis/avoidance pipeline. Free cables keep their synthesized
route, but long runs that can be moved onto a nearby parallel channel
without backtracking are pulled onto it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from cable_router.layout.constants import MIN_SNAP_LENGTH, SNAP_ITERATIONS
from cable_router.layout.routing.common import is_orthogonal
from cable_router.layout.routing.normalize import (
    ensure_orthogonal_route,
    preserve_connection_points,
    simplify_route,
)
from cable_router.parser.model import Channel, Orientation, Point

logger = logging.getLogger(__name__)


def apply_forced_channels(
    source_point: Point,
    target_point: Point,
    channel_ids: Sequence[str],
    channels: Mapping[str, Channel],
) -> list[Point]:
    """Route from source to target through each listed channel in order.

    Every channel contributes one orthogonal step onto its line: a
    vertical channel moves the running point's X to the channel
    position, a horizontal one moves its Y. The route then drops to the
    target's Y and ends at the target. Unknown channel ids are skipped.
    """
    route = [source_point]
    cx, cy = source_point
    for channel_id in channel_ids:
        channel = channels.get(channel_id)
        if channel is None:
            logger.debug("Skipping unknown forced channel %r", channel_id)
            continue
        if channel.orientation == Orientation.VERTICAL:
            cx = channel.position
        else:
            cy = channel.position
        route.append((cx, cy))

    route.append((cx, target_point[1]))
    route.append(target_point)

    route = ensure_orthogonal_route(route)
    route = preserve_connection_points(route, source_point, target_point)
    # A channel visit may double back on itself; it must survive
    return simplify_route(route, keep_reversals=True)


def _perpendicular_span(route: list[Point], i: int, axis: int) -> tuple[float, float]:
    """Range covered by segment i and the far ends of its two adjacent legs.

    ``axis`` is the perpendicular axis index (1 for a horizontal segment).
    """
    values = [route[i][axis], route[i - 1][axis], route[i + 2][axis]]
    return min(values), max(values)


def _compatible(
    route: list[Point],
    i: int,
    channel: Channel,
) -> bool:
    """True if segment i can be moved onto ``channel``."""
    start, end = route[i], route[i + 1]
    horizontal = start[1] == end[1]
    if horizontal != (channel.orientation == Orientation.HORIZONTAL):
        return False

    along, across = (0, 1) if horizontal else (1, 0)
    lo, hi = _perpendicular_span(route, i, across)
    if channel.position < lo or channel.position > hi:
        return False

    seg_min = min(start[along], end[along])
    seg_max = max(start[along], end[along])
    return channel.start <= seg_min and seg_max <= channel.end


def _channel_detour(start: Point, end: Point, channel: Channel) -> list[Point]:
    p = channel.position
    if channel.orientation == Orientation.HORIZONTAL:
        return [start, (start[0], p), (end[0], p), end]
    return [start, (p, start[1]), (p, end[1]), end]


def _on_channel(start: Point, end: Point, channel: Channel) -> bool:
    if channel.orientation == Orientation.HORIZONTAL:
        return start[1] == end[1] == channel.position
    return start[0] == end[0] == channel.position


def use_channels_for_route(
    route: list[Point],
    channels: Sequence[Channel],
) -> list[Point]:
    """Snap long interior runs of a route onto compatible channels.

    Runs at most SNAP_ITERATIONS passes and stops early after a pass
    without changes. Within a pass the first compatible channel (input
    order) wins, the run is replaced by a detour along the channel and
    scanning resumes after the inserted points. The two terminal
    segments (the node stubs) are never moved.
    """
    current = list(route)

    for iteration in range(SNAP_ITERATIONS):
        changed = False
        current = simplify_route(ensure_orthogonal_route(current))

        i = 1
        while i < len(current) - 2:
            start, end = current[i], current[i + 1]

            if not is_orthogonal(start, end):
                i += 1
                continue
            if (
                abs(start[0] - end[0]) < MIN_SNAP_LENGTH
                and abs(start[1] - end[1]) < MIN_SNAP_LENGTH
            ):
                i += 1
                continue

            for channel in channels:
                if not _compatible(current, i, channel):
                    continue
                if _on_channel(start, end, channel):
                    break
                logger.debug("Snapping segment %d onto channel %s", i, channel.id)
                detour = _channel_detour(start, end, channel)
                current[i : i + 2] = detour
                i += len(detour) - 2
                changed = True
                break

            i += 1

        if not changed:
            logger.debug("Channel snapping settled after %d pass(es)", iteration + 1)
            break

    return simplify_route(ensure_orthogonal_route(current))
