"""Cross-cable spacing: separate parallel segments that share a corridor."""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, replace

from cable_router.layout.constants import CABLE_SPACING, SPACING_BUCKET
from cable_router.layout.routing.common import is_orthogonal, is_zero_length
from cable_router.layout.routing.normalize import (
    drop_zero_length,
    ensure_orthogonal_route,
)
from cable_router.parser.model import Cable, Point

logger = logging.getLogger(__name__)


@dataclass
class SegmentRef:
    """One orthogonal segment of one cable's route."""

    cable_index: int
    segment_index: int
    vertical: bool
    position: float
    lo: float
    hi: float


def bucket_position(position: float, bucket: float = SPACING_BUCKET) -> float:
    """Round a coordinate to the nearest multiple of ``bucket`` (halves up)."""
    return math.floor(position / bucket + 0.5) * bucket


def collect_segments(
    cables: Sequence[Cable],
) -> dict[tuple[str, float], list[SegmentRef]]:
    """Group every orthogonal segment by orientation and rounded position.

    Zero-length and diagonal segments are skipped.

    Returns dict mapping ("h" | "v", bucketed position) -> segments.
    """
    buckets: dict[tuple[str, float], list[SegmentRef]] = defaultdict(list)
    for ci, cable in enumerate(cables):
        route = cable.route
        for si in range(len(route) - 1):
            start, end = route[si], route[si + 1]
            if is_zero_length(start, end) or not is_orthogonal(start, end):
                continue

            vertical = start[0] == end[0]
            if vertical:
                position = start[0]
                lo, hi = sorted((start[1], end[1]))
            else:
                position = start[1]
                lo, hi = sorted((start[0], end[0]))

            key = ("v" if vertical else "h", bucket_position(position))
            buckets[key].append(SegmentRef(ci, si, vertical, position, lo, hi))
    return buckets


def group_overlapping(segments: list[SegmentRef]) -> list[list[SegmentRef]]:
    """Sweep segments sorted by extent into clusters of overlapping intervals.

    A segment joins the running cluster when it starts at or before the
    cluster's furthest end; touching intervals therefore overlap.
    """
    if not segments:
        return []

    ordered = sorted(segments, key=lambda s: (s.lo, s.hi))
    groups: list[list[SegmentRef]] = []
    current = [ordered[0]]
    current_max = ordered[0].hi

    for seg in ordered[1:]:
        if seg.lo <= current_max:
            current.append(seg)
            current_max = max(current_max, seg.hi)
        else:
            groups.append(current)
            current = [seg]
            current_max = seg.hi

    groups.append(current)
    return groups


def compute_segment_offsets(
    cables: Sequence[Cable],
    spacing: float = CABLE_SPACING,
) -> dict[tuple[int, int], float]:
    """Compute the perpendicular offset for every clustered segment.

    A cluster of n segments is spread symmetrically around its shared
    coordinate: offsets are spacing * (i - (n - 1) / 2).

    Returns dict mapping (cable_index, segment_index) -> offset.
    """
    offsets: dict[tuple[int, int], float] = {}
    for key, segments in collect_segments(cables).items():
        if len(segments) <= 1:
            continue
        for group in group_overlapping(segments):
            n = len(group)
            if n <= 1:
                continue
            logger.debug("Spacing %d overlapping segments at %s", n, key)
            for i, seg in enumerate(group):
                offsets[(seg.cable_index, seg.segment_index)] = spacing * (i - (n - 1) / 2)
    return offsets


def _shift_route(
    route: list[Point],
    segment_offsets: dict[int, tuple[bool, float]],
) -> list[Point]:
    """Apply segment offsets to a copy of ``route``.

    The two terminal points stay pinned to their connection points; when
    a terminal segment moves, a short jog joins the pinned point to the
    shifted one.
    """
    dx = [0.0] * len(route)
    dy = [0.0] * len(route)
    for si, (vertical, off) in segment_offsets.items():
        delta = dx if vertical else dy
        delta[si] += off
        delta[si + 1] += off

    shifted = [(x + dx[j], y + dy[j]) for j, (x, y) in enumerate(route)]
    result = list(shifted)
    result[0] = route[0]
    result[-1] = route[-1]
    if shifted[0] != route[0]:
        result.insert(1, shifted[0])
    if shifted[-1] != route[-1]:
        result.insert(len(result) - 1, shifted[-1])
    return drop_zero_length(ensure_orthogonal_route(result))


def apply_spacing_to_cables(
    cables: Sequence[Cable],
    spacing: float = CABLE_SPACING,
) -> list[Cable]:
    """Offset overlapping collinear segments of different cables.

    All offsets are computed from the untouched input routes before any
    route is rewritten, so the result does not depend on cable order
    beyond the deterministic sort within each cluster. Input cables are
    not modified; new Cable objects with re-orthogonalized routes are
    returned.
    """
    offsets = compute_segment_offsets(cables, spacing)

    per_cable: dict[int, dict[int, tuple[bool, float]]] = defaultdict(dict)
    for (ci, si), off in offsets.items():
        if off == 0:
            continue
        route = cables[ci].route
        vertical = route[si][0] == route[si + 1][0]
        per_cable[ci][si] = (vertical, off)

    result: list[Cable] = []
    for ci, cable in enumerate(cables):
        route = list(cable.route)
        if ci in per_cable:
            route = _shift_route(route, per_cable[ci])
        else:
            route = ensure_orthogonal_route(route)
        result.append(replace(cable, route=route, forced_channels=list(cable.forced_channels)))
    return result
