"""Tests for cross-cable spacing of overlapping segments."""

import pytest

from cable_router.layout.routing.offsets import (
    SegmentRef,
    apply_spacing_to_cables,
    bucket_position,
    collect_segments,
    compute_segment_offsets,
    group_overlapping,
)
from cable_router.parser.model import Cable, NodeEdge


def _cable(cable_id, route):
    return Cable(
        id=cable_id,
        name=cable_id,
        source_node_id="a",
        target_node_id="b",
        source_edge=NodeEdge.BOTTOM,
        target_edge=NodeEdge.TOP,
        route=list(route),
    )


def _three_parallel():
    return [
        _cable("c1", [(0, 0), (0, 100), (200, 100), (200, 300)]),
        _cable("c2", [(10, -50), (10, 100), (150, 100), (150, 300)]),
        _cable("c3", [(20, -80), (20, 100), (250, 100), (250, 400)]),
    ]


@pytest.mark.parametrize(
    "position, expected",
    [(0, 0), (2.4, 0), (2.5, 5), (7.4, 5), (7.5, 10), (-2.5, 0), (-2.6, -5)],
)
def test_bucket_position(position, expected):
    assert bucket_position(position) == expected


def test_collect_segments_buckets_by_orientation():
    buckets = collect_segments(_three_parallel())
    assert len(buckets[("h", 100)]) == 3
    assert len(buckets[("v", 0)]) == 1
    assert ("h", 0) not in buckets


def test_collect_segments_skips_zero_length():
    buckets = collect_segments([_cable("c", [(0, 0), (0, 0), (0, 50)])])
    assert sum(len(v) for v in buckets.values()) == 1


def test_group_overlapping_splits_disjoint_runs():
    segs = [
        SegmentRef(0, 1, False, 100, 0, 50),
        SegmentRef(1, 1, False, 100, 200, 300),
        SegmentRef(2, 1, False, 100, 40, 60),
    ]
    groups = group_overlapping(segs)
    assert [[s.cable_index for s in g] for g in groups] == [[0, 2], [1]]


def test_group_overlapping_touching_counts():
    segs = [
        SegmentRef(0, 1, False, 100, 0, 50),
        SegmentRef(1, 1, False, 100, 50, 90),
    ]
    assert len(group_overlapping(segs)) == 1


def test_offsets_are_symmetric():
    offsets = compute_segment_offsets(_three_parallel(), spacing=3)
    assert sorted(offsets.values()) == [-3, 0, 3]
    assert sum(offsets.values()) == 0


def test_three_cables_are_spread_three_apart():
    spaced = apply_spacing_to_cables(_three_parallel())
    ys = sorted(cable.route[1][1] for cable in spaced)
    assert ys == [97, 100, 103]
    for cable in spaced:
        assert cable.route[1][1] == cable.route[2][1]


def test_spacing_keeps_endpoints():
    original = _three_parallel()
    spaced = apply_spacing_to_cables(original)
    for before, after in zip(original, spaced):
        assert after.route[0] == before.route[0]
        assert after.route[-1] == before.route[-1]


def test_spacing_does_not_mutate_input():
    original = _three_parallel()
    routes = [list(c.route) for c in original]
    apply_spacing_to_cables(original)
    assert [c.route for c in original] == routes


def test_terminal_segment_shift_adds_jog():
    cables = [
        _cable("c1", [(0, 0), (0, 100)]),
        _cable("c2", [(0, 20), (0, 80)]),
    ]
    spaced = apply_spacing_to_cables(cables)
    first = spaced[0].route
    assert first[0] == (0, 0)
    assert first[-1] == (0, 100)
    assert (-1.5, 0) in first
    for a, b in zip(first, first[1:]):
        assert a[0] == b[0] or a[1] == b[1]


def test_single_cable_unchanged():
    cable = _cable("c", [(0, 0), (0, 100), (50, 100)])
    assert apply_spacing_to_cables([cable])[0].route == cable.route
