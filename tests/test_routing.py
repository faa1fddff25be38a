"""Tests for the cable routing orchestrator."""

import copy
from pathlib import Path

import pytest
from route_validator import (
    Severity,
    check_obstacle_clearance,
    validate_routes,
)

from cable_router.layout.routing import generate_cable_routes, route_graph
from cable_router.parser.mermaid import parse_cable_mermaid
from cable_router.parser.model import (
    CableGraph,
    Channel,
    Connection,
    Node,
    NodeEdge,
    Orientation,
)
from cable_router.parser.records import cables_to_records

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
EQUIPMENT_ROOM = EXAMPLES_DIR / "equipment_room.mmd"


def _node(node_id, x, y, w=100.0, h=70.0):
    return Node(id=node_id, name=node_id, x=x, y=y, width=w, height=h)


@pytest.fixture
def equipment_room():
    return parse_cable_mermaid(EQUIPMENT_ROOM.read_text())


def test_single_vertical_cable():
    """One bend between stacked nodes: down, across, down."""
    nodes = [_node("A", 250, 100), _node("B", 120, 400)]
    cables = generate_cable_routes(nodes, [], [Connection("c1", "A", "B")])
    assert len(cables) == 1
    cable = cables[0]
    assert (cable.source_edge, cable.target_edge) == (NodeEdge.BOTTOM, NodeEdge.TOP)
    assert cable.route == [(250, 135), (250, 167), (120, 167), (120, 365)]


def test_level_nodes_use_centred_sides():
    nodes = [_node("A", 0, 0), _node("B", 300, 5)]
    cables = generate_cable_routes(
        nodes, [], [Connection("c1", "A", "B"), Connection("c2", "A", "B")]
    )
    for cable in cables:
        assert cable.source_edge == NodeEdge.RIGHT
        assert cable.target_edge == NodeEdge.LEFT
        assert cable.route[0] == (50, 0)
        assert cable.route[-1] == (250, 5)


def test_shared_edge_spreads_connection_points():
    nodes = [_node("A", 250, 100), _node("B", 120, 400)]
    conns = [Connection(f"c{i}", "A", "B") for i in range(3)]
    cables = generate_cable_routes(nodes, [], conns)
    starts = [c.route[0] for c in cables]
    assert len(set(starts)) == 3
    assert all(y == 135 for _, y in starts)


def test_obstacle_is_avoided():
    nodes = [_node("a", 100, 200), _node("b", 300, 200), _node("c", 500, 200)]
    cables = generate_cable_routes(nodes, [], [Connection("c1", "a", "c")])
    assert cables[0].route == [
        (150, 200),
        (182, 200),
        (182, 135),
        (418, 135),
        (418, 200),
        (450, 200),
    ]
    graph_nodes = {n.id: n for n in nodes}
    assert not check_obstacle_clearance(CableGraph(nodes=graph_nodes), cables)


def test_forced_cable_visits_channel():
    nodes = [_node("A", 250, 100), _node("B", 120, 400)]
    channel = Channel("channelH", Orientation.HORIZONTAL, 50, 50, 750)
    cables = generate_cable_routes(
        nodes, [channel], [Connection("c1", "A", "B", forced_channels=["channelH"])]
    )
    route = cables[0].route
    assert route[0] == (250, 135)
    assert route[-1] == (120, 365)
    assert any(y == 50 for _, y in route)


def test_unknown_node_is_skipped(caplog):
    nodes = [_node("A", 0, 0), _node("B", 0, 300)]
    conns = [Connection("ok", "A", "B"), Connection("bad", "A", "ghost")]
    with caplog.at_level("WARNING"):
        cables = generate_cable_routes(nodes, [], conns)
    assert [c.id for c in cables] == ["ok"]
    assert "ghost" in caplog.text


def test_unknown_forced_channel_is_ignored():
    nodes = [_node("A", 0, 0), _node("B", 0, 300)]
    cables = generate_cable_routes(
        nodes, [], [Connection("c1", "A", "B", forced_channels=["missing"])]
    )
    assert cables[0].route[0] == (0, 35)
    assert cables[0].route[-1] == (0, 265)


def test_default_cable_names():
    nodes = [_node("A", 0, 0), _node("B", 0, 300)]
    conns = [Connection("x", "A", "B", name="Feed"), Connection("y", "A", "B")]
    cables = generate_cable_routes(nodes, [], conns)
    assert [c.name for c in cables] == ["Feed", "Cable 2"]


def test_zero_size_and_coincident_nodes():
    nodes = [_node("A", 100, 100), _node("B", 100, 100), _node("Z", 400, 400, 0, 0)]
    conns = [Connection("c1", "A", "B"), Connection("c2", "A", "Z")]
    cables = generate_cable_routes(nodes, [], conns)
    assert len(cables) == 2
    for cable in cables:
        for a, b in zip(cable.route, cable.route[1:]):
            assert a[0] == b[0] or a[1] == b[1]


def test_inputs_not_mutated(equipment_room):
    before = copy.deepcopy(equipment_room)
    route_graph(equipment_room)
    assert equipment_room == before


def test_routing_is_deterministic(equipment_room):
    first = cables_to_records(route_graph(equipment_room))
    second = cables_to_records(route_graph(equipment_room))
    assert first == second


# --- Equipment room scenario ---


def test_equipment_room_routes_every_cable(equipment_room):
    cables = route_graph(equipment_room)
    assert len(cables) == 29
    assert [c.id for c in cables] == [f"cable{i}" for i in range(1, 30)]


def test_equipment_room_routes_are_valid(equipment_room):
    cables = route_graph(equipment_room)
    violations = validate_routes(equipment_room, cables)
    errors = [v for v in violations if v.severity == Severity.ERROR]
    assert not errors, "\n".join(v.message for v in errors)


def _visits(route, axis, position, tolerance=10.0):
    # Shared channel runs are spread apart by the spacing pass
    return any(abs(p[axis] - position) <= tolerance for p in route)


def test_equipment_room_forced_cables(equipment_room):
    cables = {c.id: c for c in route_graph(equipment_room)}
    assert _visits(cables["cable1"].route, 1, 50)
    assert _visits(cables["cable26"].route, 1, 50)
    assert _visits(cables["cable6"].route, 0, 50)
    for cable_id in ("cable11", "cable27", "cable28", "cable29"):
        route = cables[cable_id].route
        assert _visits(route, 1, 50)
        assert _visits(route, 0, 50)


def test_move_node_reroutes(equipment_room):
    moved = equipment_room.move_node("nodeC", 650, 250)
    before = {c.id: c for c in route_graph(equipment_room)}
    after = {c.id: c for c in route_graph(moved)}
    assert before["cable6"].route != after["cable6"].route
    assert equipment_room.nodes["nodeC"].x == 550
