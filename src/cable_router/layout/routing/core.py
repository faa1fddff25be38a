"""Core cable routing: the generate_cable_routes() orchestrator.

Each connection is routed independently: edge selection, connection
points, then either a forced-channel route or synthesis followed by
obstacle avoidance and channel snapping. Cross-cable spacing runs once
over the finished set.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cable_router.layout.constants import ALIGNMENT_THRESHOLD
from cable_router.layout.routing.channels import (
    apply_forced_channels,
    use_channels_for_route,
)
from cable_router.layout.routing.connection_points import (
    calculate_connection_point,
    determine_optimal_edges,
)
from cable_router.layout.routing.normalize import (
    ensure_orthogonal_route,
    preserve_connection_points,
)
from cable_router.layout.routing.obstacles import avoid_obstacles
from cable_router.layout.routing.offsets import apply_spacing_to_cables
from cable_router.layout.routing.synthesis import generate_orthogonal_route
from cable_router.parser.model import (
    Cable,
    CableGraph,
    Channel,
    Connection,
    Node,
    NodeEdge,
    Point,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Routing context: pre-computed state shared by all cables
# ---------------------------------------------------------------------------


@dataclass
class _RoutingCtx:
    """Pre-computed state shared by per-cable routing."""

    nodes: list[Node]
    node_map: dict[str, Node]
    channels: list[Channel]
    channel_map: dict[str, Channel]
    # (node_id, edge) -> cable ids attached there, in connection order
    edge_usage: dict[tuple[str, NodeEdge], list[str]]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_cable_routes(
    nodes: Sequence[Node],
    channels: Sequence[Channel],
    connections: Sequence[Connection],
) -> list[Cable]:
    """Route every connection and space overlapping cables.

    Inputs are read-only. Connections referencing unknown nodes are
    skipped. The result is deterministic for identical inputs.
    """
    ctx = _build_routing_context(nodes, channels)
    cables = _init_cables(ctx, connections)

    for cable in cables:
        cable.route = _route_cable(ctx, cable)

    return apply_spacing_to_cables(cables)


def route_graph(graph: CableGraph) -> list[Cable]:
    """Route all connections of a parsed cable graph."""
    return generate_cable_routes(
        list(graph.nodes.values()),
        list(graph.channels.values()),
        graph.connections,
    )


# ---------------------------------------------------------------------------
# Context builder
# ---------------------------------------------------------------------------


def _build_routing_context(
    nodes: Sequence[Node],
    channels: Sequence[Channel],
) -> _RoutingCtx:
    node_list = list(nodes)
    channel_list = list(channels)
    return _RoutingCtx(
        nodes=node_list,
        node_map={n.id: n for n in node_list},
        channels=channel_list,
        channel_map={c.id: c for c in channel_list},
        edge_usage={},
    )


def _init_cables(
    ctx: _RoutingCtx,
    connections: Sequence[Connection],
) -> list[Cable]:
    """Choose edges for every connection and register edge usage."""
    cables: list[Cable] = []
    for idx, conn in enumerate(connections):
        src = ctx.node_map.get(conn.source_node_id)
        tgt = ctx.node_map.get(conn.target_node_id)
        if src is None or tgt is None:
            missing = conn.source_node_id if src is None else conn.target_node_id
            logger.warning("Skipping cable %s: unknown node %r", conn.id, missing)
            continue

        source_edge, target_edge = determine_optimal_edges(src, tgt)
        ctx.edge_usage.setdefault((src.id, source_edge), []).append(conn.id)
        ctx.edge_usage.setdefault((tgt.id, target_edge), []).append(conn.id)

        cables.append(
            Cable(
                id=conn.id,
                name=conn.name or f"Cable {idx + 1}",
                source_node_id=conn.source_node_id,
                target_node_id=conn.target_node_id,
                source_edge=source_edge,
                target_edge=target_edge,
                forced_channels=list(conn.forced_channels),
            )
        )
    return cables


# ---------------------------------------------------------------------------
# Per-cable routing
# ---------------------------------------------------------------------------


def _connection_point(
    ctx: _RoutingCtx,
    node: Node,
    edge: NodeEdge,
    cable_id: str,
    force_center: bool,
) -> Point:
    users = ctx.edge_usage.get((node.id, edge), [])
    index = users.index(cable_id) if cable_id in users else 0
    return calculate_connection_point(node, edge, index, len(users), force_center)


def _is_side_link(cable: Cable, src: Node, tgt: Node) -> bool:
    """True for left/right cables between nodes at nearly the same height.

    Their ends are centred rather than spread across the edge.
    """
    sides = (NodeEdge.LEFT, NodeEdge.RIGHT)
    return (
        cable.source_edge in sides
        and cable.target_edge in sides
        and abs(src.y - tgt.y) < ALIGNMENT_THRESHOLD
    )


def _route_cable(ctx: _RoutingCtx, cable: Cable) -> list[Point]:
    src = ctx.node_map[cable.source_node_id]
    tgt = ctx.node_map[cable.target_node_id]

    force_center = _is_side_link(cable, src, tgt)
    source_point = _connection_point(ctx, src, cable.source_edge, cable.id, force_center)
    target_point = _connection_point(ctx, tgt, cable.target_edge, cable.id, force_center)

    if cable.forced_channels:
        route = apply_forced_channels(
            source_point, target_point, cable.forced_channels, ctx.channel_map
        )
    else:
        route = generate_orthogonal_route(
            source_point, target_point, cable.source_edge, cable.target_edge
        )
        route = avoid_obstacles(route, ctx.nodes, src.id, tgt.id)
        route = use_channels_for_route(route, ctx.channels)

    route = ensure_orthogonal_route(route)
    return preserve_connection_points(route, source_point, target_point)
