"""JSON record input/output.

Reads node, channel and connection records with camelCase keys and
writes routed cables in the same style::

    {"nodes": [{"id", "name", "x", "y", "width", "height"}],
     "channels": [{"id", "orientation", "position", "start", "end"}],
     "connections": [{"id", "name", "sourceNodeId", "targetNodeId",
                      "forcedChannels"}]}
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from cable_router.parser.model import (
    Cable,
    CableGraph,
    Channel,
    Connection,
    Node,
    Orientation,
)


def _require(record: Mapping[str, Any], key: str, kind: str) -> Any:
    if key not in record:
        raise ValueError(f"{kind} record {dict(record)!r} is missing '{key}'")
    return record[key]


def load_records(data: Mapping[str, Any]) -> CableGraph:
    """Build a CableGraph from decoded JSON records.

    Raises ValueError for records missing required keys or carrying an
    unknown channel orientation.
    """
    graph = CableGraph(title=str(data.get("title", "")))

    for rec in data.get("nodes", []):
        node_id = str(_require(rec, "id", "Node"))
        node = Node(
            id=node_id,
            name=str(rec.get("name", node_id)),
            x=float(_require(rec, "x", "Node")),
            y=float(_require(rec, "y", "Node")),
            width=float(rec.get("width", 100.0)),
            height=float(rec.get("height", 70.0)),
        )
        graph.add_node(node)
        graph._placed.add(node_id)

    for rec in data.get("channels", []):
        orientation = str(_require(rec, "orientation", "Channel")).lower()
        try:
            parsed = Orientation(orientation)
        except ValueError:
            raise ValueError(
                f"Channel '{rec.get('id')}' has unknown orientation '{orientation}'"
            ) from None
        graph.add_channel(
            Channel(
                id=str(_require(rec, "id", "Channel")),
                orientation=parsed,
                position=float(_require(rec, "position", "Channel")),
                start=float(_require(rec, "start", "Channel")),
                end=float(_require(rec, "end", "Channel")),
            )
        )

    for rec in data.get("connections", []):
        graph.add_connection(
            Connection(
                id=str(_require(rec, "id", "Connection")),
                source_node_id=str(_require(rec, "sourceNodeId", "Connection")),
                target_node_id=str(_require(rec, "targetNodeId", "Connection")),
                name=rec.get("name"),
                forced_channels=[str(c) for c in rec.get("forcedChannels") or []],
            )
        )

    return graph


def cables_to_records(cables: Sequence[Cable]) -> list[dict[str, Any]]:
    """Serialize routed cables to JSON-ready records."""
    return [
        {
            "id": cable.id,
            "name": cable.name,
            "sourceNodeId": cable.source_node_id,
            "targetNodeId": cable.target_node_id,
            "forcedChannels": list(cable.forced_channels),
            "sourceEdge": cable.source_edge.value,
            "targetEdge": cable.target_edge.value,
            "route": [{"x": x, "y": y} for x, y in cable.route],
        }
        for cable in cables
    ]
