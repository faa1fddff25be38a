"""Data model for cable routing diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

Point = tuple[float, float]


class NodeEdge(Enum):
    """Side of a node border where a cable attaches."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def is_horizontal(self) -> bool:
        """True for TOP/BOTTOM, whose border runs along the X axis."""
        return self in (NodeEdge.TOP, NodeEdge.BOTTOM)


class Orientation(Enum):
    """Direction a channel runs in."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class Node:
    """A rectangular piece of equipment, centred at (x, y)."""

    id: str
    name: str
    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 70.0


@dataclass
class Channel:
    """A fixed corridor (bus bar, cable tray) that cables can follow.

    ``position`` is the coordinate on the perpendicular axis (Y for a
    horizontal channel, X for a vertical one). ``start``/``end`` bound the
    usable extent along the channel's own axis.
    """

    id: str
    orientation: Orientation
    position: float
    start: float
    end: float


@dataclass
class Connection:
    """A requested link between two nodes."""

    id: str
    source_node_id: str
    target_node_id: str
    name: str | None = None
    forced_channels: list[str] = field(default_factory=list)


@dataclass
class Cable:
    """A routed connection (populated by the routing engine)."""

    id: str
    name: str
    source_node_id: str
    target_node_id: str
    source_edge: NodeEdge
    target_edge: NodeEdge
    forced_channels: list[str] = field(default_factory=list)
    route: list[Point] = field(default_factory=list)


@dataclass
class CableGraph:
    """Complete cable diagram definition."""

    title: str = ""
    nodes: dict[str, Node] = field(default_factory=dict)
    channels: dict[str, Channel] = field(default_factory=dict)
    connections: list[Connection] = field(default_factory=list)
    # Node ids that received an explicit %%cable place: directive
    _placed: set[str] = field(default_factory=set)

    def add_node(self, node: Node) -> None:
        self.nodes[node.id] = node

    def add_channel(self, channel: Channel) -> None:
        self.channels[channel.id] = channel

    def add_connection(self, connection: Connection) -> None:
        self.connections.append(connection)

    def connection(self, connection_id: str) -> Connection | None:
        """Return the connection with the given id, or None."""
        for conn in self.connections:
            if conn.id == connection_id:
                return conn
        return None

    def node_connections(self, node_id: str) -> list[Connection]:
        """Return connections attached to a node, in definition order."""
        return [
            c
            for c in self.connections
            if c.source_node_id == node_id or c.target_node_id == node_id
        ]

    def channel_connections(self, channel_id: str) -> list[Connection]:
        """Return connections forced through a channel."""
        return [c for c in self.connections if channel_id in c.forced_channels]

    def move_node(self, node_id: str, x: float, y: float) -> CableGraph:
        """Return a new snapshot with one node re-centred at (x, y).

        The receiver is left untouched; routes must be recomputed from the
        returned graph. Unknown node ids produce an unchanged copy.
        """
        nodes = {
            nid: replace(n, x=x, y=y) if nid == node_id else replace(n)
            for nid, n in self.nodes.items()
        }
        return CableGraph(
            title=self.title,
            nodes=nodes,
            channels=dict(self.channels),
            connections=list(self.connections),
            _placed=set(self._placed),
        )
