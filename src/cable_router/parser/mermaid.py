"""Parser for Mermaid-style cable definitions with %%cable directives.

Uses a simple line-by-line approach rather than a full grammar parser,
since the subset we need is straightforward:

    %%cable title: Equipment room
    %%cable channel: trayH | horizontal | 50 | 50 | 750
    %%cable place: rackA | 250, 100 | 100, 70
    %%cable route: power1 | trayH
    graph LR
        rackA[Rack A]
        power1: rackA -->|Main Power| rackB
"""

from __future__ import annotations

import re

from cable_router.parser.model import (
    CableGraph,
    Channel,
    Connection,
    Node,
    Orientation,
)


def _check_unsupported_input(text: str) -> None:
    """Detect common unsupported input formats and raise helpful errors."""
    stripped = text.lstrip()
    if stripped.startswith("{") or stripped.startswith("["):
        raise ValueError(
            "This looks like JSON. Load JSON records with "
            "cable_router.parser.records.load_records() instead."
        )

    lines = stripped.split("\n")
    has_flowchart = any(line.strip().startswith("flowchart ") for line in lines)
    has_cable_directives = any(line.strip().startswith("%%cable") for line in lines)
    if has_flowchart and not has_cable_directives:
        raise ValueError(
            "Mermaid 'flowchart' syntax without %%cable directives is not "
            "supported. Use 'graph LR' with %%cable place: directives to "
            "position nodes."
        )


def parse_cable_mermaid(text: str) -> CableGraph:
    """Parse a Mermaid cable definition with %%cable directives."""
    _check_unsupported_input(text)

    graph = CableGraph()
    pending_routes: dict[str, list[str]] = {}

    for line in text.strip().split("\n"):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("%%cable"):
            _parse_directive(stripped, graph, pending_routes)
            continue

        # Skip regular comments and graph declaration
        if stripped.startswith("%%") or stripped.startswith(("graph ", "flowchart ")):
            continue

        # Subgraphs carry no routing meaning
        if stripped == "end" or stripped.startswith("subgraph "):
            continue

        if "-->" in stripped or "---" in stripped:
            _parse_connection(stripped, graph)
            continue

        _parse_node(stripped, graph)

    # Forced channel lists may be declared before or after the connection
    for cable_id, channel_ids in pending_routes.items():
        conn = graph.connection(cable_id)
        if conn:
            conn.forced_channels = channel_ids

    return graph


def _parse_float_pair(text: str) -> tuple[float, float] | None:
    parts = [p.strip() for p in re.split(r"[,x]", text.strip())]
    if len(parts) != 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def _parse_directive(
    line: str,
    graph: CableGraph,
    pending_routes: dict[str, list[str]],
) -> None:
    """Parse a %%cable directive line.

    Malformed directives are ignored, like unknown ones.
    """
    content = line[len("%%cable") :].strip()

    if content.startswith("title:"):
        graph.title = content[len("title:") :].strip()
    elif content.startswith("channel:"):
        _parse_channel_directive(content, graph)
    elif content.startswith("place:"):
        _parse_place_directive(content, graph)
    elif content.startswith("route:"):
        parts = content[len("route:") :].strip().split("|")
        if len(parts) >= 2:
            cable_id = parts[0].strip()
            channel_ids = [c.strip() for c in parts[1].split(",") if c.strip()]
            pending_routes[cable_id] = channel_ids


def _parse_channel_directive(content: str, graph: CableGraph) -> None:
    """Parse %%cable channel: id | orientation | position | start | end."""
    parts = [p.strip() for p in content[len("channel:") :].split("|")]
    if len(parts) < 5:
        return

    try:
        orientation = Orientation(parts[1].lower())
        position, start, end = (float(p) for p in parts[2:5])
    except ValueError:
        return

    graph.add_channel(
        Channel(
            id=parts[0],
            orientation=orientation,
            position=position,
            start=start,
            end=end,
        )
    )


def _parse_place_directive(content: str, graph: CableGraph) -> None:
    """Parse %%cable place: node_id | x, y [| width, height]."""
    parts = [p.strip() for p in content[len("place:") :].split("|")]
    if len(parts) < 2:
        return

    node_id = parts[0]
    center = _parse_float_pair(parts[1])
    if not node_id or center is None:
        return
    size = _parse_float_pair(parts[2]) if len(parts) >= 3 else None

    node = graph.nodes.get(node_id)
    if node is None:
        node = Node(id=node_id, name=node_id)
        graph.add_node(node)
    node.x, node.y = center
    if size is not None:
        node.width, node.height = size
    graph._placed.add(node_id)


# Regex patterns for node shapes
_NODE_PATTERNS = [
    # square bracket: node_id[label]
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\[(.+?)\]$"),
    # round bracket: node_id(label)
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\((.+?)\)$"),
    # bare id
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)$"),
]

# Connection pattern: [cable_id:] source -->|name| target  or  source --> target
_CONNECTION_PATTERN = re.compile(
    r"^(?:([a-zA-Z_][a-zA-Z0-9_]*)\s*:\s*)?"  # optional cable id
    r"([a-zA-Z_][a-zA-Z0-9_]*)\s*"  # source
    r"(-->|---)"  # arrow
    r"(?:\|([^|]*)\|)?\s*"  # optional |name|
    r"([a-zA-Z_][a-zA-Z0-9_]*)$"  # target
)


def _parse_node(line: str, graph: CableGraph) -> None:
    """Parse a node definition line."""
    for pattern in _NODE_PATTERNS:
        m = pattern.match(line)
        if m:
            node_id = m.group(1)
            label = m.group(2).strip() if m.lastindex >= 2 else node_id
            if node_id not in graph.nodes:
                graph.add_node(Node(id=node_id, name=label))
            else:
                # Update label if node was auto-created
                graph.nodes[node_id].name = label
            return


def _parse_connection(line: str, graph: CableGraph) -> None:
    """Parse a connection line.

    Cable ids default to ``cable<n>`` where n counts connections from 1.
    """
    m = _CONNECTION_PATTERN.match(line)
    if not m:
        return

    cable_id = m.group(1) or f"cable{len(graph.connections) + 1}"
    source = m.group(2)
    name = m.group(4).strip() if m.group(4) else None
    target = m.group(5)

    # Ensure nodes exist
    for node_id in (source, target):
        if node_id not in graph.nodes:
            graph.add_node(Node(id=node_id, name=node_id))

    graph.add_connection(
        Connection(
            id=cable_id,
            source_node_id=source,
            target_node_id=target,
            name=name or None,
        )
    )
