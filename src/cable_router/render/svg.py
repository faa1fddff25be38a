"""SVG generation for cable diagrams using drawsvg."""

from __future__ import annotations

from collections.abc import Sequence

import drawsvg as draw

from cable_router.layout.routing import route_graph
from cable_router.layout.routing.common import node_bounds
from cable_router.parser.model import Cable, CableGraph, Orientation
from cable_router.render.colors import assign_cable_colors
from cable_router.render.constants import (
    CANVAS_PADDING,
    LEGEND_GAP,
    MIN_CANVAS_HEIGHT,
    MIN_CANVAS_WIDTH,
    TITLE_HEIGHT,
)
from cable_router.render.legend import compute_legend_dimensions, render_legend
from cable_router.render.style import Theme


def render_svg(
    graph: CableGraph,
    theme: Theme,
    cables: Sequence[Cable] | None = None,
    width: int | None = None,
    height: int | None = None,
    highlight: str | None = None,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a cable diagram to an SVG string.

    Routes the graph when ``cables`` is not supplied.
    """
    if cables is None:
        cables = route_graph(graph)

    max_x, max_y = _content_extent(graph, cables)
    _, legend_h = compute_legend_dimensions(theme)
    top = TITLE_HEIGHT if graph.title else 0.0

    auto_width = max(MIN_CANVAS_WIDTH, int(max_x + padding * 2))
    auto_height = max(
        MIN_CANVAS_HEIGHT, int(top + max_y + padding + LEGEND_GAP + legend_h + padding)
    )
    svg_width = width or auto_width
    svg_height = height or auto_height

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if graph.title:
        d.append(draw.Text(
            graph.title,
            theme.title_font_size,
            padding, 30,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    content = draw.Group(transform=f"translate(0,{top})") if top else draw.Group()

    # Channels behind cables, nodes on top
    _render_channels(content, graph, theme)
    _render_cables(content, cables, theme, highlight)
    _render_nodes(content, graph, theme)
    d.append(content)

    render_legend(d, theme, padding, top + max_y + LEGEND_GAP)

    return d.as_svg()


def _content_extent(graph: CableGraph, cables: Sequence[Cable]) -> tuple[float, float]:
    """Return the largest X and Y used by nodes, channels and routes."""
    xs = [0.0]
    ys = [0.0]
    for node in graph.nodes.values():
        b = node_bounds(node)
        xs.append(b.right)
        ys.append(b.bottom)
    for ch in graph.channels.values():
        if ch.orientation == Orientation.HORIZONTAL:
            xs.append(max(ch.start, ch.end))
            ys.append(ch.position)
        else:
            xs.append(ch.position)
            ys.append(max(ch.start, ch.end))
    for cable in cables:
        for x, y in cable.route:
            xs.append(x)
            ys.append(y)
    return max(xs), max(ys)


def _render_channels(d: draw.Group, graph: CableGraph, theme: Theme) -> None:
    """Render channels as dashed lines over their usable extent."""
    for ch in graph.channels.values():
        if ch.orientation == Orientation.HORIZONTAL:
            x1, y1, x2, y2 = ch.start, ch.position, ch.end, ch.position
        else:
            x1, y1, x2, y2 = ch.position, ch.start, ch.position, ch.end
        d.append(draw.Line(
            x1, y1, x2, y2,
            stroke=theme.channel_color,
            stroke_width=theme.channel_width,
            stroke_dasharray=theme.channel_dash,
        ))


def _render_cables(
    d: draw.Group,
    cables: Sequence[Cable],
    theme: Theme,
    highlight: str | None,
) -> None:
    """Render cables as polylines with a marker at each end."""
    colors = assign_cable_colors(cables, theme, highlight)
    for cable in cables:
        if len(cable.route) < 2:
            continue
        color = colors[cable.id]
        group = draw.Group(id=f"cable-{cable.id}")
        group.append_title(cable.name)

        path = draw.Path(
            stroke=color,
            stroke_width=theme.cable_width,
            fill="none",
            stroke_linecap="round",
            stroke_linejoin="round",
        )
        path.M(*cable.route[0])
        for point in cable.route[1:]:
            path.L(*point)
        group.append(path)

        for x, y in (cable.route[0], cable.route[-1]):
            group.append(draw.Circle(x, y, theme.cable_marker_radius, fill=color))
        d.append(group)


def _render_nodes(d: draw.Group, graph: CableGraph, theme: Theme) -> None:
    """Render nodes as labelled rounded rectangles."""
    for node in graph.nodes.values():
        b = node_bounds(node)
        d.append(draw.Rectangle(
            b.left, b.top, node.width, node.height,
            rx=theme.node_corner_radius, ry=theme.node_corner_radius,
            fill=theme.node_fill,
            stroke=theme.node_stroke,
            stroke_width=theme.node_stroke_width,
        ))
        d.append(draw.Text(
            node.name,
            theme.label_font_size,
            node.x, node.y,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            font_weight="bold",
            text_anchor="middle",
            dominant_baseline="middle",
        ))
