"""CLI for cable-router."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from cable_router import __version__
from cable_router.layout import route_graph
from cable_router.parser import cables_to_records, load_records, parse_cable_mermaid
from cable_router.parser.model import CableGraph
from cable_router.render import render_svg
from cable_router.themes import THEMES


def _load_graph(input_file: Path) -> CableGraph:
    """Read a definition file: JSON records for .json, %%cable text otherwise."""
    text = input_file.read_text()
    if input_file.suffix.lower() == ".json":
        return load_records(json.loads(text))
    return parse_cable_mermaid(text)


def _parse_move(value: str) -> tuple[str, float, float]:
    node_id, sep, coords = value.partition("=")
    parts = coords.split(",")
    if not sep or not node_id or len(parts) != 2:
        raise click.BadParameter(f"expected NODE=X,Y, got '{value}'", param_hint="--move")
    try:
        return node_id.strip(), float(parts[0]), float(parts[1])
    except ValueError:
        raise click.BadParameter(
            f"non-numeric coordinates in '{value}'", param_hint="--move"
        ) from None


def _apply_moves(graph: CableGraph, moves: tuple[str, ...]) -> CableGraph:
    for value in moves:
        node_id, x, y = _parse_move(value)
        if node_id not in graph.nodes:
            raise click.BadParameter(f"unknown node '{node_id}'", param_hint="--move")
        graph = graph.move_node(node_id, x, y)
    return graph


_move_option = click.option(
    "--move", "moves", multiple=True, metavar="NODE=X,Y",
    help="Re-centre a node before routing (repeatable)",
)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cable-router: Route orthogonal cables between equipment nodes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
@click.option("--highlight", default=None, metavar="CABLE_ID",
              help="Draw one cable at full strength")
@_move_option
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    width: int | None,
    height: int | None,
    highlight: str | None,
    moves: tuple[str, ...],
) -> None:
    """Route and render a cable definition to SVG."""
    graph = _apply_moves(_load_graph(input_file), moves)
    if highlight is not None and graph.connection(highlight) is None:
        raise click.BadParameter(f"unknown cable '{highlight}'", param_hint="--highlight")

    cables = route_graph(graph)
    svg = render_svg(graph, THEMES[theme], cables=cables, width=width,
                     height=height, highlight=highlight)
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(graph.nodes)} nodes, "
               f"{len(graph.channels)} channels, "
               f"{len(cables)} cables -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON file path. Prints to stdout when omitted")
@_move_option
def route(input_file: Path, output: Path | None, moves: tuple[str, ...]) -> None:
    """Route a cable definition and emit the cables as JSON."""
    graph = _apply_moves(_load_graph(input_file), moves)
    cables = route_graph(graph)
    text = json.dumps({"cables": cables_to_records(cables)}, indent=2) + "\n"

    if output is None:
        click.echo(text, nl=False)
    else:
        output.write_text(text)
        click.echo(f"Routed {len(cables)} cables -> {output}")


def validate_graph(graph: CableGraph) -> list[str]:
    """Return structural problems in a cable definition."""
    errors: list[str] = []

    for node_id in graph.nodes:
        if node_id not in graph._placed:
            errors.append(f"Node '{node_id}' has no position "
                          f"(add '%%cable place: {node_id} | x, y')")

    for ch in graph.channels.values():
        if ch.start > ch.end:
            errors.append(f"Channel '{ch.id}' has start {ch.start:g} "
                          f"after end {ch.end:g}")

    seen: set[str] = set()
    for conn in graph.connections:
        if conn.id in seen:
            errors.append(f"Duplicate cable id '{conn.id}'")
        seen.add(conn.id)

        for node_id in (conn.source_node_id, conn.target_node_id):
            if node_id not in graph.nodes:
                errors.append(f"Cable '{conn.id}' references unknown "
                              f"node '{node_id}'")
        if conn.source_node_id == conn.target_node_id:
            errors.append(f"Cable '{conn.id}' connects node "
                          f"'{conn.source_node_id}' to itself")
        for ch_id in conn.forced_channels:
            if ch_id not in graph.channels:
                errors.append(f"Cable '{conn.id}' is forced through unknown "
                              f"channel '{ch_id}'")

    return errors


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a cable definition."""
    try:
        graph = _load_graph(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    errors = validate_graph(graph)
    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(graph.nodes)} nodes, "
               f"{len(graph.channels)} channels, "
               f"{len(graph.connections)} cables")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a cable definition."""
    graph = _load_graph(input_file)

    click.echo(f"Title: {graph.title or '(none)'}")
    click.echo(f"Nodes: {len(graph.nodes)}")
    for node in graph.nodes.values():
        click.echo(f"  {node.id} [{node.name}] at ({node.x:g}, {node.y:g}): "
                   f"{len(graph.node_connections(node.id))} cables")
    click.echo(f"Channels: {len(graph.channels)}")
    for ch in graph.channels.values():
        click.echo(f"  {ch.id} ({ch.orientation.value} at {ch.position:g}, "
                   f"{ch.start:g}..{ch.end:g}): "
                   f"{len(graph.channel_connections(ch.id))} forced cables")
    click.echo(f"Cables: {len(graph.connections)}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.argument("cable_id")
def show(input_file: Path, cable_id: str) -> None:
    """Show cable information: name, endpoints, channels and edges."""
    graph = _load_graph(input_file)
    cable = next((c for c in route_graph(graph) if c.id == cable_id), None)
    if cable is None:
        click.echo(f"Unknown cable '{cable_id}'", err=True)
        raise SystemExit(1)

    channels = ", ".join(cable.forced_channels) if cable.forced_channels else "None"
    click.echo(f"Name: {cable.name}")
    click.echo(f"Source: {cable.source_node_id} ({cable.source_edge.value})")
    click.echo(f"Target: {cable.target_node_id} ({cable.target_edge.value})")
    click.echo(f"Channels: {channels}")
    click.echo(f"Route: {len(cable.route)} points")
