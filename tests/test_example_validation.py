"""Parametrized route checks across every shipped example.

Loads each example definition, routes it, and validates the result
programmatically for routing defects.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from route_validator import (
    Severity,
    check_endpoints_on_border,
    check_no_coincident_points,
    check_orthogonality,
    validate_routes,
)

from cable_router.cli import validate_graph
from cable_router.layout.routing import route_graph
from cable_router.parser.mermaid import parse_cable_mermaid
from cable_router.parser.records import load_records

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"

EXAMPLE_FILES = sorted(
    [*EXAMPLES_DIR.glob("*.mmd"), *EXAMPLES_DIR.glob("*.json")]
)
EXAMPLE_IDS = [f.name for f in EXAMPLE_FILES]


def _load(path: Path):
    if path.suffix == ".json":
        return load_records(json.loads(path.read_text()))
    return parse_cable_mermaid(path.read_text())


@pytest.fixture(params=EXAMPLE_FILES, ids=EXAMPLE_IDS)
def routed_example(request):
    """Load and route each example."""
    graph = _load(request.param)
    return graph, route_graph(graph)


def test_examples_present():
    assert len(EXAMPLE_FILES) >= 2


def test_example_is_structurally_valid(routed_example):
    graph, _ = routed_example
    assert validate_graph(graph) == []


def test_no_route_errors(routed_example):
    graph, cables = routed_example
    errors = [
        v for v in validate_routes(graph, cables) if v.severity == Severity.ERROR
    ]
    assert not errors, "\n".join(v.message for v in errors)


def test_every_connection_routed(routed_example):
    graph, cables = routed_example
    assert [c.id for c in cables] == [c.id for c in graph.connections]


def test_orthogonal(routed_example):
    _, cables = routed_example
    assert check_orthogonality(cables) == []


def test_no_coincident_points(routed_example):
    _, cables = routed_example
    assert check_no_coincident_points(cables) == []


def test_endpoints_on_border(routed_example):
    graph, cables = routed_example
    assert check_endpoints_on_border(graph, cables) == []
