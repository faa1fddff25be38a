"""Cable routing subpackage.

Public API:
- generate_cable_routes: Main routing orchestrator
- route_graph: Route a parsed CableGraph
- apply_spacing_to_cables: Cross-cable spacing pass
- determine_optimal_edges / calculate_connection_point: Connection points
"""

from cable_router.layout.routing.connection_points import (
    calculate_connection_point,
    determine_optimal_edges,
)
from cable_router.layout.routing.core import generate_cable_routes, route_graph
from cable_router.layout.routing.offsets import apply_spacing_to_cables

__all__ = [
    "apply_spacing_to_cables",
    "calculate_connection_point",
    "determine_optimal_edges",
    "generate_cable_routes",
    "route_graph",
]
