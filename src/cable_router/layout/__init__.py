"""Cable routing layout."""

from cable_router.layout.routing import generate_cable_routes, route_graph

__all__ = ["generate_cable_routes", "route_graph"]
