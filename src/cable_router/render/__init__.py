"""SVG rendering for cable diagrams."""

from cable_router.render.svg import render_svg

__all__ = ["render_svg"]
