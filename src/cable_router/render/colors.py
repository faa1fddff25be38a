"""Per-cable colour assignment."""

from __future__ import annotations

from collections.abc import Sequence

from cable_router.parser.model import Cable
from cable_router.render.style import Theme


def cable_color(theme: Theme, index: int, highlighted: bool = True) -> str:
    """Return the palette colour for the index-th cable.

    Non-highlighted cables get the theme's alpha suffix (half-transparent
    8-digit hex).
    """
    color = theme.cable_colors[index % len(theme.cable_colors)]
    return color if highlighted else f"{color}{theme.dim_alpha}"


def assign_cable_colors(
    cables: Sequence[Cable],
    theme: Theme,
    highlight: str | None = None,
) -> dict[str, str]:
    """Map cable id -> stroke colour.

    Only the highlighted cable is drawn at full strength; all others,
    including every cable when nothing is highlighted, are dimmed.
    """
    return {
        cable.id: cable_color(theme, i, cable.id == highlight)
        for i, cable in enumerate(cables)
    }
