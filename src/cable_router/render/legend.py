"""Legend generation for cable diagram SVGs."""

from __future__ import annotations

import drawsvg as draw

from cable_router.render.constants import (
    LEGEND_BORDER_RADIUS,
    LEGEND_CHAR_WIDTH_RATIO,
    LEGEND_LINE_HEIGHT,
    LEGEND_PADDING,
    LEGEND_SWATCH_HEIGHT,
    LEGEND_SWATCH_WIDTH,
    LEGEND_TEXT_GAP,
)
from cable_router.render.style import Theme

LEGEND_ENTRIES = ("Standard Cable", "Channel", "Node")


def compute_legend_dimensions(theme: Theme) -> tuple[float, float]:
    """Compute the width and height of the legend without rendering it."""
    max_name_len = max(len(name) for name in LEGEND_ENTRIES)
    char_width = theme.legend_font_size * LEGEND_CHAR_WIDTH_RATIO
    width = (
        LEGEND_PADDING * 2
        + LEGEND_SWATCH_WIDTH
        + LEGEND_TEXT_GAP
        + max_name_len * char_width
    )
    height = LEGEND_PADDING * 2 + len(LEGEND_ENTRIES) * LEGEND_LINE_HEIGHT
    return (width, height)


def render_legend(
    drawing: draw.Drawing,
    theme: Theme,
    x: float,
    y: float,
) -> None:
    """Render a legend explaining cables, channels and nodes."""
    width, height = compute_legend_dimensions(theme)

    drawing.append(draw.Rectangle(
        x, y, width, height,
        rx=LEGEND_BORDER_RADIUS, ry=LEGEND_BORDER_RADIUS,
        fill=theme.legend_background,
    ))

    sx = x + LEGEND_PADDING
    tx = sx + LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP
    for i, name in enumerate(LEGEND_ENTRIES):
        cy = y + LEGEND_PADDING + (i + 0.5) * LEGEND_LINE_HEIGHT

        if name == "Standard Cable":
            drawing.append(draw.Rectangle(
                sx, cy - LEGEND_SWATCH_HEIGHT / 2,
                LEGEND_SWATCH_WIDTH, LEGEND_SWATCH_HEIGHT,
                rx=3, ry=3,
                fill=theme.cable_colors[0],
            ))
        elif name == "Channel":
            drawing.append(draw.Line(
                sx, cy, sx + LEGEND_SWATCH_WIDTH, cy,
                stroke=theme.channel_color,
                stroke_width=theme.channel_width,
                stroke_dasharray=theme.channel_dash,
            ))
        else:
            drawing.append(draw.Rectangle(
                sx, cy - LEGEND_SWATCH_HEIGHT / 2 - 3,
                LEGEND_SWATCH_WIDTH, LEGEND_SWATCH_HEIGHT + 6,
                fill=theme.node_fill,
                stroke=theme.node_stroke,
                stroke_width=theme.node_stroke_width,
            ))

        drawing.append(draw.Text(
            name,
            theme.legend_font_size,
            tx, cy,
            fill=theme.legend_text_color,
            font_family=theme.label_font_family,
            dominant_baseline="central",
        ))
