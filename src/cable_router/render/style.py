"""Theme and style constants for cable diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CABLE_COLORS: tuple[str, ...] = (
    "#3498db", "#e74c3c", "#2ecc71", "#f39c12", "#9b59b6",
    "#1abc9c", "#d35400", "#34495e", "#16a085", "#c0392b",
    "#27ae60", "#e67e22", "#8e44ad", "#2980b9", "#f1c40f",
)


@dataclass
class Theme:
    """Visual theme for a cable diagram."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    node_corner_radius: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    channel_color: str
    channel_width: float
    channel_dash: str
    cable_width: float
    cable_marker_radius: float
    legend_background: str
    legend_text_color: str
    legend_font_size: float
    cable_colors: tuple[str, ...] = field(default=DEFAULT_CABLE_COLORS)
    # Alpha suffix appended to non-highlighted cable colours
    dim_alpha: str = "80"
