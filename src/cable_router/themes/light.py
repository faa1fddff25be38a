"""Light theme (white nodes on a pale canvas)."""

from cable_router.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#f8f9fa",
    node_fill="#ffffff",
    node_stroke="#495057",
    node_stroke_width=2.0,
    node_corner_radius=4.0,
    label_color="#212529",
    label_font_family="-apple-system, 'Segoe UI', Roboto, 'Helvetica Neue', sans-serif",
    label_font_size=14.0,
    title_color="#2c3e50",
    title_font_size=24.0,
    channel_color="#dee2e6",
    channel_width=3.0,
    channel_dash="5,3",
    cable_width=2.0,
    cable_marker_radius=3.0,
    legend_background="#ffffff",
    legend_text_color="#2c3e50",
    legend_font_size=13.0,
)
