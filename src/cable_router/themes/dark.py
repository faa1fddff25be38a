"""Dark grey theme."""

from cable_router.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_fill="#3a3a3a",
    node_stroke="#e0e0e0",
    node_stroke_width=1.5,
    node_corner_radius=4.0,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#ffffff",
    title_font_size=24.0,
    channel_color="#6c757d",
    channel_width=3.0,
    channel_dash="5,3",
    cable_width=2.0,
    cable_marker_radius=3.0,
    legend_background="rgba(0, 0, 0, 0.3)",
    legend_text_color="#e0e0e0",
    legend_font_size=13.0,
)
