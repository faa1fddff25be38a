"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Default padding around the diagram content."""

MIN_CANVAS_WIDTH: int = 800
"""Smallest automatic canvas width."""

MIN_CANVAS_HEIGHT: int = 600
"""Smallest automatic canvas height."""

TITLE_HEIGHT: float = 40.0
"""Vertical space reserved above the diagram for the title."""

# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
LEGEND_GAP: float = 30.0
"""Gap between content area and legend."""

LEGEND_LINE_HEIGHT: float = 22.0
"""Vertical height per legend entry."""

LEGEND_PADDING: float = 12.0
"""Internal padding of legend box."""

LEGEND_SWATCH_WIDTH: float = 20.0
"""Width of the swatch drawn before each legend label."""

LEGEND_SWATCH_HEIGHT: float = 10.0
"""Height of the swatch drawn before each legend label."""

LEGEND_TEXT_GAP: float = 10.0
"""Gap between swatch end and label text."""

LEGEND_CHAR_WIDTH_RATIO: float = 0.55
"""Character width as a fraction of font size for legend text sizing."""

LEGEND_BORDER_RADIUS: int = 6
"""Corner radius for legend background rectangle."""
