"""Routing constants used across the routing modules.

Centralizes the magic numbers of connection-point selection, route
synthesis, obstacle avoidance, channel snapping and cable spacing.
"""

# ---------------------------------------------------------------------------
# Connection points
# ---------------------------------------------------------------------------
ALIGNMENT_THRESHOLD: float = 20.0
"""Centre offset below which two nodes count as aligned on an axis."""

EDGE_SPREAD_RATIO: float = 0.4
"""Fraction of an edge's length usable on each side of its midpoint."""

EDGE_SPREAD_MAX: float = 30.0
"""Upper bound on the half-span used to spread cables along one edge."""

# ---------------------------------------------------------------------------
# Route synthesis
# ---------------------------------------------------------------------------
MIN_PERPENDICULAR_LENGTH: float = 30.0
"""Base distance a cable travels straight out of its node."""

EXIT_OFFSET: float = 2.0
"""Extra gap so cables don't hug the node border."""

EXIT_DISTANCE: float = MIN_PERPENDICULAR_LENGTH + EXIT_OFFSET
"""Length of the perpendicular exit and approach stubs."""

# ---------------------------------------------------------------------------
# Obstacles
# ---------------------------------------------------------------------------
OBSTACLE_PADDING: float = 5.0
"""Padding around a node when testing a segment for intersection."""

DETOUR_PADDING: float = 20.0
"""Padding around an obstacle when building a detour."""

DETOUR_CLEARANCE: float = 10.0
"""Extra distance beyond the padded obstacle for the detour run."""

# ---------------------------------------------------------------------------
# Channels
# ---------------------------------------------------------------------------
MIN_SNAP_LENGTH: float = 30.0
"""Segments shorter than this on both axes are never snapped to a channel."""

SNAP_ITERATIONS: int = 3
"""Maximum number of opportunistic snapping passes."""

# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------
CABLE_SPACING: float = 3.0
"""Perpendicular distance between parallel overlapping cable segments."""

SPACING_BUCKET: float = 5.0
"""Grid that segment positions are rounded to before grouping."""
