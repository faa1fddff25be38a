"""Theme definitions for cable diagrams."""

from cable_router.themes.dark import DARK_THEME
from cable_router.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "LIGHT_THEME", "DARK_THEME"]
