"""Visualization layer: themes and path renderer."""

from mars_robots.viz.render import build_visit_grid, render_paths
from mars_robots.viz.theme import (
    DARK_THEME,
    DEFAULT_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "build_visit_grid",
    "get_theme",
    "render_paths",
]
