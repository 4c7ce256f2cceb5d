"""Colour themes for path figures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Colours used by the path renderer."""

    name: str
    path_colors: tuple[str, ...]
    lost_color: str
    scent_color: str
    grid_line_color: str
    background_color: str
    text_color: str
    heatmap_cmap: str = "Greys"


DEFAULT_THEME = Theme(
    name="default",
    path_colors=(
        "#2563eb",
        "#16a34a",
        "#9333ea",
        "#ea580c",
        "#0891b2",
        "#ca8a04",
    ),
    lost_color="#dc2626",
    scent_color="#f97316",
    grid_line_color="#d1d5db",
    background_color="#ffffff",
    text_color="#111827",
)

DARK_THEME = Theme(
    name="dark",
    path_colors=(
        "#60a5fa",
        "#4ade80",
        "#c084fc",
        "#fb923c",
        "#22d3ee",
        "#facc15",
    ),
    lost_color="#f87171",
    scent_color="#fdba74",
    grid_line_color="#374151",
    background_color="#111827",
    text_color="#f9fafb",
    heatmap_cmap="magma",
)

REGISTERED_THEMES: dict[str, Theme] = {theme.name: theme for theme in (DEFAULT_THEME, DARK_THEME)}


def get_theme(name: str) -> Theme:
    """Look up a registered theme by name."""
    try:
        return REGISTERED_THEMES[name]
    except KeyError as exc:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"unknown theme {name!r}; must be one of {valid}") from exc
