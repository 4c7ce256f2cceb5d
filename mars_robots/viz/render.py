"""Matplotlib rendering of robot paths over the grid.

Axis convention: y grows upwards, so grid row 0 is drawn at the bottom.
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from mars_robots.config.constants import MIN_FIGURE_INCHES
from mars_robots.config.types import RenderConfig
from mars_robots.io.paths import resolve_within_base
from mars_robots.simulation.engine import RobotOutcome, SimulationRun
from mars_robots.viz.theme import Theme, get_theme

logger = logging.getLogger(__name__)

_START_MARKER_SIZE = 60
_LOST_MARKER_SIZE = 120
_SCENT_MARKER_SIZE = 220
_PATH_LINE_WIDTH = 1.8
_ARROW_SCALE = 0.3

# Orientation letter -> unit arrow for the heading glyph
_HEADING_VECTORS: dict[str, tuple[float, float]] = {
    "N": (0.0, 1.0),
    "E": (1.0, 0.0),
    "S": (0.0, -1.0),
    "W": (-1.0, 0.0),
}


def build_visit_grid(run: SimulationRun) -> np.ndarray:
    """Return an ``(height, width)`` int array counting visits per grid point.

    Index ``[y, x]`` is offset by the grid's lower-left corner. Off-grid
    positions (possible only for robots that start off the grid) are skipped.
    """
    bounds = run.bounds
    grid = np.zeros((bounds.height, bounds.width), dtype=int)
    for outcome in run.outcomes:
        seen: set[tuple[int, int]] = set()
        for position in outcome.visited:
            key = (position.x, position.y)
            if key in seen or not bounds.contains(position.coordinate):
                continue
            seen.add(key)
            grid[position.y - bounds.lower_left.y, position.x - bounds.lower_left.x] += 1
    return grid


def _draw_grid(ax: plt.Axes, run: SimulationRun, theme: Theme) -> None:
    """Grid lines through every lattice point, one unit apart."""
    ll, ur = run.bounds.lower_left, run.bounds.upper_right
    for x in range(ll.x, ur.x + 1):
        ax.axvline(x, color=theme.grid_line_color, linewidth=0.6, zorder=0)
    for y in range(ll.y, ur.y + 1):
        ax.axhline(y, color=theme.grid_line_color, linewidth=0.6, zorder=0)
    ax.set_xlim(ll.x - 0.5, ur.x + 0.5)
    ax.set_ylim(ll.y - 0.5, ur.y + 0.5)
    ax.set_xticks(range(ll.x, ur.x + 1))
    ax.set_yticks(range(ll.y, ur.y + 1))
    ax.set_aspect("equal")
    ax.tick_params(colors=theme.text_color, labelsize=7)
    ax.set_facecolor(theme.background_color)


def _draw_outcome(ax: plt.Axes, outcome: RobotOutcome, color: str, theme: Theme) -> None:
    xs = [p.x for p in outcome.visited]
    ys = [p.y for p in outcome.visited]
    ax.plot(
        xs,
        ys,
        color=color,
        linewidth=_PATH_LINE_WIDTH,
        zorder=2,
        label=f"Robot {outcome.robot_index}",
    )
    ax.scatter([xs[0]], [ys[0]], s=_START_MARKER_SIZE, color=color, edgecolors="black", zorder=3)

    final = outcome.final
    if outcome.lost:
        ax.scatter(
            [final.x],
            [final.y],
            s=_LOST_MARKER_SIZE,
            marker="X",
            color=theme.lost_color,
            edgecolors="black",
            linewidths=0.5,
            zorder=4,
        )
        return
    dx, dy = _HEADING_VECTORS[final.orientation.value]
    ax.arrow(
        final.x,
        final.y,
        dx * _ARROW_SCALE,
        dy * _ARROW_SCALE,
        head_width=0.15,
        head_length=0.12,
        color=color,
        length_includes_head=True,
        zorder=4,
    )


def render_paths(
    run: SimulationRun,
    output_path: Path,
    config: RenderConfig | None = None,
    base_dir: Path | None = None,
) -> Path:
    """Draw every robot's path, losses and scents, then save the figure.

    Lost robots end in a cross at their last valid position; surviving robots
    end in a heading arrow. When ``base_dir`` is given the output must stay
    inside it.
    """
    config = config or RenderConfig()
    theme = get_theme(config.theme)
    if base_dir is not None:
        output_path = resolve_within_base(output_path, base_dir)

    bounds = run.bounds
    fig_w = max(MIN_FIGURE_INCHES, bounds.width * config.cell_size)
    fig_h = max(MIN_FIGURE_INCHES, bounds.height * config.cell_size)
    fig, ax = plt.subplots(figsize=(fig_w, fig_h))
    fig.patch.set_facecolor(theme.background_color)
    try:
        _draw_grid(ax, run, theme)

        if config.show_visit_heatmap:
            ll, ur = bounds.lower_left, bounds.upper_right
            ax.imshow(
                build_visit_grid(run),
                cmap=theme.heatmap_cmap,
                origin="lower",
                extent=(ll.x - 0.5, ur.x + 0.5, ll.y - 0.5, ur.y + 0.5),
                alpha=0.35,
                zorder=1,
            )

        if config.show_scents and run.scents:
            ax.scatter(
                [c.x for c in run.scents],
                [c.y for c in run.scents],
                s=_SCENT_MARKER_SIZE,
                facecolors="none",
                edgecolors=theme.scent_color,
                linewidths=2.0,
                zorder=3,
                label="Scent",
            )

        for i, outcome in enumerate(run.outcomes):
            color = theme.path_colors[i % len(theme.path_colors)]
            _draw_outcome(ax, outcome, color, theme)

        ax.set_title(
            f"{len(run.outcomes)} robots, {run.lost_count} lost",
            color=theme.text_color,
            fontsize=10,
        )
        if run.outcomes:
            ax.legend(
                loc="upper left",
                bbox_to_anchor=(1.02, 1.0),
                fontsize=7,
                frameon=False,
                labelcolor=theme.text_color,
            )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(
            output_path,
            dpi=config.dpi,
            bbox_inches="tight",
            facecolor=theme.background_color,
        )
    finally:
        plt.close(fig)
    logger.info("rendered %d robot paths to %s", len(run.outcomes), output_path)
    return output_path
