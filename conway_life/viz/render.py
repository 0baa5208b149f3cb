"""Matplotlib-based rendering of generations to images and animations."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib import animation
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage

from conway_life.config.types import Size
from conway_life.domain.board import build_grid_array
from conway_life.domain.generation import Generation
from conway_life.viz.theme import DEFAULT_THEME, Theme


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Two-color colormap: 0 dead, 1 live."""
    cmap = ListedColormap([theme.dead_cell_color, theme.live_cell_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def _draw_cell_grid(
    ax: plt.Axes,
    grid: np.ndarray,
    cmap: ListedColormap,
    norm: BoundaryNorm,
    theme: Theme = DEFAULT_THEME,
) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines on *ax*."""
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_facecolor(theme.dead_cell_color)
    return img


def _grid_for(generation: Generation, size: Size | None) -> np.ndarray:
    return build_grid_array(generation.coordinates(), size or generation.size)


def render_generation(
    generation: Generation,
    output_path: Path,
    size: Size | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render one generation as a static image."""
    cmap, norm = _cell_cmap(theme)
    fig, ax = plt.subplots(figsize=(4, 4))
    fig.patch.set_facecolor(theme.dead_cell_color)
    _draw_cell_grid(ax, _grid_for(generation, size), cmap, norm, theme=theme)
    ax.set_title(
        f"Generation {generation.number} ({len(generation)} live)",
        fontsize=10,
        color=theme.title_color,
    )
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)


def render_filmstrip(
    generations: Sequence[Generation],
    output_path: Path,
    n_frames: int = 6,
    size: Size | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render a horizontal filmstrip of evenly spaced generations."""
    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")
    if not generations:
        raise ValueError("generations must not be empty")
    actual_n = max(1, min(n_frames, len(generations)))
    indices = [int(i * (len(generations) - 1) / max(1, actual_n - 1)) for i in range(actual_n)]

    cmap, norm = _cell_cmap(theme)
    fig, axes = plt.subplots(1, actual_n, figsize=(3 * actual_n, 3), squeeze=False)
    fig.patch.set_facecolor(theme.dead_cell_color)

    for col_idx, index in enumerate(indices):
        generation = generations[index]
        ax = axes[0, col_idx]
        _draw_cell_grid(ax, _grid_for(generation, size), cmap, norm, theme=theme)
        ax.set_title(f"Generation {generation.number}", fontsize=9, color=theme.title_color)

    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200, facecolor=fig.get_facecolor())
    plt.close(fig)


def render_animation(
    generations: Sequence[Generation],
    output_path: Path,
    fps: int = 4,
    size: Size | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render the generations as an animation (GIF via Pillow, else FFmpeg)."""
    if fps < 1:
        raise ValueError("fps must be >= 1")
    if not generations:
        raise ValueError("generations must not be empty")

    cmap, norm = _cell_cmap(theme)
    fig, ax = plt.subplots(figsize=(4, 4))
    fig.patch.set_facecolor(theme.dead_cell_color)
    img = _draw_cell_grid(ax, _grid_for(generations[0], size), cmap, norm, theme=theme)
    title = ax.set_title(f"Generation {generations[0].number}", color=theme.title_color)
    fig.tight_layout()

    def update(frame_index: int) -> tuple[Any, ...]:
        generation = generations[frame_index]
        img.set_data(_grid_for(generation, size))
        title.set_text(f"Generation {generation.number}")
        return (img, title)

    anim = animation.FuncAnimation(
        fig, update, frames=len(generations), interval=max(1, int(1000 / fps)), blit=False
    )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    writer: animation.PillowWriter | animation.FFMpegWriter
    if output_path.suffix.lower() == ".gif":
        writer = animation.PillowWriter(fps=fps)
    else:
        writer = animation.FFMpegWriter(fps=fps)
    anim.save(output_path, writer=writer)
    plt.close(fig)
