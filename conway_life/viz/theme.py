"""Visualization theme presets for board renderers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Collection of board style tokens."""

    live_cell_color: str = "#4CAF50"
    dead_cell_color: str = "#1A1A1A"
    grid_line_color: str = "#333333"
    title_color: str = "white"


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    live_cell_color="#000000",
    dead_cell_color="#FFFFFF",
    grid_line_color="#CCCCCC",
    title_color="black",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a registered theme by name."""
    try:
        return REGISTERED_THEMES[name]
    except KeyError:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme '{name}'; expected one of: {valid}") from None
