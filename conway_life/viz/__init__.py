"""Visualization layer: themes and matplotlib renderers."""

from conway_life.viz.render import render_animation, render_filmstrip, render_generation
from conway_life.viz.theme import DEFAULT_THEME, PAPER_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_animation",
    "render_filmstrip",
    "render_generation",
]
