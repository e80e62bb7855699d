"""Light/dark palettes used when styling chart specifications.

Themes only change colors. Classification, axis direction and dataset values
are identical across themes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ThemeName = Literal["light", "dark"]

SERIES_COLORS: tuple[str, ...] = (
    "#5470c6",
    "#91cc75",
    "#fac858",
    "#ee6666",
    "#73c0de",
    "#3ba272",
    "#fc8452",
    "#9a60b4",
    "#ea7ccc",
)


@dataclass(frozen=True, slots=True)
class ThemePalette:
    """Colors for one visual theme.

    Attributes:
        name: Theme identifier.
        background_color: Chart and tooltip background.
        text_color: Titles, legends and axis labels.
        grid_color: Split lines behind the plot.
        axis_line_color: Axis lines and tooltip border.
        label_border_color: Outline drawn around value labels.
        series_colors: Cycled palette for series.
    """

    name: ThemeName
    background_color: str
    text_color: str
    grid_color: str
    axis_line_color: str
    label_border_color: str
    series_colors: tuple[str, ...] = SERIES_COLORS


LIGHT = ThemePalette(
    name="light",
    background_color="#ffffff",
    text_color="#333333",
    grid_color="#f0f0f0",
    axis_line_color="#cccccc",
    label_border_color="#fff",
)

DARK = ThemePalette(
    name="dark",
    background_color="#1e1e1e",
    text_color="#ffffff",
    grid_color="#2a2a2a",
    axis_line_color="#555555",
    label_border_color="#000",
)

PALETTES: dict[str, ThemePalette] = {LIGHT.name: LIGHT, DARK.name: DARK}


def palette_for_theme(name: str | None) -> ThemePalette:
    """Return the palette for a theme name, defaulting to light."""

    return PALETTES.get((name or "").strip().lower(), LIGHT)
