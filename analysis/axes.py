"""Dual y-axis layout for exam charts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .theme import LIGHT, ThemePalette
from .vocabulary import MetricFamily

NameLocation = Literal["start", "end"]


@dataclass(frozen=True, slots=True)
class AxisDescriptor:
    """A numeric y-axis definition.

    Attributes:
        index: Axis index referenced by SeriesDescriptor.axis_index.
        family: Metric family plotted against the axis.
        name: Axis title.
        inverse: True when lower values render higher (ranks).
        name_location: Where the axis title sits along the axis.
        text_color: Label/title color.
        line_color: Axis line color.
        grid_color: Dashed split line color.
    """

    index: int
    family: MetricFamily
    name: str
    inverse: bool
    name_location: NameLocation
    text_color: str
    line_color: str
    grid_color: str


def plan_axes(palette: ThemePalette | None = None) -> tuple[AxisDescriptor, AxisDescriptor]:
    """Return the (score, rank) axis pair.

    The pair is independent of the data; only the palette changes it.
    """

    palette = palette or LIGHT
    magnitude_axis = AxisDescriptor(
        index=0,
        family=MetricFamily.magnitude,
        name="Score",
        inverse=False,
        name_location="end",
        text_color=palette.text_color,
        line_color=palette.axis_line_color,
        grid_color=palette.grid_color,
    )
    # rank 1 is best, so the rank axis is drawn upside down
    rank_axis = AxisDescriptor(
        index=1,
        family=MetricFamily.rank,
        name="Rank",
        inverse=True,
        name_location="start",
        text_color=palette.text_color,
        line_color=palette.axis_line_color,
        grid_color=palette.grid_color,
    )
    return magnitude_axis, rank_axis
