"""Per-series render classification for exam charts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .field_keys import FieldKey
from .theme import ThemePalette
from .vocabulary import MetricFamily

RenderKind = Literal["magnitude", "rank"]
SeriesChartType = Literal["bar", "line"]
LabelPosition = Literal["insideTop", "top"]


@dataclass(frozen=True, slots=True)
class SeriesDescriptor:
    """How one field key is drawn.

    Attributes:
        field_key: Record field name, matching a chart dimension.
        render_kind: `magnitude` for scores, `rank` for rank positions.
        axis_index: 0 for the score axis, 1 for the inverted rank axis.
        color_index: Position in the cycled series palette.
        chart_type: Renderer series type (scores as bars, ranks as lines).
        label_position: Where value labels are anchored.
        color: Resolved palette color, when a palette was supplied.
    """

    field_key: str
    render_kind: RenderKind
    axis_index: int
    color_index: int
    chart_type: SeriesChartType
    label_position: LabelPosition
    color: str | None = None


@dataclass(frozen=True, slots=True)
class _SeriesStyle:
    render_kind: RenderKind
    axis_index: int
    chart_type: SeriesChartType
    label_position: LabelPosition


_STYLE_BY_FAMILY: dict[MetricFamily, _SeriesStyle] = {
    MetricFamily.magnitude: _SeriesStyle("magnitude", 0, "bar", "insideTop"),
    MetricFamily.rank: _SeriesStyle("rank", 1, "line", "top"),
}


def classify_series(
    field_key: FieldKey,
    position_index: int,
    palette_size: int,
    *,
    palette: ThemePalette | None = None,
) -> SeriesDescriptor:
    """Classify a field key into a series descriptor.

    The metric family alone decides render kind and axis; data values never
    participate. Colors cycle by position, independent of subject or metric.

    Args:
        field_key: Resolved field key.
        position_index: Zero-based position among the chart's series.
        palette_size: Number of colors in the series palette.
        palette: Optional theme palette used to resolve the color.

    Returns:
        SeriesDescriptor for the field key.

    Raises:
        ValueError: When `palette_size` is not positive.
    """

    if palette_size < 1:
        raise ValueError("palette_size must be at least 1.")

    style = _STYLE_BY_FAMILY[field_key.family]
    color_index = position_index % palette_size
    color = None
    if palette is not None and palette.series_colors:
        color = palette.series_colors[color_index % len(palette.series_colors)]
    return SeriesDescriptor(
        field_key=field_key.key,
        render_kind=style.render_kind,
        axis_index=style.axis_index,
        color_index=color_index,
        chart_type=style.chart_type,
        label_position=style.label_position,
        color=color,
    )


def classify_all(field_keys: tuple[FieldKey, ...], *, palette: ThemePalette) -> tuple[SeriesDescriptor, ...]:
    """Classify field keys in order, cycling the palette's series colors."""

    palette_size = len(palette.series_colors)
    return tuple(
        classify_series(field_key, index, palette_size, palette=palette) for index, field_key in enumerate(field_keys)
    )
