"""Convert ChartSpec values into ECharts option payloads.

The browser passes the returned dict straight to `chart.setOption(...)`; no
chart logic runs client-side.
"""

from __future__ import annotations

from typing import Any, TypedDict

from analysis.axes import AxisDescriptor
from analysis.chart_spec import ChartSpec
from analysis.series import SeriesDescriptor


class EChartsSeries(TypedDict, total=False):
    """A single ECharts series entry."""

    name: str
    type: str
    yAxisIndex: int
    encode: dict[str, str]
    emphasis: dict[str, str]
    itemStyle: dict[str, str]
    lineStyle: dict[str, str]
    label: dict[str, Any]
    connectNulls: bool


class EChartsOption(TypedDict, total=False):
    """The full ECharts option for the student chart."""

    backgroundColor: str
    title: dict[str, Any]
    tooltip: dict[str, Any]
    legend: dict[str, Any]
    toolbox: dict[str, Any]
    dataset: dict[str, Any]
    dataZoom: list[dict[str, Any]]
    series: list[EChartsSeries]
    xAxis: dict[str, Any]
    yAxis: list[dict[str, Any]]
    grid: dict[str, Any]


def build_echarts_option(spec: ChartSpec) -> EChartsOption:
    """Build the ECharts option for a chart spec.

    Args:
        spec: Assembled chart specification.

    Returns:
        JSON-serializable ECharts option; series and legend follow
        `spec.dimensions[1:]` order.
    """

    text_style = {"color": spec.text_color}
    return {
        "backgroundColor": spec.background_color,
        "title": {"text": spec.title, "top": 10, "left": 10, "textStyle": text_style},
        "tooltip": {
            "trigger": "axis",
            "axisPointer": {"type": "shadow"},
            "backgroundColor": spec.background_color,
            "borderColor": spec.axis_line_color,
            "textStyle": text_style,
        },
        "legend": {"data": list(spec.dimensions[1:]), "top": "top", "textStyle": text_style},
        "toolbox": {
            "show": True,
            "orient": "horizontal",
            "left": "right",
            "top": "top",
            "feature": {"saveAsImage": {"show": True, "backgroundColor": spec.background_color}},
        },
        "dataset": {
            "dimensions": list(spec.dimensions),
            "source": [dict(row) for row in spec.dataset],
        },
        "dataZoom": [{"type": "slider", "start": 0, "end": 100, "textStyle": text_style}],
        "series": [_series(series, spec=spec) for series in spec.series],
        "xAxis": {
            "type": "category",
            "name": spec.time_axis_key,
            "nameTextStyle": text_style,
            "axisLine": {"lineStyle": {"color": spec.axis_line_color}},
            "axisLabel": text_style,
        },
        "yAxis": [_axis(axis) for axis in spec.axes],
        "grid": {"backgroundColor": spec.background_color},
    }


def _series(series: SeriesDescriptor, *, spec: ChartSpec) -> EChartsSeries:
    """Return one ECharts series for a descriptor."""

    payload: EChartsSeries = {
        "name": series.field_key,
        "type": series.chart_type,
        "yAxisIndex": series.axis_index,
        "encode": {"x": spec.time_axis_key, "y": series.field_key},
        "emphasis": {"focus": "series"},
        "label": {
            "show": True,
            "position": series.label_position,
            "color": spec.text_color,
            "textBorderColor": spec.label_border_color,
            "textBorderWidth": 2,
            "formatter": f"{{a}}: {{@[{spec.dimensions.index(series.field_key)}]}}",
        },
    }
    if series.color is not None:
        payload["itemStyle"] = {"color": series.color}
    if series.render_kind == "rank":
        payload["connectNulls"] = True
        if series.color is not None:
            payload["lineStyle"] = {"color": series.color}
    return payload


def _axis(axis: AxisDescriptor) -> dict[str, Any]:
    """Return one ECharts value axis."""

    return {
        "name": axis.name,
        "type": "value",
        "inverse": axis.inverse,
        "nameLocation": axis.name_location,
        "nameTextStyle": {"color": axis.text_color},
        "axisLine": {"lineStyle": {"color": axis.line_color}},
        "axisLabel": {"color": axis.text_color},
        "splitLine": {"lineStyle": {"color": axis.grid_color, "type": "dashed"}},
    }
