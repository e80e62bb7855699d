"""Pure chart engine for exam records.

This package turns exam records and a subject/metric selection into chart
specifications. It must not import Django or perform any database I/O.
"""

from .chart_spec import ChartSpec, build_chart_spec

__all__ = ["ChartSpec", "build_chart_spec"]
