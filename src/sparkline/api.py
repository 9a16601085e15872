"""Public Python API — block-glyph sparklines and charts.

Usage:
    import sparkline.api as sp

    sp.sparkline([1, 2, 3, 4, 5, 6, 7, 8])           # "▁▂▃▄▅▆▇█"
    sp.sparkline([-100, 0, 100], spark_bars=".:|")  # ".:|"

    # Records: pass a per-point accessor
    sp.sparkline(rows, values=lambda r: r["count"])

    # Multi-line chart with labels
    print(sp.chart(counts, height=5, start_at_zero=True))

    # Timestamped points
    sp.chart(points, values=lambda p: p["n"],
             x_labels=sp.time_labels(lambda p: p["ts"], sp.Granularity.HOUR))
    sp.time_label("2017-03-14T10:20:30Z", sp.Granularity.DAY)  # "Tu"

    # ibis tables for programmatic use
    sp.chart_frame(counts, height=5).to_polars()
    sp.export({"chart": sp.chart_frame(counts), "points": sp.sparkline_frame(counts)}, "csv")
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Any

import ibis

from sparkline.core.errors import InvalidOptions
from sparkline.core.models import ChartOptions, SparklineOptions
from sparkline.core.timelabel import Granularity, time_label, time_labels
from sparkline.display import charts


def _options(cls: type, kwargs: dict[str, Any]):
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise InvalidOptions(
            f"Unknown option(s) for {cls.__name__}: {', '.join(unknown)}"
        )
    return cls(**kwargs)


def sparkline(series: Sequence[Any], **kwargs) -> str:
    """One glyph per point. Options: values, spark_bars."""
    return charts.sparkline(series, _options(SparklineOptions, kwargs))


def chart(series: Sequence[Any], **kwargs) -> str:
    """Labeled bar chart. Options: height, bar, bar_width, start_at_zero,
    x_labels, y_labels, values."""
    return charts.chart(series, _options(ChartOptions, kwargs))


def sparkline_frame(series: Sequence[Any], **kwargs) -> ibis.Table:
    from sparkline.frames import sparkline_frame as _frame
    return _frame(charts.spark_points(series, _options(SparklineOptions, kwargs)))


def chart_frame(series: Sequence[Any], **kwargs) -> ibis.Table:
    from sparkline.frames import chart_frame as _frame
    return _frame(charts.chart_layout(series, _options(ChartOptions, kwargs)))


def export(tables: dict[str, ibis.Table], fmt: str = "csv") -> None:
    """Write frames to stdout as csv or json lines."""
    from sparkline.frames import export_tables
    export_tables(tables, fmt)
