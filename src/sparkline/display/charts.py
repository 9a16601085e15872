"""Block-glyph sparklines and multi-line bar charts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sparkline.core.labels import align_ylabels, fit, prepend_by
from sparkline.core.models import (
    ChartLayout, ChartOptions, ChartRow, SparklineOptions, SparkPoint,
)
from sparkline.core.scale import extract_values, quantize, row_thresholds


def spark_points(series: Sequence[Any], options: SparklineOptions | None = None) -> list[SparkPoint]:
    """Quantize every point of the series onto the glyph palette."""
    opts = options or SparklineOptions()
    bars = list(opts.spark_bars)
    values = extract_values(series, opts.values)
    levels = quantize(values, len(bars))
    return [
        SparkPoint(index=i, value=v, level=level, glyph=bars[level])
        for i, (v, level) in enumerate(zip(values, levels))
    ]


def sparkline(series: Sequence[Any], options: SparklineOptions | None = None) -> str:
    """Render a one-line sparkline, one glyph per point."""
    return "".join(p.glyph for p in spark_points(series, options))


def _chart_line(values: list[float], threshold: float, label: str,
                opts: ChartOptions) -> tuple[list[bool], str]:
    cells = [v >= threshold for v in values]
    bars = "".join(fit(opts.bar if filled else " ", opts.bar_width) for filled in cells)
    return cells, f"{label}|{bars}"


def chart_layout(series: Sequence[Any], options: ChartOptions | None = None) -> ChartLayout:
    """Lay out the chart grid, axis rule and interleaved x labels."""
    opts = options or ChartOptions()
    series = list(series)
    values = extract_values(series, opts.values)
    x_labels = [fit(label, opts.bar_width * 2) for label in opts.x_labels(series)]

    thresholds = row_thresholds(values, opts.height, opts.start_at_zero)
    ylabels, ylabel_width = align_ylabels(thresholds, opts.y_labels)

    rows: list[ChartRow] = []
    lines: list[str] = []
    # Top row first
    for threshold, label in reversed(list(zip(thresholds, ylabels))):
        cells, line = _chart_line(values, threshold, label, opts)
        rows.append(ChartRow(threshold=threshold, label=label, cells=cells))
        lines.append(line)

    x_axis = prepend_by("-" * (opts.bar_width * len(values) + 1), ylabel_width + 1)
    # Alternate labels between two lines so wide labels don't collide
    x_labels_even = prepend_by("".join(x_labels[0::2]), ylabel_width + 1)
    x_labels_odd = prepend_by("".join(x_labels[1::2]), ylabel_width + opts.bar_width + 1)

    return ChartLayout(
        rows=rows,
        row_lines=lines,
        label_width=ylabel_width,
        bar_width=opts.bar_width,
        x_axis=x_axis,
        x_labels_even=x_labels_even,
        x_labels_odd=x_labels_odd,
    )


def chart(series: Sequence[Any], options: ChartOptions | None = None) -> str:
    """Render a labeled multi-line bar chart."""
    return chart_layout(series, options).render()
