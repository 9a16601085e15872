"""Rich console output for sparklines and charts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from sparkline.core.models import ChartOptions, SparklineOptions
from sparkline.display.charts import chart_layout, spark_points

console = Console()


def display_sparkline(series: Sequence[Any], title: str | None = None,
                      options: SparklineOptions | None = None,
                      style: str = "cyan") -> None:
    points = spark_points(series, options)
    line = Text("".join(p.glyph for p in points), style=style)
    lo = min(p.value for p in points)
    hi = max(p.value for p in points)
    if title:
        console.print(Text.assemble((f"{title}: ", "bold"), line, (f"  ({lo:g} → {hi:g})", "dim")))
    else:
        console.print(line)


def display_chart(series: Sequence[Any], title: str | None = None,
                  options: ChartOptions | None = None) -> None:
    layout = chart_layout(series, options)
    # Text, not markup: labels may contain square brackets
    body = Text(layout.render(), no_wrap=True)
    console.print()
    console.print(Panel(
        body,
        title=f"[bold]{title}[/]" if title else None,
        subtitle=f"Rows: {len(layout.rows)}  Points: {len(layout.rows[0].cells)}",
        border_style="dim",
        expand=False,
    ))
    console.print()
