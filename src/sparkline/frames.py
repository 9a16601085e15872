"""Convert render results to ibis memtables.

    sparkline_frame(...) -> one row per point (index/value/level/glyph)
    chart_frame(...)     -> one row per chart row, top-down

Tables can be materialized to any backend:

    chart_frame(layout).to_polars()
    sparkline_frame(points).to_pandas()
"""

from __future__ import annotations

import sys

import ibis

from sparkline.core.models import ChartLayout, SparkPoint


def sparkline_frame(points: list[SparkPoint]) -> ibis.Table:
    return ibis.memtable([
        {"index": p.index, "value": p.value, "level": p.level, "glyph": p.glyph}
        for p in points
    ])


def chart_frame(layout: ChartLayout) -> ibis.Table:
    rows = [
        {
            "row": i,
            "threshold": round(r.threshold, 2),
            "label": r.label.strip(),
            "filled": r.filled,
            "line": line,
        }
        for i, (r, line) in enumerate(zip(layout.rows, layout.row_lines))
    ]
    return ibis.memtable(rows)


def export_tables(tables: dict[str, ibis.Table], fmt: str) -> None:
    """Export ibis tables to stdout as csv or json lines."""
    if fmt == "csv":
        for name, table in tables.items():
            sys.stdout.write(f"# {name}\n")
            table.to_pandas().to_csv(sys.stdout, index=False)
            sys.stdout.write("\n")
    elif fmt == "json":
        for name, table in tables.items():
            sys.stdout.write(f"# {name}\n")
            table.to_pandas().to_json(sys.stdout, orient="records", lines=True, force_ascii=False)
            sys.stdout.write("\n")
    else:
        raise ValueError(f"Unknown export format: {fmt!r}")
