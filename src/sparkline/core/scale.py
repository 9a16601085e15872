"""Numeric scaling — value extraction, level boundaries, chart row thresholds."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from sparkline.core.errors import InvalidInput, InvalidOptions


def ensure_float(num: Any) -> float:
    if isinstance(num, bool) or not isinstance(num, (int, float)):
        raise InvalidInput(f"Expected a number, got {num!r}")
    value = float(num)
    if math.isnan(value):
        raise InvalidInput("NaN cannot be plotted")
    return value


def extract_values(series: Iterable[Any], accessor: Callable[[Any], Any]) -> list[float]:
    """Apply the accessor to every point and promote the result to float."""
    values = [ensure_float(accessor(point)) for point in series]
    if not values:
        raise InvalidInput("Cannot render an empty series")
    return values


def seq(start: float, step: float, count: int) -> list[float]:
    """``count`` evenly spaced values from ``start``.

    A non-positive step collapses to ``[start]``.
    """
    if step <= 0:
        return [start]
    return [start + i * step for i in range(count)]


def spark_boundaries(values: Sequence[float], level_count: int) -> list[float]:
    """Left edge of every level except the top one."""
    if level_count < 2:
        raise InvalidOptions(f"Need at least 2 levels, got {level_count}")
    if not values:
        raise InvalidInput("Cannot quantize an empty series")
    lo, hi = min(values), max(values)
    step = (hi - lo) / (level_count - 1)
    return seq(lo, step, level_count - 1)


def level_of(value: float, boundaries: Sequence[float], level_count: int) -> int:
    for i, boundary in enumerate(boundaries):
        if boundary >= value:
            return i
    return level_count - 1


def quantize(values: Sequence[float], level_count: int) -> list[int]:
    """Map every value to a level in ``range(level_count)``."""
    boundaries = spark_boundaries(values, level_count)
    return [level_of(v, boundaries, level_count) for v in values]


def value_range(values: Sequence[float], start_at_zero: bool = False) -> tuple[float, float]:
    if not values:
        raise InvalidInput("Cannot scale an empty series")
    lo, hi = min(values), max(values)
    if start_at_zero and lo >= 0:
        return 0.0, hi
    return lo, hi


def row_boundaries(values: Sequence[float], height: int,
                   start_at_zero: bool = False) -> list[float]:
    """Band edges from min to max inclusive.

    ``height + 1`` edges when the range spans at least ``height`` units,
    otherwise one edge per unit (so narrow ranges get fewer bands).
    """
    if height <= 0:
        raise InvalidOptions(f"height must be positive, got {height}")
    lo, hi = value_range(values, start_at_zero)
    span = hi - lo
    if span <= 0:
        return [lo]
    if span >= height:
        edges = seq(lo, span / height, height + 1)
        edges[-1] = hi
        return edges
    return seq(lo, 1.0, math.floor(span) + 1)


def row_thresholds(values: Sequence[float], height: int,
                   start_at_zero: bool = False) -> list[float]:
    """One threshold per chart row, ascending.

    A wide range keeps the lower edge of each of the ``height`` bands; a
    narrow range keeps every unit step up to and including max.
    """
    edges = row_boundaries(values, height, start_at_zero)
    lo, hi = value_range(values, start_at_zero)
    if hi - lo >= height:
        return edges[:-1]
    return edges
