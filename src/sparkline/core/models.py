"""Option and result models as dataclasses."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from sparkline.core.errors import InvalidOptions

SPARK_BARS = ("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")
BAR = "█"


def identity(point: Any) -> Any:
    return point


def index_labels(series: Sequence[Any]) -> list[str]:
    """Default x labels: zero-based column indices."""
    return [str(i) for i in range(len(series))]


def format_ylabel(num: float) -> str:
    """Round to 2 decimals and render as a float literal, e.g. ``10.0``."""
    return str(round(float(num), 2))


@dataclass
class SparklineOptions:
    values: Callable[[Any], Any] = identity
    spark_bars: Sequence[str] = SPARK_BARS

    def __post_init__(self) -> None:
        if isinstance(self.spark_bars, str):
            self.spark_bars = tuple(self.spark_bars)
        if len(self.spark_bars) < 2:
            raise InvalidOptions(
                f"spark_bars needs at least 2 glyphs, got {len(self.spark_bars)}"
            )


@dataclass
class ChartOptions:
    height: int = 10
    bar: str = BAR
    bar_width: int = 2
    start_at_zero: bool = False
    x_labels: Callable[[Sequence[Any]], Sequence[Any]] = index_labels
    y_labels: Callable[[float], str] = format_ylabel
    values: Callable[[Any], Any] = identity

    def __post_init__(self) -> None:
        if isinstance(self.height, bool) or not isinstance(self.height, int) or self.height <= 0:
            raise InvalidOptions(f"height must be a positive int, got {self.height!r}")
        if isinstance(self.bar_width, bool) or not isinstance(self.bar_width, int) or self.bar_width < 1:
            raise InvalidOptions(f"bar_width must be a positive int, got {self.bar_width!r}")


@dataclass
class SparkPoint:
    index: int
    value: float
    level: int
    glyph: str


@dataclass
class ChartRow:
    threshold: float
    label: str  # left-padded to the chart's label width
    cells: list[bool] = field(default_factory=list)

    @property
    def filled(self) -> int:
        return sum(self.cells)


@dataclass
class ChartLayout:
    rows: list[ChartRow]  # top-down, descending threshold
    row_lines: list[str]  # rendered rows, same order as rows
    label_width: int
    bar_width: int
    x_axis: str
    x_labels_even: str
    x_labels_odd: str

    def lines(self) -> list[str]:
        return [*self.row_lines, self.x_axis, self.x_labels_even, self.x_labels_odd]

    def render(self) -> str:
        return "\n".join(self.lines())
