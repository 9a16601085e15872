"""Fixed-width string helpers and y-axis label alignment."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


def fit(s: Any, width: int) -> str:
    """Pad with trailing spaces or truncate to exactly ``width`` characters."""
    width = max(width, 0)
    return str(s).ljust(width)[:width]


def left_pad(s: Any, width: int, char: str = " ") -> str:
    """Prepend ``char`` until ``s`` is ``width`` long. Longer strings are kept whole.

    A multi-character ``char`` is repeated and cut to the missing width; an
    empty one pads nothing.
    """
    s = str(s)
    missing = width - len(s)
    if missing <= 0 or not char:
        return s
    return (char * missing)[:missing] + s


def prepend_by(s: str, count: int, char: str = " ") -> str:
    return char * max(count, 0) + s


def align_ylabels(thresholds: Sequence[float],
                  formatter: Callable[[float], str]) -> tuple[list[str], int]:
    """Format every threshold and right-align to the widest label.

    Returns the padded labels (same order as ``thresholds``) and their width.
    """
    raw = [str(formatter(t)) for t in thresholds]
    width = max((len(s) for s in raw), default=0)
    return [left_pad(s, width) for s in raw], width
