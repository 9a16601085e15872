"""Error taxonomy for rendering calls."""

from __future__ import annotations


class SparklineError(Exception):
    pass


class InvalidInput(SparklineError, ValueError):
    """The series (or a timestamp) cannot be rendered: empty, non-numeric, unparseable."""


class InvalidOptions(SparklineError, ValueError):
    """An option is out of range or unknown."""
