import pytest

from sparkline.core.labels import align_ylabels, fit, left_pad, prepend_by
from sparkline.core.models import format_ylabel


@pytest.mark.parametrize("s", ["", "a", "abcd", "abcdefgh", "  x  ", "█"])
@pytest.mark.parametrize("width", [0, 1, 4, 9])
def test_fit_exact_width_and_idempotent(s, width):
    once = fit(s, width)
    assert len(once) == width
    assert fit(once, width) == once


def test_fit_pads_and_truncates():
    assert fit("ab", 4) == "ab  "
    assert fit("abcdef", 4) == "abcd"
    assert fit(12, 4) == "12  "


def test_fit_negative_width():
    assert fit("abc", -2) == ""


def test_left_pad():
    assert left_pad("7", 3) == "  7"
    assert left_pad("7", 3, "0") == "007"
    assert left_pad("1234", 3) == "1234"


def test_left_pad_multi_character_fill():
    assert left_pad("7", 4, "ab") == "aba7"
    assert left_pad("7", 3, "xyz") == "xy7"


def test_left_pad_empty_fill_and_non_strings():
    assert left_pad("7", 3, "") == "7"
    assert left_pad(42, 4) == "  42"
    assert left_pad("abc", -1) == "abc"


def test_prepend_by():
    assert prepend_by("x", 3) == "   x"
    assert prepend_by("", 2, "-") == "--"
    assert prepend_by("x", 0) == "x"


@pytest.mark.parametrize("num,expected", [
    (10, "10.0"),
    (2.5, "2.5"),
    (1.23456, "1.23"),
    (-0.125, "-0.12"),
    (33.333333, "33.33"),
])
def test_format_ylabel(num, expected):
    assert format_ylabel(num) == expected


def test_align_ylabels_pads_to_widest():
    labels, width = align_ylabels([0.0, 5.0, 100.0], format_ylabel)
    assert width == 5
    assert labels == ["  0.0", "  5.0", "100.0"]


def test_align_ylabels_custom_formatter():
    labels, width = align_ylabels([1.0, 20.0], lambda n: f"{n:.0f}k")
    assert labels == [" 1k", "20k"]
    assert width == 3
