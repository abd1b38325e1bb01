"""Tests for the display formatter."""

import math

import pytest

from webcalc.calc_types import INITIAL_STATE, CalculatorState
from webcalc.formatter import display_lines, format_number


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_non_finite_is_infinity_symbol(value):
    assert format_number(value) == "∞"


@pytest.mark.parametrize(
    "value,expected",
    [
        (0.0, "0"),
        (-0.0, "0"),
        (100.0, "100"),
        (1000.0, "1,000"),
        (1234567.891, "1,234,567.891"),
        (999999999999.0, "999,999,999,999"),
        (0.1, "0.1"),
        (1 / 3, "0.3333333333"),
        (2 / 3, "0.6666666667"),
        (0.000001, "0.000001"),
        (-0.5, "-0.5"),
        (-1234.5, "-1,234.5"),
        (2 ** -11, "0.0004882813"),
    ],
)
def test_fixed_notation(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (1e12, "1.000000e12"),
        (1234567890123.0, "1.234568e12"),
        (-1234567890123.0, "-1.234568e12"),
        (1e100, "1.000000e100"),
        (1e-7, "1.000000e-7"),
        (1.5e-300, "1.500000e-300"),
        (9.9999999e15, "1.000000e16"),
    ],
)
def test_exponential_notation(value, expected):
    assert format_number(value) == expected


def test_custom_group_separator():
    assert format_number(1234567.5, group_separator=" ") == "1 234 567.5"


def test_display_lines_initial():
    lines = display_lines(INITIAL_STATE)
    assert lines.current == "0"
    assert lines.previous == ""


def test_display_lines_hides_trailing_point():
    assert display_lines(CalculatorState(current="0.")).current == "0"
    assert display_lines(CalculatorState(current="12.50")).current == "12.5"


def test_display_lines_pending_operator():
    state = CalculatorState(current="3", previous="1234.5", operator="/")
    lines = display_lines(state)
    assert lines.previous == "1,234.5 /"
    assert lines.current == "3"


def test_display_lines_needs_both_previous_and_operator():
    assert display_lines(CalculatorState(current="3", previous="", operator="+")).previous == ""
