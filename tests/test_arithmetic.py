"""Tests for the numeric helpers."""

import math

import pytest

from webcalc.arithmetic import evaluate, number_to_string, parse_number, round_significant


@pytest.mark.parametrize(
    "text,expected",
    [
        ("12", 12.0),
        ("5.", 5.0),
        (".5", 0.5),
        ("0.", 0.0),
        ("", 0.0),
        ("-3.25", -3.25),
        ("1e+21", 1e21),
        ("1e-7", 1e-7),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_number_special_values():
    assert parse_number("Infinity") == math.inf
    assert parse_number("-Infinity") == -math.inf
    assert math.isnan(parse_number("NaN"))


@pytest.mark.parametrize("text", ["-", "Infinit", "inf", "1.2.3", "abc", "1_000"])
def test_parse_number_garbage_is_nan(text):
    assert math.isnan(parse_number(text))


def test_round_significant():
    assert round_significant(0.1 + 0.2) == 0.3
    assert round_significant(1 / 3) == 0.333333333333333
    assert round_significant(1.1 * 1.1) == 1.21
    assert round_significant(0.0) == 0.0
    assert round_significant(math.inf) == math.inf


def test_evaluate_operators():
    assert evaluate("7", "2", "+") == 9
    assert evaluate("7", "2", "-") == 5
    assert evaluate("7", "2", "*") == 14
    assert evaluate("7", "2", "/") == 3.5
    assert evaluate("0.1", "0.2", "+") == 0.3


@pytest.mark.parametrize("a", ["1", "-1", "0", "123.5", "1e+300"])
def test_division_by_zero_is_positive_infinity(a):
    result = evaluate(a, "0", "/")
    assert not math.isfinite(result)
    assert result == math.inf


@pytest.mark.parametrize(
    "value,expected",
    [
        (492.0, "492"),
        (0.5, "0.5"),
        (-2.5, "-2.5"),
        (-0.0, "0"),
        (123.456, "123.456"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.2345e25, "1.2345e+25"),
        (1e-6, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-8, "1.5e-8"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ],
)
def test_number_to_string(value, expected):
    assert number_to_string(value) == expected


@pytest.mark.parametrize("value", [0.1, 1 / 3, 2.5e-7, 6.02e23, 123456789012.0, -42.125])
def test_number_to_string_parses_back(value):
    assert parse_number(number_to_string(value)) == value
