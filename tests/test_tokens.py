"""Tests for input decoding."""

import pytest

from webcalc.calc_types import (
    CLEAR,
    DECIMAL_POINT,
    DELETE,
    EQUALS,
    NEGATE,
    PERCENT,
    InputToken,
)
from webcalc.tokens import decode_button, decode_key, decode_keys


@pytest.mark.parametrize("key", list("0123456789"))
def test_digit_keys(key):
    assert decode_key(key) == InputToken.digit(key)


@pytest.mark.parametrize("key", ["+", "-", "*", "/"])
def test_operator_keys(key):
    assert decode_key(key) == InputToken.operator(key)


@pytest.mark.parametrize(
    "key,expected",
    [
        (".", DECIMAL_POINT),
        ("Enter", EQUALS),
        ("=", EQUALS),
        ("Backspace", DELETE),
        ("Escape", CLEAR),
        ("n", NEGATE),
        ("N", NEGATE),
        ("%", PERCENT),
    ],
)
def test_command_keys(key, expected):
    assert decode_key(key) == expected


@pytest.mark.parametrize("key", ["", "a", "Shift", "F1", "x", "12", "Tab"])
def test_unknown_keys_are_ignored(key):
    assert decode_key(key) is None


@pytest.mark.parametrize(
    "label,op",
    [("÷", "/"), ("×", "*"), ("−", "-"), ("+", "+"), ("/", "/"), ("*", "*"), ("-", "-")],
)
def test_operator_buttons(label, op):
    assert decode_button(label) == InputToken.operator(op)


@pytest.mark.parametrize(
    "label,expected",
    [
        ("AC", CLEAR),
        ("DEL", DELETE),
        ("%", PERCENT),
        ("±", NEGATE),
        (".", DECIMAL_POINT),
        ("=", EQUALS),
        ("7", InputToken.digit("7")),
    ],
)
def test_command_buttons(label, expected):
    assert decode_button(label) == expected


def test_unknown_button():
    assert decode_button("sin") is None
    assert decode_button("") is None


def test_decode_keys_skips_whitespace_and_garbage():
    tokens = decode_keys("12 + 3 ?=")
    assert tokens == [
        InputToken.digit("1"),
        InputToken.digit("2"),
        InputToken.operator("+"),
        InputToken.digit("3"),
        EQUALS,
    ]


def test_decode_keys_terminal_aliases():
    assert decode_keys("cCdDn") == [CLEAR, CLEAR, DELETE, DELETE, NEGATE]


def test_token_constructors_validate():
    with pytest.raises(ValueError):
        InputToken.digit("12")
    with pytest.raises(ValueError):
        InputToken.digit("a")
    with pytest.raises(ValueError):
        InputToken.operator("^")
