"""
Display formatter: float -> bounded-length display string.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from . import config
from .arithmetic import parse_number, round_half_up
from .calc_types import CalculatorState

INFINITY_SYMBOL = "∞"


def _format_exponential(value: float) -> str:
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    exponent = Decimal(magnitude).adjusted()
    rounded = round_half_up(magnitude, config.EXPONENT_FRACTION_DIGITS - exponent)
    if rounded.adjusted() > exponent:  # 9.9999995e5 rounds up to 1.000000e6
        exponent += 1
        rounded = round_half_up(magnitude, config.EXPONENT_FRACTION_DIGITS - exponent)
    mantissa = format(rounded.scaleb(-exponent), "f")
    return f"{sign}{mantissa}e{exponent}"


def _group(int_part: str, separator: str) -> str:
    sign = "-" if int_part.startswith("-") else ""
    grouped = f"{int(int_part.lstrip('-')):,}"
    if separator != ",":
        grouped = grouped.replace(",", separator)
    return sign + grouped


def format_number(value: float, group_separator: str = config.GROUP_SEPARATOR) -> str:
    """
    Format a number for the calculator display.

    - Non-finite values (including NaN) render as "∞".
    - Nonzero magnitudes >= 1e12 or < 1e-6 use exponential notation with
      6 fractional mantissa digits and a bare exponent ("1.234568e12").
    - Everything else is rounded to 10 fractional digits, trailing zeros
      are trimmed and the integer part is grouped in thousands.

    Args:
        value: Number to format
        group_separator: Thousands separator for the integer part

    Returns:
        Display string
    """
    if not math.isfinite(value):
        return INFINITY_SYMBOL
    if value == 0:
        value = 0.0

    magnitude = abs(value)
    if magnitude != 0 and (magnitude >= config.EXPONENT_UPPER or magnitude < config.EXPONENT_LOWER):
        return _format_exponential(value)

    text = format(round_half_up(value, config.FIXED_FRACTION_DIGITS), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    int_part, _, frac_part = text.partition(".")
    grouped = _group(int_part, group_separator)
    return f"{grouped}.{frac_part}" if frac_part else grouped


@dataclass(slots=True)
class DisplayLines:
    """The two display rows: the pending expression above the current value."""

    current: str
    previous: str = ""


def display_lines(state: CalculatorState, group_separator: str = config.GROUP_SEPARATOR) -> DisplayLines:
    """Render a state into its display rows using ASCII operator symbols."""
    current = format_number(parse_number(state.current), group_separator)
    previous = ""
    if state.previous and state.operator:
        previous = f"{format_number(parse_number(state.previous), group_separator)} {state.operator}"
    return DisplayLines(current=current, previous=previous)
