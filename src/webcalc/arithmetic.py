"""
Numeric steps of the calculator engine.

Operands are carried as strings in the calculator state. This module owns
the conversions in both directions and the single binary evaluation step:

    parse_number   string -> float, never raises (unparseable -> NaN)
    evaluate       a <op> b, rounded to RESULT_PRECISION significant digits
    number_to_string  float -> shortest string that parses back to it
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from . import config
from .calc_types import ADD, DIV, MUL, SUB
from .logging_config import get_logger

logger = get_logger("arithmetic")

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY_RE = re.compile(r"([+-]?)Infinity")


def parse_number(text: str) -> float:
    """
    Parse a state string into a float.

    Accepts decimal literals ("12", "5.", ".5", "1e-7"), "Infinity" with an
    optional sign and "NaN". An empty string is zero. Anything else, such as
    the bare "-" left behind by deleting digits from "-5", is NaN.
    """
    text = text.strip()
    if not text:
        return 0.0
    if _NUMBER_RE.fullmatch(text):
        return float(text)
    m = _INFINITY_RE.fullmatch(text)
    if m:
        return -math.inf if m.group(1) == "-" else math.inf
    return math.nan


def round_half_up(value: float, places: int) -> Decimal:
    """Round the exact binary value of `value` to `places` fractional digits, ties away from zero."""
    return Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_significant(value: float, digits: int = config.RESULT_PRECISION) -> float:
    """Round to `digits` significant decimal digits to hide binary fraction noise."""
    if not math.isfinite(value) or value == 0:
        return value
    exponent = Decimal(abs(value)).adjusted()
    return float(round_half_up(value, digits - 1 - exponent))


def evaluate(a: str, b: str, op: str) -> float:
    """
    Apply a pending operator to two operand strings.

    Division by zero yields positive infinity rather than an error.

    Args:
        a: Left operand
        b: Right operand
        op: One of '+', '-', '*', '/'

    Returns:
        The result rounded to RESULT_PRECISION significant digits
    """
    x, y = parse_number(a), parse_number(b)
    if op == ADD:
        result = x + y
    elif op == SUB:
        result = x - y
    elif op == MUL:
        result = x * y
    elif op == DIV:
        if y == 0:
            logger.debug("Division by zero: %s / %s, yielding infinity", a, b)
            return math.inf
        result = x / y
    else:
        return y
    return round_significant(result)


def number_to_string(value: float) -> str:
    """
    Render a float as the shortest decimal string that parses back to it.

    Magnitudes in [1e-7, 1e21) are written positionally ("0.5", "492",
    "0.0000001"); anything else uses an exponent ("1e+21", "1.5e-8").
    Integers carry no trailing ".0" and negative zero is "0".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    mantissa, _, exp = repr(abs(value)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    digits = int_part + frac_part
    # value == 0.<digits> * 10**point
    point = len(int_part) + (int(exp) if exp else 0)
    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        body = digits + "0" * (point - k)
    elif 0 < point <= 21:
        body = digits[:point] + "." + digits[point:]
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        e = point - 1
        e_text = f"e+{e}" if e >= 0 else f"e-{-e}"
        body = (digits if k == 1 else digits[0] + "." + digits[1:]) + e_text
    return sign + body
