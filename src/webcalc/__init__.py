"""
webcalc: a four-function calculator engine with a browser keypad.

The engine is a pure reducer over immutable calculator states plus a
display formatter; the Flask app and the click CLI are thin input sources.
"""

from .calc_types import INITIAL_STATE, CalculatorState, InputToken
from .formatter import display_lines, format_number
from .reducer import reduce, run

__all__ = [
    "INITIAL_STATE",
    "CalculatorState",
    "InputToken",
    "display_lines",
    "format_number",
    "reduce",
    "run",
]
