"""
=============================================================================
MODULE NAME: calc_types.py
=============================================================================

NOTES:
- Immutable value types shared by the reducer, the formatter and the
  input decoders.
- CalculatorState is only ever replaced, never mutated; the reducer builds
  each successor with dataclasses.replace().
- Operators travel as their ASCII symbols ("+", "-", "*", "/"); display
  glyphs are a presentation concern (see tokens.OPERATOR_GLYPHS).
=============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

ADD = "+"
SUB = "-"
MUL = "*"
DIV = "/"
OPERATORS = (ADD, SUB, MUL, DIV)

DIGIT = "digit"
DECIMAL = "decimal"
OPERATOR = "operator"
EQUALS_KIND = "equals"
CLEAR_KIND = "clear"
DELETE_KIND = "delete"
NEGATE_KIND = "negate"
PERCENT_KIND = "percent"
TOKEN_KINDS = (
    DIGIT,
    DECIMAL,
    OPERATOR,
    EQUALS_KIND,
    CLEAR_KIND,
    DELETE_KIND,
    NEGATE_KIND,
    PERCENT_KIND,
)


@dataclass(frozen=True, slots=True)
class InputToken:
    """One decoded user action."""

    kind: str
    value: Optional[str] = None

    @classmethod
    def digit(cls, d: str) -> "InputToken":
        if len(d) != 1 or d not in "0123456789":
            raise ValueError(f"Not a digit: {d!r}")
        return cls(DIGIT, d)

    @classmethod
    def operator(cls, op: str) -> "InputToken":
        if op not in OPERATORS:
            raise ValueError(f"Not an operator: {op!r}")
        return cls(OPERATOR, op)


DECIMAL_POINT = InputToken(DECIMAL)
EQUALS = InputToken(EQUALS_KIND)
CLEAR = InputToken(CLEAR_KIND)
DELETE = InputToken(DELETE_KIND)
NEGATE = InputToken(NEGATE_KIND)
PERCENT = InputToken(PERCENT_KIND)


@dataclass(frozen=True, slots=True)
class CalculatorState:
    """
    Snapshot of the calculator.

    Attributes:
        current: Value being typed or the last result, never empty
        previous: Left operand captured when an operator was chosen, "" if none
        operator: Pending operator symbol or None
        just_evaluated: True right after Equals produced a result
    """

    current: str = "0"
    previous: str = ""
    operator: Optional[str] = None
    just_evaluated: bool = False

    def to_dict(self) -> Dict:
        return {
            "current": self.current,
            "previous": self.previous,
            "operator": self.operator,
            "just_evaluated": self.just_evaluated,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "CalculatorState":
        """Rebuild a state from to_dict() output; malformed data yields the initial state."""
        if not isinstance(data, dict):
            return INITIAL_STATE
        current = data.get("current")
        previous = data.get("previous", "")
        operator = data.get("operator")
        just_evaluated = data.get("just_evaluated", False)
        if not isinstance(current, str) or not current:
            return INITIAL_STATE
        if not isinstance(previous, str) or not isinstance(just_evaluated, bool):
            return INITIAL_STATE
        if operator is not None and operator not in OPERATORS:
            return INITIAL_STATE
        return cls(current, previous, operator, just_evaluated)


INITIAL_STATE = CalculatorState()


__all__ = [
    "ADD",
    "SUB",
    "MUL",
    "DIV",
    "OPERATORS",
    "TOKEN_KINDS",
    "InputToken",
    "DECIMAL_POINT",
    "EQUALS",
    "CLEAR",
    "DELETE",
    "NEGATE",
    "PERCENT",
    "CalculatorState",
    "INITIAL_STATE",
]
