"""
Input reducer: (state, token) -> next state.

Every transition is total. Tokens that cannot apply (a second decimal
point, a 13th digit, Equals with nothing pending) return an equivalent
state instead of raising.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Callable, Dict, Iterable

from . import config
from .arithmetic import evaluate, number_to_string, parse_number
from .calc_types import (
    CLEAR_KIND,
    DECIMAL,
    DELETE_KIND,
    DIGIT,
    EQUALS_KIND,
    INITIAL_STATE,
    NEGATE_KIND,
    OPERATOR,
    PERCENT_KIND,
    CalculatorState,
    InputToken,
)

_NON_DIGIT = re.compile(r"\D", re.ASCII)


def digit_count(text: str) -> int:
    """Number of ASCII digit characters in `text`."""
    return len(_NON_DIGIT.sub("", text))


def _digit(state: CalculatorState, d: str) -> CalculatorState:
    if state.just_evaluated:
        return replace(state, current=d, just_evaluated=False)
    if state.current == "0":
        return replace(state, current=d)
    if digit_count(state.current) < config.MAX_DIGITS:
        return replace(state, current=state.current + d)
    return state


def _decimal(state: CalculatorState) -> CalculatorState:
    if state.just_evaluated:
        return replace(state, current="0.", just_evaluated=False)
    if "." in state.current:
        return state
    return replace(state, current=state.current + ".")


def _operator(state: CalculatorState, op: str) -> CalculatorState:
    if state.operator and not state.just_evaluated:
        # Fold the pending operation; with no digits typed since the last
        # operator this folds against "0" and effectively swaps the operator.
        result = evaluate(state.previous or "0", state.current, state.operator)
        previous = number_to_string(result)
    else:
        previous = state.current
    return CalculatorState(current="0", previous=previous, operator=op, just_evaluated=False)


def _equals(state: CalculatorState) -> CalculatorState:
    if not state.operator:
        return state
    result = evaluate(state.previous or "0", state.current, state.operator)
    return CalculatorState(current=number_to_string(result), just_evaluated=True)


def _delete(state: CalculatorState) -> CalculatorState:
    if state.just_evaluated:
        return replace(state, current="0", just_evaluated=False)
    if len(state.current) > 1:
        return replace(state, current=state.current[:-1])
    return replace(state, current="0")


# Negate and Percent leave just_evaluated untouched: adjusting a result in
# place still lets the next digit start a fresh number.
def _negate(state: CalculatorState) -> CalculatorState:
    return replace(state, current=number_to_string(-parse_number(state.current)))


def _percent(state: CalculatorState) -> CalculatorState:
    return replace(state, current=number_to_string(parse_number(state.current) / 100))


_HANDLERS: Dict[str, Callable[[CalculatorState, InputToken], CalculatorState]] = {
    DIGIT: lambda s, t: _digit(s, t.value),
    DECIMAL: lambda s, t: _decimal(s),
    OPERATOR: lambda s, t: _operator(s, t.value),
    EQUALS_KIND: lambda s, t: _equals(s),
    CLEAR_KIND: lambda s, t: INITIAL_STATE,
    DELETE_KIND: lambda s, t: _delete(s),
    NEGATE_KIND: lambda s, t: _negate(s),
    PERCENT_KIND: lambda s, t: _percent(s),
}


def reduce(state: CalculatorState, token: InputToken) -> CalculatorState:
    """
    Apply one input token.

    Args:
        state: Current calculator state
        token: Decoded input token

    Returns:
        The successor state; `state` itself when the token is a no-op
    """
    handler = _HANDLERS.get(token.kind)
    if handler is None:
        return state
    return handler(state, token)


def run(tokens: Iterable[InputToken], state: CalculatorState = INITIAL_STATE) -> CalculatorState:
    """Fold a token sequence through reduce() in arrival order."""
    for token in tokens:
        state = reduce(state, token)
    return state
