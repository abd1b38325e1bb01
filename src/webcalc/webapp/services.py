"""
Glue between HTTP requests and the calculator engine.

Calculator state lives in the signed session cookie and is replaced
wholesale on every request. The theme preference lives in its own
long-lived cookie and never reaches the engine.
"""

from typing import Dict, Optional

from flask import Request, session

from .. import config
from ..calc_types import CalculatorState, InputToken
from ..formatter import display_lines
from ..reducer import reduce
from ..tokens import OPERATOR_GLYPHS, decode_button, decode_key

SESSION_KEY = "calc_state"
THEMES = ("dark", "light")
DEFAULT_THEME = "dark"


def load_state() -> CalculatorState:
    """Read the calculator state from the session, falling back to the initial state."""
    return CalculatorState.from_dict(session.get(SESSION_KEY))


def save_state(state: CalculatorState) -> None:
    session[SESSION_KEY] = state.to_dict()


def decode_payload(data: Dict) -> Optional[InputToken]:
    """
    Decode a request payload into a token.

    Expected JSON payload:
        {"key": "Enter"}   # keyboard key name
        {"button": "×"}    # keypad label

    Returns:
        The token, or None if the payload names nothing the calculator accepts
    """
    key = data.get("key")
    if isinstance(key, str):
        return decode_key(key)
    button = data.get("button")
    if isinstance(button, str):
        return decode_button(button)
    return None


def apply_token(token: InputToken) -> CalculatorState:
    """Run one token against the session state and store the result."""
    state = reduce(load_state(), token)
    save_state(state)
    return state


def state_payload(state: CalculatorState) -> Dict:
    """
    Build the JSON body describing a state.

    Returns:
        {
            "current": "1,234.5",
            "previous": "12 *",       # ASCII operator, "" when nothing pending
            "expression": "12 ×",     # same row with display glyphs
            "state": {...}
        }
    """
    lines = display_lines(state)
    expression = lines.previous
    if expression and state.operator:
        expression = expression[: -len(state.operator)] + OPERATOR_GLYPHS[state.operator]
    return {
        "current": lines.current,
        "previous": lines.previous,
        "expression": expression,
        "state": state.to_dict(),
    }


def read_theme(request: Request) -> str:
    """Return the persisted theme, defaulting to dark for missing or unknown values."""
    theme = request.cookies.get(config.THEME_COOKIE, DEFAULT_THEME)
    return theme if theme in THEMES else DEFAULT_THEME


def toggled_theme(theme: str) -> str:
    return "dark" if theme == "light" else "light"
