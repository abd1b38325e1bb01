"""
Decoding of raw input (keyboard keys, keypad labels, terminal text) into
InputToken values. Unrecognised input decodes to None and is ignored by
callers.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .calc_types import (
    CLEAR,
    DECIMAL_POINT,
    DELETE,
    EQUALS,
    NEGATE,
    OPERATORS,
    PERCENT,
    InputToken,
)

OPERATOR_GLYPHS: Dict[str, str] = {"+": "+", "-": "−", "*": "×", "/": "÷"}

_KEY_COMMANDS: Dict[str, InputToken] = {
    ".": DECIMAL_POINT,
    "Enter": EQUALS,
    "=": EQUALS,
    "Backspace": DELETE,
    "Escape": CLEAR,
    "n": NEGATE,
    "N": NEGATE,
    "%": PERCENT,
}

_BUTTON_COMMANDS: Dict[str, InputToken] = {
    "AC": CLEAR,
    "DEL": DELETE,
    "%": PERCENT,
    "±": NEGATE,
    ".": DECIMAL_POINT,
    "=": EQUALS,
}

# Single-character aliases for terminal input, where Escape/Backspace are awkward.
_TEXT_COMMANDS: Dict[str, InputToken] = {
    "c": CLEAR,
    "C": CLEAR,
    "d": DELETE,
    "D": DELETE,
}


def decode_key(key: str) -> Optional[InputToken]:
    """
    Decode a keyboard key name as reported by a browser keydown event.

    Returns:
        The matching token, or None for keys the calculator ignores
    """
    if len(key) == 1 and key in "0123456789":
        return InputToken.digit(key)
    if key in OPERATORS:
        return InputToken.operator(key)
    return _KEY_COMMANDS.get(key)


def decode_button(label: str) -> Optional[InputToken]:
    """Decode an on-screen keypad label (digits, AC, DEL, %, ±, operator glyphs, ., =)."""
    if len(label) == 1 and label in "0123456789":
        return InputToken.digit(label)
    for op, glyph in OPERATOR_GLYPHS.items():
        if label in (op, glyph):
            return InputToken.operator(op)
    return _BUTTON_COMMANDS.get(label)


def decode_keys(text: str) -> List[InputToken]:
    """Decode a string of terminal keystrokes, skipping anything unrecognised."""
    tokens: List[InputToken] = []
    for ch in text:
        if ch.isspace():
            continue
        token = _TEXT_COMMANDS.get(ch) or decode_key(ch)
        if token is not None:
            tokens.append(token)
    return tokens
