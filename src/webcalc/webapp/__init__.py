"""
Browser front-end for webcalc.

Serves the keypad page and a small JSON API that feeds decoded input
tokens through the reducer.
"""

from .server import app, create_app

__all__ = ["app", "create_app"]
