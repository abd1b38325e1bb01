"""
Configuration for webcalc.

Engine limits are fixed. Runtime settings for the web server and logging
can be overridden via environment variables prefixed with WEBCALC_.
"""

import os

# Engine limits
MAX_DIGITS = 12
RESULT_PRECISION = 15  # significant digits kept after each evaluation
FIXED_FRACTION_DIGITS = 10
EXPONENT_FRACTION_DIGITS = 6
EXPONENT_UPPER = 1e12
EXPONENT_LOWER = 1e-6

# Display
GROUP_SEPARATOR = os.environ.get("WEBCALC_GROUP_SEPARATOR", ",")

# Web server
THEME_COOKIE = "calc-theme"
THEME_COOKIE_MAX_AGE = 60 * 60 * 24 * 365
SECRET_KEY = os.environ.get("WEBCALC_SECRET_KEY", "webcalc-dev-secret")
HOST = os.environ.get("WEBCALC_HOST", "127.0.0.1")
PORT = int(os.environ.get("WEBCALC_PORT", "5001"))

# Logging
LOG_LEVEL = os.environ.get("WEBCALC_LOG_LEVEL", "WARNING")
