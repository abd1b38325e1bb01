"""
Flask server for the webcalc keypad.

Serves the calculator page and JSON endpoints that apply one input token
per request to the session-held calculator state.
"""

from typing import Dict, Optional

from flask import Flask, jsonify, make_response, render_template, request

from .. import config
from ..calc_types import CLEAR
from ..logging_config import get_logger, setup_logging
from ..tokens import OPERATOR_GLYPHS
from .services import (
    apply_token,
    decode_payload,
    load_state,
    read_theme,
    state_payload,
    toggled_theme,
)

logger = get_logger("webapp")


def create_app(overrides: Optional[Dict] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        overrides: Extra Flask config values (e.g. {"TESTING": True})

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.SECRET_KEY
    if overrides:
        app.config.update(overrides)

    @app.route("/")
    def index():
        """Render the calculator page with the persisted theme applied."""
        return render_template(
            "index.html",
            display=state_payload(load_state()),
            theme=read_theme(request),
            glyphs=OPERATOR_GLYPHS,
        )

    @app.route("/api/input", methods=["POST"])
    def handle_input():
        """
        Apply one keyboard key or keypad button.

        Expected JSON payload:
            {"key": "7"} or {"button": "÷"}

        Returns:
            JSON display payload (see services.state_payload)
        """
        data = request.get_json(silent=True)

        if not data or not isinstance(data, dict):
            return jsonify({"error": "No data provided"}), 400

        token = decode_payload(data)
        if token is None:
            raw = data.get("key", data.get("button"))
            logger.info("Ignoring unknown input: %r", raw)
            return jsonify({"error": f"Unknown key: {raw}"}), 400

        return jsonify(state_payload(apply_token(token)))

    @app.route("/api/reset", methods=["POST"])
    def reset():
        """Reset the calculator to its initial state."""
        return jsonify(state_payload(apply_token(CLEAR)))

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Return the current display without changing state."""
        return jsonify(state_payload(load_state()))

    @app.route("/api/theme", methods=["GET"])
    def get_theme():
        return jsonify({"theme": read_theme(request)})

    @app.route("/api/theme/toggle", methods=["POST"])
    def toggle_theme():
        """Flip between light and dark and persist the choice in a cookie."""
        theme = toggled_theme(read_theme(request))
        logger.debug("Theme set to %s", theme)
        response = make_response(jsonify({"theme": theme}))
        response.set_cookie(
            config.THEME_COOKIE,
            theme,
            max_age=config.THEME_COOKIE_MAX_AGE,
            samesite="Lax",
        )
        return response

    return app


app = create_app()


def main():
    """Run the Flask development server."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the webcalc web server")
    parser.add_argument(
        "--host",
        default=config.HOST,
        help=f"Host to bind to (default: {config.HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.PORT,
        help=f"Port to bind to (default: {config.PORT})",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help=f"Logging level (default: {config.LOG_LEVEL})",
    )

    args = parser.parse_args()
    setup_logging(args.log_level)

    print("Starting webcalc web server...")
    print(f"Access at: http://{args.host}:{args.port}")

    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
