import json
from typing import Optional

import click

from . import config
from .formatter import display_lines
from .logging_config import setup_logging
from .reducer import run
from .tokens import decode_keys


@click.group()
@click.option(
    "--log-level", default=config.LOG_LEVEL, show_default=True, help="Logging level"
)
@click.option("--log-file", type=click.Path(), default=None, help="Also write logs to this file")
def main(log_level: str, log_file: Optional[str]) -> None:
    """Four-function calculator engine with a browser keypad."""
    setup_logging(log_level, log_file)


@main.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print display and state as JSON")
def keys(text: str, as_json: bool) -> None:
    """Type TEXT on the calculator and print the display.

    Digits, '.', '+ - * /', '=', '%' work as on the keypad; 'n' negates,
    'd' deletes, 'c' clears. Other characters are ignored.
    """
    state = run(decode_keys(text))
    lines = display_lines(state)
    if as_json:
        click.echo(
            json.dumps(
                {"current": lines.current, "previous": lines.previous, "state": state.to_dict()},
                ensure_ascii=False,
            )
        )
        return
    if lines.previous:
        click.echo(lines.previous)
    click.echo(lines.current)


@main.command()
@click.option("--host", default=config.HOST, show_default=True, help="Host to bind to")
@click.option("--port", default=config.PORT, show_default=True, help="Port to bind to")
@click.option("--debug", is_flag=True, default=False, help="Enable the Flask debugger")
def serve(host: str, port: int, debug: bool) -> None:
    """Run the browser calculator."""
    from .webapp import app

    click.echo(f"Access at: http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":  # pragma: no cover
    main()
