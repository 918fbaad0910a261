#!/usr/bin/env python
"""CLI for inspecting and editing formatted note bodies."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from notespan.cli.commands import clear, inspect, render, replace, toggle

app = typer.Typer(help="Inspect, render and edit formatted note bodies")
console = Console()

# Register commands
app.command("render")(render.main)
app.command("inspect")(inspect.main)
app.command("toggle")(toggle.main)
app.command("clear")(clear.main)
app.command("replace")(replace.main)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logs from the editing engine"
    ),
):
    """Work with persisted note bodies (JSON blobs or legacy plain text)."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            handlers=[
                RichHandler(
                    rich_tracebacks=True,
                    show_time=True,
                    log_time_format="%H:%M:%S",
                )
            ],
        )
        logging.getLogger("notespan").setLevel(logging.DEBUG)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
