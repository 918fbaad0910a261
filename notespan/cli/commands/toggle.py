"""Toggle command for the notespan CLI."""

from pathlib import Path

import typer
from rich.console import Console

from notespan.cli.utils.documents import (
    StyleName,
    load_controller,
    select,
    write_result,
)

console = Console()


def main(
    path: Path = typer.Argument(..., help="File holding the persisted note body"),
    start: int = typer.Option(..., help="Selection start offset"),
    end: int = typer.Option(..., help="Selection end offset (exclusive)"),
    style: StyleName = typer.Option(..., help="Style to toggle"),
    in_place: bool = typer.Option(False, "--in-place", help="Rewrite the file"),
):
    """Turn a style on or off over [start, end)."""
    controller = load_controller(path)
    select(controller, start, end)
    if not controller.toggle_style(style.to_style()):
        console.print("[yellow]Warning:[/yellow] Empty selection, nothing changed")
    write_result(controller, path, in_place)
