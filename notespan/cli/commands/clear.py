"""Clear-formatting command for the notespan CLI."""

from pathlib import Path

import typer
from rich.console import Console

from notespan.cli.utils.documents import load_controller, select, write_result

console = Console()


def main(
    path: Path = typer.Argument(..., help="File holding the persisted note body"),
    start: int = typer.Option(..., help="Selection start offset"),
    end: int = typer.Option(..., help="Selection end offset (exclusive)"),
    in_place: bool = typer.Option(False, "--in-place", help="Rewrite the file"),
):
    """Strip formatting from [start, end)."""
    controller = load_controller(path)
    select(controller, start, end)
    if not controller.clear_formatting():
        console.print("[yellow]Warning:[/yellow] No formatting in range")
    write_result(controller, path, in_place)
