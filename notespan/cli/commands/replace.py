"""Replace command for the notespan CLI."""

from pathlib import Path

import typer
from rich.console import Console

from notespan.cli.utils.documents import load_controller, select, write_result
from notespan.editor import Selection

console = Console()


def main(
    path: Path = typer.Argument(..., help="File holding the persisted note body"),
    start: int = typer.Option(..., help="Start offset of the replaced range"),
    end: int = typer.Option(..., help="End offset of the replaced range (exclusive)"),
    text: str = typer.Option("", help="Replacement text (empty deletes)"),
    in_place: bool = typer.Option(False, "--in-place", help="Rewrite the file"),
):
    """Apply one edit the way a text field would report it."""
    controller = load_controller(path)
    select(controller, start, end)
    old = controller.text
    new = old[:start] + text + old[end:]
    cursor = start + len(text)
    controller.on_text_changed(old, new, Selection(cursor, cursor))
    write_result(controller, path, in_place)
