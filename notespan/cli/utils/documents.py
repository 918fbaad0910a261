"""File helpers shared by the notespan CLI commands."""

from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from notespan.editor import RichTextController, Selection, StyleType
from notespan.exceptions import InvalidSelectionError

console = Console()


class StyleName(str, Enum):
    bold = "bold"
    italic = "italic"
    underline = "underline"
    header1 = "header1"
    header2 = "header2"

    def to_style(self) -> StyleType:
        return StyleType[self.name.upper()]


def load_controller(path: Path) -> RichTextController:
    """Load a persisted note body (structured or legacy plain text)."""
    try:
        data = path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(
            f"[bold red]Error:[/bold red] Could not read {escape(str(path))}: "
            f"{escape(str(e))}"
        )
        raise typer.Exit(1)
    controller = RichTextController()
    controller.load(data)
    return controller


def select(controller: RichTextController, start: int, end: int) -> None:
    try:
        sel = Selection(start, end).require_valid(len(controller.text))
    except InvalidSelectionError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    controller.set_selection(sel.start, sel.end)


def write_result(controller: RichTextController, path: Path, in_place: bool) -> None:
    blob = controller.serialize()
    if not in_place:
        typer.echo(blob)
        return
    path.write_text(blob, encoding="utf-8")
    console.print(f"Updated [bold]{path}[/bold]")
