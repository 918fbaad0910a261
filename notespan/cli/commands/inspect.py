"""Inspect command for the notespan CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from notespan.cli.utils.documents import load_controller, select
from notespan.editor.rendering.debug_tools import span_table

console = Console()


def main(
    path: Path = typer.Argument(..., help="File holding the persisted note body"),
    start: Optional[int] = typer.Option(None, help="Selection start for style lookup"),
    end: Optional[int] = typer.Option(None, help="Selection end (defaults to start)"),
):
    """List spans with the text they cover."""
    controller = load_controller(path)
    document = controller.document()

    console.print(f"Text length: [bold]{len(document.text)}[/bold]")
    if not document.spans:
        console.print("No spans found")
    else:
        console.print(span_table(document))

    if start is not None:
        select(controller, start, start if end is None else end)
        names = sorted(s.name.lower() for s in controller.current_styles())
        console.print(f"Active styles: {', '.join(names) or '(none)'}")
