"""Render command for the notespan CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from notespan.cli.utils.documents import load_controller
from notespan.editor.rendering.renderer import DocumentRenderer

console = Console()


def main(
    path: Path = typer.Argument(..., help="File holding the persisted note body"),
    as_html: bool = typer.Option(False, "--html", help="Emit an HTML fragment"),
    full_page: bool = typer.Option(
        False, "--full-page", help="Wrap HTML output in a full page"
    ),
    title: str = typer.Option("Note", help="Page title used with --full-page"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the result to this file"
    ),
):
    """Render a note body to the terminal or to HTML.

    Without --html, --output writes the styled text with ANSI escape codes.
    """
    controller = load_controller(path)
    renderer = DocumentRenderer(controller.render_config)
    document = controller.document()

    if not (as_html or full_page):
        if output is not None:
            output.write_text(renderer.render_ansi(document), encoding="utf-8")
            console.print(f"Wrote [bold]{output}[/bold]")
            return
        console.print(renderer.render_console(document))
        return

    html = renderer.render(document)
    if full_page:
        html = renderer.render_full_page(title, html)
    if output is not None:
        output.write_text(html, encoding="utf-8")
        console.print(f"Wrote [bold]{output}[/bold]")
    else:
        typer.echo(html)
