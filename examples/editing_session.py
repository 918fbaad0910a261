"""Example of driving the formatting engine the way a text field would.

Run: python examples/editing_session.py [--verbose]

Replays a short typing session keystroke by keystroke, toggles a few styles,
prints the rendered result to the terminal and the persisted blob.
"""

from __future__ import annotations

import argparse
import logging

from rich import print_json
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from notespan.editor import RichTextController, Selection, StyleType
from notespan.editor.rendering.debug_tools import span_table
from notespan.editor.rendering.renderer import to_rich_text

install(show_locals=True)

console = Console()

logger = logging.getLogger("notespan.example")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Replay an editing session")
    p.add_argument(
        "--verbose",
        dest="verbose",
        action="store_true",
        default=False,
        help="Enable debug logs from the editing engine",
    )
    return p.parse_args()


def type_text(controller: RichTextController, chars: str) -> None:
    for ch in chars:
        cursor = controller.selection.end
        old = controller.text
        new = old[:cursor] + ch + old[cursor:]
        controller.on_text_changed(old, new, Selection(cursor + 1, cursor + 1))


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_time=False)],
    )
    args = parse_args()
    if args.verbose:
        logging.getLogger("notespan").setLevel(logging.DEBUG)

    controller = RichTextController()
    renders = []
    controller.add_listener(lambda c: renders.append(len(c.build_segments())))

    type_text(controller, "Shopping list\n")
    controller.set_selection(0, 13)
    controller.toggle_style(StyleType.HEADER1)

    controller.set_selection(14, 14)
    type_text(controller, "Buy milk and eggs")
    controller.set_selection(18, 22)
    controller.toggle_style(StyleType.BOLD)

    # Typing at the end of a styled run extends it
    controller.set_selection(22, 22)
    type_text(controller, "!")

    logger.info("listeners ran %d times", len(renders))
    console.rule("Rendered")
    console.print(to_rich_text(controller.build_segments()))
    console.rule("Spans")
    console.print(span_table(controller.document()))
    console.rule("Persisted")
    print_json(controller.serialize())


if __name__ == "__main__":
    main()
