"""Command modules for the notespan CLI."""

from notespan.cli.commands import clear, inspect, render, replace, toggle

__all__ = ["clear", "inspect", "render", "replace", "toggle"]
