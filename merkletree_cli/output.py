"""Shared output formatting with ASCII boxes. NO class - just functions."""

import json

import click

BOX_WIDTH = 80


def print_json(data: dict) -> None:
    """Print JSON data formatted."""
    click.echo(json.dumps(data, indent=2, sort_keys=True))


def _truncate(text: str, max_len: int = 50) -> str:
    """Truncate text with ellipsis if too long."""
    return text[:max_len-3] + "..." if len(text) > max_len else text


def _top(title: str) -> str:
    return f"╭─ {title} " + "─" * max(BOX_WIDTH - len(title) - 4, 0) + "╮"


def _bottom() -> str:
    return "╰" + "─" * (BOX_WIDTH - 1) + "╯"


def success_box(title: str, rows: list[tuple[str, str]], next_cmd: str | None = None) -> None:
    """Print success box with optional Next: suggestion."""
    click.echo(_top(title))
    for label, value in rows:
        line = f"│ {label}: {_truncate(str(value), BOX_WIDTH - len(label) - 6)}"
        click.echo(line + " " * max(BOX_WIDTH - len(line), 0) + "│")
    click.echo(_bottom())
    if next_cmd:
        click.echo(f"Next: {next_cmd}")


def error_box(title: str, message: str, fix_cmd: str | None = None) -> None:
    """Print error box with optional Fix: suggestion."""
    message = _truncate(message, BOX_WIDTH - 4)
    click.echo(_top(title))
    click.echo(f"│ {message}" + " " * max(BOX_WIDTH - len(message) - 4, 0) + "│")
    click.echo(_bottom())
    if fix_cmd:
        click.echo(f"Fix: {fix_cmd}")
