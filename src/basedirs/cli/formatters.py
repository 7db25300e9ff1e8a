"""Rich console output helpers for the basedirs CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

# Status messages go to stderr (don't pollute piped output)
console = Console(stderr=True)

# Resolved paths go to stdout (supports piping/redirection)
output_console = Console()


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message to stderr."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def print_path(path: object) -> None:
    """Print a bare path to stdout, without markup or wrapping."""
    output_console.print(str(path), markup=False, highlight=False, soft_wrap=True)


def dirs_table(title: str, rows: dict[str, object]) -> Table:
    """Build a two-column table of name -> path.

    Args:
        title: Table title.
        rows: Mapping of row label to path value.

    Returns:
        A Rich table ready to print.
    """
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Purpose", style="cyan")
    table.add_column("Directory", overflow="fold")
    for label, path in rows.items():
        table.add_row(label, Text(str(path)))
    return table
