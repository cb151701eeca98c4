"""Output formatting utilities."""
import json

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from .sorting import OBJECT_SORT_LABELS
from .table import print_primitive_table

console = Console()

DARK_THEME = "monokai"
LIGHT_THEME = "friendly"


def print_json(data, dark=True):
    json_str = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    syntax = Syntax(json_str, "json", theme=DARK_THEME if dark else LIGHT_THEME, line_numbers=False)
    console.print(syntax)


def print_object_results(objects, object_sort="insertion", dark=True):
    """Print ``(entry, sorted_value)`` pairs as JSON blocks."""
    if not objects:
        console.print("[dim italic]No object results[/dim italic]")
        return
    console.print(f"[bold]Objects[/bold] [dim](sort: {OBJECT_SORT_LABELS[object_sort]})[/dim]")
    for entry, value in objects:
        console.print(f"[bold cyan]{escape(entry.path)}[/bold cyan]")
        print_json(value, dark=dark)


def show_results(session):
    """Render the current results of ``session`` as the two result panels."""
    if not session.query:
        console.print("[dim]Type a query to search.[/dim]")
        return
    objects = session.object_results()
    primitives = session.primitive_results()
    if not objects and not primitives:
        console.print(f"[dim]No matches for '{escape(session.query)}'[/dim]")
        return

    config = session.config
    print_object_results(objects, session.object_sort, dark=session.dark_mode)
    print_primitive_table(
        primitives,
        results_sort=session.results_sort,
        last_property_only=bool(config and config.copy_last_property_only),
    )
