"""Primitives table - tabular display of (value, path) results."""
import re

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .flatten import last_segment, value_text

console = Console()

HEX_REGEX = re.compile(r"^#(?:[A-Fa-f0-9]{3}){1,2}$")
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}")
_URL_PATTERN = re.compile(r"^https?://")

_MAX_VALUE_WIDTH = 80


def hex_color(value):
    """Normalise '#abc' / '#aabbcc' strings to '#aabbcc', else None."""
    if not isinstance(value, str) or not HEX_REGEX.match(value):
        return None
    digits = value[1:].lower()
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits}"


def _highlight_cell(value):
    """Format a primitive value with Rich markup for display."""
    if value is None:
        return "[dim italic]null[/dim italic]"
    if isinstance(value, bool):
        color = "green" if value else "red"
        return f"[{color}]{value_text(value)}[/{color}]"
    if isinstance(value, (int, float)):
        return f"[magenta]{value_text(value)}[/magenta]"

    s = value_text(value)
    s = s[:_MAX_VALUE_WIDTH - 3] + "..." if len(s) > _MAX_VALUE_WIDTH else s
    color = hex_color(value)
    if color:
        return f"[on {color}]    [/on {color}] {escape(s)}"
    if _URL_PATTERN.match(s):
        return f"[underline cyan]{escape(s)}[/underline cyan]"
    if _DATE_PATTERN.match(s):
        return f"[dim]{escape(s)}[/dim]"
    return escape(s)


def format_path(path, last_property_only=False):
    """Path markup; optionally dim everything but the last segment."""
    if last_property_only and "." in path:
        tail = last_segment(path)
        head = path[: -len(tail) - 1]
        return f"[dim]{escape(head)}.[/dim][bold]{escape(tail)}[/bold]"
    return escape(path)


def _header(title, column, results_sort):
    if results_sort and results_sort[0] == column:
        arrow = "↑" if results_sort[1] == "asc" else "↓"
        return f"{title} {arrow}"
    return title


def build_primitive_table(entries, results_sort=None, last_property_only=False):
    table = Table(title="Primitives", show_lines=False, title_justify="left")
    table.add_column("#", style="dim", justify="right")
    table.add_column(_header("Value", "value", results_sort), overflow="fold", max_width=_MAX_VALUE_WIDTH)
    table.add_column(_header("Path", "path", results_sort), style="cyan", justify="right", overflow="fold")
    for i, entry in enumerate(entries, 1):
        table.add_row(str(i), _highlight_cell(entry.value), format_path(entry.path, last_property_only))
    return table


def print_primitive_table(entries, results_sort=None, last_property_only=False):
    if not entries:
        console.print("[dim italic]No primitive results[/dim italic]")
        return
    console.print(build_primitive_table(entries, results_sort, last_property_only))
    console.print(f"[dim]{len(entries)} primitive(s) - use :pick <#> to copy a path[/dim]")
