"""Welcome screen."""
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from . import __version__

console = Console()

BANNER = r"""
        _      _     _
  _ __ (_) ___| | __| | ___  ___
 | '_ \| |/ __| |/ /| |/ _ \/ __|
 | |_) | | (__|   < | |  __/\__ \
 | .__/|_|\___|_|\_\|_|\___||___/
 |_|
"""


def show_welcome(session):
    console.print(BANNER, style="bold #4caf50")
    console.print(
        Panel(
            "[bold]Potentially the perfect picker for parsing perplexing properties.[/bold]\n\n"
            "Type to search the loaded JSON: suggestions appear as you type.\n"
            "[bold]Up/Down[/bold] highlight a suggestion, [bold]Enter[/bold] picks it, "
            "[bold]Right[/bold] accepts the grey prediction, [bold]Esc[/bold] clears the highlight.\n"
            "Commands start with [bold cyan]:[/bold cyan]  -  type [bold cyan]:help[/bold cyan] to see them. "
            "Press [bold]Ctrl+D[/bold] to exit.",
            title=f"pickles v{__version__}",
            border_style="#4caf50",
        )
    )
    if session.loaded:
        console.print(
            f"  Restored [bold green]{escape(session.file_name or 'previous document')}[/bold green] "
            f"([bold]{len(session.entries)}[/bold] entries). Use [bold]:remove[/bold] to forget it.\n"
        )
    else:
        console.print("  No file loaded. Use [bold]:load <file.json>[/bold] to get started.\n")
