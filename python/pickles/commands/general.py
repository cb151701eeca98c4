"""General shell commands."""
import os

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import parse_bool

console = Console()


def register(registry):
    registry.register("copy-last", cmd_copy_last, "Show only the last property of result paths (on|off)")
    registry.register("dark", cmd_dark, "Toggle dark mode (on|off)")
    registry.register("set-config", cmd_set_config, "Set a config value")
    registry.register("show-config", cmd_show_config, "Show all config values")
    registry.register("clear", cmd_clear, "Clear the terminal")
    registry.register("exit", cmd_exit, "Exit the shell")
    registry.register("quit", cmd_exit, "Exit the shell")


def _toggle(args, current):
    return parse_bool(args[0]) if args else not current


def cmd_copy_last(args, config, session):
    config.set_config("copy_last_property_only", _toggle(args, config.copy_last_property_only))
    state = "last property only" if config.copy_last_property_only else "full path"
    console.print(f"[green]Result paths show:[/green] {state}")


def cmd_dark(args, config, session):
    session.set_dark_mode(_toggle(args, session.dark_mode))
    console.print(f"[green]Dark mode:[/green] {'on' if session.dark_mode else 'off'}")


def cmd_set_config(args, config, session):
    if len(args) < 2:
        console.print("[yellow]Usage:[/yellow] :set-config <key> <value>")
        console.print("[dim]Example: :set-config object_sort key-smart[/dim]")
        console.print("[dim]Example: :set-config notification_seconds 3[/dim]")
        return
    key = args[0]
    value = " ".join(args[1:])
    config.set_config(key, value)
    console.print(f"[green]Config set:[/green] {escape(key)} = {escape(value)}")


def cmd_show_config(args, config, session):
    table = Table(title="Shell Configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    for key, value in config.as_rows():
        table.add_row(key, escape(value))
    table.add_row("dark_mode", str(session.dark_mode))
    console.print(table)


def cmd_clear(args, config, session):
    os.system("clear" if os.name != "nt" else "cls")


def cmd_exit(args, config, session):
    console.print("[dim]Goodbye![/dim]")
    raise EOFError
