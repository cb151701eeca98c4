"""Help command."""
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..utils.sorting import OBJECT_SORT_LABELS

console = Console()

TOPIC_HELP = {
    "search": {
        "description": "Searching the loaded document",
        "commands": {
            "<words>": "Every word must appear in a property's path or value",
            "Up / Down": "Highlight a suggestion; results show it and its children",
            "Enter": "Pick the highlighted suggestion (copies its path)",
            "Right": "Accept the grey prediction",
            "Esc": "Clear the highlight",
            ":results": "Show results for the current query again",
            ":pick <n | path>": "Copy a primitive row's path, or an exact path",
        },
    },
    "sort": {
        "description": "Ordering results",
        "commands": {
            f":sort-objects {mode}": label for mode, label in OBJECT_SORT_LABELS.items()
        } | {
            ":sort-results path|value [asc|desc]": "Sort the primitives table (repeat to flip)",
            ":sort-results none": "Back to match order",
        },
    },
    "file": {
        "description": "Loaded document",
        "commands": {
            ":load <file.json>": "Load and flatten a JSON file",
            ":remove": "Forget the loaded file",
            ":info": "Show file name and entry counts",
        },
    },
    "general": {
        "description": "General commands",
        "commands": {
            ":copy-last [on|off]": "Highlight only the last property of result paths",
            ":dark [on|off]": "Toggle dark mode",
            ":set-config <key> <value>": "Set a config value",
            ":show-config": "Show all config values",
            ":clear": "Clear the terminal",
            ":exit / :quit": "Exit the shell",
        },
    },
}


def register(registry):
    registry.register("help", cmd_help, "Show available commands")


def cmd_help(args, config, session):
    if args:
        topic = args[0].lower()
        if topic in TOPIC_HELP:
            _show_topic_help(topic)
        else:
            console.print(
                f"[red]No help for:[/red] {escape(topic)}\n"
                f"Available: {', '.join(TOPIC_HELP.keys())}"
            )
        return

    table = Table(title="pickles Commands")
    table.add_column("Command", style="bold cyan", min_width=14)
    table.add_column("Description", style="white")
    table.add_column("Example", style="dim")

    table.add_row("<query>", "Search properties", "colors primary")
    table.add_row("", "", "")
    table.add_row(":load", "Load a JSON file", ":load tokens.json")
    table.add_row(":remove", "Forget the loaded file", ":remove")
    table.add_row(":info", "Show the loaded file", ":info")
    table.add_row("", "", "")
    table.add_row(":results", "Show results again", ":results")
    table.add_row(":pick", "Copy a result path", ":pick 2")
    table.add_row(":sort-objects", "Order object keys", ":sort-objects key-smart")
    table.add_row(":sort-results", "Order the primitives table", ":sort-results value desc")
    table.add_row("", "", "")
    table.add_row(":copy-last", "Highlight last property only", ":copy-last on")
    table.add_row(":dark", "Toggle dark mode", ":dark")
    table.add_row(":set-config", "Set a config value", ":set-config notification_seconds 3")
    table.add_row(":show-config", "Show config values", ":show-config")
    table.add_row(":clear", "Clear terminal", ":clear")
    table.add_row(":exit", "Exit the shell", ":exit")

    console.print(table)
    console.print(
        "\n[dim]Type [bold]:help <topic>[/bold] for details "
        f"({', '.join(TOPIC_HELP.keys())}). "
        "Press [bold]Tab[/bold] for auto-completion.[/dim]"
    )


def _show_topic_help(topic):
    info = TOPIC_HELP[topic]
    table = Table(title=f"{topic.upper()} - {info['description']}")
    table.add_column("Command", style="bold cyan", min_width=35)
    table.add_column("Description", style="white")

    for cmd, desc in info["commands"].items():
        table.add_row(escape(cmd), desc)

    console.print(table)
