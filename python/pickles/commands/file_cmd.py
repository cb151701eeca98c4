"""Document commands: load, remove and inspect the searched file."""
from rich.console import Console
from rich.markup import escape

from ..utils.flatten import is_structured

console = Console()


def register(registry):
    registry.register("load", cmd_load, "Load a JSON file")
    registry.register("remove", cmd_remove, "Forget the loaded file")
    registry.register("info", cmd_info, "Show the loaded file")


def cmd_load(args, config, session):
    if not args:
        console.print(
            "[yellow]Usage:[/yellow] :load <file.json>\n"
            "[dim]Example: :load ~/design/tokens.json[/dim]"
        )
        return
    entries = session.load_file(" ".join(args))
    console.print(
        f"[green]Loaded[/green] [bold]{escape(session.file_name)}[/bold]: "
        f"{len(entries)} entries"
    )


def cmd_remove(args, config, session):
    if not session.loaded:
        console.print("[dim]No file loaded.[/dim]")
        return
    name = session.file_name
    session.clear()
    console.print(f"[green]Removed[/green] {escape(name or 'document')}")


def cmd_info(args, config, session):
    if not session.loaded:
        console.print("[dim]No file loaded. Use :load <file.json>.[/dim]")
        return
    objects = sum(1 for entry in session.entries if is_structured(entry.value))
    console.print(f"  [bold]File:[/bold]        {escape(session.file_name or '(unnamed)')}")
    console.print(f"  [bold]Entries:[/bold]     {len(session.entries)}")
    console.print(f"  [bold]Objects:[/bold]     {objects}")
    console.print(f"  [bold]Primitives:[/bold]  {len(session.entries) - objects}")
