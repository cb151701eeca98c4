"""Result commands: redisplay, pick and sort."""
from rich.console import Console

from ..errors import PicklesError
from ..utils.output import show_results
from ..utils.sorting import OBJECT_SORT_LABELS, OBJECT_SORTS, RESULT_COLUMNS

console = Console()


def register(registry):
    registry.register("results", cmd_results, "Show results for the current query")
    registry.register("pick", cmd_pick, "Copy a result path to the clipboard")
    registry.register("sort-objects", cmd_sort_objects, "Set the key order of object results")
    registry.register("sort-results", cmd_sort_results, "Sort the primitives table")


def cmd_results(args, config, session):
    show_results(session)


def _find_entry(session, target):
    if target.isdigit():
        primitives = session.primitive_results()
        index = int(target)
        if not 1 <= index <= len(primitives):
            raise PicklesError(f"No primitive result #{index} (there are {len(primitives)})")
        return primitives[index - 1]
    for entry in session.entries:
        if entry.path == target:
            return entry
    raise PicklesError(f"No property at path {target!r}")


def cmd_pick(args, config, session):
    if not args:
        console.print(
            "[yellow]Usage:[/yellow] :pick <row-number | path>\n"
            "[dim]Example: :pick 3[/dim]\n"
            "[dim]Example: :pick colors.primary.500[/dim]"
        )
        return
    session.select(_find_entry(session, args[0]))


def cmd_sort_objects(args, config, session):
    if not args:
        console.print(f"[yellow]Current object sort:[/yellow] {OBJECT_SORT_LABELS[config.object_sort]}")
        console.print(f"[yellow]Usage:[/yellow] :sort-objects <{'|'.join(OBJECT_SORTS)}>")
        return
    config.set_config("object_sort", args[0].lower())
    console.print(f"[green]Objects sorted by:[/green] {OBJECT_SORT_LABELS[config.object_sort]}")
    if session.query:
        show_results(session)


def cmd_sort_results(args, config, session):
    if not args:
        current = config.results_sort
        console.print(f"[yellow]Current result sort:[/yellow] {' '.join(current) if current else 'none'}")
        console.print(f"[yellow]Usage:[/yellow] :sort-results <{'|'.join(RESULT_COLUMNS)}> [asc|desc|none]")
        return
    column = args[0].lower()
    if column == "none" or (len(args) > 1 and args[1].lower() == "none"):
        config.clear_results_sort()
        config.save()
    elif len(args) > 1:
        config.set_results_sort(column, args[1].lower())
        config.save()
    else:
        if column not in RESULT_COLUMNS:
            raise PicklesError(f"Unknown column {column!r}. Choose: {', '.join(RESULT_COLUMNS)}")
        session.toggle_result_sort(column)
        config.save()
    current = config.results_sort
    console.print(f"[green]Primitives sorted by:[/green] {' '.join(current) if current else 'none'}")
    if session.query:
        show_results(session)
