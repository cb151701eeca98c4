"""Bottom toolbar for the shell prompt."""
from prompt_toolkit.formatted_text import HTML

from .utils.sorting import OBJECT_SORT_LABELS


def get_toolbar(session, notifier):
    message = notifier.message
    if message:
        return HTML("  <notification> {} </notification>").format(message)

    if not session.loaded:
        return HTML("  <b>No file loaded</b>  |  Type <b>:load &lt;file.json&gt;</b>")

    config = session.config
    results_sort = config.results_sort
    results_sort_text = f"{results_sort[0]} {results_sort[1]}" if results_sort else "none"
    active = session.active_index
    selection = f"{active + 1}/{len(session.suggestions)}" if active >= 0 else "-"

    return HTML(
        "  <b>File:</b> {}  |  "
        "<b>Entries:</b> {}  |  "
        "<b>Selected:</b> {}  |  "
        "<b>Objects:</b> {}  |  "
        "<b>Primitives:</b> {}  |  "
        "<b>Copy:</b> {}"
    ).format(
        session.file_name or "(unnamed)",
        len(session.entries),
        selection,
        OBJECT_SORT_LABELS[config.object_sort],
        results_sort_text,
        "last property" if config.copy_last_property_only else "full path",
    )
