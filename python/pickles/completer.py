"""Auto-completion and inline prediction for the pickles prompt."""
import os

from prompt_toolkit.auto_suggest import AutoSuggest, Suggestion
from prompt_toolkit.completion import Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

from .utils.sorting import OBJECT_SORTS, RESULT_COLUMNS, SORT_DIRECTIONS
from .utils.table import hex_color

COMMAND_PREFIX = ":"

# Top-level command descriptions
COMMAND_DESCRIPTIONS = {
    "load": "Load a JSON file",
    "remove": "Forget the loaded file",
    "info": "Show the loaded file",
    "results": "Show results for the current query",
    "pick": "Copy a result path to the clipboard",
    "sort-objects": "Set the key order of object results",
    "sort-results": "Sort the primitives table",
    "copy-last": "Show only the last property of result paths",
    "dark": "Toggle dark mode",
    "set-config": "Set a config value",
    "show-config": "Show all config values",
    "help": "Show available commands",
    "clear": "Clear terminal",
    "exit": "Exit the shell",
    "quit": "Exit the shell",
}

ON_OFF = ("on", "off")

# Argument choices per command position
ARGUMENT_CHOICES = {
    "sort-objects": [OBJECT_SORTS],
    "sort-results": [RESULT_COLUMNS, SORT_DIRECTIONS + ("none",)],
    "copy-last": [ON_OFF],
    "dark": [ON_OFF],
    "set-config": [(
        "object_sort", "results_sort.column", "results_sort.direction",
        "copy_last_property_only", "notification_seconds", "state_dir", "history_file",
    )],
}

_SHORT_VALUE = 20


def _suggestion_display(entry):
    color = hex_color(entry.value)
    if color:
        return [(f"bg:{color}", "  "), ("", f" {entry.path}")]
    return entry.path


def _suggestion_meta(entry):
    if isinstance(entry.value, str) and len(entry.value) < _SHORT_VALUE:
        return entry.value
    return ""


def is_navigating(buffer):
    """True while the user is stepping through the completion menu."""
    state = buffer.complete_state
    return state is not None and state.current_completion is not None


def query_text(buffer):
    """The typed query, ignoring any completion previewed in the buffer."""
    if buffer.complete_state is not None:
        return buffer.complete_state.original_document.text
    return buffer.text


class PicklesCompleter(Completer):
    """Suggests matching property paths, or command names after ':'."""

    def __init__(self, session):
        self.session = session
        self._path_completer = PathCompleter(
            expanduser=True,
            file_filter=lambda name: os.path.isdir(name) or name.endswith(".json"),
        )

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        if text.startswith(COMMAND_PREFIX):
            yield from self._command_completions(text[len(COMMAND_PREFIX):], complete_event)
            return

        self.session.set_query(text)
        for entry in self.session.suggestions:
            yield Completion(
                entry.path,
                start_position=-len(text),
                display=_suggestion_display(entry),
                display_meta=_suggestion_meta(entry),
            )

    def _command_completions(self, text, complete_event):
        parts = text.split()

        if not parts or (len(parts) == 1 and not text.endswith(" ")):
            # Completing the command name
            partial = parts[0].lower() if parts else ""
            for cmd, desc in COMMAND_DESCRIPTIONS.items():
                if cmd.startswith(partial):
                    yield Completion(cmd, start_position=-len(partial), display_meta=desc)
            return

        command = parts[0].lower()
        if command == "load":
            path_text = text[len(parts[0]):].lstrip()
            yield from self._path_completer.get_completions(Document(path_text), complete_event)
            return

        choices = ARGUMENT_CHOICES.get(command)
        if not choices:
            return
        position = len(parts) - 1 if text.endswith(" ") else len(parts) - 2
        if position >= len(choices):
            return
        partial = "" if text.endswith(" ") else parts[-1].lower()
        for choice in choices[position]:
            if choice.startswith(partial):
                yield Completion(choice, start_position=-len(partial))


class InlinePredictionSuggest(AutoSuggest):
    """Grey completion text after the caret, taken from the top suggestion."""

    def __init__(self, session):
        self.session = session

    def get_suggestion(self, buffer, document):
        text = document.text
        if not text or text.startswith(COMMAND_PREFIX) or is_navigating(buffer):
            return None
        self.session.set_query(text)
        prediction = self.session.inline_prediction
        return Suggestion(prediction) if prediction else None
