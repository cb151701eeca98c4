"""Search session: the loaded document plus the live query state."""
import logging

from .loader import parse_document, read_document
from .utils.flatten import flatten
from .utils.search import EMPTY_MATCH, match, split_results
from .utils.sorting import sort_object, sort_results
from .utils.storage import Snapshot

logger = logging.getLogger(__name__)


class SearchSession:
    """Owns the entry set and the query/selection state machine.

    Changing the query text always clears the active suggestion. Results are
    recomputed from ``match`` whenever they are read.
    """

    def __init__(self, config=None):
        self.config = config
        self.entries = []
        self.file_name = ""
        self.dark_mode = False
        self._query = ""
        self._active_index = -1
        self._pick_listeners = []
        self._change_listeners = []

    # Document lifecycle

    @property
    def loaded(self):
        return bool(self.entries)

    def load(self, document, file_name=""):
        """Replace the entry set with the flattening of ``document``."""
        self.entries = flatten(document)
        self.file_name = file_name
        self._reset_query()
        logger.info("Loaded %s: %d entries", file_name or "document", len(self.entries))
        self._changed("document")
        return self.entries

    def load_text(self, text, file_name=""):
        """Parse and load JSON text. A parse error leaves the current entries."""
        return self.load(parse_document(text), file_name)

    def load_file(self, path):
        document, file_name = read_document(path)
        return self.load(document, file_name)

    def clear(self):
        self.entries = []
        self.file_name = ""
        self._reset_query()
        self._changed("document")

    def set_dark_mode(self, enabled):
        self.dark_mode = bool(enabled)
        self._changed("dark_mode")

    def snapshot(self):
        return Snapshot(list(self.entries), self.file_name, self.dark_mode)

    def restore(self, snapshot):
        self.entries = list(snapshot.entries)
        self.file_name = snapshot.file_name if self.entries else ""
        self.dark_mode = snapshot.dark_mode
        self._reset_query()
        logger.info("Restored %s: %d entries", self.file_name or "session", len(self.entries))

    # Query state machine

    def _reset_query(self):
        self._query = ""
        self._active_index = -1

    @property
    def query(self):
        return self._query

    @property
    def active_index(self):
        return self._active_index

    def set_query(self, text):
        if text != self._query:
            self._query = text
            self._active_index = -1

    def move_down(self):
        count = len(self.suggestions)
        if self._active_index < count - 1:
            self._active_index += 1
        return self._active_index

    def move_up(self):
        self._active_index = self._active_index - 1 if self._active_index > 0 else -1
        return self._active_index

    def activate(self, index):
        """Make ``index`` the active suggestion, clamped to the valid range."""
        self._active_index = max(-1, min(index, len(self.suggestions) - 1))
        return self._active_index

    def clear_selection(self):
        self._active_index = -1

    @property
    def active_suggestion(self):
        suggestions = self.suggestions
        if 0 <= self._active_index < len(suggestions):
            return suggestions[self._active_index]
        return None

    def accept_prediction(self):
        prediction = self.inline_prediction
        if prediction:
            self.set_query(self._query + prediction)
        return prediction

    def on_change(self, listener):
        """Call ``listener(kind)`` after the document or dark mode changes."""
        self._change_listeners.append(listener)

    def _changed(self, kind):
        for listener in self._change_listeners:
            listener(kind)

    def on_pick(self, listener):
        self._pick_listeners.append(listener)

    def select(self, entry):
        """Pick ``entry``: its path becomes the query and listeners are told."""
        self.set_query(entry.path)
        self.clear_selection()
        for listener in self._pick_listeners:
            listener(entry)
        return entry.path

    # Derived views

    def current_match(self):
        if not self.entries:
            return EMPTY_MATCH
        return match(self.entries, self._query, self._active_index)

    @property
    def suggestions(self):
        return self.current_match().suggestions

    @property
    def results(self):
        return self.current_match().results

    @property
    def inline_prediction(self):
        return self.current_match().inline_prediction

    @property
    def object_sort(self):
        return self.config.object_sort if self.config else "insertion"

    @property
    def results_sort(self):
        return self.config.results_sort if self.config else None

    def object_results(self):
        """Structured results as ``(entry, sorted_value)`` pairs."""
        objects, _ = split_results(self.results)
        return [(entry, sort_object(entry.value, self.object_sort)) for entry in objects]

    def primitive_results(self):
        _, primitives = split_results(self.results)
        return sort_results(primitives, self.results_sort)

    def toggle_result_sort(self, column):
        """Sort the primitives table by ``column``, flipping on repeat."""
        current = self.config.results_sort
        if current and current[0] == column and current[1] == "asc":
            self.config.set_results_sort(column, "desc")
        else:
            self.config.set_results_sort(column, "asc")
        return self.config.results_sort
