"""Main pickles application - the REPL loop."""
import logging
import os
import shlex

from prompt_toolkit import PromptSession
from prompt_toolkit.application import get_app
from prompt_toolkit.filters import Condition, completion_is_selected, has_completions
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.lexers import PygmentsLexer
from prompt_toolkit.styles import DynamicStyle
from rich.console import Console
from rich.markup import escape

from .commands import CommandRegistry
from .completer import COMMAND_PREFIX, InlinePredictionSuggest, PicklesCompleter, query_text
from .config import ShellConfig
from .lexer import PicklesLexer
from .picker import Notifier, Picker
from .session import SearchSession
from .style import get_style
from .toolbar import get_toolbar
from .utils.output import show_results
from .utils.storage import StateStore
from .welcome import show_welcome

logger = logging.getLogger(__name__)
console = Console()


def _show_completion(buffer, index):
    """Mirror the active suggestion index in the completion menu."""
    completions = buffer.complete_state.completions
    if index < 0 or not completions:
        buffer.go_to_completion(None)
    else:
        buffer.go_to_completion(min(index, len(completions) - 1))


class PicklesShell:
    def __init__(self, config_path=None, document_path=None):
        self.config = ShellConfig(config_path=config_path)
        self.store = StateStore(self.config.state_dir)
        self.session = SearchSession(self.config)
        self.session.restore(self.store.load())
        self.session.on_change(self._persist)

        self.notifier = Notifier(duration=self.config.notification_seconds)
        self.session.on_pick(Picker(self.config, self.notifier))
        self.registry = CommandRegistry(self.config, self.session)
        self._pending_pick = None
        self._document_path = document_path

        history_path = os.path.expanduser(self.config.history_file)

        self.prompt_session = PromptSession(
            history=FileHistory(history_path),
            completer=PicklesCompleter(self.session),
            auto_suggest=InlinePredictionSuggest(self.session),
            lexer=PygmentsLexer(PicklesLexer),
            style=DynamicStyle(lambda: get_style(self.session.dark_mode)),
            complete_while_typing=True,
            key_bindings=self._build_key_bindings(),
            refresh_interval=0.5,
        )

    def _build_key_bindings(self):
        bindings = KeyBindings()
        session = self.session

        @Condition
        def is_query():
            return not query_text(get_app().current_buffer).startswith(COMMAND_PREFIX)

        @bindings.add(Keys.Down, filter=has_completions & is_query)
        def _move_down(event):
            """Highlight the next suggestion; stops at the last one."""
            buf = event.current_buffer
            session.set_query(query_text(buf))
            index = session.move_down()
            _show_completion(buf, index)

        @bindings.add(Keys.Up, filter=has_completions & is_query)
        def _move_up(event):
            """Highlight the previous suggestion; above the first clears it."""
            buf = event.current_buffer
            session.set_query(query_text(buf))
            index = session.move_up()
            _show_completion(buf, index)

        @bindings.add(Keys.Enter, filter=completion_is_selected & is_query)
        def _pick_active(event):
            """Submit the highlighted suggestion as a pick."""
            buf = event.current_buffer
            state = buf.complete_state
            self._pending_pick = (state.original_document.text, state.complete_index)
            buf.validate_and_handle()

        @bindings.add(Keys.Escape, eager=True)
        def _handle_escape(event):
            """Clear the highlighted suggestion and close the menu."""
            buf = event.current_buffer
            session.clear_selection()
            if buf.complete_state:
                buf.cancel_completion()

        return bindings

    def _persist(self, kind):
        if kind == "document":
            self.store.save_entries(self.session.entries, self.session.file_name)
        elif kind == "dark_mode":
            self.store.save_dark_mode(self.session.dark_mode)

    def run(self):
        if self._document_path:
            self.registry.dispatch("load", [self._document_path])
        show_welcome(self.session)

        while True:
            try:
                self._pending_pick = None
                text = self.prompt_session.prompt(
                    [("class:prompt", "pickles> ")],
                    bottom_toolbar=lambda: get_toolbar(self.session, self.notifier),
                )
                self._handle(text)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break

    def _handle(self, text):
        if self._pending_pick is not None:
            query, index = self._pending_pick
            self._pick_suggestion(query, index)
            return

        stripped = text.strip()
        if stripped.startswith(COMMAND_PREFIX):
            self._execute(stripped[len(COMMAND_PREFIX):])
            return
        if not stripped:
            return
        if not self.session.loaded:
            console.print("[yellow]No file loaded.[/yellow] Use [bold]:load <file.json>[/bold] first.")
            return
        self.session.set_query(text)
        show_results(self.session)

    def _pick_suggestion(self, query, index):
        self.session.set_query(query)
        self.session.activate(index)
        entry = self.session.active_suggestion
        if entry is None:
            logger.debug("Suggestion %s vanished before it was picked", index)
            return
        show_results(self.session)
        self.session.select(entry)

    def _execute(self, text):
        try:
            parts = shlex.split(text)
        except ValueError as e:
            console.print(f"[bold red]Parse error:[/bold red] {escape(str(e))}")
            return
        if not parts:
            return

        command_name = parts[0].lower()
        args = parts[1:]
        self.registry.dispatch(command_name, args)
