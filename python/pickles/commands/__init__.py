"""Command registry for the pickles shell."""
import logging

from rich.console import Console
from rich.markup import escape

from ..errors import PicklesError

console = Console()
logger = logging.getLogger(__name__)


class CommandRegistry:
    def __init__(self, config, session):
        self.config = config
        self.session = session
        self._commands = {}
        self._register_all()

    def _register_all(self):
        from .general import register as register_general
        from .help_cmd import register as register_help
        from .file_cmd import register as register_file
        from .results_cmd import register as register_results

        register_general(self)
        register_help(self)
        register_file(self)
        register_results(self)

    def register(self, name, handler, help_text=""):
        self._commands[name] = {
            "handler": handler,
            "help": help_text,
        }

    def dispatch(self, command, args):
        if command in self._commands:
            try:
                self._commands[command]["handler"](args, self.config, self.session)
            except (EOFError, KeyboardInterrupt):
                raise
            except PicklesError as e:
                console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            except Exception as e:
                logger.debug("Command %s failed", command, exc_info=True)
                console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        else:
            console.print(
                f"[bold red]Unknown command:[/bold red] {escape(command)}\n"
                f"Type [bold cyan]:help[/bold cyan] to see available commands."
            )

    def get_all_commands(self):
        return self._commands
