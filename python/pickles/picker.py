"""Clipboard picks and the transient "Picked!" notification."""
import logging
import time

import pyperclip
from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)
console = Console()


class Notifier:
    """Holds a message until ``duration`` seconds have passed."""

    def __init__(self, duration=2.0, clock=time.monotonic):
        self.duration = duration
        self._clock = clock
        self._message = ""
        self._expires_at = 0.0

    def show(self, message):
        self._message = message
        self._expires_at = self._clock() + self.duration

    @property
    def message(self):
        if self._message and self._clock() >= self._expires_at:
            self._message = ""
        return self._message


class Picker:
    """Pick listener: copies the picked path and announces it."""

    def __init__(self, config, notifier, copy=pyperclip.copy):
        self.config = config
        self.notifier = notifier
        self._copy = copy

    def __call__(self, entry):
        self.notifier.duration = self.config.notification_seconds
        try:
            self._copy(entry.path)
        except pyperclip.PyperclipException as e:
            logger.warning("Clipboard unavailable: %s", e)
            self.notifier.show(f"Picked! {entry.path} (clipboard unavailable)")
            console.print(f"[yellow]Picked![/yellow] {escape(entry.path)} [dim](clipboard unavailable: {escape(str(e))})[/dim]")
            return False
        self.notifier.show(f"Picked! {entry.path}")
        console.print(f"[bold green]Picked![/bold green] {escape(entry.path)}")
        return True
