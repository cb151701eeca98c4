"""Persist the loaded document and preferences between shell sessions."""
import json
import logging
import os
from typing import List, NamedTuple

from .flatten import Entry

logger = logging.getLogger(__name__)

DATA_KEY = "picklesData"
FILE_NAME_KEY = "picklesFileName"
DARK_MODE_KEY = "darkMode"


class Snapshot(NamedTuple):
    entries: List[Entry]
    file_name: str
    dark_mode: bool


class StateStore:
    """Key/value store keeping one JSON file per key in ``directory``."""

    def __init__(self, directory):
        self.directory = os.path.expanduser(directory)

    def _path(self, key):
        return os.path.join(self.directory, f"{key}.json")

    def get(self, key, default=None):
        path = self._path(key)
        if not os.path.exists(path):
            return default
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable stored value %s: %s", key, e)
            return default

    def set(self, key, value):
        if not os.path.exists(self.directory):
            os.makedirs(self.directory, mode=0o700, exist_ok=True)
        tmp_path = self._path(key) + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(value, f)
        os.replace(tmp_path, self._path(key))

    def remove(self, key):
        try:
            os.remove(self._path(key))
        except FileNotFoundError:
            pass

    def has(self, key):
        return os.path.exists(self._path(key))

    # Snapshot layout

    def save_entries(self, entries, file_name):
        """Store the flattened document, or forget it when it is empty."""
        if entries:
            self.set(DATA_KEY, [{"path": e.path, "value": e.value} for e in entries])
            if file_name:
                self.set(FILE_NAME_KEY, file_name)
            else:
                self.remove(FILE_NAME_KEY)
        else:
            self.remove(DATA_KEY)
            self.remove(FILE_NAME_KEY)

    def load_entries(self):
        raw = self.get(DATA_KEY, [])
        if not isinstance(raw, list):
            logger.warning("Ignoring malformed %s: expected a list", DATA_KEY)
            return []
        entries = []
        for item in raw:
            if not isinstance(item, dict) or not isinstance(item.get("path"), str):
                logger.warning("Ignoring malformed %s: bad entry %r", DATA_KEY, item)
                return []
            entries.append(Entry(item["path"], item.get("value")))
        return entries

    def save_dark_mode(self, enabled):
        self.set(DARK_MODE_KEY, bool(enabled))

    def save(self, snapshot):
        self.save_entries(snapshot.entries, snapshot.file_name)
        self.save_dark_mode(snapshot.dark_mode)

    def load(self):
        return Snapshot(
            entries=self.load_entries(),
            file_name=self.get(FILE_NAME_KEY, "") or "",
            dark_mode=bool(self.get(DARK_MODE_KEY, False)),
        )
