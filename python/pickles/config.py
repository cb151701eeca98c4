"""Shell configuration state with YAML persistence."""
import logging
import os

import yaml

from .errors import ConfigError
from .utils.sorting import OBJECT_SORTS, RESULT_COLUMNS, SORT_DIRECTIONS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.pickles/config.yaml"
DEFAULT_STATE_DIR = "~/.pickles/state"
DEFAULT_HISTORY_FILE = "~/.pickles_history"

_TRUE_WORDS = ("1", "true", "yes", "on")
_FALSE_WORDS = ("0", "false", "no", "off")


def parse_bool(value):
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ConfigError(f"Expected on/off, got {value!r}")


class ShellConfig:
    def __init__(self, config_path=None):
        self._config_path = os.path.expanduser(config_path or DEFAULT_CONFIG_PATH)
        self._data = {}
        self._load()

        self._state_dir_override = os.environ.get("PICKLES_STATE_DIR")
        self.state_dir = self._state_dir_override or self._data.get("state_dir", DEFAULT_STATE_DIR)
        self.history_file = self._data.get("history_file", DEFAULT_HISTORY_FILE)
        self.object_sort = "insertion"
        self.results_sort = None
        self.copy_last_property_only = False
        self.notification_seconds = 2.0

        # Stored preferences are validated the same way as interactive ones
        for key, value in (
            ("object_sort", self._data.get("object_sort")),
            ("copy_last_property_only", self._data.get("copy_last_property_only")),
            ("notification_seconds", self._data.get("notification_seconds")),
        ):
            if value is not None:
                self._apply(key, value)
        results_sort = self._data.get("results_sort") or {}
        if isinstance(results_sort, dict) and results_sort.get("column"):
            try:
                self.set_results_sort(results_sort["column"], results_sort.get("direction", "asc"))
            except ConfigError as e:
                logger.warning("Ignoring results_sort from %s: %s", self._config_path, e)

    @property
    def config_path(self):
        return self._config_path

    def _load(self):
        """Load YAML config from disk if it exists."""
        if not os.path.exists(self._config_path):
            return
        try:
            with open(self._config_path, "r") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read config %s: %s", self._config_path, e)
            return
        if isinstance(loaded, dict):
            self._data = loaded

    def _apply(self, key, value):
        try:
            self.set_preference(key, value)
        except ConfigError as e:
            logger.warning("Ignoring %s from %s: %s", key, self._config_path, e)

    def _save(self):
        """Write config to YAML, creating directory if needed. File mode 0600."""
        config_dir = os.path.dirname(self._config_path)
        if config_dir and not os.path.exists(config_dir):
            os.makedirs(config_dir, mode=0o700, exist_ok=True)

        # Sync current runtime values back to _data
        if self.state_dir != self._state_dir_override:
            self._data["state_dir"] = self.state_dir
        self._data["history_file"] = self.history_file
        self._data["object_sort"] = self.object_sort
        self._data["copy_last_property_only"] = self.copy_last_property_only
        self._data["notification_seconds"] = self.notification_seconds
        if self.results_sort:
            column, direction = self.results_sort
            self._data["results_sort"] = {"column": column, "direction": direction}
        else:
            self._data.pop("results_sort", None)

        fd = os.open(self._config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            yaml.dump(self._data, f, default_flow_style=False, sort_keys=False)

    def set_preference(self, key, value):
        """Validate and set a single preference without saving."""
        if key == "object_sort":
            if value not in OBJECT_SORTS:
                raise ConfigError(f"Unknown object sort {value!r}. Choose: {', '.join(OBJECT_SORTS)}")
            self.object_sort = value
        elif key == "copy_last_property_only":
            self.copy_last_property_only = parse_bool(value)
        elif key == "notification_seconds":
            try:
                seconds = float(value)
            except (TypeError, ValueError):
                raise ConfigError(f"Expected a number of seconds, got {value!r}") from None
            if seconds < 0:
                raise ConfigError("notification_seconds cannot be negative")
            self.notification_seconds = seconds
        elif key in ("state_dir", "history_file"):
            setattr(self, key, str(value))
        else:
            raise ConfigError(f"Unknown config key {key!r}")

    def set_results_sort(self, column, direction="asc"):
        if column not in RESULT_COLUMNS:
            raise ConfigError(f"Unknown column {column!r}. Choose: {', '.join(RESULT_COLUMNS)}")
        if direction not in SORT_DIRECTIONS:
            raise ConfigError(f"Unknown direction {direction!r}. Choose: {', '.join(SORT_DIRECTIONS)}")
        self.results_sort = (column, direction)

    def clear_results_sort(self):
        self.results_sort = None

    def set_config(self, key, value):
        """Set a config value using dot notation (e.g. 'results_sort.column')."""
        parts = key.split(".")
        if len(parts) == 2 and parts[0] == "results_sort":
            column, direction = self.results_sort or (None, "asc")
            if parts[1] == "column":
                column = value
            elif parts[1] == "direction":
                direction = value
            else:
                raise ConfigError(f"Unknown config key {key!r}")
            if column is None:
                raise ConfigError("Set results_sort.column first")
            self.set_results_sort(column, direction)
        elif len(parts) == 1:
            self.set_preference(key, value)
        else:
            raise ConfigError(f"Unknown config key {key!r}")
        self._save()

    def save(self):
        self._save()

    def as_rows(self):
        """(key, value) pairs for display."""
        column, direction = self.results_sort or ("none", "")
        return [
            ("state_dir", self.state_dir),
            ("history_file", self.history_file),
            ("object_sort", self.object_sort),
            ("results_sort.column", column),
            ("results_sort.direction", direction),
            ("copy_last_property_only", str(self.copy_last_property_only)),
            ("notification_seconds", str(self.notification_seconds)),
            ("config_path", self._config_path),
        ]
