"""Light and dark colour schemes for the shell."""
from functools import lru_cache

from prompt_toolkit.styles import Style

_PICKLE_GREEN = "#4caf50"

_COMMON = {
    "prompt": f"bold {_PICKLE_GREEN}",
    "notification": f"bold bg:{_PICKLE_GREEN} #ffffff",
    "pygments.keyword": f"bold {_PICKLE_GREEN}",
    "pygments.name.attribute": "#66d9ef",
    "pygments.literal.string": "#e6db74",
    "pygments.literal.number": "#ae81ff",
}

_DARK = {
    "bottom-toolbar": "bg:#1e2a1e #ffffff",
    "bottom-toolbar.text": _PICKLE_GREEN,
    "completion-menu.completion": "bg:#263326 #ffffff",
    "completion-menu.completion.current": f"bg:{_PICKLE_GREEN} #000000",
    "completion-menu.meta.completion": "bg:#1e2a1e #9e9e9e",
    "auto-suggestion": "#6b6b6b",
}

_LIGHT = {
    "bottom-toolbar": "bg:#e8f5e9 #1b5e20",
    "bottom-toolbar.text": "#1b5e20",
    "completion-menu.completion": "bg:#f1f8e9 #000000",
    "completion-menu.completion.current": "bg:#c8e6c9 #000000",
    "completion-menu.meta.completion": "bg:#f1f8e9 #757575",
    "auto-suggestion": "#9e9e9e",
}


@lru_cache(maxsize=None)
def get_style(dark=False):
    return Style.from_dict({**_COMMON, **(_DARK if dark else _LIGHT)})
