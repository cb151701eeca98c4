"""Flatten a parsed JSON document into addressable (path, value) entries."""
import json
from typing import Any, NamedTuple


class Entry(NamedTuple):
    path: str
    value: Any


def is_structured(value):
    return isinstance(value, (dict, list))


def value_text(value):
    """Text form of a value, used wherever values are compared as text.

    Objects collapse to a fixed marker so they never match on their nested
    content; arrays join the text of their items with commas.
    Integral floats drop their fraction, so a document value of 1.0 reads as 1.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, list):
        return ",".join(value_text(item) for item in value)
    if isinstance(value, dict):
        return "[object]"
    return str(value)


def flatten(data, prefix=""):
    """Recursively flatten a nested dict/list into entries, pre-order.

    Every key of a structured node yields its own entry, immediately followed
    by the entries of its value. Primitive input yields nothing.
    """
    if isinstance(data, dict):
        items = data.items()
    elif isinstance(data, list):
        items = ((str(i), value) for i, value in enumerate(data))
    else:
        return []

    entries = []
    for key, value in items:
        path = f"{prefix}.{key}" if prefix else str(key)
        entries.append(Entry(path, value))
        entries.extend(flatten(value, path))
    return entries


def descendants(entries, parent_path):
    """Entries below ``parent_path``, in the order they appear."""
    prefix = parent_path + "."
    return [entry for entry in entries if entry.path.startswith(prefix)]


def last_segment(path):
    return path.rsplit(".", 1)[-1]
