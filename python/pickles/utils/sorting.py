"""Display orderings for object results and the primitives table."""
import re
from functools import cmp_to_key

from .flatten import value_text
from .numeric import looks_numeric, numeric_prefix

OBJECT_SORTS = ("insertion", "key-asc", "key-desc", "key-smart", "value-asc", "value-desc")

OBJECT_SORT_LABELS = {
    "insertion": "As-Is",
    "key-asc": "Key (A-Z)",
    "key-desc": "Key (Z-A)",
    "key-smart": "Key (Smart)",
    "value-asc": "Value (0-9)",
    "value-desc": "Value (9-0)",
}

RESULT_COLUMNS = ("path", "value")
SORT_DIRECTIONS = ("asc", "desc")

_TRAILING_DIGITS = re.compile(r"^(.*?)(\d+)$")


def _cmp(a, b):
    return (a > b) - (a < b)


def compare_text(a, b):
    """Locale-style comparison: case-insensitive first, exact text breaks ties."""
    return _cmp(a.casefold(), b.casefold()) or _cmp(a, b)


def _split_key(key):
    match = _TRAILING_DIGITS.match(key)
    if match:
        return match.group(1), int(match.group(2))
    return key, 0


def _compare_smart_keys(a, b):
    text_a, num_a = _split_key(a[0])
    text_b, num_b = _split_key(b[0])
    return compare_text(text_a, text_b) or _cmp(num_a, num_b)


def _compare_values(a, b):
    num_a, num_b = numeric_prefix(a[1]), numeric_prefix(b[1])
    if num_a != num_b:
        return _cmp(num_a, num_b)
    return compare_text(value_text(a[1]), value_text(b[1]))


def sort_object(value, mode):
    """Return ``value`` with its immediate keys reordered by ``mode``.

    Anything that is not a dict comes back untouched. Nested values are
    shared with the input, not copied.
    """
    if not isinstance(value, dict):
        return value

    items = list(value.items())
    if mode == "key-asc":
        items.sort(key=cmp_to_key(lambda a, b: compare_text(a[0], b[0])))
    elif mode == "key-desc":
        items.sort(key=cmp_to_key(lambda a, b: compare_text(b[0], a[0])))
    elif mode == "key-smart":
        items.sort(key=cmp_to_key(_compare_smart_keys))
    elif mode == "value-asc":
        items.sort(key=cmp_to_key(_compare_values))
    elif mode == "value-desc":
        items.sort(key=cmp_to_key(lambda a, b: _compare_values(b, a)))
    return dict(items)


def _compare_result_values(a, b):
    text_a, text_b = value_text(a.value), value_text(b.value)
    if looks_numeric(text_a) and looks_numeric(text_b):
        num_a, num_b = numeric_prefix(text_a), numeric_prefix(text_b)
        if num_a != num_b:
            return _cmp(num_a, num_b)
    return compare_text(text_a, text_b)


def sort_results(entries, sort_spec=None):
    """Order primitive entries by ``(column, direction)``.

    Without a sort the entries come back in their original order.
    """
    ordered = list(entries)
    if not sort_spec:
        return ordered

    column, direction = sort_spec
    modifier = 1 if direction == "asc" else -1
    if column == "path":
        compare = lambda a, b: compare_text(a.path, b.path) * modifier
    else:
        compare = lambda a, b: _compare_result_values(a, b) * modifier
    ordered.sort(key=cmp_to_key(compare))
    return ordered
