"""Leading-magnitude extraction for values like "16px" or "-3.5rem"."""
import re

_NUMERIC_PREFIX = re.compile(r"^-?\d+\.?\d*")
_LOOKS_NUMERIC = re.compile(r"^-?\d")


def numeric_prefix(value):
    """Return the leading number of ``value``, or 0 when there is none.

    Numbers pass through unchanged; booleans are not numbers here.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return 0
    match = _NUMERIC_PREFIX.match(value)
    return float(match.group(0)) if match else 0


def looks_numeric(text):
    return bool(_LOOKS_NUMERIC.match(text))
