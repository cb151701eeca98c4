"""Read and parse JSON documents."""
import json
import logging
import os

from .errors import DocumentParseError, DocumentReadError

logger = logging.getLogger(__name__)


def parse_document(text):
    """Parse JSON text, raising DocumentParseError when it is malformed."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        logger.debug("Rejected document: %s", e)
        raise DocumentParseError(detail=str(e)) from e


def read_document(path):
    """Read and parse a JSON file. Returns ``(document, file_name)``."""
    path = os.path.expanduser(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"Could not read {path}: {e}") from e
    return parse_document(text), os.path.basename(path)
