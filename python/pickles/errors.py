"""Exceptions raised by pickles."""


class PicklesError(Exception):
    """Base class for errors shown to the user."""


class DocumentParseError(PicklesError):
    """The supplied text is not valid JSON."""

    def __init__(self, message="Invalid JSON file", detail=None):
        super().__init__(message)
        self.detail = detail


class DocumentReadError(PicklesError):
    """The document file could not be read."""


class ConfigError(PicklesError):
    """A preference was given a value it does not accept."""
