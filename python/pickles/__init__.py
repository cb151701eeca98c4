"""pickles: an interactive picker for JSON property paths."""

__version__ = "0.1.0"
