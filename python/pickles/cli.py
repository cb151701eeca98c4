"""CLI entry point for pickles."""
import argparse
import logging

from rich.logging import RichHandler

from . import __version__
from .app import PicklesShell


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def main():
    parser = argparse.ArgumentParser(description="Interactive picker for JSON property paths")
    parser.add_argument("file", nargs="?", default=None, help="JSON file to load on start")
    parser.add_argument("--config", type=str, default=None, help="Path to config YAML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"pickles {__version__}")
    args = parser.parse_args()
    setup_logging(args.verbose)
    shell = PicklesShell(config_path=args.config, document_path=args.file)
    shell.run()


if __name__ == "__main__":
    main()
