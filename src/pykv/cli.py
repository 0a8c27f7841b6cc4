"""
CLI Interface
=============
Prints key/value event data as JSON, with the derived fifth value added.

Usage:
    pykv <path to event data>
    python -m pykv <path to event data>
"""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from .decoder import load
from .errors import KVError
from .puzzle import can_enrich, enrich

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

_HANDLER_NAME = "pykv-cli"


def _setup_logging():
    """Send package diagnostics to stderr so stdout stays pure JSON."""
    package_logger = logging.getLogger("pykv")
    package_logger.setLevel(logging.INFO)

    # Rebind on every run, sys.stderr may have been swapped since the last one
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)


def _fail(message: str):
    err_console.print(f"[red]Error:[/] {escape(message)}")
    sys.exit(1)


@click.command()
@click.argument("path", type=click.Path(dir_okay=False))
def cli(path: str):
    """Parse event data at PATH and print it as JSON."""
    _setup_logging()

    try:
        with open(path, encoding="utf-8") as fp:
            data = load(fp)
    except OSError as e:
        _fail(f"Failed to open {path}: {e.strerror or e}")
    except UnicodeDecodeError as e:
        _fail(f"Failed to read {path}: {e}")
    except KVError as e:
        _fail(str(e))

    if can_enrich(data):
        try:
            data = enrich(data)
        except KVError as e:
            _fail(str(e))
    else:
        logger.debug("Puzzle keys missing, skipping fifth value")

    click.echo(json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False))


def main():
    cli()


if __name__ == "__main__":
    main()
