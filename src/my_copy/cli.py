# SPDX-License-Identifier: Apache-2.0

"""Copy a file, asking before an existing destination is overwritten."""

import logging
import os

import click

from my_copy.constants import CANCELED_MESSAGE, PROGRAM_NAME
from my_copy.copying import copy_file
from my_copy.exceptions import MyCopyError, UsageError
from my_copy.prompt import ask_overwrite
from my_copy.version import VERSION

L = logging.getLogger(__name__)


def _setup_logging(verbose: int) -> None:
    # Allow overriding the logging with the DEBUG env var.
    if os.getenv("DEBUG", "False").lower() == "true":
        level = logging.DEBUG
    else:
        level = (logging.WARNING, logging.INFO, logging.DEBUG)[min(verbose, 2)]

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_paths(paths: tuple[str, ...]) -> tuple[str, str]:
    """Return the source and destination paths, requiring exactly two arguments."""
    if len(paths) != 2:
        raise UsageError()
    source, destination = paths
    return source, destination


@click.command(PROGRAM_NAME)
@click.version_option(version=VERSION)
@click.option("-v", "--verbose", count=True, default=0, help="-v for INFO, -vv for DEBUG")
@click.argument("paths", nargs=-1, metavar="SOURCE_FILE DEST_FILE")
@click.pass_context
def main(ctx, verbose, paths):
    """Copy SOURCE_FILE to DEST_FILE, asking before overwriting an existing DEST_FILE."""
    _setup_logging(verbose)

    try:
        source, destination = parse_paths(paths)
        copied = copy_file(source, destination, confirm=ask_overwrite)
    except UsageError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)
    except MyCopyError as e:
        L.debug("Copy failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    else:
        if not copied:
            click.echo(CANCELED_MESSAGE)
