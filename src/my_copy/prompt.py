# SPDX-License-Identifier: Apache-2.0

"""Overwrite confirmation."""

import logging
from typing import BinaryIO, TextIO

import click

from my_copy.constants import INVALID_INPUT_MESSAGE, OVERWRITE_PROMPT

L = logging.getLogger(__name__)

_YES = (b"y", b"Y")
_NO = (b"n", b"N")


def ask_overwrite(
    input_stream: BinaryIO | None = None, output_stream: TextIO | None = None
) -> bool:
    """Ask whether the existing destination should be overwritten.

    The prompt is repeated, without limit, for every byte that is not a yes or no answer.
    Each iteration consumes a single byte, so a trailing newline or each byte of a multi-byte
    character counts as an invalid answer. End of input or a read failure is a refusal.

    Args:
        input_stream: Binary stream to read the answer from. Defaults to stdin.
        output_stream: Text stream to write the prompt to. Defaults to stdout.

    Returns:
        True if the user accepted.
    """
    if input_stream is None:
        input_stream = click.get_binary_stream("stdin")

    while True:
        click.echo(OVERWRITE_PROMPT, file=output_stream, nl=False)

        try:
            answer = input_stream.read(1)
        except OSError as e:
            L.debug("Reading the answer failed: %s", e)
            return False

        if not answer:
            L.debug("End of input while waiting for an answer.")
            return False

        if answer in _YES:
            return True

        if answer in _NO:
            return False

        click.echo(INVALID_INPUT_MESSAGE, file=output_stream)
