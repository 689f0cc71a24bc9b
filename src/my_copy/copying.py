# SPDX-License-Identifier: Apache-2.0

"""Copy engine.

The source is opened first. If the destination can already be opened for reading the caller is
asked for confirmation, then the destination is created or truncated and the source streamed into
it through a fixed size buffer. Handles are unbuffered so that every read and write maps to a
single system call.
"""

import logging
import os
from collections.abc import Callable
from typing import BinaryIO

from my_copy.constants import BUFFER_SIZE, CREATION_MODE
from my_copy.exceptions import DestOpenError, ReadError, SourceOpenError, WriteError
from my_copy.model import CopySettings
from my_copy.typing import StrOrPath
from my_copy.utils import log

L = logging.getLogger(__name__)


def open_source(path: StrOrPath) -> BinaryIO:
    """Open the source file for reading."""
    try:
        return open(path, "rb", buffering=0)  # pylint: disable=consider-using-with
    except OSError as e:
        raise SourceOpenError() from e


def destination_exists(path: StrOrPath) -> bool:
    """Return True if the path can be opened for reading.

    An existing file that cannot be read is reported as missing.
    """
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def open_destination(path: StrOrPath, mode: int = CREATION_MODE) -> BinaryIO:
    """Open the destination for writing, creating it with `mode` or truncating it."""

    def opener(file, flags):
        return os.open(file, flags, mode)

    try:
        return open(path, "wb", buffering=0, opener=opener)  # pylint: disable=consider-using-with
    except OSError as e:
        raise DestOpenError() from e


def write_all(fd: BinaryIO, data, count: int) -> int:
    """Write exactly the first `count` bytes of `data` to `fd`.

    Short writes are reissued for the remainder. Any write error aborts the operation.
    """
    view = memoryview(data)
    written = 0
    while written < count:
        try:
            written += fd.write(view[written:count])
        except OSError as e:
            raise WriteError() from e
    return written


def copy_stream(source: BinaryIO, destination: BinaryIO, buffer_size: int = BUFFER_SIZE) -> int:
    """Copy `source` to `destination` until end of input and return the number of bytes copied."""
    buffer = bytearray(buffer_size)
    total = 0
    while True:
        try:
            count = source.readinto(buffer)
        except OSError as e:
            raise ReadError() from e

        if not count:
            break

        write_all(destination, buffer, count)
        total += count

    return total


@log
def copy_file(
    source: StrOrPath,
    destination: StrOrPath,
    *,
    confirm: Callable[[], bool] | None = None,
    settings: CopySettings | None = None,
) -> bool:
    """Copy the contents of `source` into `destination`.

    Args:
        source: Path to the file to read.
        destination: Path to the file to create or overwrite.
        confirm: Called without arguments when the destination already exists. A falsy return
            cancels the copy. If None an existing destination is overwritten.
        settings: Buffer size and creation mode. Defaults to `CopySettings()`.

    Returns:
        True if the data was copied, False if the overwrite was declined.

    Raises:
        SourceOpenError: If the source cannot be opened.
        DestOpenError: If the destination cannot be opened for writing.
        ReadError, WriteError: If the transfer fails. The destination is left partially written.
    """
    settings = settings or CopySettings()

    with open_source(source) as src:
        if destination_exists(destination):
            L.debug("Destination %s already exists.", destination)

            if confirm is not None and not confirm():
                L.info("Overwriting %s was declined.", destination)
                return False

        with open_destination(destination, mode=settings.creation_mode) as dst:
            total = copy_stream(src, dst, buffer_size=settings.buffer_size)

    L.info("Copied %d bytes from %s to %s", total, source, destination)
    return True
