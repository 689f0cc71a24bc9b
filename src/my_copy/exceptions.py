# SPDX-License-Identifier: Apache-2.0

"""my-copy exceptions."""

from my_copy.constants import USAGE_MESSAGE


class MyCopyError(Exception):
    """my-copy exception class.

    Each subclass carries a fixed, human readable message which is used when the exception is
    raised without arguments.
    """

    message = "copy failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class UsageError(MyCopyError):
    """Wrong number of command line arguments."""

    message = USAGE_MESSAGE


class SourceOpenError(MyCopyError):
    """The source file is missing or cannot be opened for reading."""

    message = "source file does not exist or cannot be read"


class DestOpenError(MyCopyError):
    """The destination file cannot be created or opened for writing."""

    message = "cannot open destination file"


class CopyIOError(MyCopyError):
    """I/O failure while transferring data."""


class ReadError(CopyIOError):
    """Reading from the source failed."""

    message = "read failed"


class WriteError(CopyIOError):
    """Writing to the destination failed."""

    message = "write failed"
