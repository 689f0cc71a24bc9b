# SPDX-License-Identifier: Apache-2.0

"""Constants definitions."""

PROGRAM_NAME = "my-copy"

# size of the reusable transfer buffer of the copy loop
BUFFER_SIZE = 8192

# rw-r--r-- for newly created destination files, before the umask is applied
CREATION_MODE = 0o644

USAGE_MESSAGE = f"Usage: {PROGRAM_NAME} <source_file> <dest_file>"

OVERWRITE_PROMPT = (
    "The destination file already exists.\n"
    "Overwriting it will erase its contents.\n"
    "Do you want to continue? (y/n)\n"
)
INVALID_INPUT_MESSAGE = "Invalid input. Please enter 'y' or 'n'."
CANCELED_MESSAGE = "Copy operation canceled by the user."
