# SPDX-License-Identifier: Apache-2.0

"""Allow running the tool with `python -m my_copy`."""

from my_copy.cli import main

if __name__ == "__main__":
    main()
