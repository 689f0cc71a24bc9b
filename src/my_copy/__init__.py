# SPDX-License-Identifier: Apache-2.0

"""Interactive single file copy."""

from my_copy.copying import copy_file
from my_copy.model import CopySettings
from my_copy.version import __version__

__all__ = ["CopySettings", "__version__", "copy_file"]
