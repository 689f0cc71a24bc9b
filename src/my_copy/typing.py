# SPDX-License-Identifier: Apache-2.0

"""Typing aliases."""

import os

StrOrPath = str | os.PathLike[str]
