# SPDX-License-Identifier: Apache-2.0

"""Utilities."""

import functools
import inspect
import logging

L = logging.getLogger(__name__)


def log(function, logger=L):
    """Log the bound arguments of each call to a function at DEBUG level.

    Defaults that are not passed explicitly are included in the record.
    """
    signature = inspect.signature(function)

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        if logger.isEnabledFor(logging.DEBUG):
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()

            str_v = "\n".join(f"  {k} = {v!r}" for k, v in bound.arguments.items())
            logger.debug("Executed function:\n Name: %s\n Args:\n%s\n", function.__name__, str_v)

        return function(*args, **kwargs)

    return wrapper
