"""Logging helpers for fractionkit.

The library is quiet by default: loggers live under the ``fractionkit``
namespace and a NullHandler is attached to its root, so nothing is printed
unless the application configures logging (e.g. ``logging.basicConfig``).

Failure paths (overflow, invalid construction, parse errors) log at DEBUG
right before raising.
"""

import logging
from typing import Final

LOGGER_NAME: Final[str] = "fractionkit"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Module logger inside the ``fractionkit`` namespace."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())
