"""Exceptions raised by the ninarow package.

Only two conditions are errors: building a board (or search configuration)
from invalid parameters, and asking for a move when none exists. Per-cell
checks such as placing on an occupied cell are ordinary return values.
"""


class NinARowError(Exception):
    """Base class for all package errors."""


class ConfigurationError(NinARowError, ValueError):
    """Invalid board geometry, search settings or configuration value."""


class NoMoveAvailable(NinARowError, RuntimeError):
    """A move was requested on a board with no empty cell."""
