"""Exception types raised by statkit functions.

Every error derives from :class:`StatkitError` and from the builtin exception a
caller would already expect for that failure, so ``except ValueError`` keeps
working for bad arguments.
"""

from __future__ import annotations

import numpy as np


class StatkitError(Exception):
    """Base class for all statkit errors."""


class InvalidInputError(StatkitError, ValueError):
    """Malformed argument: empty sequence, mismatched lengths, bad count."""


class InvalidRangeError(StatkitError, ValueError):
    """Lower bound of a range lies above its upper bound."""


class DivisionByZeroError(StatkitError, ZeroDivisionError):
    """Statistic is undefined because the input has zero spread."""


class SingularMatrixError(StatkitError, np.linalg.LinAlgError):
    """Matrix cannot be inverted."""


class SchemaMismatchError(StatkitError, ValueError):
    """Table or mapping does not have the shape a conversion needs."""


class SerializationError(StatkitError, TypeError):
    """Value could not be written to a binary file."""


class DeserializationError(StatkitError, ValueError):
    """Binary file does not hold a value of the expected structure."""
