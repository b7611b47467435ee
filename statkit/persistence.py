"""Save in-memory values to binary files and load them back.

Values are written with :mod:`pickle`, so any picklable object round-trips:
scalars, sequences, nested mappings, numpy arrays and DataFrames.
"""

from __future__ import annotations

import logging
import os
import pickle
import tempfile
from typing import Any, Optional, Type

from .constants import PICKLE_PROTOCOL
from .errors import DeserializationError, SerializationError

logger = logging.getLogger(__name__)


def save_to_binary_file(value: Any, path: str | os.PathLike) -> None:
    """Serialize ``value`` to ``path``, replacing any existing file.

    Args:
        value: Any picklable object.
        path (str or os.PathLike): Destination file.

    Raises:
        OSError: If the file cannot be opened or written.
        SerializationError: If ``value`` cannot be pickled.

    Note:
        The value is written to a temporary file in the same directory and
        moved onto ``path`` only once pickling succeeds, so a failed save
        leaves any existing file untouched.
    """
    target = os.fspath(path)
    fd, tmp_path = tempfile.mkstemp(
        prefix=f".{os.path.basename(target)}.", dir=os.path.dirname(target) or "."
    )
    try:
        with os.fdopen(fd, "wb") as fh:
            pickle.dump(value, fh, protocol=PICKLE_PROTOCOL)
        os.replace(tmp_path, target)
    except BaseException as exc:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        if isinstance(
            exc,
            (pickle.PicklingError, TypeError, AttributeError, ValueError, RecursionError),
        ):
            raise SerializationError(
                f"Cannot serialize {type(value).__name__} to {target}: {exc}"
            ) from exc
        raise
    logger.debug("Saved %s to %s", type(value).__name__, target)


def load_from_binary_file(
    path: str | os.PathLike, expected_type: Optional[Type] = None
) -> Any:
    """Deserialize the value stored at ``path``.

    Args:
        path (str or os.PathLike): File written by ``save_to_binary_file``.
        expected_type (type, optional): If given, the loaded value must be an
            instance of it.

    Returns:
        The stored value.

    Raises:
        OSError: If the file is missing or unreadable.
        DeserializationError: If the bytes are not a valid serialized value,
            or the value is not an ``expected_type``.

    Note:
        Unpickling can execute code; only load files this process or a
        trusted source wrote.
    """
    with open(path, "rb") as fh:
        try:
            value = pickle.load(fh)
        except (
            pickle.UnpicklingError,
            EOFError,
            AttributeError,
            ImportError,
            IndexError,
            KeyError,
            MemoryError,
            OverflowError,
            RecursionError,
            TypeError,
            ValueError,
        ) as exc:
            raise DeserializationError(
                f"{os.fspath(path)} does not contain a valid serialized value: {exc}"
            ) from exc

    if expected_type is not None and not isinstance(value, expected_type):
        raise DeserializationError(
            f"{os.fspath(path)} holds {type(value).__name__}, "
            f"expected {expected_type.__name__}."
        )
    logger.debug("Loaded %s from %s", type(value).__name__, os.fspath(path))
    return value
