"""Fatal unwrapping of OS-level results."""

from __future__ import annotations

import logging as py_logging
from collections.abc import Callable
from typing import TypeVar, Union

from .errors import FALLBACK_EXIT_CODE, Displayable, into_user_error
from .render import write_diagnostic

T = TypeVar("T")

IoResult = Union[T, OSError]

MISSING_CODE_NOTE = (
    "note: the error code could not be found for this variant; "
    f"reverting to {FALLBACK_EXIT_CODE}..."
)

logger = py_logging.getLogger(__name__)


def exit_code_for(error: OSError) -> int:
    """Return the raw OS error code, or the fallback after printing a note.

    On Windows the Win32 code (`winerror`) is preferred over the C runtime
    `errno` translation of it.
    """
    code = getattr(error, "winerror", None)
    if code is None:
        code = error.errno
    if code is not None:
        return code
    logger.debug("No OS error number on %r", error)
    write_diagnostic(MISSING_CODE_NOTE + "\n")
    return FALLBACK_EXIT_CODE


def unwrap_io(msg: Displayable, result: IoResult[T]) -> T:
    """Return `result`, or report it and exit if it is an `OSError`.

    On failure the error is printed after `msg` and the process exits with
    the error's `errno`. This never returns on the failure path; do not use
    it where the failure should be recoverable.
    """
    if not isinstance(result, OSError):
        return result

    code = exit_code_for(result)
    into_user_error(result).print_all(msg).exit(code)


def run_io(msg: Displayable, operation: Callable[[], T]) -> T:
    """Call `operation` and unwrap its outcome with `unwrap_io`.

    Only `OSError` is treated as fatal; anything else propagates.
    """
    try:
        value = operation()
    except OSError as exc:
        return unwrap_io(msg, exc)
    return unwrap_io(msg, value)
