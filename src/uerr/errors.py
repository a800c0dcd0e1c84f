"""Human-readable error model and exit code contract."""

from __future__ import annotations

import logging as py_logging
from collections.abc import Iterable
from enum import IntEnum
from typing import NoReturn, Protocol, TextIO

from typing_extensions import Self

from .render import render_lines, write_diagnostic

FALLBACK_EXIT_CODE = -1

logger = py_logging.getLogger(__name__)


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    INVALID_ARGS = 2
    CONFIG_ERROR = 3


class Displayable(Protocol):
    """Anything with a textual representation."""

    def __str__(self) -> str: ...


class UserError(Exception):
    """A human-readable error: a message plus ordered reasons and help tips.

    Example::

        UserError("could not open file") \\
            .and_reason("The system cannot find the file specified.") \\
            .and_help("Does this file exist?") \\
            .print_all("myprogram: error: ") \\
            .exit(1)

    The message is fixed at construction. Reasons and help tips can be
    appended at any time and are rendered in insertion order.
    """

    def __init__(
        self,
        message: str,
        *,
        reasons: Iterable[Displayable] = (),
        help: Iterable[Displayable] = (),
    ) -> None:
        super().__init__(message)
        self._message = message
        self._reasons = [str(reason) for reason in reasons]
        self._help = [str(tip) for tip in help]

    @classmethod
    def from_display(cls, value: Displayable) -> Self:
        return cls(str(value))

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self._message!r}, "
            f"reasons={self._reasons!r}, help={self._help!r})"
        )

    @property
    def message(self) -> str:
        return self._message

    @property
    def reasons(self) -> tuple[str, ...]:
        return tuple(self._reasons)

    @property
    def help(self) -> tuple[str, ...]:
        return tuple(self._help)

    def reasons_mut(self) -> list[str]:
        return self._reasons

    def help_mut(self) -> list[str]:
        return self._help

    def add_reason(self, reason: Displayable) -> None:
        self._reasons.append(str(reason))

    def add_help(self, help: Displayable) -> None:
        self._help.append(str(help))

    def and_reason(self, reason: Displayable) -> Self:
        self.add_reason(reason)
        return self

    def and_help(self, help: Displayable) -> Self:
        self.add_help(help)
        return self

    def render(self, prefix: Displayable = "") -> str:
        """Return the block `print_all` would write, with a trailing newline."""
        lines = render_lines(prefix, self._message, self._reasons, self._help)
        return "\n".join(lines) + "\n"

    def print_all(self, prefix: Displayable = "", *, stream: TextIO | None = None) -> Self:
        """Write the prefix, message, reasons and help tips to stderr.

        No padding is inserted between the prefix and the message. Write
        failures are ignored.
        """
        if not write_diagnostic(self.render(prefix), stream):
            logger.debug("Could not write user error to the diagnostic stream")
        logger.debug(
            "Rendered user error with %d reason(s) and %d help tip(s)",
            len(self._reasons),
            len(self._help),
        )
        return self

    def exit(self, code: int) -> NoReturn:
        """Terminate the process with `code` by raising `SystemExit`."""
        logger.debug("Exiting with code %s after user error: %s", code, self._message)
        raise SystemExit(code)


def into_user_error(value: Displayable) -> UserError:
    """Convert any displayable value into a `UserError` with no reasons or help."""
    return UserError(str(value))
