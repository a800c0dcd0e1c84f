"""Console rendering for user-facing error blocks."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

REASON_FIRST = " - caused by: "
REASON_REST = "     |        "
HELP_FIRST = " + help: "
HELP_REST = "     |   "


def enumerate_lines(items: Iterable[str], first: str, rest: str) -> Iterator[str]:
    """Yield one line per item, marking the first entry differently.

    An empty iterable yields nothing.
    """
    iterator = iter(items)
    for item in iterator:
        yield f"{first}{item}"
        break
    for item in iterator:
        yield f"{rest}{item}"


def render_lines(
    prefix: object,
    message: str,
    reasons: Iterable[str],
    help: Iterable[str],
) -> list[str]:
    lines = [f"{prefix}{message}"]
    lines.extend(enumerate_lines(reasons, REASON_FIRST, REASON_REST))
    lines.extend(enumerate_lines(help, HELP_FIRST, HELP_REST))
    return lines


def write_diagnostic(text: str, stream: TextIO | None = None) -> bool:
    """Best-effort write to the diagnostic stream; returns False if it failed."""
    target = stream if stream is not None else sys.stderr
    if target is None:
        return False
    try:
        target.write(text)
        target.flush()
    except (OSError, ValueError):
        return False
    return True
