"""Human-readable errors for command-line programs."""

from .errors import FALLBACK_EXIT_CODE, Displayable, ExitCode, UserError, into_user_error
from .unwrap import IoResult, run_io, unwrap_io

__all__ = [
    "Displayable",
    "ExitCode",
    "FALLBACK_EXIT_CODE",
    "into_user_error",
    "IoResult",
    "run_io",
    "unwrap_io",
    "UserError",
]
