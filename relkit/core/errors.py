"""Exit codes for the relkit CLI.

The release flow only distinguishes success from failure; usage errors
are reported by the CLI parser itself with the conventional code 2.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are part of the CLI contract."""

    OK = 0
    RELEASE_FAILED = 1
    USAGE_ERROR = 2
