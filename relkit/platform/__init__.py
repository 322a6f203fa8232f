"""Platform abstraction layer."""

from .paths import process_root
from .process import (
    CommandRunner,
    ProcessError,
    ShellRunner,
    parse_command,
    run,
    run_inherit,
    split_command,
)

__all__ = [
    # paths
    "process_root",
    # process
    "CommandRunner",
    "ProcessError",
    "ShellRunner",
    "parse_command",
    "run",
    "run_inherit",
    "split_command",
]
