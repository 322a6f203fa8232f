"""Subprocess execution with Result-based error handling.

Commands are written as plain strings (`git push origin tag v1.0.0`) so
the exact text can be logged and asserted on in tests. A CommandRunner
turns that string into a subprocess call; ShellRunner is the real one,
tests substitute a recording fake.

Usage:
    runner = ShellRunner(cwd=Path("."))
    match runner.run("git remote -v"):
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from relkit.core.result import Err, Ok, Result

__all__ = [
    "CommandRunner",
    "ProcessError",
    "ShellRunner",
    "parse_command",
    "run",
    "run_inherit",
    "split_command",
]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The argv that was executed.
        returncode: Exit code, or -1 when the process could not start.
        stdout: Standard output (empty when stdio was inherited).
        stderr: Standard error, or the OS error message.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        return f"{' '.join(self.command)} failed (exit {self.returncode})"


def split_command(command: str) -> list[str]:
    """Split a command string into argv using POSIX shell quoting rules.

    `git branch -rl '*/HEAD'` becomes `["git", "branch", "-rl", "*/HEAD"]`,
    so patterns reach git unexpanded without going through a shell.
    """
    return shlex.split(command)


def parse_command(command: str) -> Result[list[str], ProcessError]:
    """Split a command string, reporting unbalanced quotes as a ProcessError."""
    try:
        return Ok(split_command(command))
    except ValueError as e:
        return Err(ProcessError(command=(command,), returncode=-1, stdout="", stderr=str(e)))


def _resolve_executable(argv: list[str]) -> list[str]:
    # npm and pnpm are .cmd shims on Windows; subprocess needs the full path.
    if not argv:
        return argv
    found = shutil.which(argv[0])
    if found is None:
        return argv
    return [found, *argv[1:]]


def run(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and capture its output.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_inherit(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command with stdio inherited from this process.

    Used for build, tag, push and publish so their progress streams to
    the terminal. Nothing is captured, not even on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(command=tuple(cmd), returncode=proc.returncode, stdout="", stderr="")
        )

    return Ok(None)


class CommandRunner(Protocol):
    """Capability to run one command string to completion.

    `inherit=True` streams stdio to the terminal and returns an empty
    string on success. Any failure, including a command string that
    cannot be split, is returned as Err, never raised.
    """

    def run(self, command: str, *, inherit: bool = False) -> Result[str, ProcessError]: ...


@dataclass(frozen=True, slots=True)
class ShellRunner:
    """CommandRunner backed by subprocess, bound to a working directory."""

    cwd: Path
    env: Mapping[str, str] | None = None

    def run(self, command: str, *, inherit: bool = False) -> Result[str, ProcessError]:
        parsed = parse_command(command)
        if isinstance(parsed, Err):
            return parsed
        argv = _resolve_executable(parsed.value)
        if inherit:
            result = run_inherit(argv, cwd=self.cwd, env=self.env)
            if isinstance(result, Err):
                return result
            return Ok("")
        return run(argv, cwd=self.cwd, env=self.env)
