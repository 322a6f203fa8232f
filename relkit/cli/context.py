from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from relkit.output.console import ConsoleProtocol, RichConsole
from relkit.platform.paths import process_root
from relkit.platform.process import CommandRunner, ShellRunner


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    runner: CommandRunner
    console: ConsoleProtocol


def build_context(env: Mapping[str, str] | None = None, cwd: Path | None = None) -> CLIContext:
    """Snapshot the process environment once for a command invocation."""
    snapshot = dict(os.environ if env is None else env)
    root = process_root(snapshot, cwd if cwd is not None else Path.cwd())
    return CLIContext(
        root=root,
        runner=ShellRunner(cwd=root, env=snapshot),
        console=RichConsole(),
    )
