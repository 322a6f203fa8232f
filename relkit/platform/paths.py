"""Process root resolution."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

__all__ = ["process_root"]


def process_root(env: Mapping[str, str], cwd: Path) -> Path:
    """Return the directory the release runs against.

    npm and pnpm set INIT_CWD to the directory a script was invoked from,
    which can differ from cwd when relkit runs as a package script.
    """
    init_cwd = env.get("INIT_CWD")
    if init_cwd:
        return Path(init_cwd)
    return cwd
