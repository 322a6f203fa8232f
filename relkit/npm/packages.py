"""Installed-package checks via `npm list --json`."""

from __future__ import annotations

import json
from dataclasses import dataclass

from relkit.core.result import Err, Ok, Result
from relkit.core.structured import StrDict, as_str_dict, get_table
from relkit.platform.process import CommandRunner

__all__ = ["NpmError", "is_package_installed", "list_packages"]


@dataclass(frozen=True, slots=True)
class NpmError:
    command: str
    message: str


def _list_command(global_: bool) -> str:
    return "npm list --json -g" if global_ else "npm list --json"


def list_packages(runner: CommandRunner, *, global_: bool = False) -> Result[StrDict, NpmError]:
    """Return the local (or global) dependency tree as parsed JSON."""
    command = _list_command(global_)
    result = runner.run(command)
    if isinstance(result, Err):
        e = result.error
        return Err(NpmError(command=command, message=e.stderr.strip() or str(e)))

    try:
        raw: object = json.loads(result.value)
    except json.JSONDecodeError as e:
        return Err(NpmError(command=command, message=f"invalid JSON: {e}"))

    tree = as_str_dict(raw)
    if tree is None:
        return Err(NpmError(command=command, message="dependency tree is not a JSON object"))
    return Ok(tree)


def is_package_installed(
    runner: CommandRunner,
    name: str,
    *,
    global_: bool = False,
) -> Result[bool, NpmError]:
    """Whether `name` is a top-level dependency of the local or global tree."""
    tree = list_packages(runner, global_=global_)
    if isinstance(tree, Err):
        return tree
    dependencies = get_table(tree.value, "dependencies") or {}
    return Ok(name in dependencies)
