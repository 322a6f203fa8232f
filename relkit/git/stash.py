"""Parsing of `git stash list` output."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "DEFAULT_STASH_BRANCH",
    "Stash",
    "find_stash",
    "format_stash",
    "format_stash_list",
    "parse_stash_list",
]

DEFAULT_STASH_BRANCH = "main"


@dataclass(frozen=True, slots=True)
class Stash:
    """One entry of the stash stack.

    Attributes:
        index: Position in the stack, 0 is the most recent.
        branch: Branch the stash was created on.
        name: Stash message, None when the entry carries none.
    """

    index: int
    branch: str = DEFAULT_STASH_BRANCH
    name: str | None = None


def _parse_index(ref: str) -> int | None:
    start = ref.find("@{")
    end = ref.find("}", start + 2)
    if start == -1 or end == -1:
        return None
    raw = ref[start + 2 : end]
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)


def format_stash(line: str) -> Stash | None:
    """Parse one `stash@{N}: <label>: <name>` line.

    Examples:
        "stash@{0}: WIP on main: 1234567 Commit message"
            -> Stash(0, "main", "1234567 Commit message")
        "stash@{1}: stash-2" -> Stash(1, "main", "stash-2")
        "stash@{x}: On main: y" -> None
    """
    chunks = line.strip().split(": ")

    index = _parse_index(chunks[0])
    if index is None:
        return None

    branch = DEFAULT_STASH_BRANCH
    name: str | None = None

    if len(chunks) >= 3:
        branch = chunks[1].split(" ")[-1] or DEFAULT_STASH_BRANCH
        name = ": ".join(chunks[2:])
    elif len(chunks) == 2:
        name = chunks[1].split(" ")[-1]

    return Stash(index=index, branch=branch, name=name or None)


def format_stash_list(lines: Iterable[str]) -> list[Stash | None]:
    """Parse each line, keeping None where a line was not a stash entry."""
    return [format_stash(line) for line in lines]


def parse_stash_list(stdout: str) -> list[Stash]:
    """Parse `git stash list` output, dropping unparsable lines."""
    lines = [line for line in stdout.splitlines() if line.strip()]
    return [stash for stash in format_stash_list(lines) if stash is not None]


def find_stash(
    stashes: Sequence[Stash],
    *,
    index: int | None = None,
    name: str | None = None,
) -> Stash | None:
    """Return the first stash matching exactly one of index or name.

    Raises:
        ValueError: if both or neither selector is given.
    """
    if (index is None) == (name is None):
        raise ValueError("find_stash() takes exactly one of index= or name=")

    for stash in stashes:
        if index is not None and stash.index == index:
            return stash
        if name is not None and stash.name == name:
            return stash
    return None
