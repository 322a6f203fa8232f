"""Parsing of `git remote -v` and default-remote detection.

Malformed lines are skipped rather than reported: callers work with
whatever remotes could be read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

__all__ = [
    "Remote",
    "RemoteUrlType",
    "parse_default_remote_and_branch",
    "parse_remotes",
]

RemoteUrlType: TypeAlias = Literal["fetch", "push"]

_URL_TYPES: tuple[RemoteUrlType, ...] = ("fetch", "push")


def _empty_urls() -> dict[RemoteUrlType, str]:
    return {}


@dataclass(frozen=True, slots=True)
class Remote:
    """A git remote with up to one fetch and one push URL.

    Attributes:
        name: Remote name (e.g. "origin").
        urls: URL per type; never empty for a parsed remote.
    """

    name: str
    urls: dict[RemoteUrlType, str] = field(default_factory=_empty_urls)

    @property
    def fetch_url(self) -> str | None:
        return self.urls.get("fetch")

    @property
    def push_url(self) -> str | None:
        return self.urls.get("push")


def _other(url_type: RemoteUrlType) -> RemoteUrlType:
    return "push" if url_type == "fetch" else "fetch"


def _split_url_and_type(rest: str) -> tuple[str, RemoteUrlType | None]:
    text = rest.strip()
    url, _, suffix = text.rpartition(" ")
    if not (suffix.startswith("(") and suffix.endswith(")")):
        return text, None
    label = suffix[1:-1].strip()
    url_type: RemoteUrlType | None = None
    for known in _URL_TYPES:
        if label == known:
            url_type = known
    return url.strip(), url_type


def _slot_for(urls: dict[RemoteUrlType, str], wanted: RemoteUrlType | None) -> RemoteUrlType | None:
    if wanted is None:
        wanted = "fetch" if "fetch" not in urls else "push"
    if wanted not in urls:
        return wanted
    flipped = _other(wanted)
    if flipped not in urls:
        return flipped
    return None


def parse_remotes(stdout: str) -> dict[str, Remote]:
    """Parse `git remote -v` output into remotes keyed by name.

    Each line is `name<TAB>url (type)` or `name<TAB>url`. An unlabeled
    URL fills the fetch slot first, then push. A URL whose slot is taken
    moves to the other slot; once both are filled, extra URLs are
    ignored. Lines without a name or URL are skipped.

    Returns:
        Remotes in order of first appearance.
    """
    collected: dict[str, dict[RemoteUrlType, str]] = {}

    for raw in stdout.splitlines():
        line = raw.strip("\r\n")
        if not line.strip():
            continue

        name, sep, rest = line.partition("\t")
        name = name.strip()
        if not sep or not name:
            continue

        url, wanted = _split_url_and_type(rest)
        if not url:
            continue

        urls = collected.setdefault(name, {})
        slot = _slot_for(urls, wanted)
        if slot is not None:
            urls[slot] = url

    return {name: Remote(name=name, urls=urls) for name, urls in collected.items()}


def parse_default_remote_and_branch(stdout: str) -> tuple[str | None, str | None]:
    """Parse `git branch -rl '*/HEAD'` output.

    `  origin/HEAD -> origin/master` yields ("origin", "master"). Output
    without the `->` arrow, or no output at all, yields (None, None).
    """
    first = next((line for line in stdout.splitlines() if line.strip()), None)
    if first is None or "->" not in first:
        return (None, None)

    target = first.split("->", 1)[1].strip()
    remote, _, branch = target.partition("/")
    return (remote or None, branch or None)
