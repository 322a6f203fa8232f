"""Git operations module.

- remotes: `git remote -v` and default-remote parsing
- stash: `git stash list` parsing and lookup
- Repository: the git commands the release flow runs

Usage:
    from relkit.git import Repository

    repo = Repository(runner)
    stash = repo.stash_by(name="pre-release")
"""

from relkit.git.remotes import (
    Remote,
    RemoteUrlType,
    parse_default_remote_and_branch,
    parse_remotes,
)
from relkit.git.repository import GitError, Repository
from relkit.git.stash import (
    DEFAULT_STASH_BRANCH,
    Stash,
    find_stash,
    format_stash,
    format_stash_list,
    parse_stash_list,
)

__all__ = [
    # Remotes
    "Remote",
    "RemoteUrlType",
    "parse_default_remote_and_branch",
    "parse_remotes",
    # Repository
    "GitError",
    "Repository",
    # Stash
    "DEFAULT_STASH_BRANCH",
    "Stash",
    "find_stash",
    "format_stash",
    "format_stash_list",
    "parse_stash_list",
]
