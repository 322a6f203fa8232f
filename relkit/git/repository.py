"""Git repository operations used by the release flow.

Repository issues the exact git command strings through an injected
CommandRunner and parses their output with the pure parsers in
`remotes` and `stash`. Every method returns a Result.

Usage:
    repo = Repository(ShellRunner(cwd=Path(".")))

    match repo.default_remote():
        case Ok(remote) if remote is not None:
            print(f"pushing to {remote.name}")
        case Ok(None):
            print("no remotes configured")
        case Err(e):
            print(f"git failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass

from relkit.core.result import Err, Ok, Result
from relkit.git.remotes import Remote, parse_default_remote_and_branch, parse_remotes
from relkit.git.stash import Stash, find_stash, parse_stash_list
from relkit.platform.process import CommandRunner, ProcessError

__all__ = ["GitError", "Repository"]

REMOTE_LIST_CMD = "git remote -v"
DEFAULT_HEAD_CMD = "git branch -rl '*/HEAD'"
STASH_LIST_CMD = "git stash list"


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


def _git_error(command: str, error: ProcessError) -> GitError:
    return GitError(
        command=command,
        message=error.stderr.strip() or str(error),
        returncode=error.returncode,
    )


class Repository:
    """Git operations over a CommandRunner bound to the working copy."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    def _query(self, command: str) -> Result[str, GitError]:
        return self.runner.run(command).map_err(lambda e: _git_error(command, e))

    def _mutate(self, command: str) -> Result[None, GitError]:
        result = self.runner.run(command, inherit=True)
        if isinstance(result, Err):
            return Err(_git_error(command, result.error))
        return Ok(None)

    # -- remotes -------------------------------------------------------------

    def remotes(self) -> Result[dict[str, Remote], GitError]:
        """Remotes from `git remote -v`, in listing order."""
        return self._query(REMOTE_LIST_CMD).map(parse_remotes)

    def default_remote_and_branch(self) -> Result[tuple[str | None, str | None], GitError]:
        """(remote, branch) that the upstream HEAD points at, or (None, None)."""
        return self._query(DEFAULT_HEAD_CMD).map(parse_default_remote_and_branch)

    def default_remote(self) -> Result[Remote | None, GitError]:
        """The remote tracking upstream HEAD, else the first remote, else None.

        A HEAD pointing at a remote that `git remote -v` does not list
        resolves to None rather than falling back.
        """
        head = self.default_remote_and_branch()
        if isinstance(head, Err):
            return head
        name, _ = head.value

        remotes = self.remotes()
        if isinstance(remotes, Err):
            return remotes

        if name is not None:
            return Ok(remotes.value.get(name))
        return Ok(next(iter(remotes.value.values()), None))

    # -- stash ---------------------------------------------------------------

    def stash_list(self) -> Result[list[Stash], GitError]:
        return self._query(STASH_LIST_CMD).map(parse_stash_list)

    def stash_by(
        self,
        *,
        index: int | None = None,
        name: str | None = None,
    ) -> Result[Stash | None, GitError]:
        """Find a stash by exact index or exact name (exactly one)."""
        stashes = self.stash_list()
        if isinstance(stashes, Err):
            return stashes
        return Ok(find_stash(stashes.value, index=index, name=name))

    def stash_save(self, message: str) -> Result[None, GitError]:
        """Stash tracked and untracked changes under a message."""
        return self._mutate(f'git stash save -u -m "{message}"')

    def stash_pop(self, index: int) -> Result[None, GitError]:
        """Restore the stash at `index` (not necessarily the top one)."""
        return self._mutate(f"git stash pop --index {index}")

    # -- tags ----------------------------------------------------------------

    def tag(self, tag: str) -> Result[None, GitError]:
        return self._mutate(f"git tag {tag}")

    def push_tag(self, remote: str, tag: str) -> Result[None, GitError]:
        return self._mutate(f"git push {remote} tag {tag}")
