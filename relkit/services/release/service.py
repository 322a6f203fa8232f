"""Release orchestration.

A release validates its inputs first, then runs the mutating sequence

    git stash save -u -m "pre-release"
    <npm run|pnpm> <build>
    git tag v<version>
    git push <origin> tag v<version>
    npm publish --access <access>[ --tag <pre-release>]   (with --npm)
    git stash pop --index <n>                            (if the stash exists)

as one unit: the first failing command stops the run and leaves the
pre-release stash in place for manual recovery.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.git.repository import GitError, Repository
from relkit.npm.package_json import PackageJson, get_pre_release_tag, read_package_json
from relkit.npm.packages import is_package_installed
from relkit.output.console import ConsoleProtocol, Style
from relkit.platform.process import CommandRunner, ProcessError
from relkit.services.release import config
from relkit.services.release.errors import ReleaseError
from relkit.services.release.model import (
    BuildRunner,
    ReleaseContext,
    ReleaseOptions,
    ReleaseSummary,
)

__all__ = [
    "execute_release",
    "prepare_release",
    "publish_command",
    "release",
    "resolve_build_runner",
    "resolve_origin",
]


@dataclass(frozen=True, slots=True)
class _EchoingRunner:
    """Prints streamed commands before running them."""

    inner: CommandRunner
    console: ConsoleProtocol

    def run(self, command: str, *, inherit: bool = False) -> Result[str, ProcessError]:
        if inherit:
            self.console.print(f"$ {command}", Style.DIM)
        return self.inner.run(command, inherit=inherit)


def resolve_build_runner(
    *,
    runner: CommandRunner,
    console: ConsoleProtocol,
    project: PackageJson | None,
) -> BuildRunner:
    """Use pnpm when it is installed globally, npm otherwise.

    A failed check (npm missing, unparsable listing) falls back to npm.
    """
    installed = is_package_installed(runner, config.PNPM_PACKAGE, global_=True)
    if isinstance(installed, Err):
        package = project.name if project is not None else None
        console.warning(
            f"couldn't check if `pnpm` is installed, using `npm` instead "
            f"(package: {package}, error: {installed.error.message})"
        )
        return "npm run"
    return "pnpm" if installed.value else "npm run"


def resolve_origin(*, repo: Repository, console: ConsoleProtocol, options: ReleaseOptions) -> str:
    """Pick the remote the tag is pushed to.

    `--origin` wins, then the remote upstream HEAD points at, then
    "origin". A failing `git branch -rl` or `git remote -v` is treated as
    no default remote: it is noted dimmed and the release goes on with
    "origin" instead of stopping before anything was changed. A push to
    a remote that does not exist still fails the release.
    """
    if options.origin:
        return options.origin

    remote = repo.default_remote()
    if isinstance(remote, Err):
        console.print(f"default remote lookup failed: {remote.error.message}", Style.DIM)
        return config.DEFAULT_ORIGIN
    if remote.value is None:
        return config.DEFAULT_ORIGIN
    return remote.value.name


def prepare_release(
    *,
    root: Path,
    runner: CommandRunner,
    console: ConsoleProtocol,
    options: ReleaseOptions,
) -> Result[ReleaseContext, ReleaseError]:
    """Resolve and validate everything before any command mutates state."""
    loaded = read_package_json(root)
    project = loaded.value if isinstance(loaded, Ok) else None

    build_runner = resolve_build_runner(runner=runner, console=console, project=project)

    version = options.version or (project.version if project is not None else None)
    if not version or not isinstance(version, str):
        return Err(
            ReleaseError(
                kind="missing_version",
                message="No `version` found in `package.json`",
                hint="Pass --version or add a version to package.json.",
            )
        )

    if options.npm and (options.access or config.DEFAULT_ACCESS) not in config.ALLOWED_ACCESS:
        return Err(
            ReleaseError(
                kind="invalid_access",
                message="Invalid `--access` option. `public` or `restricted` accepted.",
            )
        )

    origin = resolve_origin(repo=Repository(runner), console=console, options=options)

    return Ok(
        ReleaseContext(
            project=project,
            options=options,
            version=version,
            origin=origin,
            build_runner=build_runner,
        )
    )


def publish_command(ctx: ReleaseContext) -> str:
    parts = [f"npm publish --access {ctx.access}"]
    pre_release = get_pre_release_tag(ctx.version)
    if pre_release:
        parts.append(f"--tag {pre_release}")
    return " ".join(parts)


def _describe(error: GitError | ProcessError) -> str:
    if isinstance(error, GitError):
        return error.message
    return str(error)


def execute_release(
    ctx: ReleaseContext,
    *,
    runner: CommandRunner,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    """Run the mutating sequence; stop at the first failure."""
    echo = _EchoingRunner(inner=runner, console=console)
    repo = Repository(echo)

    def run_inherit(command: str) -> Result[str, ProcessError]:
        return echo.run(command, inherit=True)

    steps: list[Callable[[], Result[object, GitError | ProcessError]]] = [
        lambda: repo.stash_save(ctx.stash_name),
        lambda: run_inherit(ctx.build_command),
        lambda: repo.tag(ctx.tag),
        lambda: repo.push_tag(ctx.origin, ctx.tag),
    ]
    if ctx.options.npm:
        steps.append(lambda: run_inherit(publish_command(ctx)))

    for i, step in enumerate(steps):
        result = step()
        if isinstance(result, Err):
            hint = None
            if i > 0:
                hint = f'local changes are stashed as "{ctx.stash_name}" (see `git stash list`)'
            return Err(
                ReleaseError(
                    kind="command_failed",
                    message=f"Error during release process: {_describe(result.error)}",
                    hint=hint,
                )
            )

    # Pop by exact index: another stash may have been pushed on top meanwhile.
    found = repo.stash_by(name=ctx.stash_name)
    if isinstance(found, Err):
        return _restore_failed(ctx, found.error)
    if found.value is not None:
        popped = repo.stash_pop(found.value.index)
        if isinstance(popped, Err):
            return _restore_failed(ctx, popped.error)

    return Ok(None)


def _restore_failed(ctx: ReleaseContext, error: GitError) -> Err[ReleaseError]:
    return Err(
        ReleaseError(
            kind="command_failed",
            message=f"Error during release process: {_describe(error)}",
            hint=f'restore the "{ctx.stash_name}" stash manually (see `git stash list`)',
        )
    )


def release(
    *,
    root: Path,
    runner: CommandRunner,
    console: ConsoleProtocol,
    options: ReleaseOptions,
) -> Result[ReleaseSummary, ReleaseError]:
    """Validate, then stash, build, tag, push, optionally publish, restore."""
    prepared = prepare_release(root=root, runner=runner, console=console, options=options)
    if isinstance(prepared, Err):
        return prepared
    ctx = prepared.value

    executed = execute_release(ctx, runner=runner, console=console)
    if isinstance(executed, Err):
        return executed

    summary = ReleaseSummary(
        package=ctx.package_name,
        message=f"Released version {ctx.version}",
        origin=ctx.origin,
        tag=ctx.tag,
        npm_publish=ctx.options.npm,
    )
    if options.verbose:
        console.print(json.dumps(summary.to_dict(), indent=2))
    console.success(f"released {ctx.tag}")
    return Ok(summary)
