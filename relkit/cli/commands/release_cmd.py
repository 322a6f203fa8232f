from __future__ import annotations

import typer

from relkit.cli.commands._helpers import exit_on_error
from relkit.cli.context import build_context
from relkit.services.release.model import ReleaseOptions
from relkit.services.release.service import release as run_release


_VERBOSE_HELP = "Print a JSON summary once the release is done."
_VERSION_HELP = "Version to release (defaults to package.json version)."
_ORIGIN_HELP = "Remote to push the tag to (defaults to the upstream HEAD remote)."
_NPM_HELP = "Also run `npm publish` after pushing the tag."
_ACCESS_HELP = "npm publish access: public or restricted."
_BUILD_HELP = "Package script that builds the project."


def _release(options: ReleaseOptions) -> None:
    ctx = build_context()
    result = run_release(root=ctx.root, runner=ctx.runner, console=ctx.console, options=options)
    exit_on_error(result, ctx)


def release(
    verbose: bool = typer.Option(False, "--verbose", help=_VERBOSE_HELP),
    version: str | None = typer.Option(None, "--version", help=_VERSION_HELP),
    origin: str | None = typer.Option(None, "--origin", "--o", "-o", help=_ORIGIN_HELP),
    npm: bool = typer.Option(False, "--npm", help=_NPM_HELP),
    access: str | None = typer.Option(None, "--access", help=_ACCESS_HELP),
    build: str | None = typer.Option(None, "--build", help=_BUILD_HELP),
) -> None:
    """Stash, build, tag and push a release, then restore the stash."""
    _release(
        ReleaseOptions(
            verbose=verbose,
            version=version,
            origin=origin,
            npm=npm,
            access=access,
            build=build,
        )
    )


def publish(
    verbose: bool = typer.Option(False, "--verbose", help=_VERBOSE_HELP),
    version: str | None = typer.Option(None, "--version", help=_VERSION_HELP),
    origin: str | None = typer.Option(None, "--origin", "--o", "-o", help=_ORIGIN_HELP),
    npm: bool = typer.Option(False, "--npm", help=_NPM_HELP),
    access: str | None = typer.Option(None, "--access", help=_ACCESS_HELP),
    build: str | None = typer.Option(None, "--build", help=_BUILD_HELP),
) -> None:
    """Same as `release`; kept for scripts that call `publish`."""
    _release(
        ReleaseOptions(
            verbose=verbose,
            version=version,
            origin=origin,
            npm=npm,
            access=access,
            build=build,
        )
    )
