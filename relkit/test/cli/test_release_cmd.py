from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer

from relkit.cli.context import CLIContext, build_context
from relkit.core.errors import ErrorCode
from relkit.output.console import MockConsole
from relkit.platform.process import ShellRunner
from relkit.test._fakes import FakeRunner


def _ctx(tmp_path: Path, runner: FakeRunner) -> CLIContext:
    return CLIContext(root=tmp_path, runner=runner, console=MockConsole())


def _options(**overrides: object) -> dict[str, object]:
    options: dict[str, object] = {
        "verbose": False,
        "version": None,
        "origin": None,
        "npm": False,
        "access": None,
        "build": None,
    }
    options.update(overrides)
    return options


@pytest.fixture
def runner() -> FakeRunner:
    fake = FakeRunner()
    fake.respond("npm list --json -g", json.dumps({"dependencies": {}}))
    fake.respond("git stash list", "stash@{0}: On main: pre-release\n")
    return fake


def test_release_succeeds(tmp_path: Path, runner: FakeRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    import relkit.cli.commands.release_cmd as release_cmd

    ctx = _ctx(tmp_path, runner)
    monkeypatch.setattr(release_cmd, "build_context", lambda: ctx)

    release_cmd.release(**_options(version="1.0.0", origin="upstream"))  # type: ignore[arg-type]

    assert "git push upstream tag v1.0.0" in runner.inherited()


def test_publish_is_an_alias_of_release(
    tmp_path: Path, runner: FakeRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    import relkit.cli.commands.release_cmd as release_cmd

    monkeypatch.setattr(release_cmd, "build_context", lambda: _ctx(tmp_path, runner))

    release_cmd.publish(**_options(version="1.0.0", npm=True))  # type: ignore[arg-type]

    assert "npm publish --access public" in runner.inherited()


def test_release_missing_version_exits_1(
    tmp_path: Path, runner: FakeRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    import relkit.cli.commands.release_cmd as release_cmd

    ctx = _ctx(tmp_path, runner)
    monkeypatch.setattr(release_cmd, "build_context", lambda: ctx)

    with pytest.raises(typer.Exit) as exc:
        release_cmd.release(**_options())  # type: ignore[arg-type]

    assert exc.value.exit_code == int(ErrorCode.RELEASE_FAILED)
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.find("No `version` found in `package.json`")
    assert not any(cmd.startswith("git") for cmd in runner.commands)


def test_release_invalid_access_exits_1_before_stash(
    tmp_path: Path, runner: FakeRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    import relkit.cli.commands.release_cmd as release_cmd

    monkeypatch.setattr(release_cmd, "build_context", lambda: _ctx(tmp_path, runner))

    with pytest.raises(typer.Exit) as exc:
        release_cmd.release(**_options(version="1.0.0", npm=True, access="invalid"))  # type: ignore[arg-type]

    assert exc.value.exit_code == 1
    assert runner.inherited() == []


def test_release_command_failure_exits_1(
    tmp_path: Path, runner: FakeRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    import relkit.cli.commands.release_cmd as release_cmd

    ctx = _ctx(tmp_path, runner)
    runner.fail("npm run build", returncode=2)
    monkeypatch.setattr(release_cmd, "build_context", lambda: ctx)

    with pytest.raises(typer.Exit) as exc:
        release_cmd.release(**_options(version="1.0.0"))  # type: ignore[arg-type]

    assert exc.value.exit_code == 1
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.has_error()
    assert ctx.console.find("hint:")
    assert not any(cmd.startswith("git stash pop") for cmd in runner.commands)


def test_build_context_prefers_init_cwd(tmp_path: Path) -> None:
    ctx = build_context(env={"INIT_CWD": str(tmp_path)}, cwd=Path("/somewhere/else"))

    assert ctx.root == tmp_path
    assert isinstance(ctx.runner, ShellRunner)
    assert ctx.runner.cwd == tmp_path


def test_build_context_defaults_to_cwd(tmp_path: Path) -> None:
    ctx = build_context(env={}, cwd=tmp_path)

    assert ctx.root == tmp_path


def test_release_parses_flags_from_argv(
    tmp_path: Path, runner: FakeRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    from typer.testing import CliRunner

    import relkit.cli.commands.release_cmd as release_cmd
    from relkit.cli.app import app

    monkeypatch.setattr(release_cmd, "build_context", lambda: _ctx(tmp_path, runner))

    result = CliRunner().invoke(
        app,
        [
            "release",
            "--version",
            "1.0.0-beta.2",
            "--o",
            "fork",
            "--npm",
            "--access",
            "restricted",
            "--build",
            "dist",
        ],
    )

    assert result.exit_code == 0
    assert runner.inherited() == [
        'git stash save -u -m "pre-release"',
        "npm run dist",
        "git tag v1.0.0-beta.2",
        "git push fork tag v1.0.0-beta.2",
        "npm publish --access restricted --tag beta",
        "git stash pop --index 0",
    ]
