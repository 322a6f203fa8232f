from __future__ import annotations

from pathlib import Path

from relkit.platform.paths import process_root


def test_init_cwd_wins(tmp_path: Path) -> None:
    assert process_root({"INIT_CWD": "/mock/init/cwd"}, tmp_path) == Path("/mock/init/cwd")


def test_falls_back_to_cwd(tmp_path: Path) -> None:
    assert process_root({}, tmp_path) == tmp_path


def test_empty_init_cwd_is_ignored(tmp_path: Path) -> None:
    assert process_root({"INIT_CWD": ""}, tmp_path) == tmp_path
