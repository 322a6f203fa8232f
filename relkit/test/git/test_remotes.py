"""Tests for git/remotes.py."""

from __future__ import annotations

from relkit.git.remotes import Remote, parse_default_remote_and_branch, parse_remotes


def _lines(*lines: str) -> str:
    return "\n".join(lines) + "\n"


LISTING = _lines(
    "another-remote\tgit@github.com:username/another-remote.git (fetch)",
    "another-remote\tgit@github.com:username/another-remote.git (push)",
    "origin\tgit@github.com:username/project-name.git (fetch)",
    "origin\tgit@github.com:username/project-name.git (push)",
    "project-2\tgit@github.com:username/project-name-2.git (fetch)",
    "project-2\tgit@github.com:username/project-name-2.git (push)",
)


class TestParseRemotes:
    """Tests for parse_remotes()."""

    def test_parses_all_remotes(self) -> None:
        remotes = parse_remotes(LISTING)

        assert list(remotes) == ["another-remote", "origin", "project-2"]
        assert remotes["origin"].fetch_url == "git@github.com:username/project-name.git"
        assert remotes["origin"].push_url == "git@github.com:username/project-name.git"

    def test_fetch_and_push_lines_merge_into_one_remote(self) -> None:
        remotes = parse_remotes(_lines("origin\turl-a (fetch)", "origin\turl-b (push)"))

        assert remotes == {"origin": Remote(name="origin", urls={"fetch": "url-a", "push": "url-b"})}

    def test_unlabeled_urls_fill_fetch_then_push(self) -> None:
        remotes = parse_remotes(
            _lines(
                "origin\tgit@github.com:username/project-name-fetch.git",
                "origin\tgit@github.com:username/project-name-push.git",
            )
        )

        origin = remotes["origin"]
        assert origin.fetch_url == "git@github.com:username/project-name-fetch.git"
        assert origin.push_url == "git@github.com:username/project-name-push.git"

    def test_colliding_label_moves_to_free_slot(self) -> None:
        remotes = parse_remotes(_lines("p\tfirst.git (push)", "p\tsecond.git (push)"))

        assert remotes["p"].push_url == "first.git"
        assert remotes["p"].fetch_url == "second.git"

    def test_extra_urls_are_ignored_once_both_slots_are_filled(self) -> None:
        remotes = parse_remotes(_lines("o\ta (fetch)", "o\tb (push)", "o\tc (push)"))

        assert remotes["o"].urls == {"fetch": "a", "push": "b"}

    def test_remote_without_url_is_excluded(self) -> None:
        remotes = parse_remotes(
            _lines(
                "another-remote\tgit@github.com:username/another-remote.git (fetch)",
                "origin\t ()",
                "origin\t ()",
            )
        )

        assert "origin" not in remotes
        assert "another-remote" in remotes

    def test_blank_and_malformed_lines_are_skipped(self) -> None:
        remotes = parse_remotes(_lines("", "no-tab-here", "\turl-without-name (fetch)", "ok\turl"))

        assert list(remotes) == ["ok"]

    def test_empty_output(self) -> None:
        assert parse_remotes("") == {}


class TestParseDefaultRemoteAndBranch:
    """Tests for parse_default_remote_and_branch()."""

    def test_arrow_format(self) -> None:
        assert parse_default_remote_and_branch("\torigin/HEAD -> origin/master\n") == (
            "origin",
            "master",
        )

    def test_branch_with_slashes_is_kept_whole(self) -> None:
        assert parse_default_remote_and_branch("  up/HEAD -> up/release/2.x") == ("up", "release/2.x")

    def test_missing_arrow_returns_nones(self) -> None:
        assert parse_default_remote_and_branch("\torigin/HEAD origin/master\n") == (None, None)

    def test_no_output_returns_nones(self) -> None:
        assert parse_default_remote_and_branch("") == (None, None)
        assert parse_default_remote_and_branch("\n\n") == (None, None)
