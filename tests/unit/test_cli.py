"""Tests for the ghsweep command line entry point."""

from unittest.mock import AsyncMock, MagicMock, patch

from common.exception.exceptions import RefUpdateError
from ghsweep import cli
from ghsweep.services.github.models.types import AppliedChange


def _result(created=True):
    result = MagicMock()
    result.created = created
    result.commit.sha = "c0ffee"
    result.changes = [AppliedChange(path="README.md", match_count=2)]
    return result


class TestBuildChanges:
    """Tests for turning arguments into changes."""

    def test_no_files_means_search(self):
        changes = cli.build_changes("foo", "bar", [])

        assert len(changes) == 1
        assert changes[0].is_search_driven is True
        assert changes[0].target == "foo"

    def test_files_map_to_direct_path_changes(self):
        changes = cli.build_changes("foo", "bar", ["a.md", "build/b.md:docs/b.md"])

        assert [c.target for c in changes] == ["a.md", "build/b.md:docs/b.md"]
        assert not any(c.is_search_driven for c in changes)


class TestBuildOptions:
    """Tests for option overrides."""

    def test_unset_arguments_keep_defaults(self):
        args = cli.build_parser().parse_args(
            ["--repo", "acme/widgets", "--branch", "b", "--find", "x", "--replace", "y"]
        )

        options = cli.build_options(args)

        assert options.message
        assert options.base_branch is None or isinstance(options.base_branch, str)

    def test_arguments_override_defaults(self):
        args = cli.build_parser().parse_args(
            [
                "--repo", "acme/widgets", "--branch", "b", "--find", "x", "--replace", "y",
                "--message", "Rename x", "--language", "go", "--base-branch", "develop",
            ]
        )

        options = cli.build_options(args)

        assert options.message == "Rename x"
        assert options.language_filter == "go"
        assert options.base_branch == "develop"


class TestMain:
    """Tests for main."""

    ARGS = ["--repo", "acme/widgets", "--branch", "feature-x", "--find", "foo", "--replace", "bar"]

    def test_success_prints_commit(self, capsys):
        service = MagicMock()
        service.publish = AsyncMock(return_value=_result())

        with patch.object(cli, "GitHubService", return_value=service) as service_cls:
            with patch.object(cli, "GITHUB_AUTH_TOKEN", "secret"):
                exit_code = cli.main(self.ARGS + ["--file", "README.md"])

        assert exit_code == 0
        assert service_cls.call_args.args[:2] == ("secret", "acme/widgets")
        branch, changes = service.publish.call_args.args
        assert branch == "feature-x"
        assert changes[0].target == "README.md"
        output = capsys.readouterr().out
        assert "Created branch feature-x at c0ffee" in output
        assert "README.md: 2 replacement(s)" in output

    def test_missing_token_fails(self):
        with patch.object(cli, "GITHUB_AUTH_TOKEN", None):
            assert cli.main(self.ARGS) == 1

    def test_publish_error_fails(self):
        service = MagicMock()
        service.publish = AsyncMock(side_effect=RefUpdateError("conflict", orphaned_commit_sha="dead"))

        with patch.object(cli, "GitHubService", return_value=service):
            with patch.object(cli, "GITHUB_AUTH_TOKEN", "secret"):
                assert cli.main(self.ARGS) == 1
