"""Tests for `release-tagger tags create`."""

from click.testing import CliRunner

from release_tagger.cli.cli import cli
from release_tagger.core.context import ReleaseTaggerContext
from release_tagger.github.rest.fake import FakeGitHubRestClient
from release_tagger.github.types import RepoId

REPO = RepoId(owner="test-owner", repo="test-repo")


def test_create_lightweight_tag_with_explicit_sha() -> None:
    runner = CliRunner()
    github = FakeGitHubRestClient()
    ctx = ReleaseTaggerContext.for_test(github=github)

    result = runner.invoke(cli, ["tags", "create", "v2.0.0", "--sha", "abc123"], obj=ctx)

    assert result.exit_code == 0
    assert github.created_tag_objects == []
    assert github.created_refs == [(REPO, "refs/tags/v2.0.0", "abc123")]
    assert "Created lightweight tag v2.0.0 at abc123" in result.output


def test_create_annotated_tag_defaults_to_github_sha() -> None:
    runner = CliRunner()
    github = FakeGitHubRestClient(tag_object_sha="tagobj")
    ctx = ReleaseTaggerContext.for_test(github=github, sha="fromenv")

    result = runner.invoke(cli, ["tags", "create", "v2.0.0", "--annotated"], obj=ctx)

    assert result.exit_code == 0
    assert github.created_tag_objects == [(REPO, "v2.0.0", "v2.0.0", "fromenv", "commit")]
    assert github.created_refs == [(REPO, "refs/tags/v2.0.0", "tagobj")]


def test_create_without_sha_is_usage_error() -> None:
    runner = CliRunner()
    github = FakeGitHubRestClient()
    ctx = ReleaseTaggerContext.for_test(github=github)

    result = runner.invoke(cli, ["tags", "create", "v2.0.0"], obj=ctx)

    assert result.exit_code == 2
    assert "No commit to tag" in result.output
    assert github.created_refs == []


def test_create_dry_run_writes_nothing() -> None:
    runner = CliRunner()
    github = FakeGitHubRestClient()
    ctx = ReleaseTaggerContext.for_test(github=github)

    result = runner.invoke(
        cli, ["tags", "create", "v2.0.0", "--sha", "abc123", "--annotated", "--dry-run"], obj=ctx
    )

    assert result.exit_code == 0
    assert github.created_tag_objects == []
    assert github.created_refs == []
    assert "[dry-run] Would create annotated tag v2.0.0 at abc123" in result.output


def test_create_failed_tag_object_reports_error() -> None:
    runner = CliRunner()
    github = FakeGitHubRestClient(create_tag_should_succeed=False)
    ctx = ReleaseTaggerContext.for_test(github=github)

    result = runner.invoke(
        cli, ["tags", "create", "v2.0.0", "--sha", "abc123", "--annotated"], obj=ctx
    )

    assert result.exit_code == 1
    assert "Failed to create tag v2.0.0" in result.output
    assert github.created_refs == []
