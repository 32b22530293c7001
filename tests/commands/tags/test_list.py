"""Tests for `release-tagger tags list`."""

import json

from click.testing import CliRunner

from release_tagger.cli.cli import cli
from release_tagger.core.context import ReleaseTaggerContext
from release_tagger.gateway.http.fake import FakeHttpClient, http_status_error
from release_tagger.github.rest.fake import FakeGitHubRestClient
from release_tagger.github.rest.real import RealGitHubRestClient
from tests.test_utils.builders import make_tags


def test_list_prints_first_page_only_by_default() -> None:
    runner = CliRunner()
    github = FakeGitHubRestClient(tags=make_tags(150))
    ctx = ReleaseTaggerContext.for_test(github=github)

    result = runner.invoke(cli, ["tags", "list"], obj=ctx)

    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 100
    assert len(github.list_tags_calls) == 1


def test_list_all_walks_every_page() -> None:
    runner = CliRunner()
    github = FakeGitHubRestClient(tags=make_tags(150))
    ctx = ReleaseTaggerContext.for_test(github=github)

    result = runner.invoke(cli, ["tags", "list", "--all"], obj=ctx)

    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 150
    assert len(github.list_tags_calls) == 2


def test_list_json_output() -> None:
    runner = CliRunner()
    ctx = ReleaseTaggerContext.for_test(github=FakeGitHubRestClient(tags=make_tags(1)))

    result = runner.invoke(cli, ["tags", "list", "--json"], obj=ctx)

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data[0]["name"] == "v0.0.0"
    assert data[0]["commit"]["sha"] == "sha-v0.0.0"


def test_list_empty_repository() -> None:
    runner = CliRunner()
    ctx = ReleaseTaggerContext.for_test(github=FakeGitHubRestClient())

    result = runner.invoke(cli, ["tags", "list"], obj=ctx)

    assert result.exit_code == 0
    assert "No tags found in test-owner/test-repo." in result.output


def test_list_reports_request_failure() -> None:
    runner = CliRunner()
    endpoint = "repos/test-owner/test-repo/tags?per_page=100&page=1"
    http_client = FakeHttpClient()
    error = http_status_error("GET", endpoint, 401, "Bad credentials")
    http_client.set_error(endpoint, error=error)
    ctx = ReleaseTaggerContext.for_test(github=RealGitHubRestClient(http_client))

    result = runner.invoke(cli, ["tags", "list"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to list tags for test-owner/test-repo: GitHub returned 401" in result.output


def test_list_does_not_mask_unexpected_errors() -> None:
    runner = CliRunner()
    http_client = FakeHttpClient()
    http_client.set_error(
        "repos/test-owner/test-repo/tags?per_page=100&page=1",
        error=RuntimeError("unexpected"),
    )
    ctx = ReleaseTaggerContext.for_test(github=RealGitHubRestClient(http_client))

    result = runner.invoke(cli, ["tags", "list"], obj=ctx)

    assert result.exit_code == 1
    assert isinstance(result.exception, RuntimeError)
    assert "Failed to list tags" not in result.output
