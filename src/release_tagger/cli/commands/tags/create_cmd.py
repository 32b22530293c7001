"""Create a release tag."""

import click
import httpx

from release_tagger.cli.commands.tags.shared import api_error, require_repo_id
from release_tagger.core.context import ReleaseTaggerContext
from release_tagger.core.tags import create_tag
from release_tagger.github.rest.abc import GitHubRestClient
from release_tagger.github.rest.dry_run import DryRunGitHubRestClient


@click.command("create")
@click.argument("name")
@click.option(
    "--sha",
    "target_sha",
    default=None,
    help="Commit to tag. Defaults to $GITHUB_SHA.",
)
@click.option(
    "--annotated/--lightweight",
    default=False,
    help="Create an annotated tag object (message = tag name) or a plain ref.",
)
@click.option("--dry-run", is_flag=True, help="Show what would be created without writing.")
@click.pass_obj
def tags_create(
    ctx: ReleaseTaggerContext,
    name: str,
    target_sha: str | None,
    annotated: bool,
    dry_run: bool,
) -> None:
    """Create tag NAME in the configured repository.

    Examples:

        # Lightweight tag at $GITHUB_SHA
        release-tagger tags create v1.2.0

        # Annotated tag at a specific commit
        release-tagger tags create v1.2.0 --sha 1a2b3c4 --annotated
    """
    repo_id = require_repo_id(ctx)

    sha = target_sha or ctx.config.sha
    if sha is None:
        raise click.UsageError("No commit to tag. Pass --sha or set GITHUB_SHA.")

    client: GitHubRestClient = ctx.get_github()
    if dry_run:
        client = DryRunGitHubRestClient(client)

    kind = "annotated" if annotated else "lightweight"
    try:
        create_tag(client, repo_id, name, annotated=annotated, target_sha=sha)
    except httpx.HTTPError as e:
        raise api_error(f"create tag {name}", e) from e

    if dry_run:
        click.echo(f"[dry-run] Would create {kind} tag {name} at {sha} in {repo_id}")
        return

    click.echo(click.style(f"Created {kind} tag {name} at {sha} in {repo_id}", fg="green"))
