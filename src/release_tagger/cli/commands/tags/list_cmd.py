"""List repository tags."""

import json

import click
import httpx

from release_tagger.cli.commands.tags.shared import api_error, require_repo_id
from release_tagger.core.context import ReleaseTaggerContext
from release_tagger.core.tags import TAGS_PAGE_SIZE, list_tags
from release_tagger.github.parsing import tag_to_dict


@click.command("list")
@click.option(
    "--all",
    "fetch_all",
    is_flag=True,
    help=f"Walk every page instead of only the first {TAGS_PAGE_SIZE} tags.",
)
@click.option("--json", "as_json", is_flag=True, help="Print tags as a JSON array.")
@click.pass_obj
def tags_list(ctx: ReleaseTaggerContext, fetch_all: bool, as_json: bool) -> None:
    """List tags in the configured repository.

    Tags are printed in the order GitHub returns them, one name per line.

    Examples:

        # First page of tags
        release-tagger tags list

        # Every tag, as JSON
        release-tagger tags list --all --json
    """
    repo_id = require_repo_id(ctx)

    try:
        tags = list_tags(ctx.get_github(), repo_id, fetch_all=fetch_all)
    except httpx.HTTPError as e:
        raise api_error(f"list tags for {repo_id}", e) from e

    if as_json:
        click.echo(json.dumps([tag_to_dict(tag) for tag in tags], indent=2))
        return

    if not tags:
        click.echo(f"No tags found in {repo_id}.", err=True)
        return

    for tag in tags:
        click.echo(tag.name)
