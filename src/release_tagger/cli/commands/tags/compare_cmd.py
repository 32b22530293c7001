"""Compare two refs and list the commits between them."""

import json

import click
import httpx
from rich.console import Console
from rich.table import Table

from release_tagger.cli.commands.tags.shared import api_error, require_repo_id
from release_tagger.core.context import ReleaseTaggerContext
from release_tagger.core.tags import compare_commits
from release_tagger.github.parsing import compare_commit_to_dict


@click.command("compare")
@click.argument("base")
@click.argument("head")
@click.option("--json", "as_json", is_flag=True, help="Print commits as a JSON array.")
@click.pass_obj
def tags_compare(ctx: ReleaseTaggerContext, base: str, head: str, as_json: bool) -> None:
    """List commits reachable from HEAD but not from BASE.

    BASE and HEAD may be tags, branches, or commit SHAs.

    Examples:

        release-tagger tags compare v1.0.0 v1.1.0
        release-tagger tags compare v1.0.0 main --json
    """
    repo_id = require_repo_id(ctx)

    try:
        commits = compare_commits(ctx.get_github(), repo_id, base, head)
    except httpx.HTTPError as e:
        raise api_error(f"compare {base}...{head}", e) from e

    if as_json:
        click.echo(json.dumps([compare_commit_to_dict(c) for c in commits], indent=2))
        return

    if not commits:
        click.echo(f"No commits between {base} and {head}.", err=True)
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("sha", no_wrap=True)
    table.add_column("message", no_wrap=False)
    for commit in commits:
        table.add_row(commit.short_sha, commit.title)

    Console().print(table)
