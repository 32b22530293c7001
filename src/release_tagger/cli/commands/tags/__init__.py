"""Release tag commands."""

import click

from release_tagger.cli.commands.tags.compare_cmd import tags_compare
from release_tagger.cli.commands.tags.create_cmd import tags_create
from release_tagger.cli.commands.tags.list_cmd import tags_list


@click.group("tags")
def tags_group() -> None:
    """List, compare, and create release tags."""
    pass


tags_group.add_command(tags_compare, name="compare")
tags_group.add_command(tags_create, name="create")
tags_group.add_command(tags_list, name="list")
