import logging

import click

from release_tagger.cli.commands.tags import tags_group
from release_tagger.core.config import ConfigError
from release_tagger.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="release-tagger")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Discover and create release tags on GitHub.

    Reads GITHUB_TOKEN (or INPUT_GITHUB_TOKEN), GITHUB_REPOSITORY, and
    GITHUB_SHA from the environment, as set by a GitHub Actions runner.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ConfigError as e:
            raise click.ClickException(str(e)) from e


cli.add_command(tags_group)
