"""release-tagger CLI entry point.

This package lists, compares, and creates release tags on a GitHub
repository through the REST API. See `release-tagger --help` for details.
"""

from release_tagger.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `release-tagger` console script."""
    cli()
