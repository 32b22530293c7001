"""Helpers shared by the tags commands."""

import click
import httpx

from release_tagger.core.context import ReleaseTaggerContext
from release_tagger.github.types import RepoId


def require_repo_id(ctx: ReleaseTaggerContext) -> RepoId:
    """Return the configured repository or fail with a usage error."""
    if ctx.repo_id is None:
        raise click.UsageError(
            "No repository configured. Set GITHUB_REPOSITORY to 'owner/repo'."
        )
    return ctx.repo_id


def api_error(action: str, error: Exception) -> click.ClickException:
    """Build a user-facing error for a failed GitHub request."""
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        return click.ClickException(
            f"Failed to {action}: GitHub returned {response.status_code} "
            f"for {response.request.method} {response.request.url}"
        )
    return click.ClickException(f"Failed to {action}: {error}")
