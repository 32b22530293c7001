"""Process configuration read from the execution environment.

Variable names follow the GitHub Actions runner conventions so the tool
runs unchanged inside a workflow step.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from release_tagger.gateway.http.real import DEFAULT_API_URL
from release_tagger.github.parsing import parse_repo_id
from release_tagger.github.types import RepoId

# Action input `github_token` is exposed to the step as INPUT_GITHUB_TOKEN
TOKEN_ENV_VARS = ("INPUT_GITHUB_TOKEN", "GITHUB_TOKEN")
REPOSITORY_ENV_VAR = "GITHUB_REPOSITORY"
API_URL_ENV_VAR = "GITHUB_API_URL"
SHA_ENV_VAR = "GITHUB_SHA"


class ConfigError(ValueError):
    """Raised when an environment variable is present but malformed."""


@dataclass(frozen=True)
class TaggerConfig:
    """In-memory representation of the environment configuration."""

    token: str  # empty string when no token is configured
    repo_id: RepoId | None  # None when GITHUB_REPOSITORY is unset
    api_url: str
    sha: str | None  # default target commit for new tags


def load_config(environ: Mapping[str, str]) -> TaggerConfig:
    """Build a TaggerConfig from environment variables.

    Missing values fall back to defaults; nothing is validated against the
    server here. An empty token is accepted and only fails once a request
    is made.

    Raises:
        ConfigError: If GITHUB_REPOSITORY is set but not "owner/repo"
    """
    repo_id = None
    repository = environ.get(REPOSITORY_ENV_VAR, "").strip()
    if repository:
        try:
            repo_id = parse_repo_id(repository)
        except ValueError as e:
            raise ConfigError(f"Invalid {REPOSITORY_ENV_VAR}: {e}") from e

    sha = environ.get(SHA_ENV_VAR, "").strip() or None

    return TaggerConfig(
        token=load_token(environ),
        repo_id=repo_id,
        api_url=load_api_url(environ),
        sha=sha,
    )


def load_token(environ: Mapping[str, str]) -> str:
    """Return the first non-empty token variable, or "" when none is set."""
    for name in TOKEN_ENV_VARS:
        value = environ.get(name, "").strip()
        if value:
            return value
    return ""


def load_api_url(environ: Mapping[str, str]) -> str:
    return environ.get(API_URL_ENV_VAR, "").strip() or DEFAULT_API_URL
