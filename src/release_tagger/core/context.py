"""Application context passed to CLI commands."""

import os
from collections.abc import Callable
from dataclasses import dataclass

from release_tagger.core.client import get_client
from release_tagger.core.config import TaggerConfig, load_config
from release_tagger.gateway.http.real import DEFAULT_API_URL
from release_tagger.github.rest.abc import GitHubRestClient
from release_tagger.github.types import RepoId

TEST_REPO_ID = RepoId(owner="test-owner", repo="test-repo")


@dataclass(frozen=True)
class ReleaseTaggerContext:
    """Immutable bundle of configuration and the GitHub client accessor.

    The client is obtained through get_github() so that commands which never
    reach the network (usage errors, --help) never construct one.
    """

    config: TaggerConfig
    get_github: Callable[[], GitHubRestClient]

    @property
    def repo_id(self) -> RepoId | None:
        return self.config.repo_id

    @classmethod
    def for_test(
        cls,
        *,
        github: GitHubRestClient | None = None,
        repo_id: RepoId | None = TEST_REPO_ID,
        sha: str | None = None,
    ) -> "ReleaseTaggerContext":
        """Create a context backed by a fake client.

        Args:
            github: Client to hand out (default: empty FakeGitHubRestClient)
            repo_id: Repository identity (default: test-owner/test-repo).
                Pass None to simulate an unset GITHUB_REPOSITORY.
            sha: Default target SHA, as if GITHUB_SHA were set
        """
        from release_tagger.github.rest.fake import FakeGitHubRestClient

        client = github or FakeGitHubRestClient()
        config = TaggerConfig(
            token="test-token",
            repo_id=repo_id,
            api_url=DEFAULT_API_URL,
            sha=sha,
        )
        return cls(config=config, get_github=lambda: client)


def create_context() -> ReleaseTaggerContext:
    """Create the production context from the process environment.

    Raises:
        ConfigError: If GITHUB_REPOSITORY is malformed
    """
    return ReleaseTaggerContext(config=load_config(os.environ), get_github=get_client)
