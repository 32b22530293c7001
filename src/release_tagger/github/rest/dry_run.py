"""No-op wrapper for GitHub REST write operations."""

import logging

from release_tagger.github.rest.abc import GitHubRestClient
from release_tagger.github.types import CompareCommit, RepoId, Tag

logger = logging.getLogger(__name__)

DRY_RUN_TAG_OBJECT_SHA = "0" * 40


class DryRunGitHubRestClient(GitHubRestClient):
    """No-op wrapper for tag and ref creation.

    Read operations are delegated to the wrapped implementation.
    Write operations are logged and return without executing.
    """

    def __init__(self, wrapped: GitHubRestClient) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real GitHubRestClient implementation to wrap
        """
        self._wrapped = wrapped

    def list_tags(self, repo_id: RepoId, *, per_page: int, page: int) -> list[Tag]:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.list_tags(repo_id, per_page=per_page, page=page)

    def compare_commits(self, repo_id: RepoId, *, base: str, head: str) -> list[CompareCommit]:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.compare_commits(repo_id, base=base, head=head)

    def create_tag(
        self,
        repo_id: RepoId,
        *,
        tag: str,
        message: str,
        object_sha: str,
        object_type: str,
    ) -> str:
        """No-op for creating a tag object in dry-run mode.

        Returns a placeholder all-zero SHA so callers can continue.
        """
        logger.info(
            "[dry-run] Would create tag object %s on %s (%s %s)",
            tag,
            repo_id,
            object_type,
            object_sha,
        )
        return DRY_RUN_TAG_OBJECT_SHA

    def create_ref(self, repo_id: RepoId, *, ref: str, sha: str) -> None:
        """No-op for creating a reference in dry-run mode."""
        logger.info("[dry-run] Would create %s on %s at %s", ref, repo_id, sha)
