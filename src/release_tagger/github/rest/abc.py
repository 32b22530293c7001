"""Abstract base class for the GitHub REST operations used in release tagging."""

from abc import ABC, abstractmethod

from release_tagger.github.types import CompareCommit, RepoId, Tag


class GitHubRestClient(ABC):
    """Abstract interface for the tag, compare, and git-ref endpoints.

    All implementations (real, fake, and dry-run) must implement this
    interface. Implementations do not retry; request failures propagate
    to the caller unchanged.
    """

    @abstractmethod
    def list_tags(self, repo_id: RepoId, *, per_page: int, page: int) -> list[Tag]:
        """List one page of repository tags.

        Args:
            repo_id: Repository to list tags for
            per_page: Page size requested from the service
            page: 1-based page number

        Returns:
            Tags on the requested page, in the order the service returned them
        """
        ...

    @abstractmethod
    def compare_commits(self, repo_id: RepoId, *, base: str, head: str) -> list[CompareCommit]:
        """Compare two refs (base...head).

        Returns:
            Commits reachable from head but not from base, in service order
        """
        ...

    @abstractmethod
    def create_tag(
        self,
        repo_id: RepoId,
        *,
        tag: str,
        message: str,
        object_sha: str,
        object_type: str,
    ) -> str:
        """Create an annotated tag object.

        The object is not visible by name until a ref points at it.

        Returns:
            SHA of the newly created tag object
        """
        ...

    @abstractmethod
    def create_ref(self, repo_id: RepoId, *, ref: str, sha: str) -> None:
        """Create a git reference (e.g. "refs/tags/v1.0.0") pointing at sha."""
        ...
