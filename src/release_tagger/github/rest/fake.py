"""Fake GitHub REST operations for testing."""

from release_tagger.gateway.http.fake import http_status_error
from release_tagger.github.rest.abc import GitHubRestClient
from release_tagger.github.types import CompareCommit, RepoId, Tag


class FakeGitHubRestClient(GitHubRestClient):
    """In-memory fake implementation of GitHub REST operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        tags: list[Tag] | None = None,
        comparisons: dict[tuple[str, str], list[CompareCommit]] | None = None,
        tag_object_sha: str = "fake-tag-object-sha",
        create_tag_should_succeed: bool = True,
        create_ref_should_succeed: bool = True,
    ) -> None:
        """Create FakeGitHubRestClient with pre-configured state.

        Args:
            tags: All tags on the repository; served page by page by list_tags()
            comparisons: Mapping of (base, head) to the commits compare_commits()
                returns. Unknown pairs raise a 404 httpx.HTTPStatusError.
            tag_object_sha: SHA returned by create_tag()
            create_tag_should_succeed: If False, create_tag() raises a 422 error
            create_ref_should_succeed: If False, create_ref() raises a 422 error
        """
        self._tags = tags or []
        self._comparisons = comparisons or {}
        self._tag_object_sha = tag_object_sha
        self._create_tag_should_succeed = create_tag_should_succeed
        self._create_ref_should_succeed = create_ref_should_succeed
        self._list_tags_calls: list[tuple[RepoId, int, int]] = []
        self._compare_calls: list[tuple[RepoId, str, str]] = []
        self._created_tag_objects: list[tuple[RepoId, str, str, str, str]] = []
        self._created_refs: list[tuple[RepoId, str, str]] = []

    def list_tags(self, repo_id: RepoId, *, per_page: int, page: int) -> list[Tag]:
        self._list_tags_calls.append((repo_id, per_page, page))
        start = (page - 1) * per_page
        return list(self._tags[start : start + per_page])

    def compare_commits(self, repo_id: RepoId, *, base: str, head: str) -> list[CompareCommit]:
        self._compare_calls.append((repo_id, base, head))
        if (base, head) not in self._comparisons:
            endpoint = f"repos/{repo_id.owner}/{repo_id.repo}/compare/{base}...{head}"
            msg = f"No common ancestor between {base} and {head}"
            raise http_status_error("GET", endpoint, 404, msg)
        return list(self._comparisons[(base, head)])

    def create_tag(
        self,
        repo_id: RepoId,
        *,
        tag: str,
        message: str,
        object_sha: str,
        object_type: str,
    ) -> str:
        self._created_tag_objects.append((repo_id, tag, message, object_sha, object_type))
        if not self._create_tag_should_succeed:
            endpoint = f"repos/{repo_id.owner}/{repo_id.repo}/git/tags"
            raise http_status_error("POST", endpoint, 422, f"Failed to create tag object {tag}")
        return self._tag_object_sha

    def create_ref(self, repo_id: RepoId, *, ref: str, sha: str) -> None:
        self._created_refs.append((repo_id, ref, sha))
        if not self._create_ref_should_succeed:
            endpoint = f"repos/{repo_id.owner}/{repo_id.repo}/git/refs"
            raise http_status_error("POST", endpoint, 422, "Reference already exists")

    @property
    def list_tags_calls(self) -> list[tuple[RepoId, int, int]]:
        """Get list_tags() calls as (repo_id, per_page, page) tuples."""
        return self._list_tags_calls

    @property
    def compare_calls(self) -> list[tuple[RepoId, str, str]]:
        """Get compare_commits() calls as (repo_id, base, head) tuples."""
        return self._compare_calls

    @property
    def created_tag_objects(self) -> list[tuple[RepoId, str, str, str, str]]:
        """Get create_tag() calls as (repo_id, tag, message, object_sha, object_type).

        Failed attempts are included.
        """
        return self._created_tag_objects

    @property
    def created_refs(self) -> list[tuple[RepoId, str, str]]:
        """Get create_ref() calls as (repo_id, ref, sha) tuples.

        Failed attempts are included.
        """
        return self._created_refs
