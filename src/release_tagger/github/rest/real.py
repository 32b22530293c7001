"""Production implementation of GitHub REST operations."""

from urllib.parse import quote

from release_tagger.gateway.http.abc import HttpClient
from release_tagger.github.parsing import parse_compare_commits, parse_tag_list
from release_tagger.github.rest.abc import GitHubRestClient
from release_tagger.github.types import CompareCommit, RepoId, Tag


class RealGitHubRestClient(GitHubRestClient):
    """Production implementation over an authenticated HttpClient.

    Errors raised by the HTTP client propagate unchanged.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http_client = http_client

    def list_tags(self, repo_id: RepoId, *, per_page: int, page: int) -> list[Tag]:
        endpoint = f"repos/{repo_id.owner}/{repo_id.repo}/tags?per_page={per_page}&page={page}"
        return parse_tag_list(self._http_client.get(endpoint))

    def compare_commits(self, repo_id: RepoId, *, base: str, head: str) -> list[CompareCommit]:
        # "#" and "%" are legal in ref names
        endpoint = (
            f"repos/{repo_id.owner}/{repo_id.repo}/compare/"
            f"{quote(base, safe='/')}...{quote(head, safe='/')}"
        )
        return parse_compare_commits(self._http_client.get(endpoint))

    def create_tag(
        self,
        repo_id: RepoId,
        *,
        tag: str,
        message: str,
        object_sha: str,
        object_type: str,
    ) -> str:
        response = self._http_client.post(
            f"repos/{repo_id.owner}/{repo_id.repo}/git/tags",
            data={
                "tag": tag,
                "message": message,
                "object": object_sha,
                "type": object_type,
            },
        )
        return response["sha"]

    def create_ref(self, repo_id: RepoId, *, ref: str, sha: str) -> None:
        self._http_client.post(
            f"repos/{repo_id.owner}/{repo_id.repo}/git/refs",
            data={"ref": ref, "sha": sha},
        )
