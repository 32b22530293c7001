"""Parsing utilities for GitHub REST responses."""

from typing import Any

from release_tagger.github.types import CompareCommit, RepoId, Tag, TagCommit


def parse_repo_id(value: str) -> RepoId:
    """Parse an "owner/repo" string into a RepoId.

    Raises:
        ValueError: If the value is not exactly two non-empty path segments
    """
    parts = value.strip().split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        msg = f"Expected repository in the form 'owner/repo', got {value!r}"
        raise ValueError(msg)
    return RepoId(owner=parts[0], repo=parts[1])


def parse_tag(data: dict[str, Any]) -> Tag:
    """Parse one entry of the GET /repos/{owner}/{repo}/tags response."""
    commit = data["commit"]
    return Tag(
        name=data["name"],
        commit=TagCommit(sha=commit["sha"], url=commit["url"]),
        zipball_url=data["zipball_url"],
        tarball_url=data["tarball_url"],
        node_id=data["node_id"],
    )


def parse_tag_list(data: list[dict[str, Any]]) -> list[Tag]:
    return [parse_tag(item) for item in data]


def parse_compare_commits(data: dict[str, Any]) -> list[CompareCommit]:
    """Extract the commit list from a compare response, preserving order.

    Only the `commits` array is read. Any truncation applied by GitHub to
    large comparisons is passed through as-is.
    """
    return [
        CompareCommit(sha=item["sha"], message=item["commit"]["message"])
        for item in data["commits"]
    ]


def tag_to_dict(tag: Tag) -> dict[str, Any]:
    """Convert a Tag back into the REST response shape (for JSON output)."""
    return {
        "name": tag.name,
        "commit": {"sha": tag.commit.sha, "url": tag.commit.url},
        "zipball_url": tag.zipball_url,
        "tarball_url": tag.tarball_url,
        "node_id": tag.node_id,
    }


def compare_commit_to_dict(commit: CompareCommit) -> dict[str, Any]:
    return {"sha": commit.sha, "commit": {"message": commit.message}}
