"""Type definitions for GitHub tag operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepoId:
    """Owner and name of a GitHub repository."""

    owner: str  # e.g. "octocat"
    repo: str  # e.g. "hello-world"

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class TagCommit:
    """Commit a tag points at, as reported by the tags endpoint."""

    sha: str
    url: str


@dataclass(frozen=True)
class Tag:
    """A tag listed on a GitHub repository.

    Only produced by parsing service responses; never built locally
    outside of tests.
    """

    name: str
    commit: TagCommit
    zipball_url: str
    tarball_url: str
    node_id: str


@dataclass(frozen=True)
class CompareCommit:
    """A commit from a base...head comparison."""

    sha: str
    message: str

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def title(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]
