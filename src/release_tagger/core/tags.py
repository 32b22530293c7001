"""Tag discovery and creation for a release.

These functions take the GitHub client and repository explicitly. They
never retry and never translate errors: any failure from the client
propagates to the caller unchanged.
"""

import logging
from collections.abc import Iterator

from release_tagger.github.rest.abc import GitHubRestClient
from release_tagger.github.types import CompareCommit, RepoId, Tag

logger = logging.getLogger(__name__)

TAGS_PAGE_SIZE = 100


def iter_tag_pages(
    client: GitHubRestClient,
    repo_id: RepoId,
    *,
    fetch_all: bool = False,
) -> Iterator[list[Tag]]:
    """Yield pages of tags, starting at page 1.

    Stops after the first page when fetch_all is False. Otherwise stops
    after the first page holding fewer than TAGS_PAGE_SIZE tags, which may
    be an empty page when the total is an exact multiple of the page size.
    """
    page = 1
    while True:
        tags = client.list_tags(repo_id, per_page=TAGS_PAGE_SIZE, page=page)
        yield tags
        if len(tags) < TAGS_PAGE_SIZE or not fetch_all:
            return
        page += 1


def list_tags(
    client: GitHubRestClient,
    repo_id: RepoId,
    *,
    fetch_all: bool = False,
) -> list[Tag]:
    """List repository tags in the order GitHub returns them.

    Without fetch_all only the first page is requested, so at most
    TAGS_PAGE_SIZE tags are returned regardless of how many exist.
    """
    tags: list[Tag] = []
    for page in iter_tag_pages(client, repo_id, fetch_all=fetch_all):
        tags.extend(page)
    return tags


def compare_commits(
    client: GitHubRestClient,
    repo_id: RepoId,
    base_ref: str,
    head_ref: str,
) -> list[CompareCommit]:
    """Compare head_ref to base_ref (i.e. base_ref...head_ref).

    Args:
        base_ref: old commit
        head_ref: new commit

    Returns:
        The commit list exactly as GitHub returns it. Large comparisons
        truncated by GitHub are not paged through.
    """
    logger.debug("Comparing commits (%s...%s)", base_ref, head_ref)
    return client.compare_commits(repo_id, base=base_ref, head=head_ref)


def create_tag(
    client: GitHubRestClient,
    repo_id: RepoId,
    new_tag: str,
    *,
    annotated: bool,
    target_sha: str,
) -> None:
    """Create refs/tags/<new_tag>, optionally backed by an annotated tag object.

    A lightweight tag points the ref straight at target_sha. An annotated
    tag first creates a tag object (message = tag name) and points the ref
    at that object instead.

    If the tag object cannot be created, no ref is created. If the ref
    cannot be created after the object was, the object is left orphaned.
    """
    ref_sha = target_sha
    if annotated:
        logger.debug("Creating annotated tag.")
        ref_sha = client.create_tag(
            repo_id,
            tag=new_tag,
            message=new_tag,
            object_sha=target_sha,
            object_type="commit",
        )

    logger.debug("Pushing new tag to the repo.")
    client.create_ref(repo_id, ref=f"refs/tags/{new_tag}", sha=ref_sha)
