"""GitHub REST operations used for release tagging.

This package provides an abstract interface and implementations for the
tag, compare, and git-ref endpoints.

Import from submodules:
- abc: GitHubRestClient
- real: RealGitHubRestClient
- fake: FakeGitHubRestClient
- dry_run: DryRunGitHubRestClient
"""
