"""Tests for environment configuration loading."""

import pytest

from release_tagger.core.config import ConfigError, load_config, load_token
from release_tagger.gateway.http.real import DEFAULT_API_URL
from release_tagger.github.types import RepoId


def test_empty_environment_uses_defaults() -> None:
    config = load_config({})

    assert config.token == ""
    assert config.repo_id is None
    assert config.api_url == DEFAULT_API_URL
    assert config.sha is None


def test_reads_all_variables() -> None:
    config = load_config(
        {
            "GITHUB_TOKEN": "ghp_abc",
            "GITHUB_REPOSITORY": "octocat/hello-world",
            "GITHUB_API_URL": "https://github.example.com/api/v3",
            "GITHUB_SHA": "deadbeef",
        }
    )

    assert config.token == "ghp_abc"
    assert config.repo_id == RepoId(owner="octocat", repo="hello-world")
    assert config.api_url == "https://github.example.com/api/v3"
    assert config.sha == "deadbeef"


def test_action_input_token_takes_precedence() -> None:
    token = load_token({"INPUT_GITHUB_TOKEN": "from-input", "GITHUB_TOKEN": "from-env"})

    assert token == "from-input"


def test_blank_action_input_falls_back_to_github_token() -> None:
    token = load_token({"INPUT_GITHUB_TOKEN": "  ", "GITHUB_TOKEN": "from-env"})

    assert token == "from-env"


def test_malformed_repository_raises() -> None:
    with pytest.raises(ConfigError, match="GITHUB_REPOSITORY"):
        load_config({"GITHUB_REPOSITORY": "just-a-name"})


def test_config_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        load_config({"GITHUB_REPOSITORY": "a/b/c"})
