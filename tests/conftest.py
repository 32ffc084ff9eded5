"""
Shared fixtures for the GitHub MCP server tests.

Nothing here talks to GitHub: handler tests get an autospecced
RepositoryClient, client tests get a MagicMock standing in for PyGithub's
Github object.
"""

from unittest.mock import MagicMock, create_autospec

import pytest

from client.repository_client import RepositoryClient
from core.dispatcher import OperationDispatcher
from core.registry import registry


@pytest.fixture
def repo_client():
    """RepositoryClient whose async methods are AsyncMocks."""
    return create_autospec(RepositoryClient, instance=True)


@pytest.fixture
def dispatcher(repo_client):
    return OperationDispatcher(registry, repo_client)


@pytest.fixture
def github():
    """Stand-in for github.Github; configure requester.requestJsonAndCheck per test."""
    gh = MagicMock(name="Github")
    gh.requester.requestJsonAndCheck.return_value = ({}, {})
    return gh


@pytest.fixture
def live_client(github):
    """A real RepositoryClient over the mocked PyGithub requester."""
    return RepositoryClient(github)


@pytest.fixture
def branch_at_c1(repo_client):
    """Branch main of acme/site sits at commit C1 with tree T1."""
    repo_client.get_ref.return_value = {
        "ref": "refs/heads/main",
        "object": {"sha": "C1", "type": "commit"},
    }
    repo_client.get_commit.return_value = {"sha": "C1", "tree": {"sha": "T1"}}
    repo_client.create_blob.side_effect = lambda owner, repo, content: {"sha": f"blob-{content}"}
    repo_client.create_tree.return_value = {"sha": "T2"}
    repo_client.create_commit.return_value = {
        "sha": "C2",
        "message": "update",
        "tree": {"sha": "T2"},
        "parents": [{"sha": "C1"}],
    }
    repo_client.update_ref.return_value = {
        "ref": "refs/heads/main",
        "object": {"sha": "C2", "type": "commit"},
    }
    return repo_client
