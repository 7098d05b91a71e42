"""Pytest fixtures."""

import json

import httpx
import pytest

from hubwire import GitHubClient, Repository, User


def repo_payload(owner: str = "octo", name: str = "hello", **extra) -> dict:
    """Minimal repository body as returned by GitHub."""
    payload = {
        "name": name,
        "owner": {"login": owner, "id": 1, "type": "User"},
        "description": "Test repo",
        "homepage": None,
        "default_branch": "main",
        "fork": False,
        "forks_count": 2,
        "private": False,
        "git_url": f"git://github.com/{owner}/{name}.git",
        "ssh_url": f"git@github.com:{owner}/{name}.git",
        "clone_url": f"https://github.com/{owner}/{name}.git",
    }
    payload.update(extra)
    return payload


class Recorder:
    """httpx handler that records requests and replays queued responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def reply(self, status_code: int = 200, body=None, text: str | None = None) -> "Recorder":
        if text is None:
            text = json.dumps(body)
        self.responses.append(httpx.Response(status_code, text=text))
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def github_token():
    """Mock GitHub token."""
    return "ghp_mock_token_12345"


@pytest.fixture
def recorder():
    """Request recorder backing the mock transport."""
    return Recorder()


@pytest.fixture
def client(github_token, recorder):
    """GitHubClient wired to the recorder."""
    with GitHubClient(token=github_token, transport=httpx.MockTransport(recorder)) as gh:
        yield gh


@pytest.fixture
def repository(client):
    """octo/hello bound to the mock client."""
    repo = Repository(name="hello", owner=User(login="octo"))
    repo.bind(client)
    return repo


@pytest.fixture
def make_repo_payload():
    """Factory for repository response bodies."""
    return repo_payload
