"""Shared fixtures for agentcatalog tests."""

import json

import pytest

from agentcatalog.config import Settings
from agentcatalog.errors import TransportFailure
from agentcatalog.fetcher import FetchResult


class FakeFetcher:
    """Stands in for RemoteFetcher; replays canned outcomes and records calls."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def fetch(self, url, headers=None):
        self.calls.append((url, dict(headers or {})))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def ok_json(data, status=200):
    return FetchResult(status=status, body=json.dumps(data).encode("utf-8"))


def unreachable(url="https://api.github.com/x"):
    return TransportFailure(url, ConnectionError("connection refused"))


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Default settings, isolated from the user's config and environment."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in (
        "AGENTCATALOG_TIMEOUT_S",
        "AGENTCATALOG_RETRIES",
        "AGENTCATALOG_USER_AGENT",
        "AGENTCATALOG_ANTHROPIC_BASE_URL",
        "AGENTCATALOG_GITHUB_API_URL",
        "AGENTCATALOG_GITHUB_RAW_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("CLAUDE_API_KEY", raising=False)
