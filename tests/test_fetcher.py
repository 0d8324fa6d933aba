"""Tests for the remote fetcher."""

from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from agentcatalog.errors import ErrorKind, TransportFailure
from agentcatalog.fetcher import (
    FetchResult,
    RemoteFetcher,
    anthropic_headers,
    github_headers,
)


def _response(status, content=b""):
    response = Mock()
    response.status_code = status
    response.content = content
    return response


class TestFetchResult:
    """Tests for FetchResult."""

    def test_ok_range(self):
        assert FetchResult(200, b"").ok is True
        assert FetchResult(204, b"").ok is True
        assert FetchResult(301, b"").ok is False
        assert FetchResult(403, b"").ok is False

    def test_text(self):
        assert FetchResult(500, b"rate limited").text() == "rate limited"


class TestHeaders:
    """Tests for header builders."""

    def test_github_headers(self):
        assert github_headers() == {"User-Agent": "Opcode-Agent"}

    def test_anthropic_headers(self):
        headers = anthropic_headers("sk-test")
        assert headers["x-api-key"] == "sk-test"
        assert headers["anthropic-version"] == "2023-06-01"
        assert headers["content-type"] == "application/json"


class TestRemoteFetcher:
    """Tests for RemoteFetcher."""

    @patch("agentcatalog.fetcher.requests.Session")
    def test_fetch_passes_headers_and_timeout(self, mock_session_class):
        """Headers are passed through untouched with the configured timeout."""
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session
        mock_session.get.return_value = _response(200, b"[]")

        fetcher = RemoteFetcher(timeout_s=5)
        result = fetcher.fetch("https://example.com/x", {"User-Agent": "Opcode-Agent"})

        assert result == FetchResult(200, b"[]")
        mock_session.get.assert_called_once_with(
            "https://example.com/x",
            headers={"User-Agent": "Opcode-Agent"},
            timeout=5,
        )

    def test_error_status_is_data(self):
        """A 403 comes back as a result, not an exception."""
        session = MagicMock()
        session.get.return_value = _response(403, b'{"message": "rate limit"}')

        result = RemoteFetcher(session=session).fetch("https://example.com/x")

        assert result.status == 403
        assert result.ok is False
        assert b"rate limit" in result.body

    def test_transport_failure(self):
        session = MagicMock()
        session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(TransportFailure) as exc:
            RemoteFetcher(session=session).fetch("https://example.com/x")

        assert exc.value.kind is ErrorKind.TRANSPORT_FAILURE
        assert exc.value.url == "https://example.com/x"
        session.get.assert_called_once()

    def test_timeout_is_transport_failure(self):
        session = MagicMock()
        session.get.side_effect = requests.exceptions.Timeout("too slow")

        with pytest.raises(TransportFailure):
            RemoteFetcher(session=session).fetch("https://example.com/x")

    def test_retries_transport_failures_only(self):
        """With retries=2 a third attempt can still succeed."""
        session = MagicMock()
        session.get.side_effect = [
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.ConnectionError("refused"),
            _response(200, b"ok"),
        ]

        result = RemoteFetcher(retries=2, session=session).fetch("https://example.com/x")

        assert result.body == b"ok"
        assert session.get.call_count == 3

    def test_no_retry_on_http_status(self):
        session = MagicMock()
        session.get.return_value = _response(500, b"boom")

        result = RemoteFetcher(retries=3, session=session).fetch("https://example.com/x")

        assert result.status == 500
        assert session.get.call_count == 1

    def test_negative_retries_clamped(self):
        assert RemoteFetcher(retries=-4, session=MagicMock()).retries == 0
