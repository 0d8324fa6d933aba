"""Remote Fetcher.

Issues a GET against a registry endpoint and hands back the raw status and
body. Deciding whether a status counts as success is left to the caller, so
"reachable but rejected" stays distinguishable from "unreachable".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import requests

from .errors import TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 30.0


@dataclass(frozen=True)
class FetchResult:
    """Raw HTTP outcome: status code plus undecoded body."""
    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


def github_headers(user_agent: str = "Opcode-Agent") -> Dict[str, str]:
    # GitHub rejects API calls without a User-Agent.
    return {"User-Agent": user_agent}


def anthropic_headers(api_key: str, version: str = "2023-06-01") -> Dict[str, str]:
    return {
        "x-api-key": api_key,
        "anthropic-version": version,
        "content-type": "application/json",
    }


class RemoteFetcher:
    """Single-purpose HTTP GET client.

    ``retries`` counts extra attempts after a transport failure; an HTTP
    response of any status ends the loop. The default is one attempt.
    """

    def __init__(
        self,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        retries: int = 0,
        session: Optional[requests.Session] = None,
    ):
        self.timeout_s = timeout_s
        self.retries = max(0, retries)
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings) -> "RemoteFetcher":
        return cls(timeout_s=settings.timeout_s, retries=settings.retries)

    def fetch(self, url: str, headers: Optional[Mapping[str, str]] = None) -> FetchResult:
        """GET ``url`` with exactly the given headers.

        Raises:
            TransportFailure: If no HTTP response could be obtained.
        """
        attempts = self.retries + 1
        last_error: Optional[requests.exceptions.RequestException] = None

        for attempt in range(1, attempts + 1):
            try:
                response = self._session.get(
                    url,
                    headers=dict(headers or {}),
                    timeout=self.timeout_s,
                )
            except requests.exceptions.RequestException as e:
                last_error = e
                logger.debug("GET %s failed (attempt %d/%d): %s", url, attempt, attempts, e)
                continue

            logger.debug("GET %s -> %s", url, response.status_code)
            return FetchResult(status=response.status_code, body=response.content or b"")

        assert last_error is not None
        raise TransportFailure(url, last_error)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "RemoteFetcher":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
