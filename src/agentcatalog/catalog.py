"""Catalog queries.

Marketplace browsing (skills, MCP servers) always returns something: the
live listing or a built-in fallback. Model listing talks to the provider
with real credentials and surfaces every failure to the caller.
"""

from __future__ import annotations

from typing import List, Optional

from .config import Settings
from .credentials import resolve_api_key
from .errors import UpstreamError
from .fallback import resolve_catalog_with_source
from .fetcher import RemoteFetcher, anthropic_headers, github_headers
from .models import AgentTemplate, CatalogEntry, CatalogResult, ModelCatalogPage
from .normalize import parse_model_page
from .static import AGENT_TEMPLATES, MCP_SERVER_FALLBACK, SKILL_FALLBACK


def _fetcher(fetcher: Optional[RemoteFetcher], settings: Settings) -> RemoteFetcher:
    return fetcher or RemoteFetcher.from_settings(settings)


# --- Marketplaces ---

def skills_catalog(
    fetcher: Optional[RemoteFetcher] = None,
    settings: Optional[Settings] = None,
) -> CatalogResult:
    settings = settings or Settings.load()
    return resolve_catalog_with_source(
        _fetcher(fetcher, settings),
        settings.skills_url(),
        github_headers(settings.user_agent),
        SKILL_FALLBACK,
        label="Skill",
    )


def mcp_catalog(
    fetcher: Optional[RemoteFetcher] = None,
    settings: Optional[Settings] = None,
) -> CatalogResult:
    settings = settings or Settings.load()
    return resolve_catalog_with_source(
        _fetcher(fetcher, settings),
        settings.mcp_url(),
        github_headers(settings.user_agent),
        MCP_SERVER_FALLBACK,
        label="MCP Server",
    )


def fetch_available_skills(
    fetcher: Optional[RemoteFetcher] = None,
    settings: Optional[Settings] = None,
) -> List[CatalogEntry]:
    """List installable skills from the skills registry."""
    return skills_catalog(fetcher, settings).entries


def fetch_mcp_marketplace(
    fetcher: Optional[RemoteFetcher] = None,
    settings: Optional[Settings] = None,
) -> List[CatalogEntry]:
    """List official MCP servers."""
    return mcp_catalog(fetcher, settings).entries


# --- Models ---

def list_models(
    api_key: Optional[str] = None,
    fetcher: Optional[RemoteFetcher] = None,
    settings: Optional[Settings] = None,
) -> ModelCatalogPage:
    """Fetch one page of the provider's model catalog.

    The credential is resolved first, so a missing key fails without any
    network traffic.

    Raises:
        CredentialMissing: No explicit key and none in the environment.
        TransportFailure: The API could not be reached.
        UpstreamError: Non-success status; carries status and body.
        DecodeError: The body does not look like a model page.
    """
    key = resolve_api_key(api_key)
    settings = settings or Settings.load()

    result = _fetcher(fetcher, settings).fetch(
        settings.models_url(),
        anthropic_headers(key, settings.anthropic_version),
    )
    if not result.ok:
        raise UpstreamError(result.status, result.text())

    return parse_model_page(result.body)


# --- Templates ---

def fetch_agent_templates() -> List[AgentTemplate]:
    return list(AGENT_TEMPLATES)
