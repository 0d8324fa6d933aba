"""agentcatalog.

Unified, typed view over remote agent registries:
- Skills and MCP server marketplaces (GitHub contents API), with a built-in
  fallback whenever the live registry is unusable
- The Anthropic model catalog
- Static agent templates
- Skill installation into <project>/.claude/skills
"""

from .catalog import (
    fetch_agent_templates,
    fetch_available_skills,
    fetch_mcp_marketplace,
    list_models,
    mcp_catalog,
    skills_catalog,
)
from .commands import invoke
from .config import Settings
from .credentials import resolve_api_key
from .errors import (
    CatalogError,
    CredentialMissing,
    DecodeError,
    ErrorKind,
    InstallError,
    InvalidEntryId,
    TransportFailure,
    UpstreamError,
)
from .fallback import resolve_catalog
from .fetcher import FetchResult, RemoteFetcher
from .installer import install_skill
from .models import (
    AgentTemplate,
    CatalogEntry,
    CatalogResult,
    ModelCatalogPage,
    ModelDescriptor,
    SchemaKind,
)
from .normalize import normalize, parse_model_page

__version__ = "0.1.0"

__all__ = [
    "AgentTemplate",
    "CatalogEntry",
    "CatalogError",
    "CatalogResult",
    "CredentialMissing",
    "DecodeError",
    "ErrorKind",
    "FetchResult",
    "InstallError",
    "InvalidEntryId",
    "ModelCatalogPage",
    "ModelDescriptor",
    "RemoteFetcher",
    "SchemaKind",
    "Settings",
    "TransportFailure",
    "UpstreamError",
    "fetch_agent_templates",
    "fetch_available_skills",
    "fetch_mcp_marketplace",
    "install_skill",
    "invoke",
    "list_models",
    "mcp_catalog",
    "normalize",
    "parse_model_page",
    "resolve_api_key",
    "resolve_catalog",
    "skills_catalog",
]
