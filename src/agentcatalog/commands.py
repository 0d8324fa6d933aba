"""Named-call surface for a host application.

A host invokes operations by name with a dict of parameters and gets back a
JSON-serializable envelope:

    {"ok": True, "result": ...}
    {"ok": False, "error": {"kind": ..., "message": ..., ...context}}
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from . import catalog
from .config import Settings
from .errors import CatalogError
from .fetcher import RemoteFetcher
from .installer import install_skill

Handler = Callable[[Dict[str, Any], Settings, Optional[RemoteFetcher]], Any]


def _skills(params: dict, settings: Settings, fetcher: Optional[RemoteFetcher]) -> Any:
    return [e.to_dict() for e in catalog.fetch_available_skills(fetcher, settings)]


def _mcp(params: dict, settings: Settings, fetcher: Optional[RemoteFetcher]) -> Any:
    return [e.to_dict() for e in catalog.fetch_mcp_marketplace(fetcher, settings)]


def _models(params: dict, settings: Settings, fetcher: Optional[RemoteFetcher]) -> Any:
    page = catalog.list_models(params.get("api_key"), fetcher, settings)
    return page.to_dict()


def _templates(params: dict, settings: Settings, fetcher: Optional[RemoteFetcher]) -> Any:
    return [t.to_dict() for t in catalog.fetch_agent_templates()]


def _install(params: dict, settings: Settings, fetcher: Optional[RemoteFetcher]) -> Any:
    project_path = params["project_path"]
    skill_name = params["skill_name"]
    dest = install_skill(project_path, skill_name, fetcher, settings)
    return {"path": str(dest)}


COMMANDS: Dict[str, Handler] = {
    "fetch_available_skills": _skills,
    "fetch_mcp_marketplace": _mcp,
    "list_anthropic_models": _models,
    "fetch_agent_templates": _templates,
    "install_skill": _install,
}

# name -> (required params, optional params); all values are strings
PARAMS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "list_anthropic_models": ((), ("api_key",)),
    "install_skill": (("project_path", "skill_name"), ()),
}


def _error(kind: str, message: str) -> dict:
    return {"ok": False, "error": {"kind": kind, "message": message}}


def _check_params(name: str, params: Dict[str, Any]) -> Optional[str]:
    """Return a problem description, or None if ``params`` fit ``name``."""
    required, optional = PARAMS.get(name, ((), ()))
    for key in required:
        if key not in params:
            return f"Missing parameter '{key}' for {name}"
    for key in required + optional:
        value = params.get(key)
        if value is not None and not isinstance(value, str):
            return f"Parameter '{key}' for {name} must be a string, got {type(value).__name__}"
    return None


def invoke(
    name: str,
    params: Optional[Dict[str, Any]] = None,
    settings: Optional[Settings] = None,
    fetcher: Optional[RemoteFetcher] = None,
) -> dict:
    """Run operation ``name`` and wrap its outcome in a result envelope."""
    handler = COMMANDS.get(name)
    if handler is None:
        return _error("unknown_command", f"Unknown command: {name}")

    params = params or {}
    if not isinstance(params, dict):
        return _error("invalid_params", f"Parameters for {name} must be an object")
    problem = _check_params(name, params)
    if problem:
        return _error("invalid_params", problem)

    settings = settings or Settings.load()

    try:
        return {"ok": True, "result": handler(params, settings, fetcher)}
    except CatalogError as e:
        return {"ok": False, "error": e.to_dict()}
