from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

APP = "agentcatalog"

logger = logging.getLogger(__name__)


def config_dir() -> Path:
    """
    Cross-platform config directory:
      - Windows: %APPDATA%\\agentcatalog
      - macOS/Linux: $XDG_CONFIG_HOME/agentcatalog or ~/.config/agentcatalog
    """
    if os.name == "nt":
        base = os.environ.get("APPDATA") or str(Path.home())
        return Path(base) / APP
    return Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))) / APP


def config_path() -> Path:
    return config_dir() / "config.json"


def _number(convert, raw, default, name: str):
    """Convert ``raw`` with ``convert``, keeping ``default`` when absent or invalid."""
    if raw is None or raw == "" or isinstance(raw, bool):
        return default
    try:
        return convert(raw)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Ignoring invalid %s=%r", name, raw)
        return default


@dataclass
class Settings:
    timeout_s: float = 30.0
    retries: int = 0             # extra attempts after a transport failure
    user_agent: str = "Opcode-Agent"
    anthropic_version: str = "2023-06-01"
    anthropic_base_url: str = "https://api.anthropic.com/v1"
    github_api_url: str = "https://api.github.com"
    github_raw_url: str = "https://raw.githubusercontent.com"
    # Registries
    skills_repo: str = "anthropics/skills"
    skills_path: str = "skills"
    skills_branch: str = "main"
    mcp_repo: str = "modelcontextprotocol/servers"
    mcp_path: str = "src"

    @staticmethod
    def load(path: Optional[Path] = None) -> "Settings":
        path = path or config_path()

        data: dict = {}

        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError, RecursionError) as e:
                logger.debug("Ignoring unreadable config %s: %s", path, e)
                data = {}
            if not isinstance(data, dict):
                logger.debug("Ignoring config %s: expected an object", path)
                data = {}

        s = Settings(
            timeout_s=_number(float, data.get("timeout_s"), Settings.timeout_s, "timeout_s"),
            retries=_number(int, data.get("retries"), Settings.retries, "retries"),
            user_agent=str(data.get("user_agent", Settings.user_agent)),
            anthropic_version=str(data.get("anthropic_version", Settings.anthropic_version)),
            anthropic_base_url=str(data.get("anthropic_base_url", Settings.anthropic_base_url)),
            github_api_url=str(data.get("github_api_url", Settings.github_api_url)),
            github_raw_url=str(data.get("github_raw_url", Settings.github_raw_url)),
            skills_repo=str(data.get("skills_repo", Settings.skills_repo)),
            skills_path=str(data.get("skills_path", Settings.skills_path)),
            skills_branch=str(data.get("skills_branch", Settings.skills_branch)),
            mcp_repo=str(data.get("mcp_repo", Settings.mcp_repo)),
            mcp_path=str(data.get("mcp_path", Settings.mcp_path)),
        )

        # Environment overrides (highest priority)
        env = os.environ
        s.timeout_s = _number(float, env.get("AGENTCATALOG_TIMEOUT_S"), s.timeout_s, "AGENTCATALOG_TIMEOUT_S")
        s.retries = _number(int, env.get("AGENTCATALOG_RETRIES"), s.retries, "AGENTCATALOG_RETRIES")
        s.user_agent = env.get("AGENTCATALOG_USER_AGENT", s.user_agent)
        s.anthropic_base_url = env.get("AGENTCATALOG_ANTHROPIC_BASE_URL", s.anthropic_base_url)
        s.github_api_url = env.get("AGENTCATALOG_GITHUB_API_URL", s.github_api_url)
        s.github_raw_url = env.get("AGENTCATALOG_GITHUB_RAW_URL", s.github_raw_url)

        s.retries = max(0, s.retries)
        return s

    def save(self, path: Optional[Path] = None) -> Path:
        path = path or config_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        payload = {
            "timeout_s": self.timeout_s,
            "retries": self.retries,
            "user_agent": self.user_agent,
            "anthropic_version": self.anthropic_version,
            "anthropic_base_url": self.anthropic_base_url,
            "github_api_url": self.github_api_url,
            "github_raw_url": self.github_raw_url,
            "skills_repo": self.skills_repo,
            "skills_path": self.skills_path,
            "skills_branch": self.skills_branch,
            "mcp_repo": self.mcp_repo,
            "mcp_path": self.mcp_path,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    # --- Endpoints ---

    def models_url(self) -> str:
        return f"{self.anthropic_base_url.rstrip('/')}/models"

    def contents_url(self, repo: str, path: str) -> str:
        """GitHub contents API URL for a directory of ``owner/repo``."""
        return f"{self.github_api_url.rstrip('/')}/repos/{repo}/contents/{path.strip('/')}"

    def skills_url(self) -> str:
        return self.contents_url(self.skills_repo, self.skills_path)

    def mcp_url(self) -> str:
        return self.contents_url(self.mcp_repo, self.mcp_path)

    def skill_raw_url(self, skill_name: str) -> str:
        base = self.github_raw_url.rstrip("/")
        return (
            f"{base}/{self.skills_repo}/{self.skills_branch}/"
            f"{self.skills_path.strip('/')}/{skill_name}/SKILL.md"
        )
