"""Built-in catalogs.

Used verbatim when a live registry is unavailable, plus the agent template
table, which has no remote source at all. Tuples of frozen dataclasses so
they can be shared across threads without locking.
"""

from __future__ import annotations

from typing import Tuple

from .models import AgentTemplate, CatalogEntry

_MCP_TREE = "https://github.com/modelcontextprotocol/servers/tree/main/src"
_SKILLS_TREE = "https://github.com/anthropics/skills/tree/main/skills"


MCP_SERVER_FALLBACK: Tuple[CatalogEntry, ...] = (
    CatalogEntry("filesystem", "Read/Write local files", f"{_MCP_TREE}/filesystem"),
    CatalogEntry("memory", "Graph-based memory", f"{_MCP_TREE}/memory"),
    CatalogEntry("fetch", "Fetch web content", f"{_MCP_TREE}/fetch"),
    CatalogEntry("postgres", "PostgreSQL Database", f"{_MCP_TREE}/postgres"),
    CatalogEntry("sqlite", "SQLite Database", f"{_MCP_TREE}/sqlite"),
    CatalogEntry("github", "GitHub API Integration", f"{_MCP_TREE}/github"),
    CatalogEntry("slack", "Slack Integration", f"{_MCP_TREE}/slack"),
    CatalogEntry("google-drive", "Google Drive Access", f"{_MCP_TREE}/google-drive"),
)


SKILL_FALLBACK: Tuple[CatalogEntry, ...] = (
    CatalogEntry("docx", "Create and edit Word documents", f"{_SKILLS_TREE}/docx"),
    CatalogEntry("pdf", "Read, fill and generate PDF files", f"{_SKILLS_TREE}/pdf"),
    CatalogEntry("pptx", "Build PowerPoint presentations", f"{_SKILLS_TREE}/pptx"),
    CatalogEntry("xlsx", "Work with Excel spreadsheets", f"{_SKILLS_TREE}/xlsx"),
    CatalogEntry("skill-creator", "Author new skills", f"{_SKILLS_TREE}/skill-creator"),
    CatalogEntry("mcp-builder", "Build MCP servers", f"{_SKILLS_TREE}/mcp-builder"),
    CatalogEntry("webapp-testing", "Test web apps with Playwright", f"{_SKILLS_TREE}/webapp-testing"),
)


AGENT_TEMPLATES: Tuple[AgentTemplate, ...] = (
    AgentTemplate(
        name="React Engineer",
        description="Expert in React, TypeScript, and modern frontend development.",
        category="Coding",
        prompt=(
            "You are a Senior React Engineer. You write clean, performant, and accessible "
            "code using modern React patterns (Hooks, Context). You prefer functional "
            "components and TypeScript."
        ),
    ),
    AgentTemplate(
        name="Python Architect",
        description="Specializes in Python backend systems, FastAPI, and data structures.",
        category="Coding",
        prompt=(
            "You are a Python System Architect. You design robust, scalable backend systems. "
            "You follow PEP 8 and use type hints. You are expert in FastAPI, Django, and AsyncIO."
        ),
    ),
    AgentTemplate(
        name="Tech Writer",
        description="Creates clear, concise, and technical documentation.",
        category="Writing",
        prompt=(
            "You are a Technical Writer. You create documentation that is easy to understand "
            "for developers. You use clear language, code examples, and proper formatting."
        ),
    ),
    AgentTemplate(
        name="Security Auditor",
        description="Analyzes code for vulnerabilities and security flaws.",
        category="Security",
        prompt=(
            "You are a Security Auditor. You check for OWASP Top 10 vulnerabilities, "
            "insecure dependencies, and bad practices."
        ),
    ),
)
