"""agentcatalog CLI.

Usage:
    agentcatalog skills             # List skills (live or built-in)
    agentcatalog mcp                # List official MCP servers
    agentcatalog models [--key K]   # List Anthropic models
    agentcatalog templates          # List agent templates
    agentcatalog install <name>     # Install a skill into ./.claude/skills
    agentcatalog call <name> [json] # Raw named call, prints the JSON envelope
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import catalog
from .commands import invoke
from .config import Settings
from .errors import CatalogError
from .installer import install_skill
from .models import CatalogResult

console = Console()


def _settings(args: argparse.Namespace) -> Settings:
    s = Settings.load()
    if getattr(args, "timeout", None) is not None:
        s.timeout_s = args.timeout
    if getattr(args, "retries", None) is not None:
        s.retries = max(0, args.retries)
    return s


def _print_catalog(title: str, result: CatalogResult) -> None:
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("URL", style="dim")

    for entry in result.entries:
        table.add_row(entry.name, entry.description, entry.source_url)

    console.print(table)
    if result.is_live:
        console.print(f"\nTotal: {len(result.entries)} entry(s)")
    else:
        console.print("\n[yellow]Registry unavailable, showing built-in list.[/yellow]")


# --- Commands ---

def cmd_skills(args: argparse.Namespace) -> int:
    """List skills."""
    _print_catalog("Skills", catalog.skills_catalog(settings=_settings(args)))
    return 0


def cmd_mcp(args: argparse.Namespace) -> int:
    """List MCP servers."""
    _print_catalog("MCP Servers", catalog.mcp_catalog(settings=_settings(args)))
    return 0


def cmd_models(args: argparse.Namespace) -> int:
    """List provider models."""
    try:
        page = catalog.list_models(args.key, settings=_settings(args))
    except CatalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    table = Table(title="Models")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Created")
    table.add_column("Type")

    for m in page.entries:
        table.add_row(m.id, m.display_name, m.created_at, m.model_type)

    console.print(table)
    if page.has_more:
        console.print(f"[dim]More models available after {page.last_id}[/dim]")
    return 0


def cmd_templates(args: argparse.Namespace) -> int:
    """List agent templates."""
    table = Table(title="Agent Templates")
    table.add_column("Name", style="cyan")
    table.add_column("Category")
    table.add_column("Description")

    for t in catalog.fetch_agent_templates():
        table.add_row(t.name, t.category, t.description)

    console.print(table)
    return 0


def cmd_install(args: argparse.Namespace) -> int:
    """Install a skill."""
    try:
        dest = install_skill(args.root, args.name, settings=_settings(args))
    except CatalogError as e:
        console.print(f"[red]Install failed:[/red] {e}")
        return 1

    console.print(f"[green]✓ Installed {args.name}:[/green] {dest}")
    return 0


def cmd_call(args: argparse.Namespace) -> int:
    """Run a named call and print its JSON envelope."""
    try:
        params = json.loads(args.params) if args.params else {}
    except ValueError as e:
        console.print(f"[red]Invalid JSON parameters:[/red] {e}")
        return 1
    if not isinstance(params, dict):
        console.print("[red]Parameters must be a JSON object.[/red]")
        return 1

    envelope = invoke(args.command, params, settings=_settings(args))
    console.print_json(json.dumps(envelope))
    return 0 if envelope["ok"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agentcatalog",
        description="Browse skill, MCP server and model catalogs; install skills.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument("--retries", type=int, help="Extra attempts after a network failure")

    sub = parser.add_subparsers(dest="subcmd")

    p_skills = sub.add_parser("skills", help="List available skills")
    p_skills.set_defaults(func=cmd_skills)

    p_mcp = sub.add_parser("mcp", help="List official MCP servers")
    p_mcp.set_defaults(func=cmd_mcp)

    p_models = sub.add_parser("models", help="List Anthropic models")
    p_models.add_argument("--key", help="API key (defaults to ANTHROPIC_API_KEY / CLAUDE_API_KEY)")
    p_models.set_defaults(func=cmd_models)

    p_templates = sub.add_parser("templates", help="List agent templates")
    p_templates.set_defaults(func=cmd_templates)

    p_install = sub.add_parser("install", help="Install a skill into a project")
    p_install.add_argument("name", help="Skill name")
    p_install.add_argument("--root", default=".", help="Project directory (default: current)")
    p_install.set_defaults(func=cmd_install)

    p_call = sub.add_parser("call", help="Run a named call and print JSON")
    p_call.add_argument("command", help="Command name, e.g. fetch_mcp_marketplace")
    p_call.add_argument("params", nargs="?", help="JSON object of parameters")
    p_call.set_defaults(func=cmd_call)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

    if not getattr(args, "func", None):
        parser.print_help()
        raise SystemExit(1)

    raise SystemExit(args.func(args))


if __name__ == "__main__":
    main(sys.argv[1:])
