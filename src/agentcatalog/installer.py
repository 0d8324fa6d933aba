"""Skill installer.

Downloads a skill's SKILL.md and writes it to
``<root>/.claude/skills/<name>/SKILL.md``. Failures are reported, never
replaced by a fallback.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, Union

from .config import Settings
from .errors import InstallError, InvalidEntryId
from .fetcher import RemoteFetcher, github_headers

logger = logging.getLogger(__name__)

_SAFE_ENTRY_ID = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def validate_entry_id(entry_id: str) -> str:
    """Reject names that could escape the skills directory or alter the URL."""
    if not isinstance(entry_id, str) or not _SAFE_ENTRY_ID.match(entry_id) or ".." in entry_id:
        raise InvalidEntryId(str(entry_id))
    return entry_id


def skill_destination(root_dir: Union[str, Path], entry_id: str) -> Path:
    return Path(root_dir) / ".claude" / "skills" / entry_id / "SKILL.md"


def install_skill(
    root_dir: Union[str, Path],
    entry_id: str,
    fetcher: Optional[RemoteFetcher] = None,
    settings: Optional[Settings] = None,
) -> Path:
    """Install skill ``entry_id`` beneath ``root_dir`` and return the written path.

    An existing SKILL.md is overwritten, so repeating an install is safe.

    Raises:
        InvalidEntryId: Before any network or disk access, for unsafe names.
        TransportFailure: If the content endpoint is unreachable.
        InstallError: On a non-success download status or a filesystem error.
    """
    validate_entry_id(entry_id)
    settings = settings or Settings.load()
    fetcher = fetcher or RemoteFetcher.from_settings(settings)

    url = settings.skill_raw_url(entry_id)
    result = fetcher.fetch(url, github_headers(settings.user_agent))
    if not result.ok:
        raise InstallError.download(result.status)

    dest = skill_destination(root_dir, entry_id)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(result.body)
    except OSError as e:
        raise InstallError.filesystem(e) from e

    logger.debug("Installed %s (%d bytes) to %s", entry_id, len(result.body), dest)
    return dest
