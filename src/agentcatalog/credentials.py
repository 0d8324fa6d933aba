"""API key lookup."""

from __future__ import annotations

import os
from typing import Mapping, Optional, Sequence

from .errors import CredentialMissing

# Probed in order; the first set, non-empty variable wins.
API_KEY_ENV_VARS = ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY")


def resolve_api_key(
    explicit: Optional[str] = None,
    env_names: Sequence[str] = API_KEY_ENV_VARS,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Return the explicit key if given, else the first key found in the environment.

    Raises:
        CredentialMissing: If neither source yields a non-empty value.
    """
    if explicit is not None and explicit.strip():
        return explicit.strip()

    env = os.environ if environ is None else environ
    for name in env_names:
        value = (env.get(name) or "").strip()
        if value:
            return value

    raise CredentialMissing(tuple(env_names))
