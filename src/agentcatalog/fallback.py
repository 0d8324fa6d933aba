"""Fallback Resolver.

Error boundary for marketplace queries: a live registry result is used only
when it was fetched, accepted, decoded and turned out non-empty. Any other
outcome substitutes the static catalog. Degradation is silent apart from a
debug log record; the ``source`` field of CatalogResult lets callers tell
live data from the fallback.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence

from .errors import DecodeError, TransportFailure
from .fetcher import RemoteFetcher
from .models import CatalogEntry, CatalogResult, SchemaKind
from .normalize import normalize

logger = logging.getLogger(__name__)

LIVE = "live"
FALLBACK = "fallback"


def resolve_catalog_with_source(
    fetcher: RemoteFetcher,
    url: str,
    headers: Optional[Mapping[str, str]],
    fallback: Sequence[CatalogEntry],
    label: str = "Skill",
) -> CatalogResult:
    def degrade(reason: str) -> CatalogResult:
        logger.debug("Using static %s catalog for %s: %s", label, url, reason)
        return CatalogResult(entries=list(fallback), source=FALLBACK)

    try:
        result = fetcher.fetch(url, headers)
    except TransportFailure as e:
        return degrade(f"unreachable ({e.cause})")

    if not result.ok:
        return degrade(f"HTTP {result.status}")

    try:
        entries = normalize(result.body, SchemaKind.DIRECTORY_LISTING, label=label)
    except DecodeError as e:
        return degrade(e.message)

    if not entries:
        return degrade("no directory entries")

    return CatalogResult(entries=entries, source=LIVE)


def resolve_catalog(
    fetcher: RemoteFetcher,
    url: str,
    headers: Optional[Mapping[str, str]],
    fallback: Sequence[CatalogEntry],
    label: str = "Skill",
) -> List[CatalogEntry]:
    """Return the live catalog at ``url``, or ``fallback`` if it is unusable.

    Never raises for transport failures, non-success statuses, undecodable
    bodies or empty listings.
    """
    return resolve_catalog_with_source(fetcher, url, headers, fallback, label).entries
