"""Catalog data models.

Internal entities (CatalogEntry, ModelDescriptor, ModelCatalogPage,
AgentTemplate) and the raw GitHub contents record they are built from.
All of them are immutable value types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
from urllib.parse import urlparse


class SchemaKind(str, Enum):
    """Raw response shapes understood by the normalizer."""
    DIRECTORY_LISTING = "directory_listing"
    MODEL_PAGE = "model_page"


def _text(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


def _is_absolute_url(url: str) -> bool:
    u = urlparse(url or "")
    return bool(u.scheme and u.netloc)


@dataclass(frozen=True)
class CatalogEntry:
    """A selectable entry in a skills or MCP server catalog."""
    name: str
    description: str
    source_url: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("CatalogEntry.name must not be empty")
        if not _is_absolute_url(self.source_url):
            raise ValueError(f"CatalogEntry.source_url must be absolute: {self.source_url!r}")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "url": self.source_url,
        }


@dataclass(frozen=True)
class RawDirectoryListing:
    """One item of a GitHub ``/contents/{path}`` listing."""
    name: str
    path: str
    entry_type: str
    html_url: str

    @classmethod
    def from_api(cls, data: dict) -> "RawDirectoryListing":
        # KeyError / TypeError propagate to the normalizer
        return cls(
            name=_text(data, "name"),
            path=_text(data, "path"),
            entry_type=_text(data, "type"),
            html_url=_text(data, "html_url"),
        )

    @property
    def is_dir(self) -> bool:
        return self.entry_type == "dir"


@dataclass(frozen=True)
class ModelDescriptor:
    id: str
    display_name: str
    created_at: str
    model_type: str

    @classmethod
    def from_api(cls, data: dict) -> "ModelDescriptor":
        return cls(
            id=_text(data, "id"),
            display_name=_text(data, "display_name"),
            created_at=_text(data, "created_at"),
            model_type=_text(data, "type"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "display_name": self.display_name,
            "created_at": self.created_at,
            "type": self.model_type,
        }


@dataclass(frozen=True)
class ModelCatalogPage:
    """A single page of the provider's model listing."""
    entries: Tuple[ModelDescriptor, ...] = field(default_factory=tuple)
    has_more: bool = False
    first_id: Optional[str] = None
    last_id: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict) -> "ModelCatalogPage":
        return cls(
            entries=tuple(ModelDescriptor.from_api(m) for m in data["data"]),
            has_more=bool(data["has_more"]),
            first_id=data.get("first_id"),
            last_id=data.get("last_id"),
        )

    def to_dict(self) -> dict:
        return {
            "data": [m.to_dict() for m in self.entries],
            "has_more": self.has_more,
            "first_id": self.first_id,
            "last_id": self.last_id,
        }


@dataclass(frozen=True)
class AgentTemplate:
    name: str
    description: str
    prompt: str
    category: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "prompt": self.prompt,
            "category": self.category,
        }


@dataclass(frozen=True)
class CatalogResult:
    """Resolved catalog plus where it came from (``live`` or ``fallback``)."""
    entries: List[CatalogEntry]
    source: str

    @property
    def is_live(self) -> bool:
        return self.source == "live"
