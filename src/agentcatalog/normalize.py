"""Schema Normalizer.

Turns provider-specific JSON into internal entities. Directory listings are
filtered to ``type == "dir"`` because only directories are installable units
in the registries we read; model pages pass through unfiltered.
"""

from __future__ import annotations

import json
from typing import Any, List, Union

from .errors import DecodeError
from .models import CatalogEntry, ModelCatalogPage, RawDirectoryListing, SchemaKind


def _load_json(raw_body: Union[bytes, str]) -> Any:
    try:
        return json.loads(raw_body)
    except (ValueError, TypeError) as e:
        raise DecodeError(f"malformed JSON: {e}") from e
    except RecursionError as e:
        raise DecodeError("JSON nested too deeply") from e


def parse_directory_listing(raw_body: Union[bytes, str]) -> List[RawDirectoryListing]:
    data = _load_json(raw_body)
    if not isinstance(data, list):
        raise DecodeError(f"expected a JSON array, got {type(data).__name__}")

    items = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise DecodeError(f"item {index} is not an object")
        try:
            items.append(RawDirectoryListing.from_api(item))
        except KeyError as e:
            raise DecodeError(f"item {index} is missing field {e}") from e
        except TypeError as e:
            raise DecodeError(f"item {index}: {e}") from e
    return items


def normalize(
    raw_body: Union[bytes, str],
    kind: SchemaKind = SchemaKind.DIRECTORY_LISTING,
    label: str = "Skill",
) -> list:
    """Decode a registry response into a list of internal entities.

    Directory listings become CatalogEntry values, keeping only directories.
    Model pages become ModelDescriptor values, unfiltered.

    Order of the surviving entries matches the order received. ``label`` is
    used for the templated description, e.g. ``"Official MCP Server: fetch"``.

    Raises:
        DecodeError: On malformed JSON, an unexpected shape or an entry that
            cannot form a valid CatalogEntry.
    """
    if kind is SchemaKind.MODEL_PAGE:
        return list(parse_model_page(raw_body).entries)

    entries: List[CatalogEntry] = []
    for item in parse_directory_listing(raw_body):
        if not item.is_dir:
            continue
        try:
            entries.append(
                CatalogEntry(
                    name=item.name,
                    description=f"Official {label}: {item.name}",
                    source_url=item.html_url,
                )
            )
        except ValueError as e:
            raise DecodeError(str(e)) from e
    return entries


def parse_model_page(raw_body: Union[bytes, str]) -> ModelCatalogPage:
    """Decode a ``/v1/models`` response body.

    Raises:
        DecodeError: On malformed JSON or a missing required field.
    """
    data = _load_json(raw_body)
    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")
    try:
        return ModelCatalogPage.from_api(data)
    except KeyError as e:
        raise DecodeError(f"missing field {e}") from e
    except TypeError as e:
        raise DecodeError(str(e)) from e
