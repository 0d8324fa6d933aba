"""Error kinds for agentcatalog.

Every failure carries a machine-readable kind plus structured context,
so a host can branch on ``err.kind`` instead of parsing message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Tagged error kinds."""
    CREDENTIAL_MISSING = "credential_missing"
    TRANSPORT_FAILURE = "transport_failure"
    UPSTREAM_ERROR = "upstream_error"
    DECODE_ERROR = "decode_error"
    INSTALL_DOWNLOAD = "install_download"
    INSTALL_FILESYSTEM = "install_filesystem"
    INVALID_ENTRY_ID = "invalid_entry_id"


class CatalogError(Exception):
    """Base error for catalog operations."""

    kind: ErrorKind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind

    @property
    def message(self) -> str:
        return str(self)

    def context(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> dict:
        data: Dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        data.update(self.context())
        return data


class CredentialMissing(CatalogError):
    kind = ErrorKind.CREDENTIAL_MISSING

    def __init__(self, env_names: tuple = ()):
        self.env_names = tuple(env_names)
        names = ", ".join(self.env_names) or "none"
        super().__init__(
            f"No API key provided and none found in environment variables (checked: {names})"
        )

    def context(self) -> Dict[str, Any]:
        return {"env_names": list(self.env_names)}


class TransportFailure(CatalogError):
    """The endpoint could not be reached at all (DNS, refused, timeout)."""
    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, url: str, cause: BaseException):
        self.url = url
        self.cause = cause
        super().__init__(f"Cannot reach {url}: {cause}")

    def context(self) -> Dict[str, Any]:
        return {"url": self.url, "cause": str(self.cause)}


class UpstreamError(CatalogError):
    """The endpoint answered with a non-success status."""
    kind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"API request failed ({status}): {body or 'Unknown error'}")

    def context(self) -> Dict[str, Any]:
        return {"status": self.status, "body": self.body}


class DecodeError(CatalogError):
    kind = ErrorKind.DECODE_ERROR

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Unexpected response shape: {detail}")

    def context(self) -> Dict[str, Any]:
        return {"detail": self.detail}


class InstallError(CatalogError):
    """Installation failed while downloading or writing the skill."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        self.status = status
        self.cause = cause
        super().__init__(message, kind=kind)

    @classmethod
    def download(cls, status: int) -> "InstallError":
        return cls(
            ErrorKind.INSTALL_DOWNLOAD,
            f"Failed to download SKILL.md: HTTP {status}",
            status=status,
        )

    @classmethod
    def filesystem(cls, cause: BaseException) -> "InstallError":
        return cls(
            ErrorKind.INSTALL_FILESYSTEM,
            f"Failed to write SKILL.md: {cause}",
            cause=cause,
        )

    def context(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.status is not None:
            data["status"] = self.status
        if self.cause is not None:
            data["cause"] = str(self.cause)
        return data


class InvalidEntryId(CatalogError):
    kind = ErrorKind.INVALID_ENTRY_ID

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(
            f"Invalid skill name {entry_id!r}: use letters, digits, '.', '_' or '-'"
        )

    def context(self) -> Dict[str, Any]:
        return {"entry_id": self.entry_id}
