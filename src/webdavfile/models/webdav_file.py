"""Data model for WebDAV items."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any, Optional

from webdavfile.errors import InvalidRecordError
from webdavfile.util.time import parse_rfc1123, to_rfc1123

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

_DICT_KEYS: tuple[str, ...] = (
    "path",
    "id",
    "isDirectory",
    "lastModified",
    "size",
    "etag",
)


@dataclass(slots=True, frozen=True)
class WebDAVFile:
    """
    A file or directory listed by a WebDAV server.

    Notes:
        - Instances built by parse_response() have a normalized path (no
          leading '/') and size == 0 for directories.
        - id and etag are "" when the server did not report them.
    """

    path: str
    id: str
    is_directory: bool
    last_modified: datetime
    size: int
    etag: str

    def __post_init__(self) -> None:
        for key in ("path", "id", "etag"):
            if not isinstance(getattr(self, key), str):
                raise InvalidRecordError(
                    f"WebDAVFile.{key} must be a string",
                    details={"field": key, "value": getattr(self, key)},
                )

        if not isinstance(self.is_directory, bool):
            raise InvalidRecordError(
                "WebDAVFile.is_directory must be a bool",
                details={"field": "is_directory", "value": self.is_directory},
            )

        if not isinstance(self.last_modified, datetime) or self.last_modified.tzinfo is None:
            raise InvalidRecordError(
                "WebDAVFile.last_modified must be a timezone-aware datetime",
                details={"field": "last_modified", "value": self.last_modified},
            )

        # bool is an int subclass; reject it explicitly.
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 0:
            raise InvalidRecordError(
                "WebDAVFile.size must be a non-negative int",
                details={"field": "size", "value": self.size},
            )

    @classmethod
    def from_xml(cls, entry: Element, base_path: Optional[str] = None) -> Optional[WebDAVFile]:
        """Parse one multi-status <response> element. See parse_response()."""
        from webdavfile.parser.response import parse_response

        return parse_response(entry, base_path)

    # ----------------------------
    # Derived views
    # ----------------------------
    @property
    def file_path(self) -> PurePosixPath:
        return PurePosixPath(self.path)

    @property
    def file_name(self) -> str:
        """The file name including extension (last segment, trailing "/" ignored)."""
        return self.path.rstrip("/").rsplit("/", 1)[-1]

    @property
    def extension(self) -> str:
        """The file extension without the dot, or "" if there is none."""
        stem, dot, ext = self.file_name.rpartition(".")
        # A leading dot alone (".bashrc") marks a hidden file, not an extension.
        if not dot or not stem:
            return ""
        return ext

    @property
    def name(self) -> str:
        """The file name without its extension (directories keep the full name)."""
        if self.is_directory:
            return self.file_name
        ext = self.extension
        if not ext:
            return self.file_name
        return self.file_name[: -(len(ext) + 1)]

    @property
    def description(self) -> str:
        return (
            f"WebDAVFile(path: {self.path}, id: {self.id}, "
            f"isDirectory: {self.is_directory}, "
            f"lastModified: {to_rfc1123(self.last_modified)}, "
            f"size: {self.size}, etag: {self.etag})"
        )

    def __str__(self) -> str:
        return self.description

    # ----------------------------
    # Serialization
    # ----------------------------
    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dict (timestamp as RFC1123 text)."""
        return {
            "path": self.path,
            "id": self.id,
            "isDirectory": self.is_directory,
            "lastModified": to_rfc1123(self.last_modified),
            "size": self.size,
            "etag": self.etag,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebDAVFile:
        """
        Build a WebDAVFile from the output of to_dict().

        Raises:
            InvalidRecordError: on missing keys, wrong types or a bad timestamp.
        """
        if not isinstance(data, dict):
            raise InvalidRecordError("WebDAVFile data must be a dict")

        missing = [key for key in _DICT_KEYS if key not in data]
        if missing:
            raise InvalidRecordError(
                "WebDAVFile data is missing keys",
                details={"missing": missing},
            )

        raw_date = data["lastModified"]
        try:
            last_modified = parse_rfc1123(raw_date)
        except ValueError as exc:
            raise InvalidRecordError(
                "WebDAVFile.lastModified is not an RFC1123 timestamp",
                details={"field": "lastModified", "value": raw_date},
                cause=exc,
            ) from exc

        return cls(
            path=data["path"],
            id=data["id"],
            is_directory=data["isDirectory"],
            last_modified=last_modified,
            size=data["size"],
            etag=data["etag"],
        )
