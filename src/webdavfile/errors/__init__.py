"""Public error exports for webdavfile."""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidRecordError,
    WebDAVFileError,
)

__all__ = [
    "WebDAVFileError",
    "InvalidArgumentError",
    "InvalidRecordError",
    "ConfigurationError",
]
