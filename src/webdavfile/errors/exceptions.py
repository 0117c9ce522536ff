"""Exception hierarchy for webdavfile."""

from __future__ import annotations

from typing import Any, Optional


class WebDAVFileError(Exception):
    """
    Base exception for webdavfile.

    Attributes:
        details: Optional structured information (e.g., {"field": "size", "value": -1}).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidArgumentError(WebDAVFileError):
    """Raised when a function is called with an argument of the wrong kind."""


class InvalidRecordError(WebDAVFileError):
    """Raised when explicit record values or a serialized record are invalid."""


class ConfigurationError(WebDAVFileError):
    """Raised when account configuration is invalid."""
