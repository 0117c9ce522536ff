"""webdavfile public API."""

from __future__ import annotations

from webdavfile.account import AccountInfo
from webdavfile.errors import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidRecordError,
    WebDAVFileError,
)
from webdavfile.models import WebDAVFile
from webdavfile.parser import parse_response
from webdavfile.util import normalize_path, parse_rfc1123, to_rfc1123

__all__ = [
    # Parsing
    "parse_response",
    "normalize_path",
    "parse_rfc1123",
    "to_rfc1123",
    # Models / config
    "WebDAVFile",
    "AccountInfo",
    # Errors
    "WebDAVFileError",
    "InvalidArgumentError",
    "InvalidRecordError",
    "ConfigurationError",
]
