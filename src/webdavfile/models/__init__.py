"""Public model exports for webdavfile."""

from __future__ import annotations

from .webdav_file import WebDAVFile

__all__ = [
    "WebDAVFile",
]
