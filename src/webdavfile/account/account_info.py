"""Account information for webdavfile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from webdavfile.errors import ConfigurationError
from webdavfile.util.paths import percent_decode


@dataclass(slots=True, frozen=True)
class AccountInfo:
    """
    WebDAV server account.

    base_url must be an http(s) URL including the path the WebDAV root is
    mounted under, e.g. https://cloud.example.com/remote.php/dav/files/alice/
    """

    base_url: str
    username: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ConfigurationError("AccountInfo.base_url must be a non-empty string")

        if not isinstance(self.username, str):
            raise ConfigurationError("AccountInfo.username must be a string")

        parts = urlsplit(self.base_url.strip())
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                "AccountInfo.base_url must be an http(s) URL with a host",
                details={"base_url": self.base_url},
            )

    @property
    def base_path(self) -> Optional[str]:
        """Decoded path component of base_url, or None if it has none."""
        path = urlsplit(self.base_url.strip()).path
        if not path:
            return None
        return percent_decode(path)
