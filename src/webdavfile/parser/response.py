"""Parse one multi-status <response> entry into a WebDAVFile."""

from __future__ import annotations

import logging
from typing import Optional
from xml.etree.ElementTree import Element

from webdavfile.errors import InvalidArgumentError
from webdavfile.models import WebDAVFile
from webdavfile.util.paths import normalize_path
from webdavfile.util.time import parse_rfc1123

from .fields import (
    COLLECTION,
    CONTENT_LENGTH,
    ETAG,
    FILE_ID,
    HREF,
    LAST_MODIFIED,
    PROP,
    PROPSTAT,
    RESOURCE_TYPE,
)

logger = logging.getLogger(__name__)


def parse_response(entry: Element, base_path: Optional[str] = None) -> Optional[WebDAVFile]:
    """
    Build a WebDAVFile from one <response> element.

    Args:
        entry: The <response> element of a PROPFIND multi-status document.
        base_path: Server path the WebDAV root is mounted under, if known.

    Returns:
        The parsed file, or None when the href or a valid getlastmodified
        is missing. Other properties fall back to defaults.

    Raises:
        InvalidArgumentError: if entry is not an XML element.
    """
    if not isinstance(entry, Element):
        raise InvalidArgumentError(
            "entry must be an xml.etree.ElementTree.Element",
            details={"type": type(entry).__name__},
        )

    raw_path = _text(_child(entry, HREF))
    if raw_path is None:
        logger.debug("Skipping response without href")
        return None

    props = _child(_child(entry, PROPSTAT), PROP)

    date_text = _text(_child(props, LAST_MODIFIED))
    if date_text is None:
        logger.debug("Skipping %s: no getlastmodified", raw_path)
        return None
    try:
        last_modified = parse_rfc1123(date_text)
    except ValueError:
        logger.debug("Skipping %s: bad getlastmodified %r", raw_path, date_text)
        return None

    is_directory = _child(_child(props, RESOURCE_TYPE), COLLECTION) is not None

    size = 0
    if not is_directory:
        size = _parse_size(_text(_child(props, CONTENT_LENGTH)))

    return WebDAVFile(
        path=normalize_path(raw_path, base_path),
        id=_text(_child(props, FILE_ID)) or "",
        is_directory=is_directory,
        last_modified=last_modified,
        size=size,
        etag=_text(_child(props, ETAG)) or "",
    )


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        # Comments and processing instructions.
        return ""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[-1]
    return tag.rsplit(":", 1)[-1]


def _child(parent: Optional[Element], name: str) -> Optional[Element]:
    """First direct child of parent with the given local name."""
    if parent is None:
        return None
    for child in parent:
        if _local_name(child.tag) == name:
            return child
    return None


def _text(elem: Optional[Element]) -> Optional[str]:
    """Text of elem; "" for an empty element, None only when elem is missing."""
    if elem is None:
        return None
    return elem.text or ""


def _parse_size(value: Optional[str]) -> int:
    if value is None:
        return 0
    # int() also takes whitespace, "_" separators and non-ASCII digits.
    if not value.isascii() or "_" in value or value != value.strip():
        return 0
    try:
        size = int(value)
    except ValueError:
        return 0
    return max(size, 0)
