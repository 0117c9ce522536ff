"""Property names read from multi-status <response> entries."""

from __future__ import annotations

# Matched by local name; servers disagree on prefixes and some omit namespaces.
HREF: str = "href"
PROPSTAT: str = "propstat"
PROP: str = "prop"

LAST_MODIFIED: str = "getlastmodified"
RESOURCE_TYPE: str = "resourcetype"
COLLECTION: str = "collection"
CONTENT_LENGTH: str = "getcontentlength"
FILE_ID: str = "fileid"
ETAG: str = "getetag"
