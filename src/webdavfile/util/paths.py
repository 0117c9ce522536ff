"""Path normalization for hrefs returned in multi-status responses."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import unquote

SEPARATOR: str = "/"

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_decode(value: str) -> str:
    """
    Return the percent-decoded form of value, or value unchanged if it is not
    decodable (a stray '%' or escapes that are not valid UTF-8).

    '+' is left alone; hrefs are paths, not form data.
    """
    if _BAD_ESCAPE_RE.search(value):
        return value
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return value


def strip_base_overlap(base_path: str, path: str) -> str:
    """
    Remove from the start of path the longest suffix of base_path that path
    starts with.

    Offsets into base_path are tried left to right and only those whose
    character equals path[0] are considered, so the first hit is the longest
    overlap. The path is returned unchanged when nothing matches.

    >>> strip_base_overlap("/remote.php/dav/", "/dav/a.txt")
    'a.txt'
    """
    if not path:
        return path

    first = path[0]
    for i, c in enumerate(base_path):
        if c != first:
            continue
        tail = base_path[i:]
        if path.startswith(tail):
            return path[len(tail):]

    return path


def normalize_path(raw_path: str, base_path: Optional[str] = None) -> str:
    """
    Normalize an href into a path relative to the WebDAV root.

    Steps:
        1. percent-decode (kept raw if undecodable)
        2. strip the overlap with base_path, if given
        3. drop a single leading separator
    """
    path = percent_decode(raw_path)

    if base_path is not None:
        path = strip_base_overlap(base_path, path)

    if path.startswith(SEPARATOR):
        path = path[1:]

    return path
