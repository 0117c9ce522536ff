from .paths import SEPARATOR, normalize_path, percent_decode, strip_base_overlap
from .time import normalize_dt, parse_rfc1123, to_rfc1123

__all__ = [
    "SEPARATOR",
    "normalize_path",
    "percent_decode",
    "strip_base_overlap",
    "parse_rfc1123",
    "to_rfc1123",
    "normalize_dt",
]
