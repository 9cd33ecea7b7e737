"""guidsmith -- parse canonical GUID text into the Windows mixed-endian layout."""

__version__ = "0.1.0"

from .known import KNOWN_GUID_NAMES, KNOWN_GUIDS, lookup_name
from .parser import (
    Guid,
    GuidFromStrError,
    decode_hex_pair,
    format_fields,
    is_guid_str,
    parse_guid,
    try_parse_guid,
)

__all__ = [
    "Guid",
    "GuidFromStrError",
    "parse_guid",
    "try_parse_guid",
    "is_guid_str",
    "decode_hex_pair",
    "format_fields",
    "KNOWN_GUIDS",
    "KNOWN_GUID_NAMES",
    "lookup_name",
    "__version__",
]
