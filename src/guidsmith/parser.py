"""Parse canonical GUID text into the Windows/COM mixed-endian layout."""

import logging
import uuid
from dataclasses import dataclass
from typing import ClassVar

from ._constants import (
    GUID_BYTE_LEN,
    GUID_FIELD_OFFSETS,
    GUID_FROM_STR_ERROR_MESSAGE,
    GUID_STR_LEN,
    HEX_DIGITS,
    SEPARATOR,
    SEPARATOR_POSITIONS,
    SINGLE_BYTE_FIELDS,
)
from ._util import as_ascii_bytes, format_guid

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------
class GuidFromStrError(ValueError):
    """Raised when text is not a canonical ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` GUID.

    Carries no detail about which check failed.  All instances are equal.
    """

    def __init__(self):
        super().__init__(GUID_FROM_STR_ERROR_MESSAGE)

    def __eq__(self, other):
        if isinstance(other, GuidFromStrError):
            return True
        return NotImplemented

    def __hash__(self):
        return hash(GuidFromStrError)

    def __reduce__(self):
        return (type(self), ())


# ---------------------------------------------------------------------------
# Low-level readers
# ---------------------------------------------------------------------------
def decode_hex_digit(c: int) -> int:
    """Return the nibble value of ASCII hex digit *c* (``0-9``, ``a-f``, ``A-F``)."""
    try:
        return HEX_DIGITS[c]
    except KeyError:
        raise GuidFromStrError() from None


def decode_hex_pair(hi: int, lo: int) -> int:
    """Decode two ASCII hex digits into one byte, e.g. ``(b"1", b"a")`` -> ``0x1A``."""
    return decode_hex_digit(hi) << 4 | decode_hex_digit(lo)


def decode_hex_pair_at(data: bytes, start: int) -> int:
    """Decode the hex pair at ``data[start:start + 2]``."""
    return decode_hex_pair(data[start], data[start + 1])


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------
_FIELD_WIDTHS = {name: len(offsets) for name, offsets in GUID_FIELD_OFFSETS}


@dataclass(frozen=True, slots=True)
class Guid:
    """A 128-bit GUID split into its five mixed-endian fields.

    ``time_low``, ``time_mid`` and ``time_high_and_version`` hold the bytes
    as stored in memory (little-endian, so reversed relative to the text).
    ``node`` keeps the textual byte order.
    """

    time_low: bytes
    time_mid: bytes
    time_high_and_version: bytes
    clock_seq_high_and_reserved: int
    clock_seq_low: int
    node: bytes

    ZERO: ClassVar["Guid"]

    def __post_init__(self):
        for name, width in _FIELD_WIDTHS.items():
            value = getattr(self, name)
            if name in SINGLE_BYTE_FIELDS:
                if type(value) is not int or not 0 <= value <= 0xFF:
                    raise ValueError(f"{name} must be an int in 0..255, got {value!r}")
                continue
            if not isinstance(value, (bytes, bytearray)) or len(value) != width:
                raise ValueError(f"{name} must be {width} bytes, got {value!r}")
            # Normalise bytearray so instances stay hashable
            object.__setattr__(self, name, bytes(value))

    @classmethod
    def parse(cls, text: str | bytes) -> "Guid":
        """Parse canonical GUID text.  See :func:`parse_guid`."""
        return parse_guid(text)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Guid":
        """Build a Guid from its flat 16-byte mixed-endian form."""
        if len(data) != GUID_BYTE_LEN:
            raise ValueError(f"GUID must be {GUID_BYTE_LEN} bytes, got {len(data)}")
        data = bytes(data)
        return cls(
            time_low=data[0:4],
            time_mid=data[4:6],
            time_high_and_version=data[6:8],
            clock_seq_high_and_reserved=data[8],
            clock_seq_low=data[9],
            node=data[10:16],
        )

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "Guid":
        return cls.from_bytes(value.bytes_le)

    def to_bytes(self) -> bytes:
        """Return the flat 16-byte form (fields concatenated in declaration order)."""
        return (
            self.time_low
            + self.time_mid
            + self.time_high_and_version
            + bytes((self.clock_seq_high_and_reserved, self.clock_seq_low))
            + self.node
        )

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes_le=self.to_bytes())

    def __bytes__(self):
        return self.to_bytes()

    def __str__(self):
        return format_guid(self.to_bytes())


Guid.ZERO = Guid(
    time_low=bytes(4),
    time_mid=bytes(2),
    time_high_and_version=bytes(2),
    clock_seq_high_and_reserved=0,
    clock_seq_low=0,
    node=bytes(6),
)


# ---------------------------------------------------------------------------
# Layout parser
# ---------------------------------------------------------------------------
def parse_guid(text: str | bytes) -> Guid:
    """Parse ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` into a :class:`Guid`.

    Hex digits may be upper or lower case.  Braces, URN prefixes and the
    bare 32-digit form are rejected.

    Args:
        text: GUID text as ``str`` or ASCII bytes.

    Raises:
        GuidFromStrError: *text* is not in the canonical 36-character form.
        TypeError: *text* is neither ``str`` nor bytes-like.
    """
    data = as_ascii_bytes(text)

    if len(data) != GUID_STR_LEN:
        raise GuidFromStrError()

    for pos in SEPARATOR_POSITIONS:
        if data[pos] != SEPARATOR:
            raise GuidFromStrError()

    fields = {}
    for name, offsets in GUID_FIELD_OFFSETS:
        raw = bytes(decode_hex_pair_at(data, off) for off in offsets)
        fields[name] = raw[0] if name in SINGLE_BYTE_FIELDS else raw

    return Guid(**fields)


def try_parse_guid(text: str | bytes) -> Guid | None:
    """Like :func:`parse_guid` but return ``None`` for malformed text."""
    try:
        return parse_guid(text)
    except GuidFromStrError:
        logger.debug("Rejected GUID text %r", text)
        return None


def is_guid_str(text: str | bytes) -> bool:
    """Return True if *text* is a canonical hyphenated GUID string."""
    return try_parse_guid(text) is not None


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------
def format_fields(guid: Guid) -> str:
    """Return a human-readable dump of the five fields of *guid*."""
    lines: list[str] = []

    lines.append("--- GUID ---")
    lines.append(f"  {'Text:':<30}{guid}")
    lines.append(f"  {'Bytes:':<30}{guid.to_bytes().hex(' ')}")
    lines.append("")
    lines.append("--- FIELDS ---")
    for name, _ in GUID_FIELD_OFFSETS:
        value = getattr(guid, name)
        shown = f"{value:02x}" if name in SINGLE_BYTE_FIELDS else value.hex(" ")
        lines.append(f"  {name + ':':<30}{shown}")

    return "\n".join(lines)
