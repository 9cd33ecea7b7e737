"""Internal utility helpers for GUID text views and rendering."""

import struct

from ._constants import GUID_BYTE_LEN


def as_ascii_bytes(text: str | bytes | bytearray | memoryview) -> bytes:
    """Return the byte-level view of *text* used by the parser.

    ``str`` is encoded as UTF-8, so ASCII characters stay one byte each and
    anything outside ASCII, lone surrogates included, shows up as bytes above
    0x7F (never a hex digit).
    """
    if isinstance(text, str):
        return text.encode("utf-8", errors="surrogatepass")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"expected str or bytes-like GUID text, got {type(text).__name__}")


def format_guid(data: bytes, off: int = 0) -> str:
    """Format 16 bytes at *off* as a lower-case GUID string (no braces).

    Windows GUIDs are stored in mixed-endian layout:
    uint32-LE, uint16-LE, uint16-LE, 8 raw bytes.
    Returns ``"?"`` when fewer than 16 bytes are available.
    """
    if len(data) - off < GUID_BYTE_LEN:
        return "?"
    d1, d2, d3 = struct.unpack_from("<IHH", data, off)
    d4 = data[off + 8 : off + 10].hex()
    d5 = data[off + 10 : off + 16].hex()
    return f"{d1:08x}-{d2:04x}-{d3:04x}-{d4}-{d5}"
