"""GUID text layout constants and lookup tables shared by parser and helpers."""

# ---------------------------------------------------------------------------
# Canonical text shape
# ---------------------------------------------------------------------------
# xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx
GUID_STR_LEN = 36
GUID_BYTE_LEN = 16

SEPARATOR = 0x2D  # b"-"
SEPARATOR_POSITIONS = (8, 13, 18, 23)

GUID_FROM_STR_ERROR_MESSAGE = (
    'GUID hex string does not match expected format '
    '"xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx"'
)

# ---------------------------------------------------------------------------
# Field layout
# ---------------------------------------------------------------------------
# Each entry maps a Guid field to the text offsets of its hex pairs, in
# destination byte order.  The first three groups are little-endian on disk
# (Windows/COM GUID integers), so their pairs are read back to front.  The
# clock_seq bytes and node keep the textual order.
GUID_FIELD_OFFSETS = (
    ("time_low", (6, 4, 2, 0)),
    ("time_mid", (11, 9)),
    ("time_high_and_version", (16, 14)),
    ("clock_seq_high_and_reserved", (19,)),
    ("clock_seq_low", (21,)),
    ("node", (24, 26, 28, 30, 32, 34)),
)

# Fields stored as a single int rather than a byte string
SINGLE_BYTE_FIELDS = frozenset({"clock_seq_high_and_reserved", "clock_seq_low"})

# ---------------------------------------------------------------------------
# Hex digits
# ---------------------------------------------------------------------------
# ASCII code -> nibble value.  Upper and lower case both map.
HEX_DIGITS = {
    **{0x30 + i: i for i in range(10)},  # 0-9
    **{0x61 + i: 10 + i for i in range(6)},  # a-f
    **{0x41 + i: 10 + i for i in range(6)},  # A-F
}
