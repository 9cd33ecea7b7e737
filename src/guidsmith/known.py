"""Well-known GUIDs, parsed once at import time."""

from .parser import Guid, parse_guid

# ---------------------------------------------------------------------------
# GPT partition types (UEFI spec, Appendix / Microsoft, freedesktop DPS)
# ---------------------------------------------------------------------------
EFI_SYSTEM_PARTITION = parse_guid("c12a7328-f81f-11d2-ba4b-00a0c93ec93b")
BIOS_BOOT_PARTITION = parse_guid("21686148-6449-6e6f-744e-656564454649")
MICROSOFT_RESERVED_PARTITION = parse_guid("e3c9e316-0b5c-4db8-817d-f92df00215ae")
MICROSOFT_BASIC_DATA_PARTITION = parse_guid("ebd0a0a2-b9e5-4433-87c0-68b6b72699c7")
LINUX_FILESYSTEM_DATA_PARTITION = parse_guid("0fc63daf-8483-4772-8e79-3d69d8477de4")
LINUX_SWAP_PARTITION = parse_guid("0657fd6d-a4ab-43c4-84e5-0933c84b4f4f")

# ---------------------------------------------------------------------------
# UEFI variable vendor GUIDs
# ---------------------------------------------------------------------------
EFI_GLOBAL_VARIABLE = parse_guid("8be4df61-93ca-11d2-aa0d-00e098032b8c")
EFI_IMAGE_SECURITY_DATABASE = parse_guid("d719b2cb-3d3a-4596-a3bc-dad00e67656f")

# ---------------------------------------------------------------------------
# COM CLSIDs
# ---------------------------------------------------------------------------
CLSID_SHELL_LINK = parse_guid("00021401-0000-0000-c000-000000000046")
CLSID_MY_COMPUTER = parse_guid("20d04fe0-3aea-1069-a2d8-08002b30309d")

KNOWN_GUIDS: dict[str, Guid] = {
    "EfiSystemPartition": EFI_SYSTEM_PARTITION,
    "BiosBootPartition": BIOS_BOOT_PARTITION,
    "MicrosoftReservedPartition": MICROSOFT_RESERVED_PARTITION,
    "MicrosoftBasicDataPartition": MICROSOFT_BASIC_DATA_PARTITION,
    "LinuxFilesystemDataPartition": LINUX_FILESYSTEM_DATA_PARTITION,
    "LinuxSwapPartition": LINUX_SWAP_PARTITION,
    "EfiGlobalVariable": EFI_GLOBAL_VARIABLE,
    "EfiImageSecurityDatabase": EFI_IMAGE_SECURITY_DATABASE,
    "ShellLink": CLSID_SHELL_LINK,
    "MyComputer": CLSID_MY_COMPUTER,
}

# Reverse lookup: Guid -> friendly name
KNOWN_GUID_NAMES = {v: k for k, v in KNOWN_GUIDS.items()}


def lookup_name(guid: Guid) -> str | None:
    """Return the friendly name of *guid*, or None if it is not well known."""
    return KNOWN_GUID_NAMES.get(guid)
