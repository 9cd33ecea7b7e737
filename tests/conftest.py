"""Shared fixtures for guidsmith tests."""

import pytest

from guidsmith.parser import parse_guid


@pytest.fixture
def sample_str():
    """A GUID whose every hex pair is distinct."""
    return "01234567-89ab-cdef-0123-456789abcdef"


@pytest.fixture
def sample_guid(sample_str):
    return parse_guid(sample_str)


@pytest.fixture
def sample_bytes():
    """Flat mixed-endian bytes of ``sample_str``."""
    return bytes.fromhex("67452301" "ab89" "efcd" "0123" "456789abcdef")
