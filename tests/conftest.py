# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""Shared fixtures for the DNMakerNote tests."""

import struct

import pytest

from dnmakernote.directory import Directory

SONY_9050B_LENGTH = 0x200


def build_sony_plaintext(fields, length=SONY_9050B_LENGTH):
    """
    Build a deciphered Tag9050b block.

    Args:
        fields: Iterable of (offset, struct format, value or tuple of values)
        length: Total block length

    Returns:
        bytearray holding the little-endian plaintext
    """
    block = bytearray(length)
    for offset, fmt, value in fields:
        values = value if isinstance(value, tuple) else (value,)
        struct.pack_into('<' + fmt, block, offset, *values)
    return block


SONY_SAMPLE_FIELDS = (
    (0x0026, '3H', (100, 200, 300)),
    (0x0039, 'B', 1),
    (0x003A, 'I', 123456),
    (0x0046, 'H', 4096),
    (0x0048, 'H', 5120),
    (0x006D, 'B', 2),
    (0x0088, '6B', (0x01, 0x23, 0x45, 0x67, 0x89, 0xAB)),
    (0x0105, 'B', 1),
    (0x0106, 'B', 2),
    (0x0107, 'H', 32790),
    (0x010B, 'B', 1),
    (0x0114, 'B', 0),
    (0x0116, '2B', (0x00, 0x31)),
    (0x019F, 'I', 98765),
)


@pytest.fixture
def directory():
    return Directory("Test")


@pytest.fixture
def sony_plaintext():
    return bytes(build_sony_plaintext(SONY_SAMPLE_FIELDS))
