# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Bounds-checked random access reads

Maker note records are laid out by the camera, so any offset or length
taken from them may point past the end of the data. Every read here is
validated first and raises BufferBoundsError instead of returning a
short slice.

Copyright 2025 DNAi inc.
"""

import struct
from typing import Any, List, Union

from dnmakernote.exceptions import BufferBoundsError
from dnmakernote.rational import Rational
from dnmakernote.tag_values import ElementType


VALID_BYTE_ORDERS = ('<', '>')


class ByteArrayReader:
    """
    Random access reader over an immutable byte buffer.
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview], endian: str = '<'):
        """
        Initialize reader.

        Args:
            data: Buffer to read; copied so later changes by the caller are not seen
            endian: Byte order ('<' for little-endian, '>' for big-endian)
        """
        if endian not in VALID_BYTE_ORDERS:
            raise ValueError(f"Invalid byte order: {endian!r}")
        self.data = bytes(data)
        self.endian = endian

    def __len__(self) -> int:
        return len(self.data)

    def _validate(self, offset: int, count: int) -> None:
        if offset < 0 or count < 0 or offset + count > len(self.data):
            raise BufferBoundsError(offset, count, len(self.data))

    def _unpack(self, code: str, offset: int, size: int) -> Any:
        self._validate(offset, size)
        return struct.unpack_from(f'{self.endian}{code}', self.data, offset)[0]

    def get_uint8(self, offset: int) -> int:
        return self._unpack('B', offset, 1)

    def get_int8(self, offset: int) -> int:
        return self._unpack('b', offset, 1)

    def get_uint16(self, offset: int) -> int:
        return self._unpack('H', offset, 2)

    def get_int16(self, offset: int) -> int:
        return self._unpack('h', offset, 2)

    def get_uint32(self, offset: int) -> int:
        return self._unpack('I', offset, 4)

    def get_int32(self, offset: int) -> int:
        return self._unpack('i', offset, 4)

    def get_int64(self, offset: int) -> int:
        return self._unpack('q', offset, 8)

    def get_bytes(self, offset: int, count: int) -> bytes:
        """
        Read a run of raw bytes.

        Args:
            offset: Byte offset
            count: Number of bytes

        Returns:
            Exactly count bytes
        """
        self._validate(offset, count)
        return self.data[offset:offset + count]

    def get_values(self, offset: int, element_type: ElementType, count: int) -> List[Any]:
        """
        Read consecutive elements of one primitive type.

        Args:
            offset: Byte offset of the first element
            element_type: Element type to read
            count: Number of elements

        Returns:
            List of count decoded values
        """
        self._validate(offset, element_type.size * count)
        if element_type is ElementType.RATIONAL:
            pairs = struct.unpack_from(f'{self.endian}{count * 2}I', self.data, offset)
            return [Rational(pairs[i], pairs[i + 1]) for i in range(0, len(pairs), 2)]
        return list(struct.unpack_from(f'{self.endian}{count}{element_type.struct_code}', self.data, offset))
