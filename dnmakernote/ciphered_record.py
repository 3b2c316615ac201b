# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Enciphered fixed-offset record decoder

Sony writes several maker note sub-records (0x2010, 0x9050, 0x94xx)
through a simple byte substitution: each byte b below 249 is replaced by
b**3 mod 249, and bytes 249-255 are left alone. Cubing is a bijection on
the integers mod 249, so the substitution is reversed with a lookup
table. Once deciphered, the record is a fixed layout where every field
has its own offset and width.

Plaintext fixed-offset records (Kodak) use the same decoder with no
cipher.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

from dnmakernote.byte_reader import ByteArrayReader
from dnmakernote.config import DecoderConfig
from dnmakernote.directory import Directory
from dnmakernote.exceptions import BufferBoundsError
from dnmakernote.tag_values import ElementType

logger = logging.getLogger(__name__)

_CIPHER_MODULUS = 249

ENCIPHER_TABLE = bytes(
    pow(b, 3, _CIPHER_MODULUS) if b < _CIPHER_MODULUS else b for b in range(256)
)

DECIPHER_TABLE = bytes(ENCIPHER_TABLE.index(c) for c in range(256))


class SonyCipher:
    """
    Sony's keyless per-byte substitution.

    Stateless; the lookup tables are module constants.
    """

    @staticmethod
    def encipher(data: Union[bytes, bytearray, memoryview]) -> bytes:
        return bytes(data).translate(ENCIPHER_TABLE)

    @staticmethod
    def decipher(data: Union[bytes, bytearray, memoryview]) -> bytes:
        """
        Return a deciphered copy of data.

        Args:
            data: Enciphered bytes (not modified)

        Returns:
            Plaintext bytes of the same length
        """
        return bytes(data).translate(DECIPHER_TABLE)

    @staticmethod
    def decipher_in_place(buffer: bytearray) -> None:
        """
        Decipher a mutable buffer in place.

        Args:
            buffer: Enciphered bytes, overwritten with plaintext
        """
        buffer[:] = buffer.translate(DECIPHER_TABLE)


# Converts a raw field value; None means the field has no meaningful value
FieldCodec = Callable[[Any], Optional[float]]


@dataclass(frozen=True)
class FieldSpec:
    """
    One field of a fixed-offset record.

    Attributes:
        tag_id: Tag id the field is stored under
        offset: Byte offset inside the deciphered record
        element_type: Primitive type of each element
        count: Number of elements; more than one is stored as an array
        codec: Optional conversion applied before storage, result stored as float
        as_bytes: Store the field as raw bytes instead of integers
        as_text: Store the field as text, cut at the first NUL byte
    """
    tag_id: int
    offset: int
    element_type: ElementType
    count: int = 1
    codec: Optional[FieldCodec] = None
    as_bytes: bool = False
    as_text: bool = False

    @property
    def size(self) -> int:
        return self.element_type.size * self.count


class CipheredFixedRecordDecoder:
    """
    Deciphers a record, then reads each field at its documented offset.

    Fields are independent: a field that lies outside the record is
    reported and skipped, and the remaining fields are still read.
    """

    def __init__(
        self,
        fields: Sequence[FieldSpec],
        cipher: Optional[Any] = SonyCipher,
        endian: str = '<',
        config: Optional[DecoderConfig] = None
    ):
        """
        Initialize decoder.

        Args:
            fields: Field layout of the record
            cipher: Object providing decipher(data) -> bytes, or None for a plaintext record
            endian: Byte order of the deciphered record
            config: Decoder configuration
        """
        self.fields = tuple(fields)
        self.cipher = cipher
        self.endian = endian
        self.config = config or DecoderConfig()

    def decode(self, directory: Directory, data: Union[bytes, bytearray, memoryview]) -> None:
        """
        Decipher data once (if there is a cipher) and store every field that fits.

        The caller's buffer is not modified.

        Args:
            directory: Directory to populate
            data: Record bytes, enciphered when the decoder has a cipher
        """
        if self.cipher is not None:
            data = self.cipher.decipher(data)
        reader = ByteArrayReader(data, self.endian)

        for field in self.fields:
            try:
                self._read_field(directory, reader, field)
            except BufferBoundsError as e:
                message = f"Field 0x{int(field.tag_id):04X} (offset 0x{field.offset:X}, {field.size} bytes): {e.message}"
                logger.log(self.config.error_log_level, "%s: %s", directory.name, message)
                directory.add_error(message)

    def _read_field(self, directory: Directory, reader: ByteArrayReader, field: FieldSpec) -> None:
        tag_id = int(field.tag_id)

        if field.as_bytes:
            directory.set_bytes(tag_id, reader.get_bytes(field.offset, field.size))
            return

        if field.as_text:
            raw = reader.get_bytes(field.offset, field.size)
            directory.set_string(tag_id, raw.split(b"\x00", 1)[0].decode("latin-1"))
            return

        values = reader.get_values(field.offset, field.element_type, field.count)

        if field.codec is not None:
            raw = values[0] if field.count == 1 else values
            converted = field.codec(raw)
            if converted is not None:
                directory.set_float(tag_id, converted)
            return

        if field.count > 1:
            directory.set_array(tag_id, values, field.element_type)
        elif field.element_type in (ElementType.UINT32, ElementType.INT64):
            directory.set_long(tag_id, values[0])
        elif field.element_type.is_integer:
            directory.set_int(tag_id, values[0])
        elif field.element_type is ElementType.RATIONAL:
            directory.set_rational(tag_id, values[0])
        else:
            directory.set_float(tag_id, values[0])
