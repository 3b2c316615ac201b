# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Kodak MakerNote decoding

Kodak maker notes starting with "KDK" are not IFDs. After an 8-byte
header the camera writes a plaintext record of fields at fixed offsets.
A "KDK INFO" header means Motorola byte order; any other "KDK" header
means Intel order. Tag ids are the byte offsets of the fields after the
header.

Copyright 2025 DNAi inc.
"""

import logging
from typing import Any, Optional

from dnmakernote.ciphered_record import CipheredFixedRecordDecoder, FieldSpec
from dnmakernote.config import DecoderConfig
from dnmakernote.directory import Directory
from dnmakernote.tag_spaces import KodakMakernote
from dnmakernote.tag_values import ElementType, is_byte_buffer

logger = logging.getLogger(__name__)

# Exif MakerNote tag; the whole block is the record
TAG_MAKERNOTE = 0x927C

HEADER_LENGTH = 8
MOTOROLA_HEADER = b"KDK INFO"

KODAK_FIELDS = (
    FieldSpec(KodakMakernote.KODAK_MODEL, 0, ElementType.UINT8, count=8, as_text=True),
    FieldSpec(KodakMakernote.QUALITY, 9, ElementType.UINT8),
    FieldSpec(KodakMakernote.BURST_MODE, 10, ElementType.UINT8),
    FieldSpec(KodakMakernote.IMAGE_WIDTH, 12, ElementType.UINT16),
    FieldSpec(KodakMakernote.IMAGE_HEIGHT, 14, ElementType.UINT16),
    FieldSpec(KodakMakernote.YEAR_CREATED, 16, ElementType.UINT16),
    FieldSpec(KodakMakernote.MONTH_DAY_CREATED, 18, ElementType.UINT8, count=2, as_bytes=True),
    FieldSpec(KodakMakernote.TIME_CREATED, 20, ElementType.UINT8, count=4, as_bytes=True),
    FieldSpec(KodakMakernote.BURST_MODE_2, 24, ElementType.UINT16),
    FieldSpec(KodakMakernote.SHUTTER_MODE, 27, ElementType.UINT8),
    FieldSpec(KodakMakernote.METERING_MODE, 28, ElementType.UINT8),
    FieldSpec(KodakMakernote.SEQUENCE_NUMBER, 29, ElementType.UINT8),
    FieldSpec(KodakMakernote.F_NUMBER, 30, ElementType.UINT16),
    FieldSpec(KodakMakernote.EXPOSURE_TIME, 32, ElementType.UINT32),
    FieldSpec(KodakMakernote.EXPOSURE_COMPENSATION, 36, ElementType.INT16),
    FieldSpec(KodakMakernote.FOCUS_MODE, 56, ElementType.UINT8),
    FieldSpec(KodakMakernote.WHITE_BALANCE, 64, ElementType.UINT8),
    FieldSpec(KodakMakernote.FLASH_MODE, 92, ElementType.UINT8),
    FieldSpec(KodakMakernote.FLASH_FIRED, 93, ElementType.UINT8),
    FieldSpec(KodakMakernote.ISO_SETTING, 94, ElementType.UINT16),
    FieldSpec(KodakMakernote.ISO, 96, ElementType.UINT16),
    FieldSpec(KodakMakernote.TOTAL_ZOOM, 98, ElementType.UINT16),
    FieldSpec(KodakMakernote.DATE_TIME_STAMP, 100, ElementType.UINT16),
    FieldSpec(KodakMakernote.COLOR_MODE, 102, ElementType.UINT16),
    FieldSpec(KodakMakernote.DIGITAL_ZOOM, 104, ElementType.UINT16),
    FieldSpec(KodakMakernote.SHARPNESS, 107, ElementType.INT8),
)


class KodakMakerNoteDecoder:
    """
    Decodes the Kodak fixed-offset maker note record.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        """
        Initialize Kodak decoder.

        Args:
            config: Decoder configuration
        """
        self.config = config or DecoderConfig()
        self.motorola_decoder = CipheredFixedRecordDecoder(
            KODAK_FIELDS, cipher=None, endian='>', config=self.config
        )
        self.intel_decoder = CipheredFixedRecordDecoder(
            KODAK_FIELDS, cipher=None, endian='<', config=self.config
        )

    def decode(self, directory: Directory, tag_type: int, data: Any) -> None:
        """
        Decode a Kodak maker note block into directory.

        Args:
            directory: Kodak MakerNote directory
            tag_type: Tag id the block was read from (0x927C)
            data: Maker note bytes, header included
        """
        if not is_byte_buffer(data):
            directory.set_object(tag_type, data)
            return

        data = bytes(data)
        if len(data) < HEADER_LENGTH:
            message = f"Kodak makernote is shorter than its {HEADER_LENGTH}-byte header ({len(data)} bytes)"
            logger.log(self.config.error_log_level, "%s: %s", directory.name, message)
            directory.add_error(message)
            return

        if data[:HEADER_LENGTH] == MOTOROLA_HEADER:
            decoder = self.motorola_decoder
        else:
            decoder = self.intel_decoder
        decoder.decode(directory, data[HEADER_LENGTH:])
