# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Sony Tag9050b decoding

Tag 0x9050 in newer Sony maker notes is an enciphered block of camera
state: shutter counts, exposure, lens mount and the internal serial
number. Tag ids in the resulting directory are the byte offsets of the
fields inside the deciphered block.

Copyright 2025 DNAi inc.
"""

from typing import Any, Optional

from dnmakernote.ciphered_record import CipheredFixedRecordDecoder, FieldSpec, SonyCipher
from dnmakernote.config import DecoderConfig
from dnmakernote.directory import Directory
from dnmakernote.scalar_codecs import sony_exposure_time, sony_f_number
from dnmakernote.tag_spaces import SonyTag9050b
from dnmakernote.tag_values import ElementType, is_byte_buffer

TAG_9050 = 0x9050

TAG_9050B_FIELDS = (
    FieldSpec(SonyTag9050b.SHUTTER, 0x0026, ElementType.UINT16, count=3),
    FieldSpec(SonyTag9050b.FLASH_STATUS, 0x0039, ElementType.UINT8),
    FieldSpec(SonyTag9050b.SHUTTER_COUNT, 0x003A, ElementType.UINT32),
    FieldSpec(SonyTag9050b.SONY_EXPOSURE_TIME, 0x0046, ElementType.UINT16, codec=sony_exposure_time),
    FieldSpec(SonyTag9050b.SONY_F_NUMBER, 0x0048, ElementType.UINT16, codec=sony_f_number),
    FieldSpec(SonyTag9050b.RELEASE_MODE_2, 0x006D, ElementType.UINT8),
    FieldSpec(SonyTag9050b.INTERNAL_SERIAL_NUMBER, 0x0088, ElementType.UINT8, count=6),
    FieldSpec(SonyTag9050b.LENS_MOUNT, 0x0105, ElementType.UINT8),
    FieldSpec(SonyTag9050b.LENS_FORMAT, 0x0106, ElementType.UINT8),
    FieldSpec(SonyTag9050b.LENS_TYPE_2, 0x0107, ElementType.UINT16),
    FieldSpec(SonyTag9050b.DISTORTION_CORR_PARAMS_PRESENT, 0x010B, ElementType.UINT8),
    FieldSpec(SonyTag9050b.APS_C_SIZE_CAPTURE, 0x0114, ElementType.UINT8),
    FieldSpec(SonyTag9050b.LENS_SPEC_FEATURES, 0x0116, ElementType.UINT8, count=2, as_bytes=True),
    FieldSpec(SonyTag9050b.SHUTTER_COUNT_3, 0x019F, ElementType.UINT32),
)


class Sony9050bDecoder:
    """
    Decodes the Sony Tag9050b enciphered record.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        """
        Initialize Sony decoder.

        Args:
            config: Decoder configuration
        """
        self.config = config or DecoderConfig()
        self.record_decoder = CipheredFixedRecordDecoder(
            TAG_9050B_FIELDS,
            cipher=SonyCipher,
            endian=self.config.sony_byte_order,
            config=self.config,
        )

    def decode(self, directory: Directory, tag_type: int, data: Any) -> None:
        """
        Decode a Tag9050b block into directory.

        Args:
            directory: Directory for the Tag9050b record
            tag_type: MakerNote tag id the block was read from (0x9050)
            data: Enciphered bytes from the IFD reader
        """
        if not is_byte_buffer(data):
            directory.set_object(tag_type, data)
            return
        self.record_decoder.decode(directory, data)
