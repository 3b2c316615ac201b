# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Olympus MakerNote camera settings

Older Olympus (and Minolta-derived) models store camera settings as a
byte buffer of 32-bit words, always in Motorola byte order. Each word
becomes one synthetic tag.

Copyright 2025 DNAi inc.
"""

import logging
from typing import Any, Optional

from dnmakernote.byte_reader import ByteArrayReader
from dnmakernote.config import DecoderConfig
from dnmakernote.directory import Directory
from dnmakernote.tag_spaces import OLYMPUS_CAMERA_SETTINGS
from dnmakernote.tag_values import is_byte_buffer

logger = logging.getLogger(__name__)

TAG_CAMERA_SETTINGS_1 = 0x0001
TAG_CAMERA_SETTINGS_2 = 0x0003

CAMERA_SETTINGS_TAGS = (TAG_CAMERA_SETTINGS_1, TAG_CAMERA_SETTINGS_2)


class OlympusMakerNoteDecoder:
    """
    Decodes Olympus camera settings buffers.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or DecoderConfig()

    def decode_camera_settings(self, directory: Directory, tag_type: int, data: Any) -> None:
        """
        Split a camera settings buffer into signed 32-bit words.

        Trailing bytes that do not fill a whole word are ignored. A value
        that is not a byte buffer is stored unsplit under tag_type.

        Args:
            directory: Olympus MakerNote directory
            tag_type: MakerNote tag id (0x0001 or 0x0003)
            data: Raw bytes from the IFD reader
        """
        if not is_byte_buffer(data):
            directory.set_object(tag_type, data)
            return

        reader = ByteArrayReader(data, self.config.olympus_byte_order)
        count = len(reader) // 4
        if len(reader) % 4:
            logger.debug("Olympus camera settings: ignoring %d trailing bytes", len(reader) % 4)

        for i in range(count):
            directory.set_int(OLYMPUS_CAMERA_SETTINGS.tag_id(i), reader.get_int32(i * 4))
